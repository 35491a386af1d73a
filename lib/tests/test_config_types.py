from __future__ import annotations

import pytest

from jabber_rpc import ClientConfig, ConfigError, RpcClient


def test_from_options_applies_defaults() -> None:
    cfg = ClientConfig.from_options({"server": "http://jabber.test/rpc", "host": "example.com"})

    assert cfg.timeout == 5
    assert cfg.user_agent == "GameNet"
    assert cfg.debug is False
    assert cfg.has_credentials is False


def test_from_options_accepts_user_agent_alias() -> None:
    cfg = ClientConfig.from_options(
        {"server": "http://jabber.test/rpc", "host": "example.com", "userAgent": "bot/1.0", "timeout": "9"}
    )

    assert cfg.user_agent == "bot/1.0"
    assert cfg.timeout == 9


@pytest.mark.parametrize(
    "options, message",
    [
        ({"host": "example.com"}, "'server'"),
        ({"server": "http://jabber.test/rpc"}, "'host'"),
        ({"server": "http://jabber.test/rpc", "host": "example.com", "username": "admin"}, "Password"),
        ({"server": "http://jabber.test/rpc", "host": "example.com", "password": "secret"}, "Username"),
    ],
)
def test_invalid_options_raise_config_error(options, message) -> None:
    with pytest.raises(ConfigError) as exc:
        RpcClient.from_options(options)

    assert message in str(exc.value)


def test_config_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        ClientConfig(server="", host="example.com")


def test_negative_timeout_rejected_at_construction() -> None:
    with pytest.raises(ConfigError):
        ClientConfig(server="http://jabber.test/rpc", host="example.com", timeout=-1)


def test_set_timeout_validates_and_chains() -> None:
    client = RpcClient.from_options({"server": "http://jabber.test/rpc", "host": "example.com"})

    with pytest.raises(ConfigError):
        client.set_timeout(-1)
    with pytest.raises(ConfigError):
        client.set_timeout("10")  # type: ignore[arg-type]

    assert client.set_timeout(0) is client
    assert client.get_timeout() == 0


def test_set_user_agent_keeps_other_fields() -> None:
    client = RpcClient.from_options(
        {"server": "http://jabber.test/rpc", "host": "example.com", "username": "admin", "password": "secret"}
    )

    assert client.set_user_agent("ops-panel") is client
    assert client.config.user_agent == "ops-panel"
    assert client.config.username == "admin"
    assert client.host == "example.com"
