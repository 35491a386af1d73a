from __future__ import annotations

import os

from jabber_cli import config


def _use_tmp_config(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)


def test_load_config_defaults_when_missing(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)

    cfg = config.load_config()

    assert cfg.server == ""
    assert cfg.timeout == 5
    assert cfg.user_agent == "GameNet"


def test_save_and_load_round_trip(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    cfg = config.AppConfig(
        server="https://jabber.example.com/rpc",
        host="example.com",
        username="admin",
        password="secret",
        timeout=12,
        profiles={"dev": {"server": "http://localhost:4560"}},
    )

    path = config.save_config(cfg)

    assert path.endswith("config.toml")
    assert oct(os.stat(path).st_mode & 0o777) == "0o600"
    assert config.load_config() == cfg


def test_apply_profile_overrides_fields(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    tmp_path.joinpath("config.toml").write_text(
        "\n".join(
            [
                'server = "https://prod.example.com/rpc"',
                'host = "example.com"',
                "timeout = 5",
                "",
                "[profiles.dev]",
                'server = "localhost:4560"',
                'host = "dev.example.com"',
                "timeout = 30",
                "",
            ]
        ),
        encoding="utf-8",
    )

    cfg = config.apply_profile(config.load_config(), "dev")

    assert cfg.server == "http://localhost:4560"
    assert cfg.host == "dev.example.com"
    assert cfg.timeout == 30


def test_apply_env_overrides_file_values(monkeypatch) -> None:
    monkeypatch.setenv(config.ENV_SERVER, "jabber.example.org/rpc")
    monkeypatch.setenv(config.ENV_USERNAME, "root")
    monkeypatch.setenv(config.ENV_PASSWORD, "pw")
    monkeypatch.delenv(config.ENV_HOST, raising=False)

    cfg = config.apply_env(config.AppConfig(server="http://old", host="example.org"))

    assert cfg.server == "https://jabber.example.org/rpc"
    assert cfg.host == "example.org"
    assert (cfg.username, cfg.password) == ("root", "pw")


def test_normalize_server_url_defaults_to_http_for_localhost() -> None:
    assert config.normalize_server_url("127.0.0.1:4560/rpc") == "http://127.0.0.1:4560/rpc"
    assert config.normalize_server_url("https://example.com/rpc") == "https://example.com/rpc"
    assert config.normalize_server_url("  ") == ""
