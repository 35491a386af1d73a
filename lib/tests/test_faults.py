from __future__ import annotations

import xmlrpc.client

import pytest

from jabber_rpc.errors import DecodeError, RpcError
from jabber_rpc.faults import classify_response


def test_well_formed_result_passes_through() -> None:
    value = {"username": "alice", "online": True}

    assert classify_response(value, command="getUser", params=["alice"]) is value


@pytest.mark.parametrize("decoded", [None, {}, [], "", 0, False])
def test_empty_result_is_rpc_error(decoded) -> None:
    with pytest.raises(RpcError) as exc:
        classify_response(decoded, command="getUser", params=["alice"])

    assert exc.value.cause is None
    assert "empty response" in str(exc.value)


def test_fault_and_decode_error_share_error_type() -> None:
    fault = xmlrpc.client.Fault(4, "Account does not exist")
    broken = DecodeError("Malformed XML-RPC response")

    with pytest.raises(RpcError) as fault_exc:
        classify_response(fault, command="getUser", params=["alice"])
    with pytest.raises(RpcError) as decode_exc:
        classify_response(broken, command="getUser", params=["alice"])

    assert fault_exc.value.cause is fault
    assert fault_exc.value.fault_code == 4
    assert fault_exc.value.fault_string == "Account does not exist"
    assert decode_exc.value.cause is broken
    assert decode_exc.value.fault_code is None
    assert decode_exc.value.__cause__ is broken


def test_rpc_error_redacts_passwords() -> None:
    params = [{"user": "admin", "server": "example.com", "password": "secret"}, {"newpass": "hunter2"}]

    with pytest.raises(RpcError) as exc:
        classify_response(None, command="change_password", params=params)

    message = str(exc.value)
    assert "secret" not in message
    assert "hunter2" not in message
    assert "Command 'change_password' failed" in message
    assert exc.value.params[0]["user"] == "admin"
