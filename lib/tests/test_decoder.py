from __future__ import annotations

import xmlrpc.client
from datetime import datetime

import pytest

from jabber_rpc import decoder
from jabber_rpc.decoder import RESPONSE_MAX_LENGTH, decode_response, decode_standard, decode_streaming
from jabber_rpc.errors import DecodeError


def _reply(value) -> bytes:
    return xmlrpc.client.dumps((value,), methodresponse=True, allow_none=True).encode("utf-8")


ROSTER = {
    "contacts": [
        {"contact": [{"jid": "bob@example.com"}, {"nick": "Bob <3"}, {"subscription": "both"}]},
        {"contact": [{"jid": "eve@example.com"}, {"nick": ""}, {"subscription": "none"}]},
    ],
    "online": True,
    "count": 2,
    "score": 1.5,
    "avatar": b"\x89PNG\x00\x01",
    "since": datetime(2014, 5, 17, 10, 30, 0),
    "nothing": None,
    "nested": [[1, [2, [3]]], {}],
}


@pytest.mark.parametrize("decode", [decode_standard, decode_streaming])
def test_decoders_return_builtin_values(decode) -> None:
    assert decode(_reply(ROSTER)) == ROSTER


def test_untyped_value_is_string_in_both_decoders() -> None:
    raw = (
        b"<?xml version='1.0'?><methodResponse><params><param>"
        b"<value><struct><member><name>res</name><value>ok &amp; done</value></member>"
        b"<member><name>empty</name><value></value></member></struct></value>"
        b"</param></params></methodResponse>"
    )

    expected = {"res": "ok & done", "empty": ""}
    assert decode_standard(raw) == expected
    assert decode_streaming(raw) == expected


@pytest.mark.parametrize("decode", [decode_standard, decode_streaming])
def test_fault_is_returned_as_fault(decode) -> None:
    raw = xmlrpc.client.dumps(xmlrpc.client.Fault(4, "Account does not exist")).encode("utf-8")

    result = decode(raw)

    assert isinstance(result, xmlrpc.client.Fault)
    assert result.faultCode == 4
    assert result.faultString == "Account does not exist"


@pytest.mark.parametrize("decode", [decode_standard, decode_streaming])
@pytest.mark.parametrize(
    "raw",
    [
        b"",
        b"<methodResponse><params><param><value><int>1</int>",
        b"not xml at all",
        b"<methodResponse><params></params></methodResponse>",
        b"<methodResponse><params><param><value><int>x</int></value></param></params></methodResponse>",
        b"<methodResponse><params><param><value><boolean>2</boolean></value></param></params></methodResponse>",
        b"<methodResponse><params><param><value><blob>1</blob></value></param></params></methodResponse>",
        b"<methodResponse><params><param><value><struct><member><name>res</name></member></struct></value></param></params></methodResponse>",
        b"<methodResponse><params><param><value><struct><member><name>a</name><name>b</name><value>c</value></member></struct></value></param></params></methodResponse>",
        b"<?xml version='1.0'?><methodCall><methodName>x</methodName><params></params></methodCall>",
    ],
)
def test_malformed_input_raises_decode_error(decode, raw) -> None:
    with pytest.raises(DecodeError):
        decode(raw)


def _padded(value, size: int) -> bytes:
    raw = _reply(value)
    return raw + b" " * (size - len(raw))


@pytest.mark.parametrize(
    "size, expected_path",
    [
        (RESPONSE_MAX_LENGTH - 1, "standard"),
        (RESPONSE_MAX_LENGTH, "streaming"),
    ],
)
def test_size_threshold_selects_decoder(monkeypatch, size, expected_path) -> None:
    calls = []
    monkeypatch.setattr(decoder, "decode_standard", lambda raw: calls.append("standard") or decode_standard(raw))
    monkeypatch.setattr(decoder, "decode_streaming", lambda raw: calls.append("streaming") or decode_streaming(raw))
    raw = _padded({"username": "alice", "online": True}, size)
    assert len(raw) == size

    result = decode_response(raw)

    assert calls == [expected_path]
    assert result == {"username": "alice", "online": True}


def test_large_reply_decodes_with_streaming_decoder() -> None:
    rooms = {"rooms": [{"room": f"room-{i}@conference.example.com"} for i in range(120_000)]}
    raw = _reply(rooms)
    assert len(raw) >= RESPONSE_MAX_LENGTH

    assert decode_response(raw) == rooms
