"""XML-RPC reply decoding.

Replies below ``RESPONSE_MAX_LENGTH`` bytes go through ``xmlrpc.client``.
Larger ones are parsed incrementally with ``ElementTree.XMLPullParser``,
releasing each element once its value has been taken, so that huge rosters
or room lists do not need the whole document tree in memory.

Both paths return the single reply value with builtin types (``bytes`` for
base64, ``datetime`` for dateTime.iso8601), or an ``xmlrpc.client.Fault``
instance for a fault reply. Anything else raises ``DecodeError``.
"""

from __future__ import annotations

import base64
import logging
import xmlrpc.client
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable
from xml.etree import ElementTree
from xml.parsers.expat import ExpatError

from .errors import DecodeError

logger = logging.getLogger(__name__)

RESPONSE_MAX_LENGTH = 10_000_000
CHUNK_SIZE = 1 << 20


def decode_response(raw: bytes) -> Any:
    if len(raw) < RESPONSE_MAX_LENGTH:
        return decode_standard(raw)
    logger.debug("response is %d bytes, using streaming decoder", len(raw))
    return decode_streaming(raw)


def decode_standard(raw: bytes) -> Any:
    try:
        params, method = xmlrpc.client.loads(raw, use_builtin_types=True)
    except xmlrpc.client.Fault as fault:
        return fault
    except (ExpatError, xmlrpc.client.ResponseError, ValueError, TypeError, IndexError, InvalidOperation) as e:
        raise DecodeError(f"Malformed XML-RPC response: {e}") from e
    if method is not None:
        raise DecodeError("Expected a methodResponse, got a methodCall")
    return _first_param(params)


def decode_streaming(raw: bytes) -> Any:
    unmarshaller = _StreamingUnmarshaller()
    try:
        for start in range(0, len(raw), CHUNK_SIZE):
            unmarshaller.feed(raw[start:start + CHUNK_SIZE])
        return unmarshaller.close()
    except (ElementTree.ParseError, ValueError, TypeError, InvalidOperation) as e:
        raise DecodeError(f"Malformed XML-RPC response: {e}") from e


def _first_param(params: tuple | list) -> Any:
    if not params:
        raise DecodeError("XML-RPC response carries no value")
    return params[0]


def _boolean(text: str) -> bool:
    if text == "0":
        return False
    if text == "1":
        return True
    raise TypeError("bad boolean value")


def _datetime(text: str) -> datetime:
    return datetime.strptime(text, "%Y%m%dT%H:%M:%S")


def _base64(text: str) -> bytes:
    return base64.decodebytes(text.encode("ascii"))


def _nil(text: str) -> None:
    return None


_SCALARS: dict[str, Callable[[str], Any]] = {
    "boolean": _boolean,
    "i1": int,
    "i2": int,
    "i4": int,
    "i8": int,
    "int": int,
    "biginteger": int,
    "double": float,
    "float": float,
    "bigdecimal": Decimal,
    "string": str,
    "base64": _base64,
    "dateTime.iso8601": _datetime,
    "nil": _nil,
}


def _local_name(tag: str) -> str:
    if "}" in tag:
        tag = tag.rsplit("}", 1)[1]
    return tag.split(":")[-1]


class _StreamingUnmarshaller:
    def __init__(self) -> None:
        self._parser = ElementTree.XMLPullParser(events=("start", "end"))
        self._open: list[ElementTree.Element] = []
        self._typed: list[bool] = []
        self._values: list[Any] = []
        self._marks: list[int] = []
        self._members: list[tuple[int, list[int]]] = []
        self._seen_root = False
        self._fault = False

    def feed(self, data: bytes) -> None:
        self._parser.feed(data)
        self._drain()

    def close(self) -> Any:
        self._parser.close()
        self._drain()
        if not self._seen_root or self._marks or self._members:
            raise DecodeError("Incomplete XML-RPC response")
        if self._fault:
            if len(self._values) != 1 or not isinstance(self._values[0], dict):
                raise DecodeError("Malformed XML-RPC fault")
            return xmlrpc.client.Fault(**self._values[0])
        return _first_param(self._values)

    def _drain(self) -> None:
        for event, elem in self._parser.read_events():
            tag = _local_name(elem.tag)
            if event == "start":
                self._start(tag, elem)
            else:
                self._end(tag, elem)

    def _start(self, tag: str, elem: ElementTree.Element) -> None:
        if not self._seen_root:
            if tag != "methodResponse":
                raise DecodeError(f"Expected a methodResponse, got <{tag}>")
            self._seen_root = True
        if self._open and _local_name(self._open[-1].tag) == "value":
            if tag not in _SCALARS and tag not in ("array", "struct"):
                raise DecodeError(f"unknown tag {tag!r}")
            self._typed[-1] = True
        if tag == "value":
            self._typed.append(False)
        elif tag in ("array", "struct"):
            self._marks.append(len(self._values))
        elif tag == "member":
            self._members.append((len(self._values), []))
        elif tag == "fault":
            self._fault = True
        self._open.append(elem)

    def _end(self, tag: str, elem: ElementTree.Element) -> None:
        self._open.pop()
        text = elem.text or ""
        if tag in _SCALARS:
            self._values.append(_SCALARS[tag](text))
        elif tag == "name":
            if self._members:
                self._members[-1][1].append(len(self._values))
            self._values.append(text)
        elif tag == "value":
            if not self._typed.pop():
                self._values.append(text)
        elif tag == "array":
            mark = self._marks.pop()
            items = self._values[mark:]
            del self._values[mark:]
            self._values.append(items)
        elif tag == "struct":
            mark = self._marks.pop()
            items = self._values[mark:]
            del self._values[mark:]
            if len(items) % 2:
                raise DecodeError("Struct member without a value")
            self._values.append(dict(zip(items[::2], items[1::2])))
        elif tag == "member":
            mark, names = self._members.pop()
            # exactly one name followed by one value
            if names != [mark] or len(self._values) - mark != 2:
                raise DecodeError("Malformed struct member")
        # finished subtrees are no longer needed
        if self._open:
            self._open[-1].remove(elem)
