from __future__ import annotations

import xmlrpc.client
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

Params = Sequence[Any] | Mapping[str, Any]


@dataclass(frozen=True)
class Credentials:
    user: str
    server: str
    password: str

    def as_struct(self) -> dict[str, str]:
        return {"user": self.user, "server": self.server, "password": self.password}


def wrap_params(params: Params, credentials: Credentials | None = None) -> list[Any]:
    """Return the positional XML-RPC parameters for one call.

    A mapping is a single struct argument. With credentials the arguments are
    nested behind the auth struct instead of being merged into it.
    """
    if isinstance(params, Mapping):
        args: Any = dict(params)
        positional = [args]
    else:
        args = list(params)
        positional = args
    if credentials is None:
        return positional
    return [credentials.as_struct(), args]


def encode_request(command: str, params: Sequence[Any]) -> bytes:
    body = xmlrpc.client.dumps(tuple(params), methodname=command, encoding="utf-8", allow_none=True)
    return body.encode("utf-8")


def build_request(command: str, params: Params, credentials: Credentials | None = None) -> bytes:
    return encode_request(command, wrap_params(params, credentials))
