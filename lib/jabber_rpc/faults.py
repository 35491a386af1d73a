from __future__ import annotations

from typing import Any
from xmlrpc.client import Fault

from .errors import DecodeError, RpcError


def is_fault(decoded: Any) -> bool:
    return isinstance(decoded, Fault)


def classify_response(decoded: Any, *, command: str, params: Any) -> Any:
    """Return ``decoded`` unless it signals a failed call.

    Parse failures, empty results and server faults all surface as
    ``RpcError``; the underlying problem is kept in ``RpcError.cause``.
    """
    if isinstance(decoded, DecodeError):
        raise RpcError(command, params, decoded) from decoded
    if is_fault(decoded):
        raise RpcError(command, params, decoded) from decoded
    if not decoded:
        raise RpcError(command, params)
    return decoded
