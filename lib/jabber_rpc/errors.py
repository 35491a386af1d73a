from __future__ import annotations

from typing import Any
from xmlrpc.client import Fault

from .errors_utils import redact_params


class JabberRpcError(Exception):
    """Base client error."""


class ConfigError(JabberRpcError, ValueError):
    """Invalid client configuration."""


class TransportError(JabberRpcError):
    """Transport/network layer error."""

    kind = "transport"


class NetworkError(TransportError):
    kind = "network"


class RequestTimeout(NetworkError):
    kind = "timeout"


class HttpError(TransportError):
    kind = "http"

    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class DecodeError(JabberRpcError):
    """Response body is not a well-formed XML-RPC reply."""


class RpcError(JabberRpcError):
    """A command failed: unparseable reply, empty result or server fault."""

    def __init__(self, command: str, params: Any, cause: BaseException | None = None):
        self.command = command
        self.params = redact_params(params)
        self.cause = cause
        super().__init__(self._describe())

    @property
    def fault_code(self) -> int | None:
        return self.cause.faultCode if isinstance(self.cause, Fault) else None

    @property
    def fault_string(self) -> str | None:
        return self.cause.faultString if isinstance(self.cause, Fault) else None

    def _describe(self) -> str:
        if isinstance(self.cause, Fault):
            reason = f"fault {self.cause.faultCode}: {self.cause.faultString}"
        elif self.cause is not None:
            reason = str(self.cause) or type(self.cause).__name__
        else:
            reason = "empty response"
        return f"Command '{self.command}' failed with params {self.params!r}: {reason}"
