from .client import RpcClient
from .config_types import ClientConfig
from .errors import (
    ConfigError,
    DecodeError,
    HttpError,
    JabberRpcError,
    NetworkError,
    RequestTimeout,
    RpcError,
    TransportError,
)
from .vcard import VCardField

__all__ = [
    "RpcClient",
    "ClientConfig",
    "ConfigError",
    "DecodeError",
    "HttpError",
    "JabberRpcError",
    "NetworkError",
    "RequestTimeout",
    "RpcError",
    "TransportError",
    "VCardField",
]
