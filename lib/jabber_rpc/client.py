from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .config_types import ClientConfig, validate_timeout
from .decoder import decode_response
from .envelope import Credentials, Params, build_request
from .errors import DecodeError, TransportError
from .errors_utils import redact_params
from .faults import classify_response
from .transport import Transport

logger = logging.getLogger(__name__)


class RpcClient:
    """Client for the ejabberd XML-RPC administration interface.

    Command groups (users, groups, rooms, roster) live in their own modules
    and only need ``send_request`` and ``host`` from this class.
    """

    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        self._transport = transport

    @classmethod
    def from_options(
            cls,
            options: Mapping[str, Any],
            *,
            transport: httpx.BaseTransport | None = None,
    ) -> "RpcClient":
        return cls(ClientConfig.from_options(options), transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def server(self) -> str:
        return self._cfg.server

    @property
    def host(self) -> str:
        return self._cfg.host

    @property
    def debug(self) -> bool:
        return self._cfg.debug

    def set_timeout(self, timeout: int) -> "RpcClient":
        validate_timeout(timeout)
        self._cfg = dataclasses.replace(self._cfg, timeout=timeout)
        return self

    def get_timeout(self) -> int:
        return self._cfg.timeout

    def set_user_agent(self, user_agent: str) -> "RpcClient":
        self._cfg = dataclasses.replace(self._cfg, user_agent=user_agent)
        return self

    def _credentials(self, cfg: ClientConfig) -> Credentials | None:
        if not cfg.has_credentials:
            return None
        return Credentials(user=cfg.username, server=cfg.host, password=cfg.password)

    def send_request(self, command: str, params: Params = ()) -> Any:
        if not isinstance(command, str) or not command:
            raise ValueError("command must be a non-empty string")
        if isinstance(params, (str, bytes)):
            raise TypeError("params must be a sequence or a mapping")

        # one config snapshot per call; setters swap the whole object
        cfg = self._cfg
        request = build_request(command, params, self._credentials(cfg))
        if cfg.debug:
            logger.debug("xmlrpc call %s params=%r", command, redact_params(params))

        try:
            response = Transport(cfg, transport=self._transport).post(request)
        except TransportError as e:
            e.add_note(f"command {command!r} with params {redact_params(params)!r}")
            raise

        if cfg.debug:
            logger.debug("xmlrpc response %s (%d bytes): %r", command, len(response), response)

        try:
            decoded: Any = decode_response(response)
        except DecodeError as e:
            decoded = e
        return classify_response(decoded, command=command, params=params)
