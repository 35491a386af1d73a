from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .errors import ConfigError

DEFAULT_TIMEOUT = 5
DEFAULT_USER_AGENT = "GameNet"


def validate_timeout(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError("Timeout value must be a non-negative integer")
    return value


@dataclass(frozen=True)
class ClientConfig:
    server: str
    host: str
    username: str = ""
    password: str = ""
    debug: bool = False
    timeout: int = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.server:
            raise ConfigError("Parameter 'server' is not specified")
        if not self.host:
            raise ConfigError("Parameter 'host' is not specified")
        if self.username and not self.password:
            raise ConfigError("Password cannot be empty if username was defined")
        if not self.username and self.password:
            raise ConfigError("Username cannot be empty if password was defined")
        validate_timeout(self.timeout)

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "ClientConfig":
        """Build a config from a loose option mapping.

        Accepts ``server``, ``host``, ``username``, ``password``, ``debug``,
        ``timeout`` and ``userAgent`` (or ``user_agent``). Missing optional
        keys fall back to the defaults.
        """
        timeout = options.get("timeout")
        if timeout is not None and not isinstance(timeout, bool):
            try:
                timeout = int(timeout)
            except (TypeError, ValueError) as exc:
                raise ConfigError("Timeout value must be a non-negative integer") from exc
        user_agent = options.get("userAgent") or options.get("user_agent")
        return cls(
            server=str(options.get("server") or ""),
            host=str(options.get("host") or ""),
            username=str(options.get("username") or ""),
            password=str(options.get("password") or ""),
            debug=bool(options.get("debug", False)),
            timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
            user_agent=str(user_agent) if user_agent else DEFAULT_USER_AGENT,
        )
