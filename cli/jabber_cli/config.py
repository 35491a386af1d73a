from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, replace
from typing import Any

import tomli_w
from jabber_rpc.config_types import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from platformdirs import user_config_dir

from . import console

APP_NAME = "jabber-rpc"
CONFIG_FILENAME = "config.toml"
ENV_SERVER = "JABBER_RPC_SERVER"
ENV_HOST = "JABBER_RPC_HOST"
ENV_USERNAME = "JABBER_RPC_USERNAME"
ENV_PASSWORD = "JABBER_RPC_PASSWORD"

PROFILE_KEYS = ("server", "host", "username", "password", "timeout", "user_agent")

_WARNED_SERVER_SCHEME = False


@dataclass
class AppConfig:
    server: str = ""
    host: str = ""
    username: str = ""
    password: str = ""
    timeout: int = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    profiles: dict[str, dict[str, Any]] = field(default_factory=dict)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig()


def normalize_server_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_SERVER_SCHEME
    if _WARNED_SERVER_SCHEME:
        return
    console.warn(f"server URL missing scheme, assuming {normalized}")
    _WARNED_SERVER_SCHEME = True


def _as_timeout(value: Any, fallback: int) -> int:
    if value is None or isinstance(value, bool):
        return fallback
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {
        "server": cfg.server,
        "host": cfg.host,
        "username": cfg.username,
        "password": cfg.password,
        "timeout": cfg.timeout,
        "user_agent": cfg.user_agent,
    }
    if cfg.profiles:
        data["profiles"] = {name: dict(values) for name, values in cfg.profiles.items()}
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    profiles_raw = data.get("profiles") or {}
    profiles: dict[str, dict[str, Any]] = {}
    if isinstance(profiles_raw, dict):
        for name, values in profiles_raw.items():
            if isinstance(values, dict):
                profiles[str(name)] = {k: v for k, v in values.items() if k in PROFILE_KEYS}
    return AppConfig(
        server=normalize_server_url(str(data.get("server") or ""), warn=True),
        host=str(data.get("host") or "").strip(),
        username=str(data.get("username") or ""),
        password=str(data.get("password") or ""),
        timeout=_as_timeout(data.get("timeout"), DEFAULT_TIMEOUT),
        user_agent=str(data.get("user_agent") or DEFAULT_USER_AGENT),
        profiles=profiles,
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    prof = cfg.profiles.get(profile)
    if not isinstance(prof, dict):
        console.warn(f"Profile '{profile}' not found, using defaults.")
        return cfg
    return replace(
        cfg,
        server=normalize_server_url(str(prof.get("server") or cfg.server), warn=True),
        host=str(prof.get("host") or cfg.host),
        username=str(prof.get("username") or cfg.username),
        password=str(prof.get("password") or cfg.password),
        timeout=_as_timeout(prof.get("timeout"), cfg.timeout),
        user_agent=str(prof.get("user_agent") or cfg.user_agent),
    )


def apply_env(cfg: AppConfig) -> AppConfig:
    return replace(
        cfg,
        server=normalize_server_url(os.getenv(ENV_SERVER, "").strip() or cfg.server),
        host=os.getenv(ENV_HOST, "").strip() or cfg.host,
        username=os.getenv(ENV_USERNAME, "").strip() or cfg.username,
        password=os.getenv(ENV_PASSWORD, "") or cfg.password,
    )


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
