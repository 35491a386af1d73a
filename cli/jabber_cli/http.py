from __future__ import annotations

from typing import NoReturn

import typer
from jabber_rpc import HttpError, JabberRpcError, RpcClient, RpcError
from jabber_rpc.config_types import ClientConfig

from . import console
from .config import AppConfig, apply_env, apply_profile, normalize_server_url
from .logging_ import enable_wire_debug


def make_client(
    cfg: AppConfig,
    *,
    profile: str | None,
    server_override: str | None,
    debug: bool = False,
) -> RpcClient:
    effective_cfg = apply_env(apply_profile(cfg, profile))
    server = normalize_server_url(server_override or effective_cfg.server, warn=True)
    if debug:
        enable_wire_debug()
    return RpcClient(
        ClientConfig(
            server=server,
            host=effective_cfg.host,
            username=effective_cfg.username,
            password=effective_cfg.password,
            debug=debug,
            timeout=effective_cfg.timeout,
            user_agent=effective_cfg.user_agent,
        )
    )


def fail(action: str, exc: JabberRpcError) -> NoReturn:
    if isinstance(exc, HttpError) and exc.status_code in (401, 403):
        console.err("Unauthorized. Check username/password for the XML-RPC endpoint.")
    elif isinstance(exc, RpcError) and exc.fault_code is not None:
        console.err(f"Failed to {action}: server fault {exc.fault_code}: {exc.fault_string}")
    else:
        console.err(f"Failed to {action}: {exc}")
    raise typer.Exit(code=2)
