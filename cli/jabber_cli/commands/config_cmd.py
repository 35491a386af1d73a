from __future__ import annotations

import typer

from .. import console
from ..config import config_path, load_config, normalize_server_url, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/jabber-rpc/config.toml).")


@app.command("show")
def show_settings():
    cfg = load_config()
    password_state = "(set)" if cfg.password else "(empty)"
    console.console.print(
        f"server={cfg.server or '-'} host={cfg.host or '-'} username={cfg.username or '-'} "
        f"password={password_state} timeout={cfg.timeout} user_agent={cfg.user_agent}"
    )
    if cfg.profiles:
        console.info(f"profiles: {', '.join(sorted(cfg.profiles))}")
    console.info(f"config file: {config_path()}")


@app.command("set")
def set_setting(
        server: str | None = typer.Option(None, "--server", help="XML-RPC endpoint URL."),
        host: str | None = typer.Option(None, "--host", help="Virtual host (realm) commands run under."),
        username: str | None = typer.Option(None, "--username", help="Admin account for the auth block."),
        password: str | None = typer.Option(None, "--password", help="Admin password."),
        timeout: int | None = typer.Option(None, "--timeout", min=0, help="Request timeout in seconds (0 = none)."),
        user_agent: str | None = typer.Option(None, "--user-agent", help="User-Agent header."),
):
    cfg = load_config()
    if server is not None:
        cfg.server = normalize_server_url(server, warn=True)
    if host is not None:
        cfg.host = host.strip()
    if username is not None:
        cfg.username = username
    if password is not None:
        cfg.password = password
    if timeout is not None:
        cfg.timeout = timeout
    if user_agent is not None:
        cfg.user_agent = user_agent
    if bool(cfg.username) != bool(cfg.password):
        console.err("username and password must be set together.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
