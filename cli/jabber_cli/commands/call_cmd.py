from __future__ import annotations

import json
from typing import Any

import typer
from rich.pretty import Pretty
from jabber_rpc import JabberRpcError

from .. import console
from ..config import load_config
from ..http import fail, make_client


def _parse_params(raw: str | None) -> Any:
    if not raw:
        return []
    try:
        params = json.loads(raw)
    except json.JSONDecodeError as exc:
        console.err(f"--params is not valid JSON: {exc}")
        raise typer.Exit(code=2)
    if not isinstance(params, (list, dict)):
        console.err("--params must be a JSON array or object.")
        raise typer.Exit(code=2)
    return params


def call(
        command: str = typer.Argument(..., help="XML-RPC command name, e.g. connected_users_info."),
        params: str | None = typer.Option(
            None,
            "--params",
            help='JSON array of arguments or JSON object for a single struct, e.g. \'{"host": "example.com"}\'.',
        ),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
        debug: bool = typer.Option(False, "--debug", help="Dump request and raw response."),
        json_out: bool = typer.Option(False, "--json", help="Print the reply as JSON."),
):
    """Run an arbitrary XML-RPC command and print the decoded reply."""
    parsed = _parse_params(params)
    try:
        client = make_client(load_config(), profile=profile, server_override=server, debug=debug)
        data = client.send_request(command, parsed)
    except JabberRpcError as e:
        fail(f"run '{command}'", e)

    if json_out:
        console.print_json(data)
        return
    console.print(Pretty(data))
