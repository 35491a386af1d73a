from __future__ import annotations

import typer
from jabber_rpc import JabberRpcError, groups

from .. import console
from ..config import load_config
from ..http import fail, make_client

app = typer.Typer(help="Shared roster group commands.")


@app.command("list")
def list_groups(
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    try:
        client = make_client(load_config(), profile=profile, server_override=server)
        items = groups.get_groups(client)
    except JabberRpcError as e:
        fail("list groups", e)

    if json_out:
        console.print_json(items)
        return
    for group in items:
        console.console.print(group)


@app.command("members")
def list_members(
        group: str = typer.Argument(..., help="Group id."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    try:
        client = make_client(load_config(), profile=profile, server_override=server)
        members = groups.get_group_members(client, group)
    except JabberRpcError as e:
        fail(f"list members of {group}", e)

    if json_out:
        console.print_json(members)
        return
    console.info(f"{group}: {len(members)} member(s)")
    for jid in members:
        console.console.print(f"  {jid}")
