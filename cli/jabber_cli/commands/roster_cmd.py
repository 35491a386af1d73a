from __future__ import annotations

import typer
from jabber_rpc import JabberRpcError, roster
from rich.table import Table

from .. import console
from ..config import load_config
from ..http import fail, make_client

app = typer.Typer(help="Roster commands.")


@app.command("list")
def list_contacts(
        user: str = typer.Argument(..., help="Roster owner (local part of the JID)."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    try:
        client = make_client(load_config(), profile=profile, server_override=server)
        contacts = roster.get_roster_contacts(client, user)
    except JabberRpcError as e:
        fail(f"fetch roster of {user}", e)

    if json_out:
        console.print_json(contacts)
        return

    table = Table(title=f"Roster {user}")
    table.add_column("jid", style="bold")
    table.add_column("nick")
    table.add_column("subscription")
    table.add_column("group")
    for c in contacts:
        table.add_row(
            str(c.get("jid") or "-"),
            str(c.get("nick") or "-"),
            str(c.get("subscription") or "-"),
            str(c.get("group") or "-"),
        )
    console.console.print(table)
