from __future__ import annotations

import typer
from jabber_rpc import JabberRpcError, rooms

from .. import console
from ..config import load_config
from ..http import fail, make_client

app = typer.Typer(help="Multi-user chat room commands.")


@app.command("list")
def list_rooms(
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    try:
        client = make_client(load_config(), profile=profile, server_override=server)
        items = rooms.get_online_rooms(client)
    except JabberRpcError as e:
        fail("list rooms", e)

    if json_out:
        console.print_json(items)
        return
    console.info(f"online rooms: {len(items)}")
    for room in items:
        console.console.print(f"  {room}")


@app.command("create")
def create_room(
        name: str = typer.Argument(..., help="Room name."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
):
    try:
        client = make_client(load_config(), profile=profile, server_override=server)
        rooms.create_room(client, name)
    except JabberRpcError as e:
        fail(f"create room {name}", e)
    console.ok(f"Room {name}@{rooms.muc_service(client)} created.")


@app.command("delete")
def delete_room(
        name: str = typer.Argument(..., help="Room name."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
):
    if not yes and not typer.confirm(f"Destroy room {name}?", default=False):
        raise typer.Exit(code=0)
    try:
        client = make_client(load_config(), profile=profile, server_override=server)
        rooms.delete_room(client, name)
    except JabberRpcError as e:
        fail(f"delete room {name}", e)
    console.ok(f"Room {name} destroyed.")
