from __future__ import annotations

import typer
from jabber_rpc import JabberRpcError, users
from rich.table import Table

from .. import console
from ..config import load_config
from ..http import fail, make_client

app = typer.Typer(help="Account commands.")


def _client(profile: str | None, server: str | None):
    return make_client(load_config(), profile=profile, server_override=server)


@app.command("create")
def create_user(
        user: str = typer.Argument(..., help="Local part of the JID."),
        password: str = typer.Option(..., "--password", prompt=True, hide_input=True, confirmation_prompt=True),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
):
    try:
        users.create_user(_client(profile, server), user, password)
    except JabberRpcError as e:
        fail(f"create user {user}", e)
    console.ok(f"User {user} created.")


@app.command("check")
def check_user(
        user: str = typer.Argument(..., help="Local part of the JID."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
):
    try:
        exists = users.check_account(_client(profile, server), user)
    except JabberRpcError as e:
        fail(f"check user {user}", e)
    if not exists:
        console.warn(f"User {user} does not exist.")
        raise typer.Exit(code=1)
    console.ok(f"User {user} exists.")


@app.command("passwd")
def change_password(
        user: str = typer.Argument(..., help="Local part of the JID."),
        password: str = typer.Option(..., "--password", prompt=True, hide_input=True, confirmation_prompt=True),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
):
    try:
        users.change_password(_client(profile, server), user, password)
    except JabberRpcError as e:
        fail(f"change password for {user}", e)
    console.ok(f"Password for {user} changed.")


@app.command("delete")
def delete_user(
        user: str = typer.Argument(..., help="Local part of the JID."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
):
    if not yes and not typer.confirm(f"Unregister {user}?", default=False):
        raise typer.Exit(code=0)
    try:
        users.unregister_user(_client(profile, server), user)
    except JabberRpcError as e:
        fail(f"delete user {user}", e)
    console.ok(f"User {user} unregistered.")


@app.command("vcard")
def show_vcard(
        user: str = typer.Argument(..., help="Local part of the JID."),
        profile: str | None = typer.Option(None, "--profile", help="Config profile."),
        server: str | None = typer.Option(None, "--server", help="Override XML-RPC endpoint URL."),
):
    try:
        card = users.get_vcard(_client(profile, server), user)
    except JabberRpcError as e:
        fail(f"fetch vCard for {user}", e)

    if not card:
        console.info(f"No vCard data for {user}.")
        return

    table = Table(title=f"vCard {user}")
    table.add_column("field", style="bold")
    table.add_column("value")
    for field, value in card.items():
        table.add_row(field.name.lower(), value)
    console.console.print(table)
