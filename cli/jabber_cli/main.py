from __future__ import annotations

import typer

from .commands import call_cmd, config_cmd
from .commands.groups_cmd import app as groups_app
from .commands.rooms_cmd import app as rooms_app
from .commands.roster_cmd import app as roster_app
from .commands.users_cmd import app as users_app
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="jabber-rpc",
        help="ejabberd XML-RPC administration CLI",
        no_args_is_help=True,
    )

    app.add_typer(config_cmd.app, name="config")
    app.command("call")(call_cmd.call)
    app.add_typer(users_app, name="users")
    app.add_typer(groups_app, name="groups")
    app.add_typer(rooms_app, name="rooms")
    app.add_typer(roster_app, name="roster")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
