from __future__ import annotations

import typer

from .commands import auth_cmd, settings_cmd
from .commands.call_cmd import call
from .commands.sign_cmd import sign
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="shopee",
        help="Shopee partner API CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(auth_cmd.app, name="auth")
    app.command("call")(call)
    app.command("sign")(sign)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
