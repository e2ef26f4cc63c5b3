from __future__ import annotations

import typer

from .commands import auth_cmd, get_cmd, settings_cmd
from .commands.posts_cmd import app as posts_app
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="postboard",
        help="postboard CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(auth_cmd.app, name="auth")
    app.add_typer(posts_app, name="posts")
    app.command("whoami")(auth_cmd.whoami_impl)
    app.command("get")(get_cmd.get)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
