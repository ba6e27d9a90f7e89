from __future__ import annotations

from typing import Annotated

import typer
from typer.main import get_command

from coveralls_jacoco import __version__
from coveralls_jacoco.cli import report


def _show_version(value: bool) -> None:  # noqa: FBT001
    if value:
        typer.echo(f"coveralls-jacoco {__version__}")
        raise typer.Exit


def create_app() -> typer.Typer:
    app = typer.Typer(help="Convert JaCoCo XML coverage into Coveralls source file reports.")

    @app.callback()
    def _root(
        *,
        version: Annotated[
            bool,
            typer.Option("--version", help="Show version and exit", callback=_show_version, is_eager=True),
        ] = False,
    ) -> None:
        pass

    report.register(app)

    return app


def main() -> None:
    app = create_app()
    get_command(app)()


# Click-compatible object for tooling that imports it
cli = get_command(create_app())

__all__ = ["cli", "create_app", "main"]
