"""Pagesmith CLI Main Entry Point

Usage:
    pagesmith render BASE LAYOUT PAGE     # Render a page to stdout
    pagesmith render ... -o out.html      # Render to a file
    pagesmith pages BASE                  # List page keys
    pagesmith check BASE                  # Load everything, report errors
    pagesmith --version                   # Show version
"""

from __future__ import annotations

from typing import List, Optional

import typer

from pagesmith._version import __version__

from .commands import check_command, pages_command, render_command

typer_app = typer.Typer(
    help="Render HTML pages from a root/partials/layouts/pages template tree.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pagesmith {__version__}")
        raise typer.Exit()


@typer_app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Render HTML pages from a root/partials/layouts/pages template tree."""


typer_app.command("render")(render_command)
typer_app.command("pages")(pages_command)
typer_app.command("check")(check_command)


def app(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    typer_app(args=argv)


if __name__ == "__main__":
    app()
