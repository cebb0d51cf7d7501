"""Shared error handling for the pagesmith CLI."""

from typing import NoReturn

import typer

from pagesmith.exceptions import (
    ExecutionError,
    LoadError,
    NotFoundError,
    PagesmithError,
)

EXIT_CODES: dict[type[PagesmithError], int] = {
    LoadError: 2,
    NotFoundError: 3,
    ExecutionError: 4,
}


class UsageError(PagesmithError):
    """Bad command-line input (settings or data files)."""


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Report an error and exit with the code for its kind."""
    if isinstance(error, PagesmithError):
        exit_with_error(str(error), EXIT_CODES.get(type(error), 1))
    else:
        # Unexpected error
        exit_with_error(f"Unexpected error: {error}")
