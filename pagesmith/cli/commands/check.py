"""Check command - load a template tree and report problems"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from pagesmith.renderer import Pagesmith

from ..errors import handle_error
from ..utils import console, load_settings, setup_logging


def check_command(
    base: Path = typer.Argument(..., help="Template tree directory."),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Settings file (default: BASE/pagesmith.yaml)."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show progress."),
    debug: bool = typer.Option(False, "--debug", help="Show every file parsed."),
) -> None:
    """Load every template under BASE, failing on the first error."""
    setup_logging(verbose, debug)

    try:
        engine = Pagesmith(base, load_settings(base, config))
    except Exception as e:
        handle_error(e)

    console.print(f"[green]✓[/green] {len(engine)} pages loaded from {base}")
