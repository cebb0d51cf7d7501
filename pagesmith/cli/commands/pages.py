"""Pages command - list compiled page keys"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from pagesmith.engine.paths import SitePaths
from pagesmith.renderer import Pagesmith

from ..errors import handle_error
from ..utils import console, load_settings, setup_logging


def pages_command(
    base: Path = typer.Argument(..., help="Template tree directory."),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Settings file (default: BASE/pagesmith.yaml)."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show progress."),
) -> None:
    """List every page key that can be rendered."""
    setup_logging(verbose)

    try:
        engine = Pagesmith(base, load_settings(base, config))
    except Exception as e:
        handle_error(e)

    if not len(engine):
        console.print("[yellow]No pages found[/yellow]")
        return

    paths = SitePaths(engine.base_path)
    table = Table()
    table.add_column("Page", style="cyan", no_wrap=True)
    table.add_column("Category")
    table.add_column("Source", style="dim")

    for key in engine.page_keys:
        category, _, _ = key.partition("/")
        table.add_row(key, category, str(paths.page_file(key)))

    console.print(table)
