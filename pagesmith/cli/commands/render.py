"""Render command - render one layout for one page"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from pagesmith.exceptions import NotFoundError
from pagesmith.renderer import Pagesmith

from ..errors import handle_error
from ..utils import load_data, load_settings, setup_logging

log = logging.getLogger(__name__)


def render_command(
    base: Path = typer.Argument(..., help="Template tree directory."),
    layout: str = typer.Argument(..., help="Layout to render, e.g. app_layout."),
    page: str = typer.Argument(..., help="Page key, e.g. home/index.html."),
    data_file: Optional[Path] = typer.Option(
        None, "-d", "--data", help="YAML or JSON file with template variables."
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the page to a file instead of stdout."
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Settings file (default: BASE/pagesmith.yaml)."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show progress."),
    debug: bool = typer.Option(False, "--debug", help="Show every file parsed."),
) -> None:
    """Render LAYOUT with the fragments of PAGE.

    Examples:
        pagesmith render site app_layout home/index.html
        pagesmith render site app_layout blog/post.html -d post.yaml -o out.html
    """
    setup_logging(verbose, debug)

    try:
        settings = load_settings(base, config)
        data = load_data(data_file)
        engine = Pagesmith(base, settings)

        if output is not None:
            # Leave an existing output file alone when the page is unknown
            if page not in engine:
                raise NotFoundError(page)
            output.parent.mkdir(parents=True, exist_ok=True)
            with open(output, "w", encoding=settings.encoding) as f:
                engine.render_page(f, layout, page, data)
            log.info(f"Wrote {page} to {output}")
        else:
            engine.render_page(sys.stdout, layout, page, data)
            sys.stdout.flush()
    except Exception as e:
        handle_error(e)
