"""Shared utilities for CLI commands"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from pagesmith.config import EngineSettings

from .errors import UsageError

SETTINGS_FILE = "pagesmith.yaml"

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging for the pagesmith CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (-v): INFO level - shows files written
    - Debug (--debug): DEBUG level - shows every file parsed
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Log to stderr so rendered pages on stdout stay clean
    handler = RichHandler(
        console=err_console,
        show_time=verbose or debug,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("pagesmith")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def load_settings(base: Path, config: Path | None = None) -> EngineSettings:
    """Load settings from --config, else <base>/pagesmith.yaml if present."""
    if config is not None and not config.exists():
        raise UsageError(f"Settings file not found: {config}")

    path = config if config is not None else base / SETTINGS_FILE
    try:
        return EngineSettings.load(path)
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        raise UsageError(f"Invalid settings file {path}: {e}") from e


def load_data(path: Path | None) -> dict[str, Any] | None:
    """Load template variables from a YAML (or JSON) mapping file."""
    if path is None:
        return None
    if not path.exists():
        raise UsageError(f"Data file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise UsageError(f"Invalid data file {path}: {e}") from e

    if data is None:
        return None
    if not isinstance(data, dict):
        raise UsageError(f"Data file must contain a mapping: {path}")
    return data
