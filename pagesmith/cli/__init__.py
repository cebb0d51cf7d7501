"""Command-line interface for pagesmith"""

from .main import app, typer_app

__all__ = ["app", "typer_app"]
