"""CLI commands"""

from .check import check_command
from .pages import pages_command
from .render import render_command

__all__ = ["check_command", "pages_command", "render_command"]
