"""Pagesmith Exceptions

Custom exceptions raised while loading and rendering a template tree.
"""

from __future__ import annotations

from pathlib import Path


class PagesmithError(Exception):
    """Base exception for all pagesmith errors."""

    pass


class LoadError(PagesmithError):
    """Raised when the template tree cannot be loaded.

    Always fatal: no engine is produced when this is raised.
    """

    def __init__(self, phase: str, message: str, path: Path | None = None):
        self.phase = phase
        self.path = path
        super().__init__(f"failed to load {phase}: {message}")


class NotFoundError(PagesmithError):
    """Raised when rendering a page key that was never compiled."""

    def __init__(self, page_key: str):
        self.page_key = page_key
        super().__init__(f"page template not found: {page_key}")


class ExecutionError(PagesmithError):
    """Raised when a layout fails while executing against a page.

    The destination may already hold partial output.
    """

    def __init__(self, layout: str, page_key: str, message: str):
        self.layout = layout
        self.page_key = page_key
        super().__init__(f"failed to render {layout!r} for page {page_key}: {message}")


class SealedSetError(PagesmithError):
    """Raised when parsing into a template set that has already been cloned or frozen."""

    def __init__(self, names: frozenset[str]):
        self.names = names
        shown = ", ".join(sorted(names)[:5]) or "<empty>"
        super().__init__(f"template set is sealed and cannot be extended ({shown})")
