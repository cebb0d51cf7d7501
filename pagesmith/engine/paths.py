"""On-disk layout of a template tree"""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

TEMPLATE_GLOB = "*.html"


class SitePaths(NamedTuple):
    """
    Resolved template tree paths.

    Structure:
        <base>/
        ├── root.html              # outer document shell (required)
        ├── partials/*.html        # reusable fragments (optional)
        ├── layouts/*.html         # named layouts (expected)
        └── pages/<category>/<file>  # page contents (required)
    """

    base: Path

    @property
    def root(self) -> Path:
        """<base>/root.html"""
        return self.base / "root.html"

    @property
    def partials(self) -> Path:
        """<base>/partials/"""
        return self.base / "partials"

    @property
    def layouts(self) -> Path:
        """<base>/layouts/"""
        return self.base / "layouts"

    @property
    def pages(self) -> Path:
        """<base>/pages/"""
        return self.base / "pages"

    def page_file(self, page_key: str) -> Path:
        """<base>/pages/<category>/<file>"""
        return self.pages.joinpath(*page_key.split("/"))


def list_templates(directory: Path) -> list[Path]:
    """Template files directly inside a directory, in lexicographic order.

    A missing directory yields no files.
    """
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.glob(TEMPLATE_GLOB) if p.is_file())
