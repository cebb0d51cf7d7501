"""Shared fixtures for pagesmith tests."""

from pathlib import Path
from typing import Callable

import pytest

from pagesmith import Pagesmith

SITE_DIR = Path(__file__).parent / "fixtures" / "site"

ROOT = """\
{% define "root_start" %}<!DOCTYPE html><body>{% enddefine %}
{% define "root_end" %}</body>{% enddefine %}
"""

LAYOUT = """\
{% define "app_layout" %}{% include "root_start" %}{% include "content" %}{% include "root_end" %}{% enddefine %}
"""


@pytest.fixture
def site_dir() -> Path:
    """The example tree: root shell, header partial, app_layout, two pages."""
    return SITE_DIR


@pytest.fixture
def engine(site_dir: Path) -> Pagesmith:
    return Pagesmith(site_dir)


@pytest.fixture
def make_site(tmp_path: Path) -> Callable[[dict[str, str | None]], Path]:
    """Write a template tree from {relative path: content} and return its root.

    Files listed with content None become directories.
    """

    def _make(files: dict[str, str | None]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            if content is None:
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make


@pytest.fixture
def minimal_site(make_site) -> Path:
    """Root + one layout + one page, no partials directory."""
    return make_site(
        {
            "root.html": ROOT,
            "layouts/app.html": LAYOUT,
            "pages/home/index.html": '{% define "content" %}Home{% enddefine %}',
        }
    )
