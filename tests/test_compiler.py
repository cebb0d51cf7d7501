"""Tests for the loading phases: root, partials, layouts and pages."""

from pathlib import Path

import pytest

from pagesmith import LoadError, Pagesmith
from pagesmith.engine import (
    SitePaths,
    compile_pages,
    compile_site,
    load_layouts,
    load_partials,
    load_root,
)

from conftest import LAYOUT, ROOT

PAGE = '{% define "content" %}Home{% enddefine %}'


# =============================================================================
# Root
# =============================================================================


def test_root_defines_shell_fragments(site_dir):
    root = load_root(SitePaths(site_dir))
    assert {"root_start", "root_end", "root.html"} <= root.names


def test_missing_root_fails(make_site):
    base = make_site({"pages/home/index.html": PAGE})

    with pytest.raises(LoadError) as exc_info:
        Pagesmith(base)

    assert exc_info.value.phase == "root template"
    assert exc_info.value.path == base / "root.html"
    assert str(exc_info.value).startswith("failed to load root template:")
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_root_syntax_error_fails(make_site):
    base = make_site({"root.html": "{% if %}", "pages/home/index.html": PAGE})

    with pytest.raises(LoadError) as exc_info:
        Pagesmith(base)

    assert exc_info.value.phase == "root template"
    assert "line 1" in str(exc_info.value)


# =============================================================================
# Partials and layouts
# =============================================================================


def test_missing_partials_directory_is_fine(minimal_site):
    engine = Pagesmith(minimal_site)
    assert engine.render_to_string("app_layout", "home/index.html") == (
        "<!DOCTYPE html><body>Home</body>"
    )


def test_empty_partials_directory_yields_clone_of_root(make_site):
    base = make_site({"root.html": ROOT, "partials": None})
    paths = SitePaths(base)

    root = load_root(paths)
    partials = load_partials(paths, root)

    assert partials.names == root.names
    assert partials is not root
    assert root.sealed
    assert not partials.sealed


def test_partials_are_parsed_in_lexicographic_order(make_site):
    base = make_site(
        {
            "root.html": ROOT,
            "partials/b.html": '{% define "title" %}from b{% enddefine %}',
            "partials/a.html": '{% define "title" %}from a{% enddefine %}',
            "layouts/app.html": '{% define "app" %}{% include "title" %}{% enddefine %}',
            "pages/home/index.html": PAGE,
        }
    )
    assert Pagesmith(base).render_to_string("app", "home/index.html") == "from b"


def test_only_html_files_are_loaded_from_partials(make_site):
    base = make_site(
        {
            "root.html": ROOT,
            "partials/notes.txt": "{% if %} not a template",
            "layouts/app.html": LAYOUT,
            "pages/home/index.html": PAGE,
        }
    )
    assert "home/index.html" in Pagesmith(base)


def test_partial_syntax_error_fails(make_site):
    base = make_site(
        {
            "root.html": ROOT,
            "partials/header.html": '{% define "header" %}unclosed',
            "pages/home/index.html": PAGE,
        }
    )

    with pytest.raises(LoadError) as exc_info:
        Pagesmith(base)

    assert exc_info.value.phase == "partials"
    assert exc_info.value.path == base / "partials" / "header.html"


def test_layout_syntax_error_fails(make_site):
    base = make_site(
        {
            "root.html": ROOT,
            "layouts/app.html": "{% for %}",
            "pages/home/index.html": PAGE,
        }
    )

    with pytest.raises(LoadError) as exc_info:
        Pagesmith(base)

    assert exc_info.value.phase == "layouts"


def test_layouts_see_partials_and_root(site_dir):
    paths = SitePaths(site_dir)
    layouts = load_layouts(paths, load_partials(paths, load_root(paths)))
    assert {"root_start", "root_end", "header", "app_layout"} <= layouts.names
    assert "content" not in layouts.names


# =============================================================================
# Pages
# =============================================================================


def test_missing_pages_directory_fails(make_site):
    base = make_site({"root.html": ROOT, "layouts/app.html": LAYOUT})

    with pytest.raises(LoadError) as exc_info:
        Pagesmith(base)

    assert exc_info.value.phase == "pages"
    assert "pages directory not found" in str(exc_info.value)


def test_page_syntax_error_aborts_everything(make_site):
    base = make_site(
        {
            "root.html": ROOT,
            "layouts/app.html": LAYOUT,
            "pages/home/index.html": PAGE,
            "pages/home/broken.html": '{% define "content" %}',
        }
    )

    with pytest.raises(LoadError) as exc_info:
        Pagesmith(base)

    assert exc_info.value.phase == "pages"
    assert exc_info.value.path == base / "pages" / "home" / "broken.html"


def test_file_directly_under_pages_fails(make_site):
    base = make_site(
        {
            "root.html": ROOT,
            "layouts/app.html": LAYOUT,
            "pages/home/index.html": PAGE,
            "pages/stray.html": PAGE,
        }
    )

    with pytest.raises(LoadError, match="category directory"):
        Pagesmith(base)


def test_unreadable_category_fails(make_site, monkeypatch):
    base = make_site({"root.html": ROOT, "layouts/app.html": LAYOUT, "pages/home/index.html": PAGE})
    iterdir = Path.iterdir

    def locked_iterdir(self):
        if self.name == "home" and self.parent.name == "pages":
            raise PermissionError(13, "Permission denied", str(self))
        return iterdir(self)

    monkeypatch.setattr(Path, "iterdir", locked_iterdir)

    with pytest.raises(LoadError) as exc_info:
        Pagesmith(base)

    assert exc_info.value.phase == "pages"
    assert exc_info.value.path == base / "pages" / "home"
    assert "could not read the directory" in str(exc_info.value)


def test_nested_directories_are_skipped(make_site):
    base = make_site(
        {
            "root.html": ROOT,
            "layouts/app.html": LAYOUT,
            "pages/home/index.html": PAGE,
            "pages/home/drafts/wip.html": PAGE,
        }
    )
    assert Pagesmith(base).page_keys == ("home/index.html",)


def test_page_files_of_any_extension_are_compiled(make_site):
    base = make_site(
        {
            "root.html": ROOT,
            "layouts/app.html": LAYOUT,
            "pages/feeds/atom.xml": '{% define "content" %}<feed/>{% enddefine %}',
            "pages/empty": None,
        }
    )
    engine = Pagesmith(base)

    assert engine.page_keys == ("feeds/atom.xml",)
    assert "<feed/>" in engine.render_to_string("app_layout", "feeds/atom.xml")


def test_compiled_pages_are_sealed_and_read_only(site_dir):
    pages = compile_site(site_dir)

    assert set(pages) == {"blog/post.html", "home/index.html"}
    assert all(page.sealed for page in pages.values())
    with pytest.raises(TypeError):
        pages["new/page.html"] = pages["home/index.html"]  # type: ignore[index]


def test_each_page_gets_its_own_set(site_dir):
    paths = SitePaths(site_dir)
    layouts = load_layouts(paths, load_partials(paths, load_root(paths)))
    pages = compile_pages(paths, layouts)

    home, post = pages["home/index.html"], pages["blog/post.html"]
    assert home is not post
    assert "index.html" in home and "index.html" not in post
    assert "content" not in layouts
    assert layouts.sealed
