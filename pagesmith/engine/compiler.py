"""Compiler - turns a template tree into one TemplateSet per page.

Sets are derived from the outside in, cloning at every step:

    root -> partials -> layouts -> page (one clone per page file)

Each phase wraps its failures in a LoadError naming the phase and file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from jinja2 import TemplateSyntaxError

from pagesmith.config import EngineSettings
from pagesmith.engine.paths import SitePaths, list_templates
from pagesmith.engine.template_set import TemplateSet
from pagesmith.exceptions import LoadError, PagesmithError

log = logging.getLogger(__name__)

PARSE_ERRORS = (OSError, UnicodeDecodeError, TemplateSyntaxError, PagesmithError)


def _describe(exc: Exception) -> str:
    if isinstance(exc, TemplateSyntaxError):
        return f"line {exc.lineno}: {exc.message}"
    return str(exc)


def _parse_into(template_set: TemplateSet, path: Path, phase: str) -> None:
    try:
        template_set.parse_file(path)
    except PARSE_ERRORS as e:
        raise LoadError(phase, f"{path}: {_describe(e)}", path) from e


def load_root(paths: SitePaths, settings: EngineSettings | None = None) -> TemplateSet:
    """Parse <base>/root.html into a fresh set."""
    root = TemplateSet(settings)
    _parse_into(root, paths.root, "root template")
    log.debug(f"Loaded root template {paths.root}")
    return root


def _extend(base: TemplateSet, directory: Path, phase: str) -> TemplateSet:
    """Clone `base` and parse every template file of `directory` into it."""
    derived = base.clone()
    files = list_templates(directory)
    for path in files:
        _parse_into(derived, path, phase)

    if files:
        log.debug(f"Loaded {len(files)} {phase} from {directory}")
    else:
        log.debug(f"No {phase} found in {directory}")
    return derived


def load_partials(paths: SitePaths, root: TemplateSet) -> TemplateSet:
    """Derive the partials set from the root set.

    A missing or empty partials directory yields a plain clone of root.
    """
    return _extend(root, paths.partials, "partials")


def load_layouts(paths: SitePaths, partials: TemplateSet) -> TemplateSet:
    """Derive the layout set from the partials set.

    A missing layouts directory is not an error here; rendering a layout
    that does not exist fails later.
    """
    return _extend(partials, paths.layouts, "layouts")


def _list_dir(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        raise LoadError(
            "pages", f"could not read the directory {directory}: {e}", directory
        ) from e


def compile_pages(paths: SitePaths, layouts: TemplateSet) -> Mapping[str, TemplateSet]:
    """Compile every <base>/pages/<category>/<file> into its own set.

    Args:
        paths: Template tree
        layouts: Fully loaded layout set every page derives from

    Returns:
        Read-only mapping of "<category>/<file>" to a sealed TemplateSet
    """
    if not paths.pages.is_dir():
        raise LoadError(
            "pages", f"pages directory not found: {paths.pages}", paths.pages
        )

    pages: dict[str, TemplateSet] = {}
    for category in _list_dir(paths.pages):
        if not category.is_dir():
            raise LoadError(
                "pages", f"expected a category directory, found file {category}", category
            )

        for entry in _list_dir(category):
            if entry.is_dir():
                log.debug(f"Skipping nested directory {entry}")
                continue

            page = layouts.clone()
            _parse_into(page, entry, "pages")
            page.seal()
            pages[f"{category.name}/{entry.name}"] = page

    log.debug(f"Compiled {len(pages)} pages from {paths.pages}")
    return MappingProxyType(pages)


def compile_site(
    base: str | Path, settings: EngineSettings | None = None
) -> Mapping[str, TemplateSet]:
    """Run every loading phase in order and return the page registry.

    All or nothing: the first failure raises LoadError.
    """
    paths = SitePaths(Path(base))
    root = load_root(paths, settings)
    partials = load_partials(paths, root)
    layouts = load_layouts(paths, partials)
    return compile_pages(paths, layouts)
