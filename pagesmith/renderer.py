"""Pagesmith - the loaded, frozen template tree and its render entry point"""

from __future__ import annotations

import io
import logging
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import IO, Any, Iterator, Mapping

from jinja2 import TemplateError, TemplateNotFound
from pydantic import BaseModel

from pagesmith.config import EngineSettings
from pagesmith.engine.compiler import compile_site
from pagesmith.exceptions import ExecutionError, NotFoundError

log = logging.getLogger(__name__)


def as_context(data: Any) -> Mapping[str, Any]:
    """Turn render data into template variables.

    Accepts None, any mapping, a pydantic model or a dataclass instance
    (fields become variables, values are passed through untouched).
    """
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return data
    if isinstance(data, BaseModel):
        return {name: getattr(data, name) for name in type(data).model_fields}
    if is_dataclass(data) and not isinstance(data, type):
        return {f.name: getattr(data, f.name) for f in fields(data)}
    raise TypeError(
        "render data must be a mapping, a pydantic model or a dataclass, "
        f"not {type(data).__name__}"
    )


class Pagesmith:
    """Template tree loaded once from a fixed directory layout.

    All loading happens in the constructor; a LoadError there means no
    engine at all. Afterwards the engine is read-only and safe to render
    from several threads, each with its own destination.

    Example:
        engine = Pagesmith("site")
        engine.render_page(sys.stdout, "app_layout", "home/index.html")
    """

    def __init__(self, base_path: str | Path, settings: EngineSettings | None = None):
        self.base_path = Path(base_path)
        self.settings = settings or EngineSettings()
        self._pages = compile_site(self.base_path, self.settings)
        log.debug(f"Loaded {len(self._pages)} pages from {self.base_path}")

    @property
    def page_keys(self) -> tuple[str, ...]:
        """Compiled page keys, sorted."""
        return tuple(sorted(self._pages))

    def __contains__(self, page: object) -> bool:
        return page in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[str]:
        return iter(self.page_keys)

    def __repr__(self) -> str:
        return f"Pagesmith({str(self.base_path)!r}, pages={len(self._pages)})"

    def render_page(
        self, destination: IO[str], layout: str, page: str, data: Any = None
    ) -> None:
        """Render `layout` with the fragments of `page` into destination.

        Args:
            destination: Text stream receiving the output as it is produced
            layout: Name of a fragment defined in layouts/
            page: Page key, "<category>/<file>"
            data: Template variables (None, a mapping, a pydantic model or a
                dataclass instance)

        Raises:
            NotFoundError: Unknown page; nothing is written
            TypeError: Unsupported data type; nothing is written
            ExecutionError: The layout is missing or fails while rendering;
                destination may hold partial output
        """
        template_set = self._pages.get(page)
        if template_set is None:
            raise NotFoundError(page)

        context = as_context(data)
        try:
            template_set.execute(destination, layout, context)
        except TemplateNotFound as e:
            raise ExecutionError(layout, page, f"template {e.name!r} is not defined") from e
        except TemplateError as e:
            raise ExecutionError(layout, page, e.message or type(e).__name__) from e
        except Exception as e:
            raise ExecutionError(layout, page, str(e) or type(e).__name__) from e

    def render_to_string(self, layout: str, page: str, data: Any = None) -> str:
        """Render into memory and return the output."""
        buffer = io.StringIO()
        self.render_page(buffer, layout, page, data)
        return buffer.getvalue()
