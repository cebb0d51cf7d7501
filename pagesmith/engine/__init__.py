"""pagesmith.engine - template sets and the phases that derive them."""

from pagesmith.engine.compiler import (
    compile_pages,
    compile_site,
    load_layouts,
    load_partials,
    load_root,
)
from pagesmith.engine.paths import SitePaths
from pagesmith.engine.template_set import TemplateSet

__all__ = [
    "SitePaths",
    "TemplateSet",
    "compile_pages",
    "compile_site",
    "load_layouts",
    "load_partials",
    "load_root",
]
