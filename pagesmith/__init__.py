"""pagesmith - convention-driven HTML page rendering on Jinja2

Loads a fixed template tree once:

    root.html -> partials/*.html -> layouts/*.html -> pages/<category>/<file>

and renders any layout against any compiled page.
"""

from pagesmith._version import __version__
from pagesmith.config import EngineSettings
from pagesmith.engine import TemplateSet
from pagesmith.exceptions import (
    ExecutionError,
    LoadError,
    NotFoundError,
    PagesmithError,
    SealedSetError,
)
from pagesmith.renderer import Pagesmith

__all__ = [
    "__version__",
    # Engine
    "Pagesmith",
    "EngineSettings",
    "TemplateSet",
    # Errors
    "PagesmithError",
    "LoadError",
    "NotFoundError",
    "ExecutionError",
    "SealedSetError",
]
