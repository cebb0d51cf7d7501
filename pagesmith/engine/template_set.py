"""TemplateSet - a clonable namespace of compiled fragments.

A set is like a small Jinja2 world of its own:
- Every fragment is compiled once to a code object
- Each set owns its Environment and loader, so includes resolve only
  against the set's own names
- clone() shares the compiled code but not the namespace, then seals
  the original so it can never change underneath its derivatives
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import CodeType
from typing import IO, Any, Mapping

from jinja2 import BaseLoader, Environment, TemplateNotFound, nodes

from pagesmith.config import EngineSettings
from pagesmith.engine.extensions import DefineExtension
from pagesmith.exceptions import SealedSetError

log = logging.getLogger(__name__)


class FragmentLoader(BaseLoader):
    """Serve precompiled fragments by name."""

    def __init__(self, fragments: Mapping[str, CodeType]):
        self._fragments = fragments

    def load(self, environment, name, globals=None):
        code = self._fragments.get(name)
        if code is None:
            raise TemplateNotFound(name)
        if globals is None:
            globals = {}
        return environment.template_class.from_code(environment, code, globals)

    def list_templates(self) -> list[str]:
        return sorted(self._fragments)


def _is_blank(tree: nodes.Template) -> bool:
    """True if a parsed template holds nothing but whitespace."""
    for node in tree.body:
        if not isinstance(node, nodes.Output):
            return False
        for child in node.nodes:
            if not isinstance(child, nodes.TemplateData) or child.data.strip():
                return False
    return True


class TemplateSet:
    """Named collection of template fragments that can include each other.

    Usage:
        root = TemplateSet()
        root.parse_file(Path("site/root.html"))

        page = root.clone()      # root is sealed from here on
        page.parse_file(Path("site/pages/home/index.html"))
        page.execute(sys.stdout, "app_layout", {"title": "Home"})
    """

    def __init__(
        self,
        settings: EngineSettings | None = None,
        fragments: Mapping[str, CodeType] | None = None,
    ):
        self.settings = settings or EngineSettings()
        self._fragments: dict[str, CodeType] = dict(fragments or {})
        self._sealed = False
        self._env = self._create_env()
        self._define: DefineExtension = self._env.extensions[  # type: ignore[assignment]
            DefineExtension.identifier
        ]

    def _create_env(self) -> Environment:
        return Environment(
            loader=FragmentLoader(self._fragments),
            extensions=[DefineExtension],
            autoescape=self.settings.autoescape,
            undefined=self.settings.undefined,
            trim_blocks=self.settings.trim_blocks,
            lstrip_blocks=self.settings.lstrip_blocks,
            keep_trailing_newline=self.settings.keep_trailing_newline,
            auto_reload=False,
        )

    @property
    def names(self) -> frozenset[str]:
        """Fragment names defined in this set."""
        return frozenset(self._fragments)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def __contains__(self, name: object) -> bool:
        return name in self._fragments

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"<TemplateSet {state} names={sorted(self._fragments)}>"

    def seal(self) -> None:
        """Refuse any further parsing into this set."""
        self._sealed = True

    def clone(self) -> TemplateSet:
        """Copy the fragment namespace into a new, independent set.

        The original is sealed: once a set has been used as a basis it
        must not change.
        """
        self.seal()
        return TemplateSet(self.settings, self._fragments)

    def parse_file(self, path: Path) -> list[str]:
        """Parse a template file into this set, named after its basename."""
        source = path.read_text(encoding=self.settings.encoding)
        return self.parse_source(source, path.name, filename=str(path))

    def parse_source(
        self, source: str, name: str, filename: str | None = None
    ) -> list[str]:
        """Parse template markup into this set.

        Each {% define %} block becomes its own fragment; whatever is left
        becomes the fragment `name`. A blank remainder never replaces an
        existing fragment. Later definitions replace earlier ones.

        Returns:
            Names added or replaced, in order.

        Raises:
            SealedSetError: If the set has been cloned or sealed
            TemplateSyntaxError: If the markup does not parse
        """
        if self._sealed:
            raise SealedSetError(self.names)

        self._define.drain()
        tree = self._env.parse(source, name, filename)
        definitions = self._define.drain()

        compiled: dict[str, CodeType] = {}
        if not _is_blank(tree) or name not in self._fragments:
            compiled[name] = self._env.compile(tree, name, filename)

        for definition in definitions:
            fragment = nodes.Template(definition.body, lineno=definition.lineno)
            fragment.set_environment(self._env)
            compiled[definition.name] = self._env.compile(
                fragment, definition.name, filename
            )

        self._fragments.update(compiled)
        if self._env.cache is not None:
            self._env.cache.clear()

        log.debug(f"Parsed {filename or name}: {', '.join(compiled)}")
        return list(compiled)

    def execute(
        self, destination: IO[str], name: str, context: Mapping[str, Any]
    ) -> None:
        """Stream fragment `name` rendered with `context` into destination.

        Output is written chunk by chunk; a failure part way through leaves
        whatever was already written.
        """
        template = self._env.get_template(name)
        template.stream(dict(context)).dump(destination)
