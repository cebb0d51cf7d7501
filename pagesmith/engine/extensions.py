"""Jinja2 extension for named fragment definitions."""

from __future__ import annotations

from typing import NamedTuple

from jinja2 import nodes
from jinja2.ext import Extension
from jinja2.parser import Parser


class Definition(NamedTuple):
    """A fragment body lifted out of a template during parsing."""

    name: str
    body: list[nodes.Node]
    lineno: int


class DefineExtension(Extension):
    """Extension for {% define "name" %}...{% enddefine %} fragment blocks.

    The block body is removed from the surrounding template and recorded as
    a standalone fragment. Fragments are invoked with a plain include:

        {% define "header" %}<header>{{ title }}</header>{% enddefine %}

        {% include "header" %}

    Definitions are collected per parse; call drain() right after
    Environment.parse() to take them.
    """

    tags = {"define"}

    def __init__(self, environment):
        super().__init__(environment)
        self._definitions: list[Definition] = []
        self._depth = 0

    def parse(self, parser: Parser) -> list[nodes.Node]:
        """Parse the {% define %}...{% enddefine %} block."""
        lineno = next(parser.stream).lineno

        if self._depth:
            parser.fail("define blocks cannot be nested", lineno)

        name = parser.parse_expression()
        if not isinstance(name, nodes.Const) or not isinstance(name.value, str):
            parser.fail("define expects a string literal name", lineno)

        self._depth += 1
        try:
            body = parser.parse_statements(("name:enddefine",), drop_needle=True)
        finally:
            self._depth -= 1

        self._definitions.append(Definition(name.value, body, lineno))
        # Nothing is left in place of the block.
        return []

    def drain(self) -> list[Definition]:
        """Return and forget the definitions collected so far."""
        definitions, self._definitions = self._definitions, []
        self._depth = 0
        return definitions
