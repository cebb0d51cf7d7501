"""Engine settings, optionally read from a pagesmith.yaml file"""

from __future__ import annotations

from pathlib import Path

import yaml
from jinja2 import StrictUndefined, Undefined
from pydantic import BaseModel, Field


class EngineSettings(BaseModel):
    """Options applied to every template set of an engine."""

    model_config = {"extra": "forbid", "frozen": True}

    encoding: str = Field(default="utf-8", description="Template file encoding")
    autoescape: bool = Field(default=True, description="HTML-escape substitutions")
    strict: bool = Field(
        default=True, description="Fail when a template references a missing variable"
    )
    trim_blocks: bool = True
    lstrip_blocks: bool = True
    keep_trailing_newline: bool = True

    @property
    def undefined(self) -> type[Undefined]:
        return StrictUndefined if self.strict else Undefined

    @classmethod
    def load(cls, path: Path) -> "EngineSettings":
        """Load settings from yaml file"""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Settings file must contain a mapping: {path}")

        return cls.model_validate(data)
