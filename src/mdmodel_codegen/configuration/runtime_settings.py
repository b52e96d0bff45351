"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class UnknownAttributePolicy(str, Enum):
    """What the field parser does with an attribute key it does not recognize."""

    ERROR = "error"
    WARN = "warn"


@dataclass(frozen=True)
class ParsingSettings:
    """Markdown dialect parsing options."""

    unknown_attributes: UnknownAttributePolicy = UnknownAttributePolicy.ERROR
    extra_attribute_keys: tuple[str, ...] = ()


@dataclass(frozen=True)
class GenerationSettings:
    """Python source emission options."""

    builders: bool = True
    json_helpers: bool = True
    module_name: str | None = None


@dataclass(frozen=True)
class Settings:
    """Top-level settings aggregate."""

    path: Path | None = None
    parsing: ParsingSettings = field(default_factory=ParsingSettings)
    generation: GenerationSettings = field(default_factory=GenerationSettings)
