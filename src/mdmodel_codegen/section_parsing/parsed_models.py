"""Section parsing entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from mdmodel_codegen.type_references.type_reference_models import TypeReference


@dataclass(frozen=True)
class ParsedField:
    """Field bullet with its type token parsed and its attributes collected."""

    name: str
    type_ref: TypeReference
    required_override: bool | None
    attributes: Mapping[str, str]
    line: int


@dataclass(frozen=True)
class ParsedObject:
    """Object section before name resolution."""

    name: str
    fields: tuple[ParsedField, ...]
    line: int
    description: str | None


@dataclass(frozen=True)
class ParsedVariant:
    """One `IDENTIFIER = value` line of an enum block."""

    name: str
    value: str
    line: int


@dataclass(frozen=True)
class ParsedEnum:
    """Enum section before name resolution."""

    name: str
    variants: tuple[ParsedVariant, ...]
    line: int
    description: str | None
