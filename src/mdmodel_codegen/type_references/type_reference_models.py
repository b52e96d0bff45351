"""Type reference entities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class PrimitiveKind(str, Enum):
    """Built-in scalar kinds understood by the dialect."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"


@dataclass(frozen=True)
class Primitive:
    """Reference to a built-in scalar kind."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class Named:
    """Reference to a declared object or enum, looked up by name."""

    name: str


@dataclass(frozen=True)
class Optional:
    """Value that may be absent."""

    inner: TypeReference


@dataclass(frozen=True)
class Repeated:
    """Ordered sequence of values."""

    inner: TypeReference


TypeReference = Primitive | Named | Optional | Repeated


def strip_optional(reference: TypeReference) -> TypeReference:
    """Return the reference without its outermost optional marker."""
    if isinstance(reference, Optional):
        return reference.inner
    return reference


def named_references(reference: TypeReference) -> Iterator[Named]:
    """Yield every named reference nested inside `reference`."""
    if isinstance(reference, Named):
        yield reference
    elif isinstance(reference, (Optional, Repeated)):
        yield from named_references(reference.inner)


def format_type_reference(reference: TypeReference) -> str:
    """Render a reference back into type-token syntax."""
    if isinstance(reference, Primitive):
        return reference.kind.value
    if isinstance(reference, Named):
        return reference.name
    if isinstance(reference, Optional):
        return f"{format_type_reference(reference.inner)}?"
    return f"{format_type_reference(reference.inner)}[]"
