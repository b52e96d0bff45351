"""Parse `Default:` attribute text against a resolved field type."""

from __future__ import annotations

import datetime
import json
import math
from collections.abc import Mapping

from mdmodel_codegen.type_references.type_reference_models import (
    Named,
    Optional,
    Primitive,
    PrimitiveKind,
    Repeated,
    TypeReference,
)

from .schema_models import Enum

_NULL_WORDS = frozenset({"null", "none"})


def parse_default_literal(
    raw: str, type_ref: TypeReference, enums: Mapping[str, Enum]
) -> object:
    """Return the Python value of `raw` for a field typed `type_ref`.

    Sequences become tuples, enum defaults become the variant name, dates and
    datetimes become `datetime` objects. Raises ValueError with a reason when
    the literal does not fit the type.
    """
    text = raw.strip()
    if isinstance(type_ref, Optional):
        if text.lower() in _NULL_WORDS:
            return None
        type_ref = type_ref.inner
    if isinstance(type_ref, Repeated):
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError("sequence defaults must be JSON arrays") from exc
        if not isinstance(parsed, list):
            raise ValueError("sequence defaults must be JSON arrays")
        return _coerce(parsed, type_ref, enums)
    if isinstance(type_ref, Named) or (
        isinstance(type_ref, Primitive) and type_ref.kind == PrimitiveKind.STRING
    ):
        return _coerce(_unquote(text), type_ref, enums)
    return _coerce(_scalar_literal(text), type_ref, enums)


def _coerce(value: object, type_ref: TypeReference, enums: Mapping[str, Enum]) -> object:
    if isinstance(type_ref, Optional):
        if value is None:
            return None
        return _coerce(value, type_ref.inner, enums)
    if value is None:
        raise ValueError("null is only allowed for optional types")
    if isinstance(type_ref, Repeated):
        if not isinstance(value, list):
            raise ValueError(f"expected a sequence, got {value!r}")
        return tuple(_coerce(item, type_ref.inner, enums) for item in value)
    if isinstance(type_ref, Named):
        enum = enums.get(type_ref.name)
        if enum is None:
            raise ValueError(f"object type '{type_ref.name}' cannot have a default")
        variant = enum.variant_for(value) if isinstance(value, str) else None
        if variant is None:
            raise ValueError(f"{value!r} is not a variant of enum '{enum.name}'")
        return variant.name
    return _coerce_primitive(value, type_ref.kind)


def _coerce_primitive(value: object, kind: PrimitiveKind) -> object:
    if kind == PrimitiveKind.STRING:
        if isinstance(value, str):
            return value
    elif kind == PrimitiveKind.INTEGER:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif kind == PrimitiveKind.FLOAT:
        if isinstance(value, int | float) and not isinstance(value, bool) and math.isfinite(value):
            return float(value)
    elif kind == PrimitiveKind.BOOLEAN:
        if isinstance(value, bool):
            return value
    elif isinstance(value, str):
        try:
            if kind == PrimitiveKind.DATE:
                return datetime.date.fromisoformat(value)
            return datetime.datetime.fromisoformat(value)
        except ValueError as exc:
            raise ValueError(f"{value!r} is not an ISO {kind.value}") from exc
    raise ValueError(f"expected a {kind.value} literal, got {value!r}")


def _scalar_literal(text: str) -> object:
    lowered = text.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _unquote(text)


def _unquote(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        return text[1:-1]
    return text
