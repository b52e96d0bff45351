"""Type reference to Python annotation and (de)serialization expressions."""

from __future__ import annotations

import json

from mdmodel_codegen.schema_management.schema_models import DeclarationKind, Document
from mdmodel_codegen.type_references.type_reference_models import (
    Named,
    Optional,
    Primitive,
    PrimitiveKind,
    Repeated,
    TypeReference,
)

PRIMITIVE_ANNOTATIONS: dict[PrimitiveKind, str] = {
    PrimitiveKind.STRING: "str",
    PrimitiveKind.INTEGER: "int",
    PrimitiveKind.FLOAT: "float",
    PrimitiveKind.BOOLEAN: "bool",
    PrimitiveKind.DATE: "datetime.date",
    PrimitiveKind.DATETIME: "datetime.datetime",
}

_TEMPORAL_KINDS = frozenset({PrimitiveKind.DATE, PrimitiveKind.DATETIME})


def annotation_for(reference: TypeReference) -> str:
    """Return the annotation text for `reference`."""
    if isinstance(reference, Primitive):
        return PRIMITIVE_ANNOTATIONS[reference.kind]
    if isinstance(reference, Named):
        return reference.name
    if isinstance(reference, Optional):
        return f"{annotation_for(reference.inner)} | None"
    return f"list[{annotation_for(reference.inner)}]"


def uses_datetime(reference: TypeReference) -> bool:
    if isinstance(reference, Primitive):
        return reference.kind in _TEMPORAL_KINDS
    if isinstance(reference, (Optional, Repeated)):
        return uses_datetime(reference.inner)
    return False


def encode_expression(
    reference: TypeReference, expression: str, document: Document, depth: int = 0
) -> str:
    """Return code turning the value of `expression` into plain, JSON-compatible data."""
    if isinstance(reference, Primitive):
        if reference.kind in _TEMPORAL_KINDS:
            return f"{expression}.isoformat()"
        return expression
    if isinstance(reference, Named):
        if document.declaration_kind(reference.name) == DeclarationKind.ENUM:
            return f"{expression}.to_wire()"
        return f"{expression}.to_dict()"
    if isinstance(reference, Optional):
        inner = encode_expression(reference.inner, expression, document, depth)
        if inner == expression:
            return expression
        return f"(None if {expression} is None else {inner})"
    item = f"item{depth}"
    inner = encode_expression(reference.inner, item, document, depth + 1)
    if inner == item:
        return f"list({expression})"
    return f"[{inner} for {item} in {expression}]"


def decode_expression(
    reference: TypeReference, expression: str, document: Document, depth: int = 0
) -> str:
    """Return code rebuilding a typed value from the plain data in `expression`."""
    if isinstance(reference, Primitive):
        if reference.kind in _TEMPORAL_KINDS:
            return f"{PRIMITIVE_ANNOTATIONS[reference.kind]}.fromisoformat({expression})"
        return expression
    if isinstance(reference, Named):
        if document.declaration_kind(reference.name) == DeclarationKind.ENUM:
            return f"{reference.name}.from_wire({expression})"
        return f"{reference.name}.from_dict({expression})"
    if isinstance(reference, Optional):
        inner = decode_expression(reference.inner, expression, document, depth)
        if inner == expression:
            return expression
        return f"(None if {expression} is None else {inner})"
    item = f"item{depth}"
    inner = decode_expression(reference.inner, item, document, depth + 1)
    if inner == item:
        return f"list({expression})"
    return f"[{inner} for {item} in {expression}]"


def literal_expression(value: object, reference: TypeReference) -> str:
    """Return source text for a parsed default literal of type `reference`."""
    if value is None:
        return "None"
    if isinstance(reference, Optional):
        return literal_expression(value, reference.inner)
    if isinstance(reference, Repeated):
        if not isinstance(value, tuple):
            raise TypeError(f"sequence default must be a tuple, got {value!r}")
        items = ", ".join(literal_expression(item, reference.inner) for item in value)
        return f"[{items}]"
    if isinstance(reference, Named):
        return f"{reference.name}.{value}"
    if isinstance(value, str):
        return string_literal(value)
    return repr(value)


def string_literal(text: str) -> str:
    """Return a double-quoted Python string literal for `text`.

    Non-ASCII text is kept verbatim, so characters outside the BMP are not
    split into surrogate escapes.
    """
    return json.dumps(text, ensure_ascii=False)
