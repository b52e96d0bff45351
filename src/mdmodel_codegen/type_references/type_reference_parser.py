"""Type token parsing service."""

from __future__ import annotations

import re

from mdmodel_codegen.schema_errors import MalformedTypeReference

from .type_reference_models import (
    Named,
    Optional,
    Primitive,
    PrimitiveKind,
    Repeated,
    TypeReference,
)

PRIMITIVE_KEYWORDS: dict[str, PrimitiveKind] = {
    "string": PrimitiveKind.STRING,
    "str": PrimitiveKind.STRING,
    "integer": PrimitiveKind.INTEGER,
    "int": PrimitiveKind.INTEGER,
    "float": PrimitiveKind.FLOAT,
    "number": PrimitiveKind.FLOAT,
    "double": PrimitiveKind.FLOAT,
    "boolean": PrimitiveKind.BOOLEAN,
    "bool": PrimitiveKind.BOOLEAN,
    "date": PrimitiveKind.DATE,
    "datetime": PrimitiveKind.DATETIME,
}

_TOKEN_PATTERN = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)((?:\[\]|\?)*)")
_SUFFIX_PATTERN = re.compile(r"\[\]|\?")


def parse_type_reference(
    token: str, *, section: str | None = None, line: int | None = None
) -> TypeReference:
    """Parse a type token such as `string`, `Item[]` or `integer[]?`.

    Modifiers are postfix and apply left to right, so `T?[]` is a sequence
    of optional values while `T[]?` is an optional sequence. Optional is
    idempotent: `T??` is the same reference as `T?`.
    """
    text = token.strip().strip("`").strip()
    if not text:
        raise MalformedTypeReference(token, "type token is empty", section=section, line=line)
    match = _TOKEN_PATTERN.fullmatch(text)
    if match is None:
        raise MalformedTypeReference(
            token,
            "expected an identifier followed by '[]' or '?' modifiers",
            section=section,
            line=line,
        )

    base, suffixes = match.groups()
    reference = _base_reference(base)
    for suffix in _SUFFIX_PATTERN.findall(suffixes):
        if suffix == "[]":
            reference = Repeated(reference)
        elif not isinstance(reference, Optional):
            reference = Optional(reference)
    return reference


def _base_reference(base: str) -> TypeReference:
    kind = PRIMITIVE_KEYWORDS.get(base.lower())
    if kind is not None:
        return Primitive(kind)
    return Named(base)
