"""Type reference exports."""

from .type_reference_models import (
    Named,
    Optional,
    Primitive,
    PrimitiveKind,
    Repeated,
    TypeReference,
    format_type_reference,
    named_references,
    strip_optional,
)
from .type_reference_parser import PRIMITIVE_KEYWORDS, parse_type_reference

__all__ = [
    "Named",
    "Optional",
    "Primitive",
    "PrimitiveKind",
    "Repeated",
    "TypeReference",
    "PRIMITIVE_KEYWORDS",
    "format_type_reference",
    "named_references",
    "parse_type_reference",
    "strip_optional",
]
