"""Schema management exports."""

from .schema_builder import build_document
from .schema_models import DeclarationKind, DefaultValue, Document, Enum, Field, Object, Variant

__all__ = [
    "DeclarationKind",
    "DefaultValue",
    "Document",
    "Enum",
    "Field",
    "Object",
    "Variant",
    "build_document",
]
