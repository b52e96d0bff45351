"""JSON Schema rendering of a validated document."""

from __future__ import annotations

import json
from typing import Any

from mdmodel_codegen.schema_management.schema_models import Document, Enum, Object
from mdmodel_codegen.type_references.type_reference_models import (
    Named,
    Optional,
    Primitive,
    PrimitiveKind,
    Repeated,
    TypeReference,
)

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

_PRIMITIVE_SCHEMAS: dict[PrimitiveKind, dict[str, str]] = {
    PrimitiveKind.STRING: {"type": "string"},
    PrimitiveKind.INTEGER: {"type": "integer"},
    PrimitiveKind.FLOAT: {"type": "number"},
    PrimitiveKind.BOOLEAN: {"type": "boolean"},
    PrimitiveKind.DATE: {"type": "string", "format": "date"},
    PrimitiveKind.DATETIME: {"type": "string", "format": "date-time"},
}


def export_json_schema(document: Document) -> dict[str, Any]:
    """Describe the wire format of every object and enum as JSON Schema `$defs`."""
    definitions: dict[str, Any] = {}
    for enum in document.enums:
        definitions[enum.name] = _enum_schema(enum)
    for obj in document.objects:
        definitions[obj.name] = _object_schema(obj, document)

    schema: dict[str, Any] = {"$schema": JSON_SCHEMA_DIALECT}
    if document.title:
        schema["title"] = document.title
    if document.objects:
        schema["$ref"] = f"#/$defs/{document.objects[0].name}"
    schema["$defs"] = definitions
    return schema


def render_json_schema(document: Document) -> str:
    return json.dumps(export_json_schema(document), indent=2) + "\n"


def _enum_schema(enum: Enum) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "type": "string",
        "enum": [variant.value for variant in enum.variants],
    }
    if enum.description:
        schema["description"] = enum.description
    return schema


def _object_schema(obj: Object, document: Document) -> dict[str, Any]:
    properties: dict[str, Any] = {}
    for field in obj.fields:
        property_schema = _reference_schema(field.type_ref)
        if field.description:
            property_schema["description"] = field.description
        if field.default is not None:
            property_schema["default"] = _json_default(
                field.default.value, field.type_ref, document
            )
        if field.example is not None:
            property_schema["examples"] = [
                _json_default(field.example.value, field.type_ref, document)
            ]
        properties[field.serialization_key] = property_schema

    schema: dict[str, Any] = {"type": "object", "properties": properties}
    required = [field.serialization_key for field in obj.required_fields]
    if required:
        schema["required"] = required
    if obj.description:
        schema["description"] = obj.description
    return schema


def _reference_schema(reference: TypeReference) -> dict[str, Any]:
    if isinstance(reference, Primitive):
        return dict(_PRIMITIVE_SCHEMAS[reference.kind])
    if isinstance(reference, Named):
        return {"$ref": f"#/$defs/{reference.name}"}
    if isinstance(reference, Optional):
        return {"anyOf": [_reference_schema(reference.inner), {"type": "null"}]}
    return {"type": "array", "items": _reference_schema(reference.inner)}


def _json_default(value: object, reference: TypeReference, document: Document) -> object:
    if value is None:
        return None
    if isinstance(reference, Optional):
        return _json_default(value, reference.inner, document)
    if isinstance(reference, Repeated) and isinstance(value, tuple):
        return [_json_default(item, reference.inner, document) for item in value]
    if isinstance(reference, Named):
        enum = document.find_enum(reference.name)
        variant = enum.variant_for(str(value)) if enum is not None else None
        return variant.value if variant is not None else value
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value
