"""JSON Schema export tests."""

from __future__ import annotations

import json

from mdmodel_codegen.document_splitting import split_document
from mdmodel_codegen.json_schema_export import (
    JSON_SCHEMA_DIALECT,
    export_json_schema,
    render_json_schema,
)
from mdmodel_codegen.schema_management import Document, build_document

_MODEL = """# Shop
### Product
A product in the catalog.
- name
  - Type: string
  - Description: Display name
- price
  - Type: float
- tags
  - Type: string[]
  - Default: []
- color
  - Type: Color
  - Default: RED
- released
  - Type: date?
  - Key: releasedOn
- variants
  - Type: Product[]?
### Color
```
RED = red
DARK_BLUE = dark-blue
```
"""


def _document() -> Document:
    return build_document(split_document(_MODEL))


def test_document_refers_to_first_object_and_defines_every_type() -> None:
    schema = export_json_schema(_document())

    assert schema["$schema"] == JSON_SCHEMA_DIALECT
    assert schema["title"] == "Shop"
    assert schema["$ref"] == "#/$defs/Product"
    assert set(schema["$defs"]) == {"Product", "Color"}
    assert schema["$defs"]["Color"] == {"type": "string", "enum": ["red", "dark-blue"]}


def test_object_properties_use_serialization_keys_and_json_types() -> None:
    product = export_json_schema(_document())["$defs"]["Product"]

    assert product["type"] == "object"
    assert product["description"] == "A product in the catalog."
    assert product["required"] == ["name", "price"]
    properties = product["properties"]
    assert properties["name"] == {"type": "string", "description": "Display name"}
    assert properties["price"] == {"type": "number"}
    assert properties["tags"] == {"type": "array", "items": {"type": "string"}, "default": []}
    assert properties["color"] == {"$ref": "#/$defs/Color", "default": "red"}
    assert properties["releasedOn"] == {
        "anyOf": [{"type": "string", "format": "date"}, {"type": "null"}]
    }
    assert properties["variants"] == {
        "anyOf": [{"type": "array", "items": {"$ref": "#/$defs/Product"}}, {"type": "null"}]
    }


def test_rendered_schema_is_stable_json_text() -> None:
    document = _document()

    rendered = render_json_schema(document)

    assert rendered.endswith("\n")
    assert json.loads(rendered) == export_json_schema(document)
    assert render_json_schema(document) == rendered


def test_field_examples_are_exported_in_wire_form() -> None:
    document = build_document(
        split_document(
            "### Shipment\n"
            "- color\n  - Type: Color\n  - Example: DARK_BLUE\n"
            "- sent\n  - Type: date?\n  - Example: 2024-03-01\n"
            "- weights\n  - Type: float[]\n  - Example: [1, 2.5]\n"
            "### Color\n```\nRED = red\nDARK_BLUE = dark-blue\n```\n"
        )
    )

    properties = export_json_schema(document)["$defs"]["Shipment"]["properties"]

    assert properties["color"]["examples"] == ["dark-blue"]
    assert properties["sent"]["examples"] == ["2024-03-01"]
    assert properties["weights"]["examples"] == [[1.0, 2.5]]
    assert "default" not in properties["color"]
