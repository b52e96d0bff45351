"""Generated source text tests."""

from __future__ import annotations

import ast

import pytest
from mdmodel_codegen.code_generation import annotation_for, generate_module_source
from mdmodel_codegen.code_generation.type_mapping import literal_expression, string_literal
from mdmodel_codegen.configuration.runtime_settings import GenerationSettings
from mdmodel_codegen.document_splitting import split_document
from mdmodel_codegen.schema_management import Document, build_document
from mdmodel_codegen.type_references import parse_type_reference

_MODEL = """# Catalog
### Item
An item "quoted" in the catalog.
- name
  - Type: string
  - Description: Display name
- tags
  - Type: string[]
  - Default: ["new"]
- kind
  - Type: Kind
  - Default: b
### Kind
```
A = a
B = b
```
"""


def _document(markdown: str = _MODEL) -> Document:
    return build_document(split_document(markdown))


def test_annotations_follow_the_type_mapping() -> None:
    assert annotation_for(parse_type_reference("string")) == "str"
    assert annotation_for(parse_type_reference("int?")) == "int | None"
    assert annotation_for(parse_type_reference("date[]")) == "list[datetime.date]"
    assert annotation_for(parse_type_reference("Item?[]?")) == "list[Item | None] | None"
    assert annotation_for(parse_type_reference("datetime")) == "datetime.datetime"


def test_generated_source_is_valid_python_with_expected_layout() -> None:
    source = generate_module_source(_document())

    tree = ast.parse(source)
    class_names = [node.name for node in tree.body if isinstance(node, ast.ClassDef)]
    assert class_names == ["IncompleteObject", "UnknownVariant", "Kind", "Item", "ItemBuilder"]
    assert ast.get_docstring(tree) is not None
    assert source.startswith('"""Data model: Catalog.')
    assert "from __future__ import annotations" in source
    assert "from dataclasses import dataclass, field" in source
    assert "import datetime" not in source
    assert "import json" in source
    assert "@dataclass(kw_only=True)" in source
    assert '    tags: list[str] = field(default_factory=lambda: ["new"])' in source
    assert "    kind: Kind = Kind.B" in source
    assert "    #: Display name" in source
    assert '    """An item "quoted" in the catalog."""' in source
    assert '    _REQUIRED = ("name",)' in source


def test_generation_is_deterministic() -> None:
    document = _document()

    assert generate_module_source(document) == generate_module_source(document)


def test_builders_and_json_helpers_can_be_switched_off() -> None:
    settings = GenerationSettings(builders=False, json_helpers=False)

    source = generate_module_source(_document(), settings)

    assert "ItemBuilder" not in source
    assert "def builder(" not in source
    assert "def to_json(" not in source
    assert "import json" not in source
    ast.parse(source)


def test_exports_list_every_generated_type() -> None:
    source = generate_module_source(_document())
    all_node = next(
        node
        for node in ast.parse(source).body
        if isinstance(node, ast.Assign) and getattr(node.targets[0], "id", None) == "__all__"
    )

    assert ast.literal_eval(all_node.value) == [
        "IncompleteObject",
        "UnknownVariant",
        "Kind",
        "Item",
        "ItemBuilder",
    ]


def test_datetime_import_is_emitted_only_when_needed() -> None:
    source = generate_module_source(_document("### Event\n- at\n  - Type: datetime?\n"))

    assert "import datetime\n" in source
    ast.parse(source)


def test_string_literals_keep_characters_outside_the_bmp() -> None:
    literal = string_literal('say "😀"\n')

    assert literal == '"say \\"😀\\"\\n"'
    assert ast.literal_eval(literal) == 'say "😀"\n'


def test_sequence_literals_require_tuple_values() -> None:
    reference = parse_type_reference("integer[]")

    assert literal_expression((1, 2), reference) == "[1, 2]"
    with pytest.raises(TypeError, match="must be a tuple"):
        literal_expression([1, 2], reference)
