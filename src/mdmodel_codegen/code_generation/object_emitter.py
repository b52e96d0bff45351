"""Dataclass and builder emission for schema objects."""

from __future__ import annotations

from mdmodel_codegen.configuration.runtime_settings import GenerationSettings
from mdmodel_codegen.schema_management.reserved_names import builder_name, item_setter_name
from mdmodel_codegen.schema_management.schema_models import Document, Field, Object
from mdmodel_codegen.type_references.type_reference_models import (
    Optional,
    Repeated,
    strip_optional,
)

from .runtime_preamble import docstring_text
from .type_mapping import (
    annotation_for,
    decode_expression,
    encode_expression,
    literal_expression,
    string_literal,
)


def emit_object(obj: Object, document: Document, settings: GenerationSettings) -> list[str]:
    """Emit the keyword-only dataclass for `obj` with its serialization bindings."""
    summary = obj.description or f"{obj.name} data model."
    lines = [
        "",
        "",
        "@dataclass(kw_only=True)",
        f"class {obj.name}:",
        f'    """{docstring_text(summary)}"""',
        "",
        f"    _REQUIRED = {_tuple_literal(field.name for field in obj.required_fields)}",
        "",
    ]
    for field in obj.fields:
        lines.extend(_member_lines(field))

    lines.extend(_to_dict_lines(obj, document))
    lines.extend(_from_dict_lines(obj, document))
    if settings.json_helpers:
        lines.extend(
            [
                "",
                "    def to_json(self, **kwargs: Any) -> str:",
                "        return json.dumps(self.to_dict(), **kwargs)",
                "",
                "    @classmethod",
                f"    def from_json(cls, text: str | bytes) -> {obj.name}:",
                "        return cls.from_dict(json.loads(text))",
            ]
        )
    if settings.builders:
        lines.extend(
            [
                "",
                "    @classmethod",
                f"    def builder(cls) -> {builder_name(obj.name)}:",
                f"        return {builder_name(obj.name)}()",
            ]
        )
    return lines


def emit_builder(obj: Object) -> list[str]:
    """Emit the fluent builder class for `obj`."""
    name = builder_name(obj.name)
    lines = [
        "",
        "",
        f"class {name}:",
        f'    """Fluent builder for {obj.name}; build() checks that required fields are set."""',
        "",
        "    def __init__(self) -> None:",
        "        self._values: dict[str, Any] = {}",
    ]
    for field in obj.fields:
        key = string_literal(field.name)
        container = strip_optional(field.type_ref)
        stored = "value"
        if isinstance(container, Repeated):
            stored = "list(value)"
            if isinstance(field.type_ref, Optional):
                stored = "None if value is None else list(value)"
        lines.extend(
            [
                "",
                f"    def {field.name}(self, value: {annotation_for(field.type_ref)}) -> {name}:",
                f"        self._values[{key}] = {stored}",
                "        return self",
            ]
        )
        if isinstance(container, Repeated):
            item_annotation = annotation_for(container.inner)
            lines.extend(
                [
                    "",
                    f"    def {item_setter_name(field.name)}"
                    f"(self, item: {item_annotation}) -> {name}:",
                    f"        items = self._values.get({key})",
                    "        if items is None:",
                    f"            items = self._values[{key}] = []",
                    "        items.append(item)",
                    "        return self",
                ]
            )
    lines.extend(
        [
            "",
            f"    def build(self) -> {obj.name}:",
            "        values = {",
            "            key: list(value) if isinstance(value, list) else value",
            "            for key, value in self._values.items()",
            "        }",
            f"        return _construct({obj.name}, values)",
        ]
    )
    return lines


def uses_default_factory(obj: Object) -> bool:
    return any(
        field.default is not None and isinstance(field.default.value, tuple)
        for field in obj.fields
    )


def _member_lines(field: Field) -> list[str]:
    lines = []
    if field.description:
        lines.append(f"    #: {field.description}")
    annotation = annotation_for(field.type_ref)
    if field.default is not None:
        literal = literal_expression(field.default.value, field.type_ref)
        if isinstance(field.default.value, tuple):
            factory = f"field(default_factory=lambda: {literal})"
            lines.append(f"    {field.name}: {annotation} = {factory}")
        else:
            lines.append(f"    {field.name}: {annotation} = {literal}")
    elif not field.required:
        lines.append(f"    {field.name}: {annotation} = None")
    else:
        lines.append(f"    {field.name}: {annotation}")
    return lines


def _to_dict_lines(obj: Object, document: Document) -> list[str]:
    lines = [
        "",
        "    def to_dict(self) -> dict[str, Any]:",
        "        data: dict[str, Any] = {}",
    ]
    for field in obj.fields:
        key = string_literal(field.serialization_key)
        member = f"self.{field.name}"
        if isinstance(field.type_ref, Optional):
            encoded = encode_expression(field.type_ref.inner, member, document)
            lines.append(f"        if {member} is not None:")
            lines.append(f"            data[{key}] = {encoded}")
        else:
            lines.append(
                f"        data[{key}] = {encode_expression(field.type_ref, member, document)}"
            )
    lines.append("        return data")
    return lines


def _from_dict_lines(obj: Object, document: Document) -> list[str]:
    lines = [
        "",
        "    @classmethod",
        f"    def from_dict(cls, data: dict[str, Any]) -> {obj.name}:",
        "        values: dict[str, Any] = {}",
    ]
    for field in obj.fields:
        key = string_literal(field.serialization_key)
        decoded = decode_expression(field.type_ref, f"data[{key}]", document)
        lines.append(f"        if {key} in data:")
        lines.append(f"            values[{string_literal(field.name)}] = {decoded}")
    lines.append("        return _construct(cls, values)")
    return lines


def _tuple_literal(names) -> str:
    items = [string_literal(name) for name in names]
    if len(items) == 1:
        return f"({items[0]},)"
    return f"({', '.join(items)})"
