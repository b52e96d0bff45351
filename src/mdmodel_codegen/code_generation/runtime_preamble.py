"""Fixed source text emitted at the top of every generated module."""

from __future__ import annotations

RUNTIME_HELPERS = '''

class IncompleteObject(ValueError):
    """Raised when an object is constructed without all of its required fields."""

    def __init__(self, object_name: str, missing_fields: list[str]) -> None:
        self.object_name = object_name
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            f"{object_name} is missing required field(s): {', '.join(self.missing_fields)}"
        )


class UnknownVariant(ValueError):
    """Raised when a wire value matches no variant of an enum."""

    def __init__(self, enum_name: str, raw_value: object) -> None:
        self.enum_name = enum_name
        self.raw_value = raw_value
        super().__init__(f"{raw_value!r} is not a valid {enum_name} value")


def _construct(cls: Any, values: dict[str, Any]) -> Any:
    missing = [name for name in cls._REQUIRED if name not in values]
    if missing:
        raise IncompleteObject(cls.__name__, missing)
    return cls(**values)
'''


def module_header(title: str | None, module_name: str) -> str:
    """Module docstring naming the source model."""
    subject = title if title else module_name
    return (
        f'"""Data model: {docstring_text(subject)}.\n'
        "\n"
        "Generated by mdmodel-codegen from a markdown model. Do not edit by hand;\n"
        "regenerate from the markdown source instead.\n"
        '"""\n\n'
    )


def import_block(*, needs_datetime: bool, needs_json: bool, needs_field: bool) -> str:
    lines = ["from __future__ import annotations", ""]
    if needs_datetime:
        lines.append("import datetime")
    if needs_json:
        lines.append("import json")
    lines.append("from dataclasses import dataclass" + (", field" if needs_field else ""))
    lines.append("from enum import Enum")
    lines.append("from typing import Any")
    return "\n".join(lines) + "\n"


def docstring_text(text: str) -> str:
    """Escape `text` for use inside a triple-quoted docstring."""
    escaped = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    if escaped.endswith('"'):
        escaped = escaped[:-1] + '\\"'
    return escaped
