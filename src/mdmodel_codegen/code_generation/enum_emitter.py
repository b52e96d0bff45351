"""Enum class emission."""

from __future__ import annotations

from mdmodel_codegen.schema_management.schema_models import Enum

from .runtime_preamble import docstring_text
from .type_mapping import string_literal


def emit_enum(enum: Enum) -> list[str]:
    """Emit an `Enum` subclass whose member values are the wire strings."""
    summary = enum.description or f"Variants of {enum.name} and their wire values."
    lines = [
        "",
        "",
        f"class {enum.name}(Enum):",
        f'    """{docstring_text(summary)}"""',
        "",
    ]
    lines.extend(
        f"    {variant.name} = {string_literal(variant.value)}" for variant in enum.variants
    )
    first = enum.variants[0].name
    lines.extend(
        [
            "",
            "    def to_wire(self) -> str:",
            "        return self.value",
            "",
            "    @classmethod",
            f"    def from_wire(cls, raw: str) -> {enum.name}:",
            "        try:",
            "            return cls(raw)",
            "        except ValueError:",
            f"            raise UnknownVariant({string_literal(enum.name)}, raw) from None",
            "",
            "    @classmethod",
            f"    def default(cls) -> {enum.name}:",
            f"        return cls.{first}",
            "",
            "    def __str__(self) -> str:",
            "        return self.value",
        ]
    )
    return lines
