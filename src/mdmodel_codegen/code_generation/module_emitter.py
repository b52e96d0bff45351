"""Python module emission for a validated document."""

from __future__ import annotations

import logging

from mdmodel_codegen.configuration.runtime_settings import GenerationSettings
from mdmodel_codegen.schema_management.reserved_names import builder_name
from mdmodel_codegen.schema_management.schema_models import Document

from .enum_emitter import emit_enum
from .object_emitter import emit_builder, emit_object, uses_default_factory
from .runtime_preamble import RUNTIME_HELPERS, import_block, module_header
from .type_mapping import string_literal, uses_datetime

_LOGGER = logging.getLogger(__name__)


def generate_module_source(document: Document, settings: GenerationSettings | None = None) -> str:
    """Return the Python source text of the module generated for `document`.

    Enums are emitted before objects so that enum defaults can be referenced
    in dataclass bodies; object-to-object references rely on postponed
    annotation evaluation and need no ordering. The output is deterministic.
    """
    settings = settings or GenerationSettings()
    needs_datetime = any(
        uses_datetime(field.type_ref) for obj in document.objects for field in obj.fields
    )
    needs_field = any(uses_default_factory(obj) for obj in document.objects)

    parts = [
        module_header(document.title, document.module_name),
        import_block(
            needs_datetime=needs_datetime,
            needs_json=settings.json_helpers and bool(document.objects),
            needs_field=needs_field,
        ),
        RUNTIME_HELPERS,
    ]
    lines: list[str] = []
    for enum in document.enums:
        lines.extend(emit_enum(enum))
    for obj in document.objects:
        lines.extend(emit_object(obj, document, settings))
        if settings.builders:
            lines.extend(emit_builder(obj))
    lines.extend(["", ""])
    lines.extend(_all_lines(document, settings))
    parts.append("\n".join(lines) + "\n")

    source = "".join(parts)
    _LOGGER.debug(
        "generated module %r: %d line(s)", document.module_name, source.count("\n")
    )
    return source


def _all_lines(document: Document, settings: GenerationSettings) -> list[str]:
    exported = ["IncompleteObject", "UnknownVariant"]
    exported.extend(enum.name for enum in document.enums)
    for obj in document.objects:
        exported.append(obj.name)
        if settings.builders:
            exported.append(builder_name(obj.name))
    return ["__all__ = ["] + [f"    {string_literal(name)}," for name in exported] + ["]"]
