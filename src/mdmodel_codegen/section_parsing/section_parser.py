"""Section classification and dispatch."""

from __future__ import annotations

import re

from mdmodel_codegen.configuration.runtime_settings import ParsingSettings
from mdmodel_codegen.document_splitting.section_models import RawSection
from mdmodel_codegen.document_splitting.section_splitter import fence_marker
from mdmodel_codegen.schema_errors import MalformedDocument

from .field_parser import parse_object_section
from .markdown_patterns import BULLET_PATTERN, IDENTIFIER_PATTERN
from .parsed_models import ParsedEnum, ParsedObject
from .variant_parser import parse_enum_section

_SUBHEADING_PATTERN = re.compile(r"^ {0,3}#{4,6}(?:[ \t]|$)")


def parse_section(section: RawSection, settings: ParsingSettings) -> ParsedObject | ParsedEnum:
    """Parse one level-3 section as an enum (fenced block) or an object (bullet list)."""
    name = section.heading.strip("`").strip()
    if not IDENTIFIER_PATTERN.fullmatch(name):
        raise MalformedDocument(
            f"Section name '{section.heading}' is not a valid identifier.",
            section=section.heading,
            line=section.line,
        )

    has_fence = any(fence_marker(line.text) is not None for line in section.body_lines)
    has_bullets = any(BULLET_PATTERN.match(line.text) for line in section.body_lines)
    description = _section_description(section)
    if has_fence:
        return parse_enum_section(section, name=name, description=description)
    if has_bullets:
        return parse_object_section(section, settings, name=name, description=description)
    raise MalformedDocument(
        "Section has no content; expected a field list or a fenced enum block.",
        section=section.heading,
        line=section.line,
    )


def _section_description(section: RawSection) -> str | None:
    prose: list[str] = []
    for line in section.body_lines:
        if BULLET_PATTERN.match(line.text) or fence_marker(line.text) is not None:
            break
        stripped = line.text.strip()
        if stripped and not _SUBHEADING_PATTERN.match(line.text):
            prose.append(stripped)
    return " ".join(prose) or None
