"""Enum section fenced-block parsing service."""

from __future__ import annotations

from mdmodel_codegen.document_splitting.section_models import RawSection, SourceLine
from mdmodel_codegen.document_splitting.section_splitter import fence_marker
from mdmodel_codegen.schema_errors import DuplicateVariant, MalformedDocument

from .markdown_patterns import IDENTIFIER_PATTERN
from .parsed_models import ParsedEnum, ParsedVariant

_COMMENT_PREFIXES = ("#", "//")


def parse_enum_section(
    section: RawSection, *, name: str, description: str | None = None
) -> ParsedEnum:
    """Parse the single fenced block of an enum section into variants.

    Every non-blank line reads `IDENTIFIER = value`. Variant names and wire
    values must both be unique within the enum.
    """
    blocks = _fenced_blocks(section)
    if len(blocks) != 1:
        raise MalformedDocument(
            f"Enum section must contain exactly one fenced block, found {len(blocks)}.",
            section=section.heading,
            line=section.line,
        )

    variants: list[ParsedVariant] = []
    seen_names: set[str] = set()
    seen_values: set[str] = set()
    for source_line in blocks[0]:
        stripped = source_line.text.strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            continue
        variant = _parse_variant_line(stripped, source_line, section)
        if variant.name in seen_names:
            raise DuplicateVariant(
                name, variant.name, section=section.heading, line=source_line.number
            )
        if variant.value in seen_values:
            raise DuplicateVariant(
                name, variant.value, section=section.heading, line=source_line.number
            )
        seen_names.add(variant.name)
        seen_values.add(variant.value)
        variants.append(variant)

    if not variants:
        raise MalformedDocument(
            "Enum block declares no variants.", section=section.heading, line=section.line
        )
    return ParsedEnum(
        name=name, variants=tuple(variants), line=section.line, description=description
    )


def _parse_variant_line(text: str, source_line: SourceLine, section: RawSection) -> ParsedVariant:
    variant_name, separator, value = text.partition("=")
    variant_name = variant_name.strip()
    value = _unquote(value.strip())
    if not separator or not variant_name or not value:
        raise MalformedDocument(
            f"Enum line '{text}' must read 'IDENTIFIER = value'.",
            section=section.heading,
            line=source_line.number,
        )
    if not IDENTIFIER_PATTERN.fullmatch(variant_name):
        raise MalformedDocument(
            f"Enum variant '{variant_name}' is not a valid identifier.",
            section=section.heading,
            line=source_line.number,
        )
    return ParsedVariant(name=variant_name, value=value, line=source_line.number)


def _fenced_blocks(section: RawSection) -> list[list[SourceLine]]:
    blocks: list[list[SourceLine]] = []
    current: list[SourceLine] | None = None
    open_fence: str | None = None
    opening_line = section.line
    for source_line in section.body_lines:
        fence = fence_marker(source_line.text)
        if current is None:
            if fence is not None:
                current = []
                open_fence = fence
                opening_line = source_line.number
            continue
        if fence is not None and open_fence is not None and fence.startswith(open_fence):
            blocks.append(current)
            current = None
            open_fence = None
            continue
        current.append(source_line)
    if current is not None:
        raise MalformedDocument(
            "Fenced block is never closed.", section=section.heading, line=opening_line
        )
    return blocks


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value
