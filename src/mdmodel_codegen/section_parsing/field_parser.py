"""Object section bullet-list parsing service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType

from mdmodel_codegen.configuration.runtime_settings import ParsingSettings, UnknownAttributePolicy
from mdmodel_codegen.document_splitting.section_models import RawSection, SourceLine
from mdmodel_codegen.schema_errors import (
    DuplicateDeclaration,
    MalformedDocument,
    MissingFieldType,
    UnknownAttribute,
)
from mdmodel_codegen.type_references.type_reference_parser import parse_type_reference

from .attribute_keys import RECOGNIZED_ATTRIBUTE_KEYS, REQUIRED_KEY, TYPE_KEY
from .markdown_patterns import BULLET_PATTERN, IDENTIFIER_PATTERN
from .parsed_models import ParsedField, ParsedObject

_TRUE_WORDS = frozenset({"true", "yes"})
_FALSE_WORDS = frozenset({"false", "no"})

_LOGGER = logging.getLogger(__name__)


@dataclass
class _PendingField:
    """Field whose attribute bullets are still being collected."""

    name: str
    line: int
    attributes: dict[str, str] = field(default_factory=dict)
    attribute_lines: dict[str, int] = field(default_factory=dict)


def parse_object_section(
    section: RawSection,
    settings: ParsingSettings,
    *,
    name: str,
    description: str | None = None,
) -> ParsedObject:
    """Parse the bullet list of an object section into field descriptors.

    Top-level bullets name fields; indented bullets under a field are
    `Key: value` attributes, of which `Type` is mandatory.
    """
    recognized = frozenset(RECOGNIZED_ATTRIBUTE_KEYS) | {
        key.strip().lower() for key in settings.extra_attribute_keys
    }
    fields: list[ParsedField] = []
    field_lines: dict[str, int] = {}
    pending: _PendingField | None = None

    for source_line in section.body_lines:
        match = BULLET_PATTERN.match(source_line.text)
        if match is None:
            continue
        text = (match.group("text") or "").strip()
        if not match.group("indent"):
            if pending is not None:
                fields.append(_finish_field(pending, section))
            pending = _start_field(text, source_line, section, field_lines)
            continue
        if pending is None:
            raise MalformedDocument(
                "Attribute bullet appears before any field bullet.",
                section=section.heading,
                line=source_line.number,
            )
        _add_attribute(pending, text, source_line, section, recognized, settings)

    if pending is not None:
        fields.append(_finish_field(pending, section))
    if not fields:
        raise MalformedDocument(
            "Object section declares no fields.", section=section.heading, line=section.line
        )
    return ParsedObject(name=name, fields=tuple(fields), line=section.line, description=description)


def _start_field(
    text: str, source_line: SourceLine, section: RawSection, field_lines: dict[str, int]
) -> _PendingField:
    name = text.strip("`").strip()
    if not IDENTIFIER_PATTERN.fullmatch(name):
        raise MalformedDocument(
            f"Field name '{text}' is not a valid identifier.",
            section=section.heading,
            line=source_line.number,
        )
    previous = field_lines.get(name)
    if previous is not None:
        raise DuplicateDeclaration(
            name,
            f"field already declared on line {previous}",
            section=section.heading,
            line=source_line.number,
        )
    field_lines[name] = source_line.number
    return _PendingField(name=name, line=source_line.number)


def _add_attribute(
    pending: _PendingField,
    text: str,
    source_line: SourceLine,
    section: RawSection,
    recognized: frozenset[str],
    settings: ParsingSettings,
) -> None:
    key, separator, value = text.partition(":")
    key = key.strip()
    value = value.strip()
    if not separator or not key:
        raise MalformedDocument(
            f"Attribute bullet '{text}' of field '{pending.name}' must read 'Key: value'.",
            section=section.heading,
            line=source_line.number,
        )

    normalized = key.lower()
    if normalized not in recognized:
        if settings.unknown_attributes == UnknownAttributePolicy.ERROR:
            raise UnknownAttribute(
                key, pending.name, section=section.heading, line=source_line.number
            )
        _LOGGER.warning(
            "ignoring unknown attribute %r on field %r (section %r, line %d)",
            key,
            pending.name,
            section.heading,
            source_line.number,
        )
        return
    if normalized in pending.attributes:
        raise MalformedDocument(
            f"Attribute '{key}' is repeated on field '{pending.name}'.",
            section=section.heading,
            line=source_line.number,
        )
    if not value:
        raise MalformedDocument(
            f"Attribute '{key}' of field '{pending.name}' has no value.",
            section=section.heading,
            line=source_line.number,
        )
    pending.attributes[normalized] = value
    pending.attribute_lines[normalized] = source_line.number


def _finish_field(pending: _PendingField, section: RawSection) -> ParsedField:
    attributes = dict(pending.attributes)
    type_token = attributes.pop(TYPE_KEY, None)
    if type_token is None:
        raise MissingFieldType(pending.name, section=section.heading, line=pending.line)
    type_ref = parse_type_reference(
        type_token, section=section.heading, line=pending.attribute_lines[TYPE_KEY]
    )
    required_override = _parse_required(
        attributes.pop(REQUIRED_KEY, None), pending, section
    )
    return ParsedField(
        name=pending.name,
        type_ref=type_ref,
        required_override=required_override,
        attributes=MappingProxyType(attributes),
        line=pending.line,
    )


def _parse_required(
    value: str | None, pending: _PendingField, section: RawSection
) -> bool | None:
    if value is None:
        return None
    lowered = value.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise MalformedDocument(
        f"Attribute 'Required' of field '{pending.name}' must be true or false, got {value!r}.",
        section=section.heading,
        line=pending.attribute_lines[REQUIRED_KEY],
    )
