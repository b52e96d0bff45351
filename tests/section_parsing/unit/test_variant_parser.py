"""Enum section variant parsing tests."""

from __future__ import annotations

import pytest
from mdmodel_codegen.configuration.runtime_settings import ParsingSettings
from mdmodel_codegen.document_splitting import split_document
from mdmodel_codegen.schema_errors import DuplicateVariant, MalformedDocument
from mdmodel_codegen.section_parsing import ParsedEnum, parse_section


def _parse_enum(markdown: str) -> ParsedEnum:
    (section,) = split_document(markdown).sections
    parsed = parse_section(section, ParsingSettings())
    assert isinstance(parsed, ParsedEnum)
    return parsed


def test_variants_keep_declaration_order_and_unquoted_values() -> None:
    parsed = _parse_enum(
        "### Status\n"
        "Lifecycle of an order.\n"
        "```text\n"
        "# comment line\n"
        "OPEN = open\n"
        "  CLOSED   =   \"closed for good\"  \n"
        "\n"
        "// another comment\n"
        "ON_HOLD = 'on-hold'\n"
        "```\n"
    )

    assert parsed.name == "Status"
    assert parsed.description == "Lifecycle of an order."
    assert [(variant.name, variant.value) for variant in parsed.variants] == [
        ("OPEN", "open"),
        ("CLOSED", "closed for good"),
        ("ON_HOLD", "on-hold"),
    ]
    assert [variant.line for variant in parsed.variants] == [5, 6, 9]


def test_duplicate_variant_name_is_rejected() -> None:
    with pytest.raises(DuplicateVariant, match="'OPEN'") as excinfo:
        _parse_enum("### Status\n```\nOPEN = open\nOPEN = reopened\n```\n")

    assert excinfo.value.enum_name == "Status"
    assert excinfo.value.line == 4


def test_duplicate_wire_value_is_rejected() -> None:
    with pytest.raises(DuplicateVariant, match="'open'") as excinfo:
        _parse_enum("### Status\n```\nOPEN = open\nREOPENED = open\n```\n")

    assert excinfo.value.duplicate == "open"


@pytest.mark.parametrize(
    ("markdown", "message"),
    [
        ("### Status\n```\n```\n", "no variants"),
        ("### Status\n```\nOPEN = open\n", "never closed"),
        ("### Status\n```\nA = a\n```\n```\nB = b\n```\n", "exactly one fenced block"),
        ("### Status\n```\nOPEN\n```\n", "IDENTIFIER = value"),
        ("### Status\n```\nOPEN =\n```\n", "IDENTIFIER = value"),
        ("### Status\n```\n= open\n```\n", "IDENTIFIER = value"),
        ("### Status\n```\n1ST = first\n```\n", "not a valid identifier"),
    ],
)
def test_malformed_enum_blocks_are_rejected(markdown: str, message: str) -> None:
    with pytest.raises(MalformedDocument, match=message):
        _parse_enum(markdown)
