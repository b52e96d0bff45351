"""Schema assembly, name resolution and validation service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from mdmodel_codegen.configuration.runtime_settings import GenerationSettings, Settings
from mdmodel_codegen.document_splitting.section_models import SplitDocument
from mdmodel_codegen.module_naming.module_namer import module_name_for
from mdmodel_codegen.schema_errors import (
    DuplicateDeclaration,
    InvalidDefault,
    MalformedDocument,
    ReservedNameCollision,
    UnknownType,
)
from mdmodel_codegen.section_parsing.attribute_keys import (
    DEFAULT_KEY,
    EXAMPLE_KEY,
    SERIALIZATION_KEY,
)
from mdmodel_codegen.section_parsing.parsed_models import ParsedEnum, ParsedField, ParsedObject
from mdmodel_codegen.section_parsing.section_parser import parse_section
from mdmodel_codegen.type_references.type_reference_models import (
    Optional,
    Repeated,
    TypeReference,
    format_type_reference,
    named_references,
    strip_optional,
)

from .default_literals import parse_default_literal
from .reserved_names import (
    builder_name,
    field_name_conflict,
    item_setter_name,
    type_name_conflict,
    variant_name_conflict,
)
from .schema_models import DefaultValue, Document, Enum, Field, Object, Variant

ParsedDeclaration = ParsedObject | ParsedEnum

_LOGGER = logging.getLogger(__name__)


def build_document(split: SplitDocument, settings: Settings | None = None) -> Document:
    """Turn split markdown sections into a validated, fully resolved document.

    Resolution runs in two passes: every declared name is collected first,
    then each named type reference is looked up by name. Forward references
    and mutually recursive objects therefore need no special handling.
    """
    settings = settings or Settings()
    declarations = [parse_section(section, settings.parsing) for section in split.sections]
    symbols = _symbol_table(declarations)
    _check_reserved_names(declarations, symbols, settings.generation)

    enums = tuple(_build_enum(item) for item in declarations if isinstance(item, ParsedEnum))
    enums_by_name = {enum.name: enum for enum in enums}
    objects = tuple(
        _build_object(item, symbols, enums_by_name)
        for item in declarations
        if isinstance(item, ParsedObject)
    )
    module_name = settings.generation.module_name or module_name_for(split.title)
    _LOGGER.debug(
        "resolved %d object(s) and %d enum(s) into module %r",
        len(objects),
        len(enums),
        module_name,
    )
    return Document(title=split.title, module_name=module_name, objects=objects, enums=enums)


def _symbol_table(declarations: Sequence[ParsedDeclaration]) -> dict[str, ParsedDeclaration]:
    symbols: dict[str, ParsedDeclaration] = {}
    for declaration in declarations:
        previous = symbols.get(declaration.name)
        if previous is not None:
            raise DuplicateDeclaration(
                declaration.name,
                f"already declared on line {previous.line}",
                section=declaration.name,
                line=declaration.line,
            )
        symbols[declaration.name] = declaration
    return symbols


def _check_reserved_names(
    declarations: Sequence[ParsedDeclaration],
    symbols: Mapping[str, ParsedDeclaration],
    generation: GenerationSettings,
) -> None:
    for declaration in declarations:
        reason = type_name_conflict(declaration.name)
        if reason:
            raise ReservedNameCollision(
                declaration.name, reason, section=declaration.name, line=declaration.line
            )
        if isinstance(declaration, ParsedEnum):
            for variant in declaration.variants:
                reason = variant_name_conflict(variant.name)
                if reason:
                    raise ReservedNameCollision(
                        variant.name, reason, section=declaration.name, line=variant.line
                    )
            continue
        if generation.builders and builder_name(declaration.name) in symbols:
            raise ReservedNameCollision(
                builder_name(declaration.name),
                f"the builder generated for '{declaration.name}' uses this name",
                section=declaration.name,
                line=symbols[builder_name(declaration.name)].line,
            )
        _check_field_names(declaration, symbols, generation)


def _check_field_names(
    declaration: ParsedObject,
    symbols: Mapping[str, ParsedDeclaration],
    generation: GenerationSettings,
) -> None:
    field_names = {field.name for field in declaration.fields}
    keys_seen: dict[str, str] = {}
    for field in declaration.fields:
        key = field.attributes.get(SERIALIZATION_KEY, field.name)
        if key in keys_seen:
            raise DuplicateDeclaration(
                key,
                f"serialization key of field '{field.name}' is already used by "
                f"field '{keys_seen[key]}'",
                section=declaration.name,
                line=field.line,
            )
        keys_seen[key] = field.name
        reason = field_name_conflict(field.name)
        if reason is None and field.name in symbols:
            reason = "shadows a declared type inside the generated class"
        if reason:
            raise ReservedNameCollision(
                field.name, reason, section=declaration.name, line=field.line
            )
        if (
            generation.builders
            and isinstance(strip_optional(field.type_ref), Repeated)
            and item_setter_name(field.name) in field_names
        ):
            raise ReservedNameCollision(
                item_setter_name(field.name),
                f"the builder item setter for repeated field '{field.name}' uses this name",
                section=declaration.name,
                line=field.line,
            )


def _build_enum(parsed: ParsedEnum) -> Enum:
    return Enum(
        name=parsed.name,
        variants=tuple(
            Variant(name=variant.name, value=variant.value, line=variant.line)
            for variant in parsed.variants
        ),
        line=parsed.line,
        description=parsed.description,
    )


def _build_object(
    parsed: ParsedObject,
    symbols: Mapping[str, ParsedDeclaration],
    enums: Mapping[str, Enum],
) -> Object:
    return Object(
        name=parsed.name,
        fields=tuple(_build_field(parsed.name, field, symbols, enums) for field in parsed.fields),
        line=parsed.line,
        description=parsed.description,
    )


def _build_field(
    object_name: str,
    parsed: ParsedField,
    symbols: Mapping[str, ParsedDeclaration],
    enums: Mapping[str, Enum],
) -> Field:
    for reference in named_references(parsed.type_ref):
        if reference.name not in symbols:
            raise UnknownType(reference.name, parsed.name, section=object_name, line=parsed.line)

    type_ref = parsed.type_ref
    attributes = dict(parsed.attributes)
    raw_default = attributes.pop(DEFAULT_KEY, None)
    raw_example = attributes.pop(EXAMPLE_KEY, None)
    if parsed.required_override is True and isinstance(type_ref, Optional):
        raise MalformedDocument(
            f"Field '{parsed.name}' is marked required but its type "
            f"'{format_type_reference(type_ref)}' is optional.",
            section=object_name,
            line=parsed.line,
        )
    if parsed.required_override is True and raw_default is not None:
        raise MalformedDocument(
            f"Field '{parsed.name}' is marked required but has a default.",
            section=object_name,
            line=parsed.line,
        )
    if parsed.required_override is False and raw_default is None:
        type_ref = type_ref if isinstance(type_ref, Optional) else Optional(type_ref)

    default = _field_literal(object_name, parsed, DEFAULT_KEY, raw_default, type_ref, enums)
    return Field(
        name=parsed.name,
        type_ref=type_ref,
        required=default is None and not isinstance(type_ref, Optional),
        repeated=isinstance(strip_optional(type_ref), Repeated),
        default=default,
        attributes=MappingProxyType(attributes),
        line=parsed.line,
        example=_field_literal(object_name, parsed, EXAMPLE_KEY, raw_example, type_ref, enums),
    )


def _field_literal(
    object_name: str,
    parsed: ParsedField,
    attribute: str,
    raw: str | None,
    type_ref: TypeReference,
    enums: Mapping[str, Enum],
) -> DefaultValue | None:
    if raw is None:
        return None
    try:
        value = parse_default_literal(raw, type_ref, enums)
    except ValueError as exc:
        raise InvalidDefault(
            parsed.name,
            raw,
            f"{exc} (field type '{format_type_reference(type_ref)}')",
            attribute=attribute,
            section=object_name,
            line=parsed.line,
        ) from exc
    return DefaultValue(raw=raw, value=value)
