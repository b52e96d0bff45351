"""Schema management entities."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass

from mdmodel_codegen.section_parsing.attribute_keys import DESCRIPTION_KEY, SERIALIZATION_KEY
from mdmodel_codegen.type_references.type_reference_models import TypeReference


class DeclarationKind(str, enum.Enum):
    """Kind of a top-level declaration."""

    OBJECT = "object"
    ENUM = "enum"


@dataclass(frozen=True)
class DefaultValue:
    """Default literal as written in markdown and as parsed against the field type."""

    raw: str
    value: object


@dataclass(frozen=True)
class Field:  # pylint: disable=too-many-instance-attributes
    """Typed member of an object."""

    name: str
    type_ref: TypeReference
    required: bool
    repeated: bool
    default: DefaultValue | None
    attributes: Mapping[str, str]
    line: int
    example: DefaultValue | None = None

    @property
    def serialization_key(self) -> str:
        return self.attributes.get(SERIALIZATION_KEY, self.name)

    @property
    def description(self) -> str | None:
        return self.attributes.get(DESCRIPTION_KEY)


@dataclass(frozen=True)
class Object:
    """Record type declared by one object section."""

    name: str
    fields: tuple[Field, ...]
    line: int
    description: str | None = None

    @property
    def required_fields(self) -> tuple[Field, ...]:
        return tuple(field for field in self.fields if field.required)


@dataclass(frozen=True)
class Variant:
    """Enum case and its wire value."""

    name: str
    value: str
    line: int


@dataclass(frozen=True)
class Enum:
    """Closed set of variants declared by one enum section."""

    name: str
    variants: tuple[Variant, ...]
    line: int
    description: str | None = None

    def variant_for(self, literal: str) -> Variant | None:
        """Return the variant whose name or wire value equals `literal`."""
        for variant in self.variants:
            if literal in (variant.name, variant.value):
                return variant
        return None


@dataclass(frozen=True)
class Document:
    """Validated schema: every named type reference resolves to a declaration."""

    title: str | None
    module_name: str
    objects: tuple[Object, ...]
    enums: tuple[Enum, ...]

    def find_object(self, name: str) -> Object | None:
        return next((item for item in self.objects if item.name == name), None)

    def find_enum(self, name: str) -> Enum | None:
        return next((item for item in self.enums if item.name == name), None)

    def declaration_kind(self, name: str) -> DeclarationKind | None:
        if self.find_object(name) is not None:
            return DeclarationKind.OBJECT
        if self.find_enum(name) is not None:
            return DeclarationKind.ENUM
        return None
