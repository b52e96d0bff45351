"""Schema-time error taxonomy."""

from __future__ import annotations


class SchemaError(Exception):
    """Raised when a markdown model cannot be turned into a valid schema.

    Every subclass records where the problem was found so the message can
    point back at the offending markdown.
    """

    def __init__(self, message: str, *, section: str | None = None, line: int | None = None):
        self.section = section
        self.line = line
        super().__init__(_with_location(message, section, line))


class MalformedDocument(SchemaError):
    """Raised for structural violations of the markdown dialect."""


class MalformedTypeReference(MalformedDocument):
    """Raised when a type token does not follow the type grammar."""

    def __init__(
        self, token: str, reason: str, *, section: str | None = None, line: int | None = None
    ):
        self.token = token
        super().__init__(f"Malformed type '{token}': {reason}", section=section, line=line)


class MissingFieldType(SchemaError):
    """Raised when a field bullet has no `Type:` attribute."""

    def __init__(self, field_name: str, *, section: str | None = None, line: int | None = None):
        self.field_name = field_name
        super().__init__(
            f"Field '{field_name}' is missing a 'Type' attribute.", section=section, line=line
        )


class UnknownAttribute(SchemaError):
    """Raised when a field carries an attribute key outside the recognized set."""

    def __init__(
        self, key: str, field_name: str, *, section: str | None = None, line: int | None = None
    ):
        self.key = key
        self.field_name = field_name
        super().__init__(
            f"Field '{field_name}' uses unknown attribute '{key}'.", section=section, line=line
        )


class DuplicateVariant(SchemaError):
    """Raised when an enum repeats a variant name or a wire value."""

    def __init__(
        self, enum_name: str, duplicate: str, *, section: str | None = None, line: int | None = None
    ):
        self.enum_name = enum_name
        self.duplicate = duplicate
        super().__init__(
            f"Enum '{enum_name}' declares '{duplicate}' more than once.",
            section=section,
            line=line,
        )


class DuplicateDeclaration(SchemaError):
    """Raised when a type name or a field name is declared twice."""

    def __init__(
        self, name: str, detail: str, *, section: str | None = None, line: int | None = None
    ):
        self.name = name
        super().__init__(
            f"Duplicate declaration of '{name}': {detail}", section=section, line=line
        )


class UnknownType(SchemaError):
    """Raised when a named type reference matches no declared object or enum."""

    def __init__(
        self,
        name: str,
        referencing_field: str,
        *,
        section: str | None = None,
        line: int | None = None,
    ):
        self.name = name
        self.referencing_field = referencing_field
        super().__init__(
            f"Field '{referencing_field}' references unknown type '{name}'.",
            section=section,
            line=line,
        )


class ReservedNameCollision(SchemaError):
    """Raised when a declared name clashes with a name the generated code needs."""

    def __init__(
        self, name: str, reason: str, *, section: str | None = None, line: int | None = None
    ):
        self.name = name
        self.reason = reason
        super().__init__(f"Name '{name}' is reserved: {reason}", section=section, line=line)


class InvalidDefault(SchemaError):
    """Raised when a default or example literal does not fit the field type."""

    def __init__(
        self,
        field_name: str,
        raw: str,
        reason: str,
        *,
        attribute: str = "default",
        section: str | None = None,
        line: int | None = None,
    ):
        self.field_name = field_name
        self.raw = raw
        self.attribute = attribute
        super().__init__(
            f"Invalid {attribute} {raw!r} for field '{field_name}': {reason}",
            section=section,
            line=line,
        )


def _with_location(message: str, section: str | None, line: int | None) -> str:
    location: list[str] = []
    if section:
        location.append(f"section '{section}'")
    if line is not None:
        location.append(f"line {line}")
    if not location:
        return message
    return f"{message} ({', '.join(location)})"
