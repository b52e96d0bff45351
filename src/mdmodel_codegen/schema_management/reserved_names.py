"""Names the generated module introduces and therefore reserves."""

from __future__ import annotations

import builtins
import keyword

BUILDER_SUFFIX = "Builder"
ITEM_SETTER_PREFIX = "add_"

GENERATED_MODULE_NAMES = frozenset(
    {
        "IncompleteObject",
        "UnknownVariant",
        "Enum",
        "dataclass",
        "field",
        "datetime",
        "json",
        "Any",
        "annotations",
    }
)
GENERATED_OBJECT_MEMBERS = frozenset(
    {"to_dict", "from_dict", "to_json", "from_json", "builder", "build"}
)
GENERATED_ENUM_MEMBERS = frozenset({"to_wire", "from_wire", "default", "name", "value", "mro"})

_BUILTIN_NAMES = frozenset(dir(builtins))


def builder_name(object_name: str) -> str:
    return f"{object_name}{BUILDER_SUFFIX}"


def item_setter_name(field_name: str) -> str:
    return f"{ITEM_SETTER_PREFIX}{field_name}"


def type_name_conflict(name: str) -> str | None:
    """Return why `name` cannot be used for an object or enum, if it cannot."""
    common = _python_name_conflict(name)
    if common:
        return common
    if name in _BUILTIN_NAMES:
        return "shadows a Python builtin"
    if name in GENERATED_MODULE_NAMES:
        return "clashes with a name defined by the generated module"
    return None


def field_name_conflict(name: str) -> str | None:
    """Return why `name` cannot be used for a field, if it cannot."""
    common = _python_name_conflict(name)
    if common:
        return common
    if name in GENERATED_OBJECT_MEMBERS:
        return "clashes with a generated method"
    if name in GENERATED_MODULE_NAMES:
        return "clashes with a name defined by the generated module"
    return None


def variant_name_conflict(name: str) -> str | None:
    """Return why `name` cannot be used for an enum variant, if it cannot."""
    common = _python_name_conflict(name)
    if common:
        return common
    if name in GENERATED_ENUM_MEMBERS:
        return "clashes with a generated enum member"
    return None


def _python_name_conflict(name: str) -> str | None:
    if keyword.iskeyword(name):
        return "is a Python keyword"
    if name.startswith("_"):
        return "names starting with an underscore are reserved"
    return None
