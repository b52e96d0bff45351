"""Field attribute keys recognized in object sections."""

from __future__ import annotations

TYPE_KEY = "type"
DESCRIPTION_KEY = "description"
DEFAULT_KEY = "default"
REQUIRED_KEY = "required"
SERIALIZATION_KEY = "key"
EXAMPLE_KEY = "example"

RECOGNIZED_ATTRIBUTE_KEYS: tuple[str, ...] = (
    TYPE_KEY,
    DESCRIPTION_KEY,
    DEFAULT_KEY,
    REQUIRED_KEY,
    SERIALIZATION_KEY,
    EXAMPLE_KEY,
)
