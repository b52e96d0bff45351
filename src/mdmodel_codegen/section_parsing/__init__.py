"""Section parsing exports."""

from .attribute_keys import RECOGNIZED_ATTRIBUTE_KEYS
from .parsed_models import ParsedEnum, ParsedField, ParsedObject, ParsedVariant
from .section_parser import parse_section

__all__ = [
    "RECOGNIZED_ATTRIBUTE_KEYS",
    "ParsedEnum",
    "ParsedField",
    "ParsedObject",
    "ParsedVariant",
    "parse_section",
]
