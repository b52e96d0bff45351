"""Derive a Python module name from a document title."""

from __future__ import annotations

import keyword
import re

DEFAULT_MODULE_NAME = "model"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_WORD_PATTERN = re.compile(r"[A-Za-z0-9]+")


def module_name_for(title: str | None) -> str:
    """Return the snake_case module identifier for `title`.

    Words are split on non-alphanumeric characters and camel-case
    boundaries, lower-cased and joined with underscores. A missing title, or
    one with no usable characters, yields `DEFAULT_MODULE_NAME`.
    """
    if title is None:
        return DEFAULT_MODULE_NAME
    words = [
        word.lower()
        for chunk in _WORD_PATTERN.findall(title)
        for word in _CAMEL_BOUNDARY.split(chunk)
        if word
    ]
    if not words:
        return DEFAULT_MODULE_NAME
    name = "_".join(words)
    if name[0].isdigit():
        name = f"{DEFAULT_MODULE_NAME}_{name}"
    if keyword.iskeyword(name):
        name = f"{name}_"
    return name
