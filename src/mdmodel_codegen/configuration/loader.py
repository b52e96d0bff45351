"""Configuration loader service."""

from __future__ import annotations

import keyword
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    GenerationSettings,
    ParsingSettings,
    Settings,
    UnknownAttributePolicy,
)

_KNOWN_SECTIONS = ("generation", "parsing")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Settings:
    """Load and validate the configuration file.

    An empty file yields the default settings. Absent sections and keys fall
    back to their defaults; present values are type-checked.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration section(s): {', '.join(unknown)}.")

    return Settings(
        path=path,
        parsing=_parse_parsing_section(parsed.get("parsing")),
        generation=_parse_generation_section(parsed.get("generation")),
    )


def _parse_generation_section(value: Any) -> GenerationSettings:
    section = _optional_mapping(value, "generation")
    builders = _optional_bool(section.get("builders"), "generation.builders", default=True)
    json_helpers = _optional_bool(
        section.get("json_helpers"), "generation.json_helpers", default=True
    )
    module_name = _optional_string(section.get("module_name"), "generation.module_name")
    if module_name is not None and (
        not module_name.isidentifier() or keyword.iskeyword(module_name)
    ):
        raise ConfigurationError(
            f"generation.module_name '{module_name}' is not a valid Python module name."
        )
    return GenerationSettings(builders=builders, json_helpers=json_helpers, module_name=module_name)


def _parse_parsing_section(value: Any) -> ParsingSettings:
    section = _optional_mapping(value, "parsing")
    policy_raw = section.get("unknown_attributes", UnknownAttributePolicy.ERROR.value)
    policy_text = _require_non_empty_string(policy_raw, "parsing.unknown_attributes").lower()
    try:
        policy = UnknownAttributePolicy(policy_text)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in UnknownAttributePolicy)
        raise ConfigurationError(
            f"parsing.unknown_attributes must be one of: {allowed}."
        ) from exc
    extra_keys = _normalize_string_sequence(
        section.get("extra_attribute_keys"), "parsing.extra_attribute_keys"
    )
    return ParsingSettings(
        unknown_attributes=policy,
        extra_attribute_keys=tuple(key.lower() for key in extra_keys),
    )


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
