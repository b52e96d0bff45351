"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "mdmodel-codegen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Settings for mdmodel-codegen.
# Every key is optional; the values below are the defaults.
# Pass this file with --config to generate, check or json-schema.

generation:
  # Emit a <Object>Builder class with fluent setters for every object.
  builders: true
  # Emit to_json/from_json next to to_dict/from_dict.
  json_helpers: true
  # Override the module name derived from the document title.
  # module_name: "my_model"

parsing:
  # What to do with field attribute keys that are not recognized:
  # "error" stops generation, "warn" logs a warning and drops the attribute.
  unknown_attributes: error
  # Additional attribute keys to accept and keep on fields.
  extra_attribute_keys: []
"""


def build_placeholder_configuration() -> str:
    """Build the commented YAML settings template."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the settings template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
