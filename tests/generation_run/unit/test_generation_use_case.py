"""Generation use-case tests."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
from mdmodel_codegen.configuration.runtime_settings import GenerationSettings, Settings
from mdmodel_codegen.generation_run import (
    GenerationRequest,
    GenerationRunError,
    execute_generation_run,
    generate,
    load_run_settings,
    load_schema_file,
)
from mdmodel_codegen.schema_errors import MissingFieldType

_MODEL = """# Inventory
### Item
- sku
  - Type: string
- count
  - Type: integer
  - Default: 0
"""


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_generate_returns_module_name_text_and_document() -> None:
    generated = generate(_MODEL)

    assert generated.module_name == "inventory"
    assert generated.document.objects[0].name == "Item"
    assert "class Item:" in generated.text
    assert "class ItemBuilder:" in generated.text


def test_generate_honours_settings() -> None:
    settings = Settings(generation=GenerationSettings(builders=False, module_name="stock"))

    generated = generate(_MODEL, settings)

    assert generated.module_name == "stock"
    assert "ItemBuilder" not in generated.text


def test_generate_propagates_schema_errors() -> None:
    with pytest.raises(MissingFieldType):
        generate("### Item\n- sku\n")


def test_execute_writes_module_named_after_the_title(tmp_path: Path) -> None:
    schema_path = _write_file(tmp_path / "inventory.md", _MODEL)

    outcome = execute_generation_run(
        GenerationRequest(schema_path=str(schema_path), output_dir=str(tmp_path / "gen"))
    )

    assert outcome.output_path == (tmp_path / "gen" / "inventory.py").resolve()
    assert outcome.module_name == "inventory"
    assert outcome.written is True
    assert outcome.output_path.read_text(encoding="utf-8") == generate(_MODEL).text


def test_rerun_on_unchanged_schema_leaves_output_untouched(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    schema_path = _write_file(tmp_path / "inventory.md", _MODEL)
    request = GenerationRequest(schema_path=str(schema_path), output_dir=str(tmp_path))
    first = execute_generation_run(request)
    os.utime(first.output_path, (1_000_000, 1_000_000))

    with caplog.at_level(logging.DEBUG, logger="mdmodel_codegen"):
        second = execute_generation_run(request)

    assert second.written is False
    assert first.output_path.stat().st_mtime == 1_000_000
    assert "unchanged" in caplog.text


def test_builders_override_replaces_configured_value(tmp_path: Path) -> None:
    schema_path = _write_file(tmp_path / "inventory.md", _MODEL)
    config_path = _write_file(tmp_path / "settings.yaml", "generation:\n  builders: true\n")

    outcome = execute_generation_run(
        GenerationRequest(
            schema_path=str(schema_path),
            output_dir=str(tmp_path),
            config_path=str(config_path),
            builders=False,
        )
    )

    assert "ItemBuilder" not in outcome.output_path.read_text(encoding="utf-8")


def test_missing_schema_file_is_wrapped(tmp_path: Path) -> None:
    with pytest.raises(GenerationRunError, match="Schema file not found"):
        execute_generation_run(
            GenerationRequest(schema_path=str(tmp_path / "absent.md"), output_dir=str(tmp_path))
        )


def test_invalid_configuration_is_wrapped(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "settings.yaml", "generation: 1\n")

    with pytest.raises(GenerationRunError, match="must be a mapping"):
        load_run_settings(str(config_path))


def test_load_schema_file_prefixes_errors_with_the_path(tmp_path: Path) -> None:
    schema_path = _write_file(tmp_path / "broken.md", "### Item\n- sku\n")

    with pytest.raises(GenerationRunError, match=r"broken\.md: Field 'sku'") as excinfo:
        load_schema_file(schema_path, Settings())

    assert isinstance(excinfo.value.__cause__, MissingFieldType)
