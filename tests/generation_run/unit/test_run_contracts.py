"""Tests for generation run entities."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest
from mdmodel_codegen.generation_run.run_contracts import (
    GeneratedSource,
    GenerationOutcome,
    GenerationRequest,
)
from mdmodel_codegen.schema_management import Document


def test_generation_request_defaults_to_configured_builders() -> None:
    request = GenerationRequest(schema_path="model.md", output_dir="out")

    assert request.config_path is None
    assert request.builders is None


def test_generation_outcome_reports_path_module_and_write_flag() -> None:
    outcome = GenerationOutcome(
        output_path=Path("/tmp/out/order_model.py"),
        module_name="order_model",
        written=True,
    )

    assert outcome.output_path.stem == outcome.module_name
    assert outcome.written is True


def test_generated_source_is_immutable() -> None:
    source = GeneratedSource(
        module_name="model",
        text="",
        document=Document(title=None, module_name="model", objects=(), enums=()),
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        source.text = "changed"  # type: ignore[misc]
