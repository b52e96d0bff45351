"""Generation use-case service."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from mdmodel_codegen.code_generation import generate_module_source
from mdmodel_codegen.configuration import ConfigurationError, Settings, load_configuration
from mdmodel_codegen.document_splitting import split_document
from mdmodel_codegen.schema_errors import SchemaError
from mdmodel_codegen.schema_management import Document, build_document

from .run_contracts import GeneratedSource, GenerationOutcome, GenerationRequest

_LOGGER = logging.getLogger(__name__)


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed."""


def build_schema(schema_text: str, settings: Settings | None = None) -> Document:
    """Parse and validate `schema_text` into a resolved document."""
    settings = settings or Settings()
    return build_document(split_document(schema_text), settings)


def generate(schema_text: str, settings: Settings | None = None) -> GeneratedSource:
    """Turn markdown schema text into the source of a Python module.

    Raises a `SchemaError` subclass on the first problem found; nothing is
    produced for a document with errors.
    """
    settings = settings or Settings()
    document = build_schema(schema_text, settings)
    text = generate_module_source(document, settings.generation)
    return GeneratedSource(module_name=document.module_name, text=text, document=document)


def load_run_settings(config_path: str | None, *, builders: bool | None = None) -> Settings:
    """Load settings from `config_path` (defaults when absent) and apply CLI overrides."""
    try:
        settings = load_configuration(config_path) if config_path else Settings()
    except ConfigurationError as exc:
        raise GenerationRunError(str(exc)) from exc
    if builders is not None:
        settings = dataclasses.replace(
            settings,
            generation=dataclasses.replace(settings.generation, builders=builders),
        )
    return settings


def read_schema_text(schema_path: str | Path) -> str:
    path = Path(schema_path)
    if not path.is_file():
        raise GenerationRunError(f"Schema file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GenerationRunError(f"Failed to read schema file {path}: {exc}") from exc


def load_schema_file(schema_path: str | Path, settings: Settings) -> Document:
    """Read and validate a schema file, wrapping schema errors for the caller."""
    text = read_schema_text(schema_path)
    try:
        return build_schema(text, settings)
    except SchemaError as exc:
        raise GenerationRunError(f"{schema_path}: {exc}") from exc


def execute_generation_run(request: GenerationRequest) -> GenerationOutcome:
    """Generate the module for one schema file and write it into the output directory.

    The file is only rewritten when its content changes, so repeated runs on
    an unchanged schema leave the output untouched.
    """
    settings = load_run_settings(request.config_path, builders=request.builders)
    text = read_schema_text(request.schema_path)
    try:
        generated = generate(text, settings)
    except SchemaError as exc:
        raise GenerationRunError(f"{request.schema_path}: {exc}") from exc

    output_dir = Path(request.output_dir)
    output_path = output_dir / f"{generated.module_name}.py"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        written = _write_if_changed(output_path, generated.text)
    except OSError as exc:
        raise GenerationRunError(f"Failed to write {output_path}: {exc}") from exc

    _LOGGER.debug(
        "%s %s (%d bytes)",
        "wrote" if written else "unchanged",
        output_path,
        len(generated.text.encode("utf-8")),
    )
    return GenerationOutcome(
        output_path=output_path.resolve(),
        module_name=generated.module_name,
        written=written,
    )


def _write_if_changed(path: Path, text: str) -> bool:
    if path.is_file() and path.read_text(encoding="utf-8") == text:
        return False
    path.write_text(text, encoding="utf-8")
    return True
