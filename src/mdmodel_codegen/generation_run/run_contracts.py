"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mdmodel_codegen.schema_management.schema_models import Document


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for generating one module from a schema file."""

    schema_path: str
    output_dir: str
    config_path: str | None = None
    builders: bool | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    output_path: Path
    module_name: str
    written: bool


@dataclass(frozen=True)
class GeneratedSource:
    """Python source produced from one markdown schema."""

    module_name: str
    text: str
    document: Document
