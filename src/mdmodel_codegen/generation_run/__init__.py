"""Generation run domain exports."""

from .generation_use_case import (
    GenerationRunError,
    build_schema,
    execute_generation_run,
    generate,
    load_run_settings,
    load_schema_file,
)
from .run_contracts import GeneratedSource, GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GeneratedSource",
    "GenerationRunError",
    "build_schema",
    "execute_generation_run",
    "generate",
    "load_run_settings",
    "load_schema_file",
]
