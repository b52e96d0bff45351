"""Code generation exports."""

from .module_emitter import generate_module_source
from .type_mapping import PRIMITIVE_ANNOTATIONS, annotation_for

__all__ = ["PRIMITIVE_ANNOTATIONS", "annotation_for", "generate_module_source"]
