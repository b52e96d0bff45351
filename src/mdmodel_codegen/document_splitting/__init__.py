"""Document splitting exports."""

from .section_models import RawSection, SourceLine, SplitDocument
from .section_splitter import fence_marker, split_document

__all__ = ["RawSection", "SourceLine", "SplitDocument", "fence_marker", "split_document"]
