"""Document splitting entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLine:
    """One markdown line with its 1-based line number."""

    number: int
    text: str


@dataclass(frozen=True)
class RawSection:
    """Heading plus the unparsed lines that follow it."""

    heading: str
    level: int
    line: int
    body_lines: tuple[SourceLine, ...]


@dataclass(frozen=True)
class SplitDocument:
    """Title and ordered sections of a markdown model document."""

    title: str | None
    sections: tuple[RawSection, ...]
