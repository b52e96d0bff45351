"""Markdown section splitting service."""

from __future__ import annotations

import logging
import re

from mdmodel_codegen.schema_errors import MalformedDocument

from .section_models import RawSection, SourceLine, SplitDocument

SECTION_LEVEL = 3

_HEADING_PATTERN = re.compile(r"^ {0,3}(#{1,6})(?:[ \t]+(.*?))?[ \t]*$")
_FENCE_PATTERN = re.compile(r"^\s*(`{3,}|~{3,})")

_LOGGER = logging.getLogger(__name__)


def split_document(text: str) -> SplitDocument:
    """Split markdown text into the document title and its level-3 sections.

    Lines inside fenced code blocks never count as headings. Level-1 and
    level-2 headings close the current section; deeper headings stay in the
    section body.
    """
    title: str | None = None
    title_seen = False
    sections: list[RawSection] = []
    open_section: tuple[str, int] | None = None
    body: list[SourceLine] = []
    open_fence: str | None = None

    def close_section() -> None:
        if open_section is not None:
            heading, line = open_section
            sections.append(
                RawSection(heading=heading, level=SECTION_LEVEL, line=line, body_lines=tuple(body))
            )

    for number, line in enumerate(text.splitlines(), start=1):
        fence = fence_marker(line)
        if open_fence is not None:
            if fence is not None and fence.startswith(open_fence):
                open_fence = None
            body.append(SourceLine(number, line))
            continue
        if fence is not None:
            open_fence = fence
            body.append(SourceLine(number, line))
            continue

        match = _HEADING_PATTERN.match(line)
        if match is None:
            body.append(SourceLine(number, line))
            continue

        level = len(match.group(1))
        heading_text = (match.group(2) or "").rstrip("#").strip()
        if level > SECTION_LEVEL:
            body.append(SourceLine(number, line))
            continue

        close_section()
        open_section = None
        body = []
        if level == 1 and not title_seen:
            title_seen = True
            title = heading_text or None
        elif level == SECTION_LEVEL:
            if not heading_text:
                raise MalformedDocument("Section heading has no name.", line=number)
            open_section = (heading_text, number)

    close_section()
    _LOGGER.debug("split markdown model into %d section(s), title=%r", len(sections), title)
    return SplitDocument(title=title, sections=tuple(sections))


def fence_marker(line: str) -> str | None:
    """Return the fence run (``` or ~~~) opening `line`, if any."""
    match = _FENCE_PATTERN.match(line)
    if match is None:
        return None
    return match.group(1)
