"""Split analysis text into titled sections."""

from __future__ import annotations

import re

from legaloutline.schemas import Category, Section
from legaloutline.utils.logging_config import get_logger

logger = get_logger(__name__)

# Only one- and two-level headers open a section; deeper headers stay body text.
_HEADER_RE = re.compile(r"^(#{1,2})\s+(\S.*)$")
# Lines break on "\n" only; form feeds and other separators stay inside a line.
_LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split text on newlines, dropping the "\\r" of CRLF endings."""
    return _LINE_BREAK_RE.split(text)


def parse_header(line: str) -> tuple[int, str] | None:
    """Return ``(level, title)`` if the line is a section header."""
    match = _HEADER_RE.match(line)
    if not match:
        return None
    return len(match.group(1)), match.group(2).strip()


def segment(raw_text: str, *, include_preamble: bool = False) -> list[Section]:
    """Split raw analysis text into sections in document order.

    Blank lines are dropped and body lines are kept verbatim. Text before the
    first header is discarded unless ``include_preamble`` is set, in which case
    it becomes an untitled level-1 ``Generic`` section.

    Args:
        raw_text: Analysis text as returned by the analysis service.
        include_preamble: Keep text that precedes the first header.

    Returns:
        Sections with ``category``, ``has_risk`` and ``blocks`` left at their
        defaults.
    """
    sections: list[Section] = []
    title: str | None = None
    level = 1
    body: list[str] = []

    if include_preamble:
        title = ""

    for line in split_lines(raw_text):
        header = parse_header(line)
        if header is not None:
            if title is not None and (title or body):
                sections.append(_close_section(title, level, body))
            level, title = header
            body = []
            continue
        if title is not None and line.strip():
            body.append(line)

    if title is not None and (title or body):
        sections.append(_close_section(title, level, body))

    logger.debug("Segmented analysis text", extra={"section_count": len(sections)})
    return sections


def _close_section(title: str, level: int, body: list[str]) -> Section:
    return Section(
        title=title,
        level=level,
        category=Category.GENERIC,
        raw_content="\n".join(body),
    )
