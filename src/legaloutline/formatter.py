"""Classify sections and format their lines into content blocks."""

from __future__ import annotations

import re
from typing import Callable

from legaloutline.schemas import (
    Bullet,
    Category,
    ContentBlock,
    Emphasis,
    Paragraph,
    RiskLevel,
    Section,
)
from legaloutline.segmenter import segment, split_lines

_BULLET_MARKERS = ("*", "-", "•")
# Every leading whitespace and marker character; a "**" opener stays as emphasis.
_BULLET_PREFIX_RE = re.compile(r"^(?:\s|[-•]|\*(?!\*))+")
_BOLD_MARKER = "**"


def _contains(*needles: str) -> Callable[[str], bool]:
    def predicate(title: str) -> bool:
        return any(needle in title for needle in needles)

    return predicate


# Evaluated top to bottom against the lowercased title; first match wins.
CATEGORY_RULES: tuple[tuple[Callable[[str], bool], Category], ...] = (
    (_contains("summary"), Category.SUMMARY),
    (_contains("key terms"), Category.KEY_TERMS),
    (_contains("risk"), Category.RISK),
    (_contains("warning"), Category.WARNING),
    (_contains("hidden", "clause"), Category.HIDDEN_CLAUSE),
)

RISK_PHRASES: tuple[tuple[str, RiskLevel], ...] = (
    ("high risk", RiskLevel.HIGH),
    ("medium risk", RiskLevel.MEDIUM),
    ("low risk", RiskLevel.LOW),
)


def classify(title: str) -> Category:
    """Map a section title to its category, defaulting to ``GENERIC``."""
    lowered = title.lower()
    for predicate, category in CATEGORY_RULES:
        if predicate(lowered):
            return category
    return Category.GENERIC


def title_has_risk(title: str) -> bool:
    """Return True if the title mentions risk, whatever its category."""
    return "risk" in title.lower()


def detect_risk(text: str) -> RiskLevel | None:
    """Return the first risk level named in the text, if any."""
    lowered = text.lower()
    for phrase, level in RISK_PHRASES:
        if phrase in lowered:
            return level
    return None


def split_emphasis(text: str) -> Emphasis | None:
    """Split text around its first ``**bold**`` span.

    Markers past the second one are left in ``after`` untouched.
    """
    if text.count(_BOLD_MARKER) < 2:
        return None
    before, bold, after = text.split(_BOLD_MARKER, 2)
    return Emphasis(before=before, bold=bold, after=after)


def format_line(line: str) -> ContentBlock | None:
    """Turn one content line into a paragraph or bullet block.

    Whitespace-only lines yield ``None``.
    """
    stripped = line.strip()
    if not stripped:
        return None

    if stripped.startswith(_BULLET_MARKERS):
        text = _BULLET_PREFIX_RE.sub("", line, count=1)
        return Bullet(text=text, emphasis=split_emphasis(text), risk_badge=detect_risk(text))

    return Paragraph(text=line, emphasis=split_emphasis(line), risk_badge=detect_risk(line))


def format_content(raw_content: str) -> list[ContentBlock]:
    """Format every non-blank line of a section body."""
    blocks: list[ContentBlock] = []
    for line in split_lines(raw_content):
        block = format_line(line)
        if block is not None:
            blocks.append(block)
    return blocks


def format_section(section: Section) -> Section:
    """Return a copy of the section with category, risk flag and blocks filled."""
    return section.model_copy(
        update={
            "category": classify(section.title),
            "has_risk": title_has_risk(section.title),
            "blocks": format_content(section.raw_content),
        }
    )


def build_sections(raw_text: str, *, include_preamble: bool = False) -> list[Section]:
    """Segment analysis text and format every section."""
    return [format_section(section) for section in segment(raw_text, include_preamble=include_preamble)]
