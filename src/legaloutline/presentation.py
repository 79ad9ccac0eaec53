"""Expand/collapse state for rendered sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from legaloutline.config import LEGALOUTLINE_LONG_SECTION_CHARS
from legaloutline.schemas import Section


def is_long_section(section: Section, threshold: int = LEGALOUTLINE_LONG_SECTION_CHARS) -> bool:
    """Return True if the section's raw content exceeds the truncation threshold."""
    return len(section.raw_content) > threshold


def section_key(sections: Sequence[Section], index: int) -> str:
    """Build a position-independent key from the title and its occurrence count.

    The second "Risks" section gets ``"Risks#1"``.
    """
    title = sections[index].title
    occurrence = sum(1 for section in sections[:index] if section.title == title)
    return f"{title}#{occurrence}"


@dataclass
class PresentationState:
    """Per-section ``expanded`` flags keyed by section index.

    Every section starts expanded. Only long sections can be collapsed; content
    is never dropped from the sections themselves, a collapsed section is just
    clipped when rendered.
    """

    sections: list[Section] = field(default_factory=list)
    threshold: int = LEGALOUTLINE_LONG_SECTION_CHARS
    _expanded: dict[int, bool] = field(default_factory=dict, init=False, repr=False)

    def is_long(self, index: int) -> bool:
        if not 0 <= index < len(self.sections):
            return False
        return is_long_section(self.sections[index], self.threshold)

    def is_expanded(self, index: int) -> bool:
        return self._expanded.get(index, True)

    def is_truncated(self, index: int) -> bool:
        """Return True if the section should render clipped."""
        return self.is_long(index) and not self.is_expanded(index)

    def toggle(self, index: int) -> bool:
        """Flip a long section's flag and return the resulting value.

        Short sections and unknown indices are left alone.
        """
        if self.is_long(index):
            self._expanded[index] = not self.is_expanded(index)
        return self.is_expanded(index)

    def reset(self, sections: list[Section]) -> None:
        """Forget every toggle and track a new section list."""
        self.sections = sections
        self._expanded.clear()

    def as_mapping(self) -> dict[int, bool]:
        return {index: self.is_expanded(index) for index in range(len(self.sections))}
