"""Tests for expand/collapse presentation state."""

from __future__ import annotations

import pytest

from legaloutline.presentation import PresentationState, is_long_section, section_key
from legaloutline.schemas import Section


def _section(title: str = "Section", length: int = 10) -> Section:
    return Section(title=title, level=1, raw_content="x" * length)


class TestIsLongSection:
    """Tests for is_long_section function."""

    def test_boundary_is_exclusive(self) -> None:
        assert not is_long_section(_section(length=500))
        assert is_long_section(_section(length=501))

    def test_empty_section_is_short(self) -> None:
        assert not is_long_section(_section(length=0))

    def test_custom_threshold(self) -> None:
        assert is_long_section(_section(length=11), threshold=10)
        assert not is_long_section(_section(length=10), threshold=10)

    def test_counts_raw_characters(self) -> None:
        section = Section(title="A", level=1, raw_content="- **bold**\n" * 46)
        assert len(section.raw_content) == 506
        assert is_long_section(section)


class TestSectionKey:
    """Tests for section_key function."""

    def test_counts_repeated_titles(self) -> None:
        sections = [_section("Risks"), _section("Summary"), _section("Risks")]
        assert [section_key(sections, index) for index in range(3)] == [
            "Risks#0",
            "Summary#0",
            "Risks#1",
        ]


class TestPresentationState:
    """Tests for PresentationState."""

    @pytest.fixture
    def state(self) -> PresentationState:
        return PresentationState(sections=[_section(length=10), _section(length=800), _section(length=501)])

    def test_sections_start_expanded(self, state: PresentationState) -> None:
        assert state.as_mapping() == {0: True, 1: True, 2: True}
        assert not any(state.is_truncated(index) for index in range(3))

    def test_toggle_long_section(self, state: PresentationState) -> None:
        assert state.toggle(1) is False
        assert state.is_truncated(1)
        assert state.toggle(1) is True
        assert not state.is_truncated(1)

    def test_toggle_short_section_is_noop(self, state: PresentationState) -> None:
        assert state.toggle(0) is True
        assert state.is_expanded(0)
        assert not state.is_truncated(0)

    @pytest.mark.parametrize("index", [-1, 3, 99])
    def test_toggle_unknown_index_is_noop(self, state: PresentationState, index: int) -> None:
        assert state.toggle(index) is True
        assert state.as_mapping() == {0: True, 1: True, 2: True}

    def test_toggles_are_independent(self, state: PresentationState) -> None:
        state.toggle(2)
        assert state.as_mapping() == {0: True, 1: True, 2: False}

    def test_reset_forgets_toggles(self, state: PresentationState) -> None:
        state.toggle(1)
        state.reset([_section(length=900), _section(length=900)])

        assert state.as_mapping() == {0: True, 1: True}

    def test_collapsing_keeps_content(self, state: PresentationState) -> None:
        state.toggle(1)
        assert state.sections[1].raw_content == "x" * 800
