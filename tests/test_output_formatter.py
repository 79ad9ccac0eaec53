"""Tests for rendering outlines as text."""

from __future__ import annotations

from legaloutline.formatter import build_sections
from legaloutline.output_formatter import (
    TRUNCATED_LINES,
    TRUNCATION_MARKER,
    count_risk_badges,
    format_outline,
    render_block,
)
from legaloutline.presentation import PresentationState
from legaloutline.schemas import AnalysisDocument, Bullet, Paragraph, RiskLevel

RISK_TEXT = "# Risk Overview\n- HIGH RISK: auto renewal\n- Low risk: notice\n# Summary\nPlain **bold** text"


class TestRenderBlock:
    """Tests for render_block function."""

    def test_paragraph(self) -> None:
        assert render_block(Paragraph(text="Plain text")) == "Plain text"

    def test_bullet_with_badge(self) -> None:
        block = Bullet(text="HIGH RISK: auto renewal", risk_badge=RiskLevel.HIGH)
        assert render_block(block) == "• [HIGH RISK] HIGH RISK: auto renewal"


class TestFormatOutline:
    """Tests for format_outline function."""

    def test_summary_lists_counts(self) -> None:
        document = AnalysisDocument(raw_text=RISK_TEXT, filename="lease.pdf")
        result = format_outline(document=document, sections=build_sections(RISK_TEXT))

        assert result.summary.splitlines() == [
            "Document: lease.pdf",
            "Sections: 2",
            "Risk sections: Risk Overview",
            "Risk badges: high 1, low 1",
        ]

    def test_sections_tree(self) -> None:
        document = AnalysisDocument(raw_text="# Summary\n## Hidden Fees\nx", filename="a.pdf")
        result = format_outline(document=document, sections=build_sections(document.raw_text))

        assert result.sections_tree == "Sections:\nSummary (summary)\n    Hidden Fees (hidden_clause)"

    def test_content(self) -> None:
        document = AnalysisDocument(raw_text=RISK_TEXT, filename="lease.pdf")
        result = format_outline(document=document, sections=build_sections(RISK_TEXT))

        assert result.content == (
            "# Risk Overview\n"
            "• [HIGH RISK] HIGH RISK: auto renewal\n"
            "• [LOW RISK] Low risk: notice\n"
            "\n"
            "# Summary\n"
            "Plain **bold** text"
        )

    def test_empty_outline(self) -> None:
        document = AnalysisDocument(raw_text="no headers", filename="a.pdf")
        result = format_outline(document=document, sections=[])

        assert result.summary == "Document: a.pdf\nSections: 0"
        assert result.content == ""

    def test_collapsed_long_section_is_clipped(self) -> None:
        text = "# Long\n" + "\n".join(f"- clause {i} " + "z" * 60 for i in range(10))
        document = AnalysisDocument(raw_text=text, filename="a.pdf")
        sections = build_sections(text)
        state = PresentationState(sections=sections)

        assert TRUNCATION_MARKER not in format_outline(document=document, sections=sections, state=state).content

        state.toggle(0)
        content = format_outline(document=document, sections=sections, state=state).content
        lines = content.splitlines()

        assert lines[-1] == TRUNCATION_MARKER
        assert len(lines) == 1 + TRUNCATED_LINES + 1
        assert len(sections[0].blocks) == 10


class TestCountRiskBadges:
    """Tests for count_risk_badges function."""

    def test_counts_every_block(self, sample_analysis: str) -> None:
        counts = count_risk_badges(build_sections(sample_analysis))
        assert counts == {RiskLevel.HIGH: 1, RiskLevel.MEDIUM: 1, RiskLevel.LOW: 1}
