"""Format an analysis outline into summary, tree, and content outputs."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from legaloutline.presentation import PresentationState
from legaloutline.schemas import (
    AnalysisDocument,
    Bullet,
    ContentBlock,
    OutlineResult,
    RiskLevel,
    Section,
)

TRUNCATED_LINES = 6
TRUNCATION_MARKER = "... (truncated, expand to read more)"


def format_outline(
    *,
    document: AnalysisDocument,
    sections: list[Section],
    state: PresentationState | None = None,
) -> OutlineResult:
    """Create summary, section tree, and content."""
    tree = "Sections:\n" + _create_sections_tree(sections)
    content = _render_content(sections, state)

    summary_lines = [f"Document: {document.filename}", f"Sections: {len(sections)}"]
    risk_titles = [section.title for section in sections if section.has_risk]
    if risk_titles:
        summary_lines.append(f"Risk sections: {', '.join(risk_titles)}")
    badges = count_risk_badges(sections)
    if badges:
        summary_lines.append(
            "Risk badges: "
            + ", ".join(f"{level.value} {badges[level]}" for level in RiskLevel if badges[level])
        )

    token_estimate = _format_token_count(document.raw_text)
    if token_estimate:
        summary_lines.append(f"Estimated tokens: {token_estimate}")

    return OutlineResult(summary="\n".join(summary_lines), sections_tree=tree, content=content)


def count_risk_badges(sections: Iterable[Section]) -> Counter[RiskLevel]:
    """Count risk badges over every block of every section."""
    counts: Counter[RiskLevel] = Counter()
    for section in sections:
        for block in section.blocks:
            if block.risk_badge is not None:
                counts[block.risk_badge] += 1
    return counts


def render_block(block: ContentBlock) -> str:
    text = block.text
    if block.risk_badge is not None:
        text = f"[{block.risk_badge.value.upper()} RISK] {text}"
    if isinstance(block, Bullet):
        text = f"• {text}"
    return text


def _render_content(sections: list[Section], state: PresentationState | None) -> str:
    blocks: list[str] = []
    for index, section in enumerate(sections):
        truncated = state is not None and state.is_truncated(index)
        blocks.append(_render_section(section, truncated=truncated))
    return "\n\n".join(block for block in blocks if block).strip()


def _render_section(section: Section, *, truncated: bool) -> str:
    heading = f"{'#' * section.level} {section.title}".rstrip()
    lines = [render_block(block) for block in section.blocks]
    if truncated and len(lines) > TRUNCATED_LINES:
        lines = lines[:TRUNCATED_LINES] + [TRUNCATION_MARKER]
    elif truncated:
        lines.append(TRUNCATION_MARKER)
    return "\n".join([heading, *lines])


def _create_sections_tree(sections: list[Section]) -> str:
    lines: list[str] = []
    for section in sections:
        indent = " " * ((section.level - 1) * 4)
        marker = " [risk]" if section.has_risk else ""
        lines.append(f"{indent}{section.title} ({section.category.value}){marker}")
    return "\n".join(lines)


def _format_token_count(text: str) -> str | None:
    if not tiktoken:
        return None
    try:
        encoding = tiktoken.get_encoding("o200k_base")
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        return None

    if total_tokens >= 1_000_000:
        return f"{total_tokens / 1_000_000:.1f}M"
    if total_tokens >= 1_000:
        return f"{total_tokens / 1_000:.1f}k"
    return str(total_tokens)
