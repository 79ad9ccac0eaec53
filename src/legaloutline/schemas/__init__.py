"""Shared schemas for legaloutline."""

from legaloutline.schemas.document import AnalysisDocument
from legaloutline.schemas.outline import OutlineResult
from legaloutline.schemas.sections import (
    Bullet,
    Category,
    ContentBlock,
    Emphasis,
    Paragraph,
    RiskLevel,
    Section,
)

__all__ = [
    "AnalysisDocument",
    "Bullet",
    "Category",
    "ContentBlock",
    "Emphasis",
    "OutlineResult",
    "Paragraph",
    "RiskLevel",
    "Section",
]
