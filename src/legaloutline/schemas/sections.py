"""Section and content block models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class Category(str, Enum):
    """Topic of a section, used to pick its icon."""

    SUMMARY = "summary"
    KEY_TERMS = "key_terms"
    RISK = "risk"
    WARNING = "warning"
    HIDDEN_CLAUSE = "hidden_clause"
    GENERIC = "generic"


class RiskLevel(str, Enum):
    """Risk badge attached to a single line."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Emphasis(BaseModel):
    """A line split around its single bold span."""

    before: str
    bold: str
    after: str


class Paragraph(BaseModel):
    """A plain line of section content."""

    kind: Literal["paragraph"] = "paragraph"
    text: str
    emphasis: Emphasis | None = None
    risk_badge: RiskLevel | None = None


class Bullet(BaseModel):
    """A list item with its marker stripped."""

    kind: Literal["bullet"] = "bullet"
    text: str
    emphasis: Emphasis | None = None
    risk_badge: RiskLevel | None = None


ContentBlock = Annotated[Union[Paragraph, Bullet], Field(discriminator="kind")]


class Section(BaseModel):
    """A titled block of the analysis delimited by header lines."""

    title: str
    level: int = Field(..., ge=1, le=2)
    category: Category = Category.GENERIC
    has_risk: bool = False
    raw_content: str = ""
    blocks: list[ContentBlock] = Field(default_factory=list)
