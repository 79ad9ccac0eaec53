"""Rendered outline output model."""

from __future__ import annotations

from pydantic import BaseModel


class OutlineResult(BaseModel):
    """Plain-text rendering of an analysis outline."""

    summary: str
    sections_tree: str
    content: str
