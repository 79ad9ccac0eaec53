"""Pydantic models for the outline API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from legaloutline.schemas import Section


class OutlineRequest(BaseModel):
    """Request model for the /api/outline and /api/download endpoints.

    Attributes
    ----------
    raw_text : str
        Analysis text produced by the analysis service.
    filename : str
        Name of the analysed document.

    """

    raw_text: str = Field(..., description="Analysis text to outline")
    filename: str = Field(..., description="Name of the analysed document")

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Validate that ``filename`` is not empty."""
        if not v.strip():
            err = "filename cannot be empty"
            raise ValueError(err)
        return v.strip()


class SectionView(Section):
    """A section plus the presentation fields a renderer needs.

    Attributes
    ----------
    index : int
        Position of the section in the outline.
    key : str
        Stable key built from the title and its occurrence count.
    is_long : bool
        Whether the section is long enough to be collapsible.
    expanded : bool
        Initial expand/collapse flag (always ``True`` for a fresh outline).

    """

    index: int
    key: str
    is_long: bool
    expanded: bool = True


class OutlineSuccessResponse(BaseModel):
    """Success response model for the outline endpoints.

    Attributes
    ----------
    filename : str
        Name of the analysed document.
    raw_text : str
        The analysis text, for copy and download actions.
    download_name : str
        File name offered by the download action.
    summary : str
        Outline summary with section and risk counts.
    tree : str
        Section tree structure.
    content : str
        Rendered plain-text outline.
    sections : list[SectionView]
        Structured sections with their content blocks.

    """

    filename: str = Field(..., description="Name of the analysed document")
    raw_text: str = Field(..., description="Analysis text")
    download_name: str = Field(..., description="Download file name")
    summary: str = Field(..., description="Outline summary")
    tree: str = Field(..., description="Section tree structure")
    content: str = Field(..., description="Rendered outline")
    sections: list[SectionView] = Field(default_factory=list, description="Structured sections")


class OutlineErrorResponse(BaseModel):
    """Error response model for the outline endpoints.

    Attributes
    ----------
    detail : str
        Error message shown to the user.

    """

    detail: str = Field(..., description="Error message")
