"""Analysis document input model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AnalysisDocument(BaseModel):
    """Analysis text returned for one uploaded document.

    Attributes:
        raw_text: Free-form analysis text produced by the analysis service.
        filename: Name of the uploaded file the analysis describes.
    """

    model_config = ConfigDict(frozen=True)

    raw_text: str
    filename: str
