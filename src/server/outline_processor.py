"""Turn analysis documents and uploads into outline responses."""

from __future__ import annotations

from legaloutline.exceptions import AnalysisError, InvalidAnalysisResponseError
from legaloutline.output_formatter import format_outline
from legaloutline.presentation import PresentationState, is_long_section, section_key
from legaloutline.schemas import AnalysisDocument
from legaloutline.session import download_filename, outline_for
from legaloutline.upload import analyze_document
from legaloutline.utils.logging_config import get_logger
from server.models import OutlineSuccessResponse, SectionView
from server.server_config import MAX_DISPLAY_SIZE

logger = get_logger(__name__)


def process_outline(document: AnalysisDocument) -> OutlineSuccessResponse:
    """Build the outline response for an analysis document."""
    sections = outline_for(document.raw_text)
    state = PresentationState(sections=sections)
    result = format_outline(document=document, sections=sections, state=state)

    content = result.content
    if len(content) > MAX_DISPLAY_SIZE:
        content = (
            f"(Content cropped to {int(MAX_DISPLAY_SIZE / 1_000)}k characters, "
            "download the analysis to see more)\n" + content[:MAX_DISPLAY_SIZE]
        )

    views = [
        SectionView(
            **section.model_dump(),
            index=index,
            key=section_key(sections, index),
            is_long=is_long_section(section, state.threshold),
            expanded=state.is_expanded(index),
        )
        for index, section in enumerate(sections)
    ]

    logger.info(
        "Outline built",
        extra={"analysis_filename": document.filename, "section_count": len(sections)},
    )

    return OutlineSuccessResponse(
        filename=document.filename,
        raw_text=document.raw_text,
        download_name=download_filename(document.filename),
        summary=result.summary,
        tree=result.sections_tree,
        content=content,
        sections=views,
    )


async def process_upload(data: bytes, filename: str, content_type: str | None) -> OutlineSuccessResponse:
    """Validate and analyse an uploaded file, then outline the analysis.

    Raises
    ------
    UploadError
        If the file is rejected before analysis.
    AnalysisError
        If the analysis service fails.
    InvalidAnalysisResponseError
        If the analysis service returns an unusable body.

    """
    try:
        document = await analyze_document(data, filename, content_type)
    except (AnalysisError, InvalidAnalysisResponseError) as exc:
        logger.error("Upload processing failed", extra={"upload_name": filename, "error": str(exc)})
        raise
    return process_outline(document)
