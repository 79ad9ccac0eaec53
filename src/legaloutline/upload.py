"""Upload validation and the analysis service client."""

from __future__ import annotations

from typing import Any

import httpx

from legaloutline.config import (
    LEGALOUTLINE_ANALYSIS_URL,
    LEGALOUTLINE_MAX_UPLOAD_BYTES,
    LEGALOUTLINE_UPLOAD_PATH,
)
from legaloutline.exceptions import (
    AnalysisError,
    FileTooLargeError,
    InvalidAnalysisResponseError,
    UnsupportedFileTypeError,
)
from legaloutline.http_utils import post_with_retries
from legaloutline.schemas import AnalysisDocument
from legaloutline.utils.logging_config import get_logger

logger = get_logger(__name__)

PDF_CONTENT_TYPE = "application/pdf"

_UNSUPPORTED_TYPE_MESSAGE = "Please select a PDF file"


def _too_large_message(max_bytes: int) -> str:
    return f"File too large (max {max_bytes // (1024 * 1024)}MB)"


def validate_upload(
    filename: str,
    content_type: str | None,
    size: int,
    *,
    max_bytes: int | None = None,
) -> None:
    """Reject anything that is not a PDF within the size limit.

    ``max_bytes`` defaults to ``LEGALOUTLINE_MAX_UPLOAD_BYTES``.

    Raises:
        UnsupportedFileTypeError: If the content type is not ``application/pdf``.
        FileTooLargeError: If the file is larger than ``max_bytes``.
    """
    if content_type != PDF_CONTENT_TYPE:
        logger.warning(
            "Rejected upload with unsupported type",
            extra={"upload_name": filename, "content_type": content_type},
        )
        raise UnsupportedFileTypeError(_UNSUPPORTED_TYPE_MESSAGE)
    if max_bytes is None:
        max_bytes = LEGALOUTLINE_MAX_UPLOAD_BYTES
    if size > max_bytes:
        logger.warning(
            "Rejected oversized upload",
            extra={"upload_name": filename, "size": size, "max_bytes": max_bytes},
        )
        raise FileTooLargeError(_too_large_message(max_bytes))


async def analyze_document(
    data: bytes,
    filename: str,
    content_type: str | None = PDF_CONTENT_TYPE,
    *,
    client: httpx.AsyncClient | None = None,
) -> AnalysisDocument:
    """Validate a PDF, send it to the analysis service and return its analysis.

    Args:
        data: Raw file bytes.
        filename: Name of the uploaded file.
        content_type: MIME type reported by the uploader.
        client: Optional httpx.AsyncClient for connection pooling.

    Returns:
        The analysis text together with the filename the service reports.

    Raises:
        UploadError: If the file fails validation.
        AnalysisError: If the service fails or cannot be reached.
        InvalidAnalysisResponseError: If the response lacks analysis text.
    """
    validate_upload(filename, content_type, len(data))

    url = f"{LEGALOUTLINE_ANALYSIS_URL}{LEGALOUTLINE_UPLOAD_PATH}"
    try:
        body = await post_with_retries(
            url,
            files={"file": (filename, data, PDF_CONTENT_TYPE)},
            client=client,
        )
    except AnalysisError as exc:
        logger.error("Analysis request failed", extra={"upload_name": filename, "error": str(exc)})
        raise

    document = parse_analysis_response(body, fallback_filename=filename)
    logger.info(
        "Analysis received",
        extra={"upload_name": document.filename, "analysis_chars": len(document.raw_text)},
    )
    return document


def parse_analysis_response(body: Any, *, fallback_filename: str | None = None) -> AnalysisDocument:
    """Build an ``AnalysisDocument`` from the service's ``{analysis, filename}`` body."""
    if not isinstance(body, dict) or not isinstance(body.get("analysis"), str):
        raise InvalidAnalysisResponseError("Analysis response is missing the analysis text")
    filename = body.get("filename") or fallback_filename
    if not isinstance(filename, str):
        raise InvalidAnalysisResponseError("Analysis response is missing the filename")
    return AnalysisDocument(raw_text=body["analysis"], filename=filename)
