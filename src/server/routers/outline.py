"""Outline endpoints for the API."""

from fastapi import APIRouter, File, UploadFile, status
from fastapi.responses import JSONResponse, PlainTextResponse

from legaloutline.exceptions import (
    AnalysisError,
    AnalysisServiceError,
    FileTooLargeError,
    InvalidAnalysisResponseError,
    UploadError,
)
from legaloutline.schemas import AnalysisDocument
from legaloutline.session import download_filename
from legaloutline.upload import validate_upload
from server.models import OutlineErrorResponse, OutlineRequest
from server.outline_processor import process_outline, process_upload

router = APIRouter()

COMMON_OUTLINE_RESPONSES: dict[int | str, dict] = {
    status.HTTP_400_BAD_REQUEST: {"model": OutlineErrorResponse, "description": "Rejected upload"},
    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: {"model": OutlineErrorResponse, "description": "File too large"},
    status.HTTP_502_BAD_GATEWAY: {"model": OutlineErrorResponse, "description": "Analysis service failure"},
}


@router.post("/api/outline")
async def api_outline(outline_request: OutlineRequest) -> JSONResponse:
    """Outline analysis text that was produced elsewhere.

    **Parameters**

    - **outline_request** (`OutlineRequest`): analysis text and document filename

    **Returns**

    - **JSONResponse**: sections, blocks, presentation flags and a rendered outline
    """
    document = AnalysisDocument(raw_text=outline_request.raw_text, filename=outline_request.filename)
    response = process_outline(document)
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))


@router.post("/api/upload-document", responses=COMMON_OUTLINE_RESPONSES)
async def api_upload_document(file: UploadFile = File(...)) -> JSONResponse:  # noqa: B008
    """Upload a PDF, analyse it and return its outline.

    **Parameters**

    - **file** (`UploadFile`): the PDF to analyse (max 10MB)

    **Returns**

    - **JSONResponse**: outline on success, ``{"detail": ...}`` otherwise

    """
    filename = file.filename or "document.pdf"
    try:
        # Reject by declared type and size before reading the body into memory.
        validate_upload(filename, file.content_type, file.size or 0)
        data = await file.read()
        response = await process_upload(data, filename, file.content_type)
    except FileTooLargeError as exc:
        return _error(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, str(exc))
    except UploadError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except AnalysisServiceError as exc:
        return _error(status.HTTP_502_BAD_GATEWAY, exc.detail)
    except (AnalysisError, InvalidAnalysisResponseError):
        return _error(status.HTTP_502_BAD_GATEWAY, "Upload failed")
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))


@router.post("/api/download", response_class=PlainTextResponse)
async def api_download(outline_request: OutlineRequest) -> PlainTextResponse:
    """Return the analysis text as a ``{filename}-analysis.txt`` attachment."""
    name = download_filename(outline_request.filename)
    return PlainTextResponse(
        content=outline_request.raw_text,
        headers={"Content-Disposition": f'attachment; filename="{name}"'},
    )


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=OutlineErrorResponse(detail=detail).model_dump())
