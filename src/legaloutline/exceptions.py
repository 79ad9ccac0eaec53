"""Custom exceptions for legaloutline."""


class LegalOutlineError(Exception):
    """Base exception for legaloutline operations."""


class UploadError(LegalOutlineError):
    """Uploaded file was rejected before analysis.

    The message is shown to the user verbatim.
    """


class UnsupportedFileTypeError(UploadError):
    """Uploaded file is not a PDF."""


class FileTooLargeError(UploadError):
    """Uploaded file exceeds the size limit."""


class AnalysisError(LegalOutlineError):
    """Error while talking to the analysis service."""


class AnalysisServiceError(AnalysisError):
    """Analysis service answered with a non-retryable error status."""

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class AnalysisUnavailableError(AnalysisError):
    """Analysis service could not be reached after all retries."""


class InvalidAnalysisResponseError(LegalOutlineError):
    """Analysis service response is missing the analysis text or filename."""


class NoDocumentError(LegalOutlineError):
    """An action needs an analysis document but none is loaded."""
