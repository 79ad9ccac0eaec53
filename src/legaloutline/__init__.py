"""legaloutline: turn AI legal-document analyses into risk-annotated outlines."""

from legaloutline.exceptions import (
    AnalysisError,
    AnalysisServiceError,
    AnalysisUnavailableError,
    FileTooLargeError,
    InvalidAnalysisResponseError,
    LegalOutlineError,
    NoDocumentError,
    UnsupportedFileTypeError,
    UploadError,
)
from legaloutline.formatter import build_sections, classify, detect_risk, format_line
from legaloutline.output_formatter import format_outline
from legaloutline.presentation import PresentationState, is_long_section, section_key
from legaloutline.schemas import (
    AnalysisDocument,
    Bullet,
    Category,
    ContentBlock,
    Emphasis,
    OutlineResult,
    Paragraph,
    RiskLevel,
    Section,
)
from legaloutline.segmenter import segment
from legaloutline.session import AnalysisSession, download_filename, outline_for
from legaloutline.upload import analyze_document, validate_upload

__all__ = [
    "AnalysisDocument",
    "AnalysisError",
    "AnalysisServiceError",
    "AnalysisSession",
    "AnalysisUnavailableError",
    "Bullet",
    "Category",
    "ContentBlock",
    "Emphasis",
    "FileTooLargeError",
    "InvalidAnalysisResponseError",
    "LegalOutlineError",
    "NoDocumentError",
    "OutlineResult",
    "Paragraph",
    "PresentationState",
    "RiskLevel",
    "Section",
    "UnsupportedFileTypeError",
    "UploadError",
    "analyze_document",
    "build_sections",
    "classify",
    "detect_risk",
    "download_filename",
    "format_line",
    "format_outline",
    "is_long_section",
    "outline_for",
    "section_key",
    "segment",
    "validate_upload",
]
