"""Single-document session: current analysis, its outline and UI toggles."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from legaloutline.exceptions import NoDocumentError
from legaloutline.formatter import build_sections
from legaloutline.presentation import PresentationState
from legaloutline.schemas import AnalysisDocument, Section
from legaloutline.utils.logging_config import get_logger

logger = get_logger(__name__)

DOWNLOAD_SUFFIX = "-analysis.txt"


@lru_cache(maxsize=32)
def _cached_sections(raw_text: str, include_preamble: bool) -> tuple[Section, ...]:
    return tuple(build_sections(raw_text, include_preamble=include_preamble))


def outline_for(raw_text: str, *, include_preamble: bool = False) -> list[Section]:
    """Return formatted sections for the text, memoized on the text itself.

    Each call gets fresh copies, so callers cannot corrupt the cache.
    """
    return [section.model_copy(deep=True) for section in _cached_sections(raw_text, include_preamble)]


def download_filename(filename: str) -> str:
    """Name of the text file offered for download."""
    return f"{filename}{DOWNLOAD_SUFFIX}"


class AnalysisSession:
    """Holds at most one analysis document and its presentation state."""

    def __init__(self, *, include_preamble: bool = False) -> None:
        self.include_preamble = include_preamble
        self.document: AnalysisDocument | None = None
        self.state = PresentationState()

    @property
    def sections(self) -> list[Section]:
        return self.state.sections

    def load(self, document: AnalysisDocument) -> list[Section]:
        """Replace the current document and reset every toggle."""
        self.document = document
        sections = outline_for(document.raw_text, include_preamble=self.include_preamble)
        self.state.reset(sections)
        logger.info(
            "Loaded analysis",
            extra={"analysis_filename": document.filename, "section_count": len(sections)},
        )
        return sections

    def clear(self) -> None:
        """Drop the current document, as when the user starts a new one."""
        self.document = None
        self.state.reset([])

    def toggle(self, index: int) -> bool:
        return self.state.toggle(index)

    def download_filename(self) -> str:
        return download_filename(self._require_document().filename)

    def write_download(self, directory: Path) -> Path:
        """Write the raw analysis text to ``directory`` and return the file path."""
        document = self._require_document()
        path = directory / download_filename(document.filename)
        path.write_text(document.raw_text, encoding="utf-8")
        return path

    def _require_document(self) -> AnalysisDocument:
        if self.document is None:
            raise NoDocumentError("No analysis document loaded")
        return self.document
