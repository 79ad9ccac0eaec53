"""Local configuration for legaloutline."""

from __future__ import annotations

import os


DEFAULT_ANALYSIS_URL = "http://localhost:8000"
DEFAULT_UPLOAD_PATH = "/api/upload-document"
DEFAULT_FETCH_TIMEOUT_S = 60.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "legaloutline/0.1"
DEFAULT_LONG_SECTION_CHARS = 500
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_LEVEL = "INFO"

# Analysis service that turns an uploaded PDF into analysis text.
LEGALOUTLINE_ANALYSIS_URL = os.getenv("LEGALOUTLINE_ANALYSIS_URL", DEFAULT_ANALYSIS_URL).rstrip("/")
LEGALOUTLINE_UPLOAD_PATH = os.getenv("LEGALOUTLINE_UPLOAD_PATH", DEFAULT_UPLOAD_PATH)
LEGALOUTLINE_FETCH_TIMEOUT_S = float(os.getenv("LEGALOUTLINE_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
LEGALOUTLINE_FETCH_MAX_RETRIES = int(os.getenv("LEGALOUTLINE_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
LEGALOUTLINE_FETCH_BACKOFF_S = float(os.getenv("LEGALOUTLINE_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
LEGALOUTLINE_USER_AGENT = os.getenv("LEGALOUTLINE_USER_AGENT", DEFAULT_USER_AGENT)

# Raw characters above which a section renders collapsible.
LEGALOUTLINE_LONG_SECTION_CHARS = int(
    os.getenv("LEGALOUTLINE_LONG_SECTION_CHARS", str(DEFAULT_LONG_SECTION_CHARS))
)
LEGALOUTLINE_MAX_UPLOAD_BYTES = int(os.getenv("LEGALOUTLINE_MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES)))
LEGALOUTLINE_LOG_LEVEL = os.getenv("LEGALOUTLINE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
