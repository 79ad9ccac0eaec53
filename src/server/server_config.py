"""Configuration for the HTTP server."""

from __future__ import annotations

import os

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8080

HOST = os.getenv("HOST", DEFAULT_HOST)
PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))
RELOAD = os.getenv("RELOAD", "false").lower() == "true"

# Characters of rendered content returned inline before cropping.
MAX_DISPLAY_SIZE = int(os.getenv("MAX_DISPLAY_SIZE", "300000"))

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
