"""FastAPI application serving analysis outlines."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from legaloutline.utils.logging_config import configure_logging
from server.routers.outline import router as outline_router
from server.server_config import CORS_ORIGINS

configure_logging()

app = FastAPI(title="legaloutline", description="Risk-annotated outlines for legal document analyses")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(outline_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "healthy"}
