"""
FastAPI application factory and API package.

Run with:
    uvicorn qfd_engine.api:app --reload --port 8000

Or via main.py:
    python -m qfd_engine --serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qfd_engine.config import get_settings
from qfd_engine.api.routes import qfd_router, health_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Application factory — create and configure the FastAPI instance."""
    settings = get_settings()

    application = FastAPI(
        title="QFD Analysis API",
        description="House of Quality scoring, classification and correlation analysis",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
    )

    # CORS — the web client calls the analysis routes from the browser
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router, tags=["Health"])
    application.include_router(qfd_router, prefix="/api/qfd", tags=["QFD"])

    logger.info(f"Created {settings.app_name} API")
    return application


# Module-level instance for `uvicorn qfd_engine.api:app`
app = create_app()
