"""
FastAPI application entrypoint for the Yahoo fantasy relay.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.frontend import router as frontend_router
from app.api.routes import router as api_router
from app.core.config import get_settings
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Factory for the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    for name in settings.missing_credentials():
        logger.warning("%s is not configured; Yahoo requests will fail.", name)

    app = FastAPI(
        title="Yahoo Fantasy Relay",
        version="0.1.0",
        description="OAuth relay and JSON proxy for a Yahoo Fantasy league.",
    )
    app.add_middleware(
        CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"]
    )
    app.include_router(api_router)
    app.include_router(frontend_router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
