"""
FastAPI application entry point for the frontend server.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from frontend_server.config import Settings, get_settings
from frontend_server.middleware import (
    BodyParserMiddleware,
    ErrorHandlerMiddleware,
    StaticAssetMiddleware,
)
from frontend_server.routes import build_router

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = get_settings()

    # No generated docs: /docs and /openapi.json would shadow the SPA fallback.
    app = FastAPI(
        title="Frontend Server",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(build_router(settings))

    # add_middleware wraps, so the last one added runs first:
    # CORS -> error trap -> body parser -> static assets -> router.
    app.add_middleware(StaticAssetMiddleware, directory=settings.static_dir)
    app.add_middleware(BodyParserMiddleware, limit=settings.body_limit)
    app.add_middleware(ErrorHandlerMiddleware)

    if settings.cors_allow_credentials and settings.allows_any_origin:
        logger.info(
            "CORS allows any origin; credentialed requests are disabled. "
            "Set CORS_ORIGINS to an explicit list to enable them."
        )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=settings.cors_credentials_enabled,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )
    return app


app = create_app()
