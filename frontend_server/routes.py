"""
HTTP routes for the frontend server.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import FileResponse

from frontend_server.config import Settings
from frontend_server.errors import EntryDocumentMissing
from frontend_server.schemas import ConfigResponse, HealthResponse

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "Frontend server is running"
# HEAD mirrors GET without a body.
ROUTE_METHODS = ["GET", "HEAD"]


def build_router(settings: Settings) -> APIRouter:
    """
    Build the router around an immutable settings snapshot.

    Route order matters: the catch-all goes last so it only sees paths the
    API routes did not claim.
    """
    router = APIRouter()
    backend_url = settings.backend_url
    index_path = settings.index_path

    @router.api_route("/api/config", methods=ROUTE_METHODS, response_model=ConfigResponse)
    def get_config():
        return ConfigResponse(backend_url=backend_url)

    @router.api_route("/health", methods=ROUTE_METHODS, response_model=HealthResponse)
    def health():
        return HealthResponse(message=HEALTH_MESSAGE, backend_url=backend_url)

    @router.api_route("/{full_path:path}", methods=ROUTE_METHODS, include_in_schema=False)
    def spa_fallback(full_path: str):
        if not index_path.is_file():
            raise EntryDocumentMissing(index_path)
        logger.debug("SPA fallback for /%s", full_path)
        return FileResponse(index_path, media_type="text/html")

    return router
