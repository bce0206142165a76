"""
Request stages that run around the router: body decoding, static asset
lookup and the final error trap.
"""

from __future__ import annotations

import logging
import os

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp

from frontend_server.body import parse_request_body
from frontend_server.schemas import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
STATIC_METHODS = ("GET", "HEAD")


class StaticAssetMiddleware(BaseHTTPMiddleware):
    """
    Serve a file from the asset root when one matches the request path.

    Misses fall through to the router, so API routes and the SPA fallback
    only ever see paths that are not real assets.
    """

    def __init__(self, app: ASGIApp, directory: str | os.PathLike[str]) -> None:
        super().__init__(app)
        # The asset root is filled by an external build and may not exist yet.
        self.files = StaticFiles(directory=directory, html=True, check_dir=False)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method not in STATIC_METHODS:
            return await call_next(request)

        path = self.files.get_path(request.scope)
        try:
            response = await self.files.get_response(path, request.scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            return await call_next(request)

        # A build-provided 404.html must not shadow the SPA fallback.
        if response.status_code == 404:
            return await call_next(request)

        logger.debug("Static asset %s -> %s", request.url.path, response.status_code)
        return response


class BodyParserMiddleware(BaseHTTPMiddleware):
    """Decode JSON and form bodies before assets or routes see the request."""

    def __init__(self, app: ASGIApp, limit: int) -> None:
        super().__init__(app)
        self.limit = limit

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        await parse_request_body(request, self.limit)
        return await call_next(request)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turn any exception from a later stage into a uniform 500 response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "Error: unhandled exception while serving %s %s",
                request.method,
                request.url.path,
            )
            return internal_error_response()


def internal_error_response() -> JSONResponse:
    body = ErrorResponse(message=INTERNAL_ERROR_MESSAGE)
    return JSONResponse(status_code=500, content=body.model_dump())
