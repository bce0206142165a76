"""
Request body decoding shared by every request, routed or static.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from frontend_server.errors import RequestBodyError

JSON_MEDIA_TYPE = "application/json"
FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
PARSED_MEDIA_TYPES = (JSON_MEDIA_TYPE, FORM_MEDIA_TYPE)


def _media_type(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower()


def _check_declared_length(request: Request, limit: int) -> None:
    declared = request.headers.get("content-length")
    if declared is None:
        return
    try:
        length = int(declared)
    except ValueError as exc:
        raise RequestBodyError(f"Invalid Content-Length: {declared!r}") from exc
    if length > limit:
        raise RequestBodyError(f"Request body of {length} bytes exceeds {limit}")


async def parse_request_body(request: Request, limit: int) -> Any:
    """
    Decode a JSON or URL-encoded body and keep it on ``request.state.body``.

    Other media types and empty bodies yield ``None``. Bodies over ``limit``
    bytes are rejected before decoding.
    """
    media_type = _media_type(request)
    parsed: Any = None

    if media_type in PARSED_MEDIA_TYPES:
        _check_declared_length(request, limit)
        # Read through body() so later stages can read the same bytes again.
        raw = await request.body()
        if len(raw) > limit:
            raise RequestBodyError(f"Request body of {len(raw)} bytes exceeds {limit}")

        if media_type == JSON_MEDIA_TYPE:
            if raw.strip():
                try:
                    parsed = json.loads(raw)
                except ValueError as exc:
                    raise RequestBodyError(f"Malformed JSON body: {exc}") from exc
        else:
            form = await request.form()
            parsed = dict(form)

    request.state.body = parsed
    return parsed
