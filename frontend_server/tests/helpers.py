from __future__ import annotations

import os
import tempfile
from pathlib import Path
from unittest import mock

from frontend_server.config import Settings

INDEX_HTML = b"<!doctype html><html><body><div id=\"root\"></div></body></html>"

ENV_KEYS = (
    "FRONTEND_HOST",
    "FRONTEND_PORT",
    "BACKEND_URL",
    "NODE_ENV",
    "STATIC_DIR",
    "INDEX_DOCUMENT",
    "CORS_ORIGINS",
    "CORS_ALLOW_CREDENTIALS",
    "BODY_LIMIT",
    "LOG_LEVEL",
)


def clean_environ(**values: str):
    """Patch os.environ with the server variables removed, then ``values`` set."""
    environ = {k: v for k, v in os.environ.items() if k.upper() not in ENV_KEYS}
    environ.update(values)
    return mock.patch.dict(os.environ, environ, clear=True)


def make_settings(static_dir: Path, **overrides) -> Settings:
    with clean_environ():
        return Settings(_env_file=None, static_dir=static_dir, **overrides)


class AssetRoot:
    """Temporary asset directory laid out like a built SPA."""

    def __init__(self, with_index: bool = True) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name)
        if with_index:
            self.write("index.html", INDEX_HTML)

    def write(self, relative: str, content: bytes) -> Path:
        target = self.path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        return target

    def cleanup(self) -> None:
        self._tmp.cleanup()
