"""
Process entry point: runs the app under uvicorn.
"""

from __future__ import annotations

import logging
import socket
from typing import Optional

import uvicorn

from frontend_server.app import create_app
from frontend_server.config import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def log_startup_banner(settings: Settings) -> None:
    logger.info("Frontend server running on http://localhost:%d", settings.frontend_port)
    logger.info("Backend API: %s", settings.backend_url)
    logger.info("Environment: %s", settings.node_env)


class FrontendServer(uvicorn.Server):
    """uvicorn server that reports the resolved configuration once bound."""

    def __init__(self, config: uvicorn.Config, settings: Settings) -> None:
        super().__init__(config)
        self.settings = settings

    async def startup(self, sockets: Optional[list[socket.socket]] = None) -> None:
        await super().startup(sockets=sockets)
        # A failed lifespan leaves ``started`` unset; a failed bind exits.
        if self.started:
            log_startup_banner(self.settings)


def build_server(settings: Settings) -> FrontendServer:
    config = uvicorn.Config(
        create_app(settings),
        host=settings.frontend_host,
        port=settings.frontend_port,
        log_level=settings.log_level.lower(),
    )
    return FrontendServer(config, settings)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    build_server(settings).run()


if __name__ == "__main__":
    main()
