"""uvicorn entrypoint for serving the application."""

from __future__ import annotations

import logging
import socket

import uvicorn

from .app import create_app
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


class ListeningServer(uvicorn.Server):
    """uvicorn server that announces itself once its socket is bound."""

    def __init__(self, config: uvicorn.Config, app_settings: Settings) -> None:
        super().__init__(config)
        self.app_settings = app_settings

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(
                "App running on port %s, version: %s",
                self.bound_port(),
                self.app_settings.version,
            )

    def bound_port(self) -> int:
        """Port held by the listening socket, resolving an ephemeral ``0``."""
        sockets = [sock for server in self.servers for sock in server.sockets]
        if not sockets:
            return self.config.port
        return sockets[0].getsockname()[1]


def build_server(settings: Settings) -> ListeningServer:
    """Create a server for ``settings``, listening on all interfaces."""
    config = uvicorn.Config(
        create_app(settings),
        host="0.0.0.0",
        port=settings.port,
        reload=False,
    )
    return ListeningServer(config, settings)


def run_server() -> None:
    """Serve the application on the configured port until interrupted."""
    build_server(get_settings()).run()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    run_server()


__all__ = ["ListeningServer", "build_server", "main", "run_server"]
