"""Entry point for the album store service.

Builds the FastAPI application from environment settings and serves it
with Uvicorn.  Configuration (``ALBUMS_DIR``, ``PORT``,
``ALBUM_WRITE_SECRET`` and friends) can be exported in the shell or
set by the process manager; see ``album_store_api/app/core/config.py``
for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from album_store_api.app.core.config import Settings
from album_store_api.app.main import create_app

logger = logging.getLogger("album_store")


class AlbumStoreServer(Server):
    """Uvicorn server that announces itself once its sockets are bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # Uvicorn exits without setting ``started`` when binding fails.
        if self.started:
            logger.info("Server running at http://%s:%s", self.config.host, self.config.port)


def build_server(settings: Settings) -> AlbumStoreServer:
    """Create the application and wrap it in a configured server.

    ``log_config=None`` leaves Uvicorn's loggers unconfigured so their
    records propagate to the root logger set up by ``create_app``.
    """
    app = create_app(settings)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    return AlbumStoreServer(config)


async def main() -> None:
    """Serve the application until interrupted."""
    server = build_server(Settings())
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
