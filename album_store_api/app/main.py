"""
Main entrypoint for the Album Store API.

``create_app`` assembles the FastAPI application: it configures
logging, prepares the album directory, installs the album store and
the credential checker on ``app.state`` and includes the API router
under ``/api``.  When the configured public directory exists its
static files are served from ``/``; the mount is added last so API
routes always win.

No application is built at import time.  Run the service with
``run.py`` or through uvicorn's factory mode::

    uvicorn album_store_api.app.main:create_app --factory
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .api.v1.router import router as api_router
from .core.config import Settings
from .core.logging_config import setup_logging
from .core.security import build_credential_checker
from .core.storage import AlbumStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  When omitted, settings are read from the
        environment.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    settings = settings or Settings()
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    store = AlbumStore(settings.albums_path)
    store.ensure_directory()

    app.state.settings = settings
    app.state.album_store = store
    app.state.credential_checker = build_credential_checker(settings)

    if settings.uses_default_secret:
        logger.warning("Using the built-in default write secret; set ALBUM_WRITE_SECRET for deployments")

    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "time": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")}

    public_path = settings.public_path
    if public_path.is_dir():
        app.mount("/", StaticFiles(directory=str(public_path), html=True), name="public")
    else:
        logger.info("Public directory %s not found; static files disabled", public_path)

    logger.info("Serving albums from %s", store.directory)
    return app
