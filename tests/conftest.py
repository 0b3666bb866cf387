"""
Shared fixtures for the album store tests.

Every test gets its own album directory under ``tmp_path`` and a
freshly built application, so tests never share stored albums.
"""

import pytest
from fastapi.testclient import TestClient

from album_store_api.app.core.config import Settings
from album_store_api.app.core.security import SharedSecretChecker
from album_store_api.app.core.storage import AlbumStore
from album_store_api.app.main import create_app
from album_store_api.app.services.album_service import AlbumService

WRITE_SECRET = "admin123"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at temporary directories."""
    return Settings(
        albums_dir=str(tmp_path / "albums"),
        public_dir=str(tmp_path / "public"),
        write_secret=WRITE_SECRET,
        write_secret_hash="",
    )


@pytest.fixture
def albums_dir(settings):
    return settings.albums_path


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(tmp_path):
    album_store = AlbumStore(tmp_path / "store")
    album_store.ensure_directory()
    return album_store


@pytest.fixture
def service(store):
    return AlbumService(store, SharedSecretChecker(WRITE_SECRET))
