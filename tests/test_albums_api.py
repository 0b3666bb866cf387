"""
Album API tests.

Covers the HTTP contract of the three album routes: status codes,
response bodies and what ends up on disk.
"""

import json

import pytest
from fastapi.testclient import TestClient

from album_store_api.app.core.config import Settings
from album_store_api.app.core.security import hash_secret
from album_store_api.app.main import create_app

from .conftest import WRITE_SECRET


def save(client, album_id, album, password=WRITE_SECRET):
    return client.post(f"/api/album/{album_id}", json={"password": password, "album": album})


# ============================================================================
# Upsert
# ============================================================================

class TestSaveAlbum:

    def test_save_then_get_returns_same_document(self, client):
        response = save(client, "sunset", {"title": "Sunset"})

        assert response.status_code == 200
        assert response.text == "Saved"
        assert response.headers["content-type"].startswith("text/plain")
        assert client.get("/api/album/sunset").json() == {"title": "Sunset"}

    def test_nested_document_round_trips(self, client):
        album = {
            "title": "Été à Paris",
            "photos": [{"src": "a.jpg", "tags": ["x", "y"]}, {"src": "b.jpg", "rating": 4.5}],
            "published": False,
            "cover": None,
        }
        save(client, "paris_2024", album)

        assert client.get("/api/album/paris_2024").json() == album

    def test_non_object_album_is_stored_verbatim(self, client):
        save(client, "plain", ["one", 2, None])

        assert client.get("/api/album/plain").json() == ["one", 2, None]

    def test_wrong_password_is_forbidden_and_keeps_content(self, client):
        save(client, "sunset", {"title": "Sunset"})

        response = save(client, "sunset", {"title": "X"}, password="wrong")

        assert response.status_code == 403
        assert client.get("/api/album/sunset").json() == {"title": "Sunset"}

    def test_wrong_password_does_not_create_file(self, client, albums_dir):
        response = save(client, "ghost", {"title": "Ghost"}, password="wrong")

        assert response.status_code == 403
        assert not (albums_dir / "ghost.json").exists()

    def test_missing_password_is_forbidden(self, client, albums_dir):
        response = client.post("/api/album/ghost", json={"album": {"title": "Ghost"}})

        assert response.status_code == 403
        assert not (albums_dir / "ghost.json").exists()

    def test_password_comparison_is_exact(self, client):
        assert save(client, "a", {}, password=WRITE_SECRET + " ").status_code == 403
        assert save(client, "a", {}, password=WRITE_SECRET.upper()).status_code == 403

    def test_missing_album_is_rejected(self, client):
        response = client.post("/api/album/sunset", json={"password": WRITE_SECRET})

        assert response.status_code == 422

    def test_last_write_wins(self, client):
        save(client, "sunset", {"title": "First", "extra": True})
        save(client, "sunset", {"title": "Second"})

        assert client.get("/api/album/sunset").json() == {"title": "Second"}

    def test_save_is_idempotent(self, client, albums_dir):
        album = {"title": "Sunset", "photos": [1, 2, 3]}
        save(client, "sunset", album)
        first = (albums_dir / "sunset.json").read_bytes()
        save(client, "sunset", album)

        assert (albums_dir / "sunset.json").read_bytes() == first
        assert len(list(albums_dir.iterdir())) == 1

    def test_file_is_pretty_printed(self, client, albums_dir):
        album = {"title": "Sunset", "photos": ["a.jpg"]}
        save(client, "sunset", album)

        assert (albums_dir / "sunset.json").read_text(encoding="utf-8") == json.dumps(album, indent=2)

    @pytest.mark.parametrize("album_id", ["bad.id", "a%20b", "sunset%0A", "x" * 129])
    def test_invalid_id_is_rejected(self, client, albums_dir, album_id):
        response = save(client, album_id, {"title": "X"})

        assert response.status_code == 400
        assert list(albums_dir.iterdir()) == []


# ============================================================================
# Get
# ============================================================================

class TestGetAlbum:

    def test_unknown_id_is_not_found(self, client):
        response = client.get("/api/album/nonexistent")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not found"}

    def test_invalid_id_is_bad_request(self, client):
        assert client.get("/api/album/bad.id").status_code == 400

    def test_malformed_file_is_server_error(self, client, albums_dir):
        (albums_dir / "broken.json").write_text("{not json", encoding="utf-8")

        response = client.get("/api/album/broken")

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}

    def test_service_keeps_running_after_malformed_file(self, client, albums_dir):
        (albums_dir / "broken.json").write_text("{not json", encoding="utf-8")
        client.get("/api/album/broken")

        assert save(client, "fine", {"ok": True}).status_code == 200
        assert client.get("/api/album/fine").json() == {"ok": True}


# ============================================================================
# List
# ============================================================================

class TestListAlbums:

    def test_empty_directory_returns_empty_list(self, client):
        response = client.get("/api/albums")

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_every_saved_album_once(self, client):
        for title in ["c", "a", "b"]:
            save(client, title, {"title": title})
        save(client, "a", {"title": "a"})

        albums = client.get("/api/albums").json()

        assert sorted(a["title"] for a in albums) == ["a", "b", "c"]

    def test_rejected_writes_are_not_listed(self, client):
        save(client, "kept", {"title": "kept"})
        save(client, "dropped", {"title": "dropped"}, password="wrong")

        assert client.get("/api/albums").json() == [{"title": "kept"}]

    def test_ignores_non_json_files(self, client, albums_dir):
        save(client, "sunset", {"title": "Sunset"})
        (albums_dir / "notes.txt").write_text("not an album", encoding="utf-8")

        assert client.get("/api/albums").json() == [{"title": "Sunset"}]

    def test_malformed_file_fails_whole_listing(self, client, albums_dir):
        save(client, "sunset", {"title": "Sunset"})
        (albums_dir / "broken.json").write_text("[1, 2", encoding="utf-8")

        response = client.get("/api/albums")

        assert response.status_code == 500
        assert response.json() == {"detail": "Server error"}

    def test_missing_directory_is_server_error(self, client, albums_dir):
        albums_dir.rmdir()

        assert client.get("/api/albums").status_code == 500


# ============================================================================
# Application wiring
# ============================================================================

class TestApplication:

    def test_creates_album_directory(self, settings):
        assert not settings.albums_path.exists()

        create_app(settings)

        assert settings.albums_path.is_dir()

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_hashed_secret_replaces_plain_secret(self, tmp_path):
        settings = Settings(
            albums_dir=str(tmp_path / "albums"),
            public_dir=str(tmp_path / "public"),
            write_secret=WRITE_SECRET,
            write_secret_hash=hash_secret("s3cret"),
        )
        with TestClient(create_app(settings)) as client:
            assert save(client, "sunset", {"t": 1}, password=WRITE_SECRET).status_code == 403
            assert save(client, "sunset", {"t": 1}, password="s3cret").status_code == 200

    def test_apps_do_not_share_storage(self, tmp_path):
        first = Settings(albums_dir=str(tmp_path / "one"), public_dir=str(tmp_path / "public"), write_secret_hash="")
        second = Settings(albums_dir=str(tmp_path / "two"), public_dir=str(tmp_path / "public"), write_secret_hash="")
        with TestClient(create_app(first)) as one, TestClient(create_app(second)) as two:
            save(one, "sunset", {"title": "Sunset"}, password=first.write_secret)

            assert two.get("/api/album/sunset").status_code == 404

    def test_serves_static_files(self, settings):
        settings.public_path.mkdir(parents=True)
        (settings.public_path / "index.html").write_text("<h1>Albums</h1>", encoding="utf-8")

        with TestClient(create_app(settings)) as client:
            page = client.get("/")
            albums = client.get("/api/albums")

        assert page.status_code == 200
        assert "<h1>Albums</h1>" in page.text
        assert albums.json() == []
