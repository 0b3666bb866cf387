"""
Service layer for albums.

``AlbumService`` implements the three album operations on top of an
``AlbumStore``: listing every stored album, fetching one album by id
and creating or replacing an album.  Albums are opaque JSON values;
the service never looks inside them.

Failures are reported with the exceptions below, all derived from
``AlbumServiceError``.  The API layer maps them to HTTP status codes.
Low level ``OSError`` and JSON decoding errors never escape this
module; they are wrapped in ``AlbumStorageError``.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional

from fastapi import Depends

from album_store_api.app.core.security import CredentialChecker, get_credential_checker
from album_store_api.app.core.storage import AlbumStore, get_album_store

logger = logging.getLogger(__name__)

# Ids become file names, so only a conservative character set is
# accepted.  This rules out path separators and ``..``.
ALBUM_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,128}")


class AlbumServiceError(Exception):
    """Base class for album service failures."""


class AlbumNotFoundError(AlbumServiceError):
    """No album is stored under the requested id."""


class ForbiddenError(AlbumServiceError):
    """The write password was rejected."""


class InvalidAlbumIdError(AlbumServiceError, ValueError):
    """The id cannot be used as an album file name."""


class AlbumStorageError(AlbumServiceError):
    """Reading or writing the storage directory failed."""


def validate_album_id(album_id: str) -> str:
    if not ALBUM_ID_PATTERN.fullmatch(album_id):
        raise InvalidAlbumIdError(f"Invalid album id: {album_id!r}")
    return album_id


class AlbumService:
    """Album operations bound to one store and one credential checker."""

    def __init__(self, store: AlbumStore, checker: CredentialChecker) -> None:
        self.store = store
        self.checker = checker

    def list_albums(self) -> List[Any]:
        """Return every stored album.

        Either all albums are returned or ``AlbumStorageError`` is
        raised; a single unreadable file fails the whole listing.
        """
        try:
            return [self.store.read(album_id) for album_id in self.store.list_ids()]
        except (OSError, ValueError) as exc:
            logger.exception("Failed to list albums in %s", self.store.directory)
            raise AlbumStorageError("Failed to list albums") from exc

    def get_album(self, album_id: str) -> Any:
        validate_album_id(album_id)
        if not self.store.exists(album_id):
            raise AlbumNotFoundError(album_id)
        try:
            return self.store.read(album_id)
        except FileNotFoundError as exc:
            raise AlbumNotFoundError(album_id) from exc
        except json.JSONDecodeError as exc:
            logger.error("Album %s holds malformed JSON: %s", album_id, exc)
            raise AlbumStorageError(f"Album {album_id} is corrupted") from exc
        except (OSError, ValueError) as exc:
            logger.exception("Failed to read album %s", album_id)
            raise AlbumStorageError(f"Failed to read album {album_id}") from exc

    def upsert_album(self, album_id: str, password: Optional[str], album: Any) -> None:
        """Create or fully replace the album stored under ``album_id``.

        Nothing is written when the password is rejected.
        """
        validate_album_id(album_id)
        if not self.checker.verify(password):
            logger.warning("Rejected write to album %s: bad password", album_id)
            raise ForbiddenError(album_id)
        try:
            path = self.store.write(album_id, album)
        except (OSError, TypeError, ValueError) as exc:
            logger.exception("Failed to write album %s", album_id)
            raise AlbumStorageError(f"Failed to write album {album_id}") from exc
        logger.info("Saved album %s to %s", album_id, path)


def get_album_service(
    store: AlbumStore = Depends(get_album_store),
    checker: CredentialChecker = Depends(get_credential_checker),
) -> AlbumService:
    """Dependency assembling the service for the current application."""
    return AlbumService(store, checker)
