"""
Album endpoints.

``GET /albums`` lists every stored album, ``GET /album/{album_id}``
returns one album and ``POST /album/{album_id}`` creates or replaces
an album when the request carries the shared write secret.  Reads are
public.

Handlers are plain functions; FastAPI runs them in its thread pool so
the blocking filesystem calls do not stall the event loop.
"""

from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from album_store_api.app.schemas.album import AlbumSave
from album_store_api.app.services.album_service import (
    AlbumNotFoundError,
    AlbumService,
    AlbumStorageError,
    ForbiddenError,
    InvalidAlbumIdError,
    get_album_service,
)

router = APIRouter()


def _invalid_id() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid album id")


def _server_error() -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")


@router.get("/albums", response_model=List[Any])
def list_albums(service: AlbumService = Depends(get_album_service)) -> List[Any]:
    """Return all stored albums in directory listing order."""
    try:
        return service.list_albums()
    except AlbumStorageError:
        raise _server_error()


@router.get("/album/{album_id}")
def get_album(album_id: str, service: AlbumService = Depends(get_album_service)) -> Any:
    """Return a single album.

    Responds with 404 when nothing is stored under ``album_id`` and
    with 500 when the stored file cannot be read or parsed.
    """
    try:
        return service.get_album(album_id)
    except InvalidAlbumIdError:
        raise _invalid_id()
    except AlbumNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    except AlbumStorageError:
        raise _server_error()


@router.post("/album/{album_id}", response_class=PlainTextResponse)
def save_album(
    album_id: str,
    body: AlbumSave,
    service: AlbumService = Depends(get_album_service),
) -> str:
    """Create or replace an album (requires the write secret)."""
    try:
        service.upsert_album(album_id, body.password, body.album)
    except InvalidAlbumIdError:
        raise _invalid_id()
    except ForbiddenError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    except AlbumStorageError:
        raise _server_error()
    return "Saved"
