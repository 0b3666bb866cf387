"""
Pydantic schemas for album payloads.

Albums themselves are opaque JSON values and have no schema.  Only the
envelope of a write request is modelled: the write password and the
album document to store.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class AlbumSave(BaseModel):
    """Body of ``POST /api/album/{album_id}``."""

    # A missing password is treated like a wrong one (403), not as a
    # validation error.
    password: Optional[str] = Field(None, description="Shared write secret")
    album: Any = Field(..., description="Album document, stored verbatim")
