"""
Top‑level API router.

Aggregates the domain routers under a single router that the
application mounts at ``/api``.  The album router defines both the
plural ``/albums`` collection path and the singular ``/album/{id}``
item paths itself, so it is included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import albums

router = APIRouter()

router.include_router(albums.router, tags=["albums"])
