"""
Top‑level package for the Album Store API.

All functionality lives in submodules under ``app``; import the
application factory from ``album_store_api.app.main``.
"""

__all__ = []
