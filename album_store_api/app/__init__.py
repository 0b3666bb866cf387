"""
Application package for the album store.

``core`` holds configuration, logging, write authorisation and the
filesystem store, ``services`` the album operations, ``schemas`` the
request models and ``api`` the HTTP routes.  ``main.create_app`` ties
them together.
"""

from .main import create_app  # noqa: F401
