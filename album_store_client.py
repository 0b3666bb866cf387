"""Album store API client.

A thin wrapper around the album store HTTP API using the ``requests``
library.  It exposes one method per operation:

* :meth:`AlbumStoreClient.list_albums` – return every stored album.
* :meth:`AlbumStoreClient.get_album` – fetch one album by id.
* :meth:`AlbumStoreClient.save_album` – create or replace an album.

Methods never raise for HTTP or network failures.  Each returns a
tuple whose last element is ``None`` on success or an error dictionary
with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class AlbumStoreClient:
    """Client for the album store API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against the service.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or the text body for non-JSON responses.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("Album store request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                err_json = response.json()
                message = err_json.get("detail") or str(err_json)
            except ValueError:
                message = response.text
            logger.error("Album store request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if not response.content:
            return None, None
        content_type = response.headers.get("content-type", "")
        if content_type.startswith("application/json"):
            return response.json(), None
        return response.text, None

    def list_albums(self) -> Tuple[List[Any], Optional[Error]]:
        data, error = self._request("GET", "/api/albums")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_album(self, album_id: str) -> Tuple[Optional[Any], Optional[Error]]:
        """Retrieve a single album.

        A missing album is reported as an error with ``status_code`` 404.
        """
        return self._request("GET", f"/api/album/{album_id}")

    def save_album(self, album_id: str, password: str, album: Any) -> Tuple[bool, Optional[Error]]:
        """Create or replace an album.

        Returns:
            A tuple ``(saved, error)``.
        """
        _, error = self._request(
            "POST",
            f"/api/album/{album_id}",
            json_body={"password": password, "album": album},
        )
        if error:
            return False, error
        return True, None
