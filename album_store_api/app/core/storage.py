"""
Filesystem storage for album documents.

Each album lives in its own file, ``<id>.json``, inside a single
directory.  ``AlbumStore`` performs the raw reads and writes; it does
not validate ids or interpret payloads, and it lets ``OSError`` and
``json.JSONDecodeError`` propagate so the service layer can decide how
to report them.  There is no locking: concurrent writes to the same id
are last‑write‑wins.

``ensure_directory`` is called once at application startup, and
``get_album_store`` is the dependency routes use to reach the store
configured for the running application.
"""

import json
import os
from pathlib import Path
from typing import Any, List

from fastapi import Request

ALBUM_SUFFIX = ".json"


class AlbumStore:
    """One‑file‑per‑album JSON storage rooted at ``directory``."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def ensure_directory(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, album_id: str) -> Path:
        return self.directory / f"{album_id}{ALBUM_SUFFIX}"

    def exists(self, album_id: str) -> bool:
        return self.path_for(album_id).is_file()

    def list_ids(self) -> List[str]:
        """Return the ids of all stored albums in directory listing order."""
        return [
            name[: -len(ALBUM_SUFFIX)]
            for name in os.listdir(self.directory)
            if name.endswith(ALBUM_SUFFIX)
        ]

    def read(self, album_id: str) -> Any:
        with open(self.path_for(album_id), "r", encoding="utf-8") as f:
            return json.load(f)

    def write(self, album_id: str, album: Any) -> Path:
        """Replace the stored document for ``album_id`` with ``album``.

        The document is written as 2‑space indented JSON with non‑ASCII
        characters kept as is.  Serialisation happens before the file is
        opened, so an unserialisable album leaves the old content intact.
        """
        text = json.dumps(album, indent=2, ensure_ascii=False)
        path = self.path_for(album_id)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path


def get_album_store(request: Request) -> AlbumStore:
    """Dependency returning the store installed at application startup."""
    return request.app.state.album_store
