"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and are
evaluated each time ``Settings`` is instantiated, so a process (or a
test) can build as many independent configurations as it needs.  The
application factory receives one instance at startup and stores it on
the application; request handlers never read the environment
themselves.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


# Default write secret shipped with the service.  Deployments must
# override it via ``ALBUM_WRITE_SECRET`` or ``ALBUM_WRITE_SECRET_HASH``.
DEFAULT_WRITE_SECRET = "admin123"

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Album Store API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3000")))

    # Directory holding one ``<id>.json`` file per album.  Relative
    # paths are resolved against the project root.
    albums_dir: str = field(default_factory=lambda: _env("ALBUMS_DIR", "albums"))

    # Directory of static assets mounted at ``/``.  Ignored when it
    # does not exist.
    public_dir: str = field(default_factory=lambda: _env("PUBLIC_DIR", "public"))

    # Shared secret required for writes.  When ``write_secret_hash`` is
    # set (``salthex$hashhex`` as printed by ``hash_secret.py``) it takes
    # precedence and the plain secret is ignored.
    write_secret: str = field(default_factory=lambda: _env("ALBUM_WRITE_SECRET", DEFAULT_WRITE_SECRET))
    write_secret_hash: str = field(default_factory=lambda: _env("ALBUM_WRITE_SECRET_HASH", ""))

    @property
    def albums_path(self) -> Path:
        return resolve_path(self.albums_dir)

    @property
    def public_path(self) -> Path:
        return resolve_path(self.public_dir)

    @property
    def uses_default_secret(self) -> bool:
        return not self.write_secret_hash and self.write_secret == DEFAULT_WRITE_SECRET


def resolve_path(value: str) -> Path:
    """Resolve ``value`` against the project root unless it is absolute."""
    path = Path(value)
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()
