"""
Write authorisation for the album store.

Writes are gated by a single shared secret.  Handlers never compare
passwords themselves; they ask a ``CredentialChecker`` whether the
supplied password is acceptable.  Two checkers are provided:

* ``SharedSecretChecker`` compares against a plain secret taken from
  the configuration.
* ``HashedSecretChecker`` compares against a PBKDF2‑HMAC‑SHA256 hash
  (``salthex$hashhex``), so the secret itself does not have to be
  stored in the deployment environment.  Use ``hash_secret.py`` to
  produce the hash.

Both comparisons run in constant time.  The checker for the running
application is built once by ``build_credential_checker`` and exposed
to routes through the ``get_credential_checker`` dependency.
"""

import hashlib
import hmac
import os
from abc import ABC, abstractmethod
from typing import Optional

from fastapi import Request

from .config import Settings

PBKDF2_ITERATIONS = 100_000


class CredentialChecker(ABC):
    """Interface for password verification."""

    @abstractmethod
    def verify(self, password: Optional[str]) -> bool:
        """Return ``True`` when ``password`` authorises a write."""


class SharedSecretChecker(CredentialChecker):
    """Accept exactly one plain‑text secret."""

    def __init__(self, secret: str) -> None:
        self._secret = secret.encode("utf-8")

    def verify(self, password: Optional[str]) -> bool:
        if not isinstance(password, str):
            return False
        return hmac.compare_digest(password.encode("utf-8"), self._secret)


class HashedSecretChecker(CredentialChecker):
    """Accept the secret whose PBKDF2 hash was configured."""

    def __init__(self, hashed_secret: str) -> None:
        self._hashed = hashed_secret

    def verify(self, password: Optional[str]) -> bool:
        if not isinstance(password, str):
            return False
        return verify_secret(password, self._hashed)


def hash_secret(secret: str) -> str:
    """Hash a secret using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each call.  The result
    contains the salt and the derived key, both hex encoded and joined
    with ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", secret.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_secret(plain_secret: str, hashed_secret: str) -> bool:
    """Verify ``plain_secret`` against a ``salthex$hashhex`` string.

    Malformed hashes never verify.
    """
    try:
        salt_hex, hash_hex = hashed_secret.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_secret.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


def build_credential_checker(settings: Settings) -> CredentialChecker:
    """Pick the checker matching the configuration."""
    if settings.write_secret_hash:
        return HashedSecretChecker(settings.write_secret_hash)
    return SharedSecretChecker(settings.write_secret)


def get_credential_checker(request: Request) -> CredentialChecker:
    """Dependency returning the checker installed at application startup."""
    return request.app.state.credential_checker
