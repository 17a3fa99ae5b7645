"""
In-memory credential store.

Passwords are kept and compared as opaque strings. The comparison lives
in ``passwords_match`` alone, so a hashing scheme can replace it without
changing the store's interface.
"""

from __future__ import annotations

import hmac
import logging
import threading
from typing import Dict, Optional

from ..errors import AlreadyExists, NotFound, Unauthorized

logger = logging.getLogger(__name__)


def passwords_match(stored: str, supplied: str) -> bool:
    return hmac.compare_digest(stored.encode("utf-8"), supplied.encode("utf-8"))


class CredentialStore:
    """Thread-safe mapping of username to password."""

    def __init__(self, credentials: Optional[Dict[str, str]] = None):
        self._credentials: Dict[str, str] = dict(credentials or {})
        self._lock = threading.RLock()

    def exists(self, username: str) -> bool:
        with self._lock:
            return username in self._credentials

    def create(self, username: str, password: str) -> None:
        """Register a new user. Raises ``AlreadyExists`` if the name is taken."""
        with self._lock:
            if username in self._credentials:
                raise AlreadyExists("User already exists")
            self._credentials[username] = password
        logger.debug("Registered user %s", username)

    def verify_password(self, username: str, password: str) -> None:
        """Check a login attempt.

        Raises ``NotFound`` for an unknown user and ``Unauthorized`` when
        the password does not match; returns ``None`` on success.
        """
        with self._lock:
            stored = self._credentials.get(username)
        if stored is None:
            raise NotFound("User not found")
        if not passwords_match(stored, password):
            raise Unauthorized("Wrong password")

    def __len__(self) -> int:
        with self._lock:
            return len(self._credentials)
