from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    username: str
    role: str = "admin"


class AuthService:
    """Use case: authenticate the single console admin.

    The credential comes from settings; only its hash is kept in memory.
    """

    def __init__(self, *, username: str, password: str):
        self._username = require_non_empty(username, "Admin username")
        self._password_hash = generate_password_hash(require_non_empty(password, "Admin password"))

    def authenticate(self, username: str, password: str) -> SessionUser:
        if (username or "").strip() != self._username or not check_password_hash(self._password_hash, password or ""):
            logger.warning("Failed login for %r", username)
            raise AuthenticationError("Invalid credentials. Please check your ID and password.")

        logger.info("Admin %s logged in", self._username)
        return SessionUser(username=self._username)
