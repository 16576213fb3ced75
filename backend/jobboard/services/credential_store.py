"""
In-memory credential store.

Holds one bcrypt verifier per username for the lifetime of the process.
Records are only ever added: there is no update, delete or lockout state.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any

from ..config import BCRYPT_ROUNDS
from ..utils.error_handlers import (
    AuthenticationError,
    ConflictError,
    InternalError,
    get_error_message,
)
from ..utils.security import hash_password, verify_password
from ..utils.validation import require_credentials

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserRecord:
    username: str
    password_hash: str


class CredentialStore:
    """
    Username -> verifier mapping that arbitrates registration and login.

    The lock only covers dict access. bcrypt work runs outside it so a slow
    hash never holds up other requests; register re-checks for the username
    before inserting, which keeps check-then-insert atomic.
    """

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds
        self._lock = threading.Lock()
        self._users: dict[str, UserRecord] = {}
        # Compared against when the username is unknown, so a miss costs the
        # same bcrypt check as a wrong password.
        self._dummy_hash = hash_password("dummy-password", rounds=rounds)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, username: object) -> bool:
        with self._lock:
            return username in self._users

    def _get(self, username: str) -> UserRecord | None:
        with self._lock:
            return self._users.get(username)

    def register(self, username: Any, password: Any) -> dict[str, str]:
        username, password = require_credentials(username, password)

        if username in self:
            raise ConflictError(get_error_message("username_taken"))

        try:
            password_hash = hash_password(password, rounds=self.rounds)
        except Exception as e:
            logger.exception("Password hashing failed for %r: %s", username, e)
            raise InternalError(get_error_message("registration_failed")) from e

        record = UserRecord(username=username, password_hash=password_hash)
        with self._lock:
            # Another request may have registered the name while we were hashing.
            if username in self._users:
                raise ConflictError(get_error_message("username_taken"))
            self._users[username] = record
            total = len(self._users)

        logger.info("Registered user %r (%d total)", username, total)
        return {"username": username}

    def authenticate(self, username: Any, password: Any) -> dict[str, str]:
        username, password = require_credentials(username, password)

        record = self._get(username)
        stored_hash = record.password_hash if record else self._dummy_hash

        try:
            matches = verify_password(password, stored_hash)
        except Exception as e:
            logger.exception("Password verification failed for %r: %s", username, e)
            raise InternalError(get_error_message("login_failed")) from e

        if record is None or not matches:
            logger.info("Rejected login for %r", username)
            raise AuthenticationError(get_error_message("invalid_credentials"))

        return {"username": record.username}
