# frontend/streamlit_app/services/auth.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Credential gate for the "Official Login" button on the public site.

Validates one fixed user id / password pair by exact string comparison and,
on success, records the session in the tab-scoped `SessionStore`.

Known weakness: there is no rate limiting, lockout or hashing. This gates an
informational site's admin panel. The store itself only serves inquiries to
callers holding a session token issued for the admin secret.
"""

import logging

from core.state import ADMIN_TOKEN_KEY, LOGIN_FLAG_KEY, USER_ID_KEY, SessionStore

log = logging.getLogger(__name__)


class CredentialGate:
    def __init__(self, store: SessionStore, *, user_id: str, password: str, admin_token: str) -> None:
        self._store = store
        self._user_id = user_id
        self._password = password
        self._admin_token = admin_token

    def login(self, user_id: str, password: str) -> bool:
        """Return True and open the session only on an exact match."""
        if not user_id or not password or not self._user_id or not self._password:
            return False
        if user_id != self._user_id or password != self._password:
            log.info("Official login rejected")
            return False

        # Token first, flag last; subscribers are notified once after all three.
        self._store.write_many(
            [
                (ADMIN_TOKEN_KEY, self._admin_token),
                (USER_ID_KEY, user_id),
                (LOGIN_FLAG_KEY, "true"),
            ]
        )
        log.info("Official login accepted for %s", user_id)
        return True

    def logout(self) -> None:
        self._store.clear_many([LOGIN_FLAG_KEY, USER_ID_KEY, ADMIN_TOKEN_KEY])
        log.info("Official session closed")

    def is_logged_in(self) -> bool:
        return self._store.read_flag(LOGIN_FLAG_KEY)

    def identity(self) -> tuple[str, str] | None:
        """(admin token, user id) for a logged-in tab, else None."""
        if not self.is_logged_in():
            return None
        token = self._store.read(ADMIN_TOKEN_KEY)
        user_id = self._store.read(USER_ID_KEY)
        if not token or not user_id:
            return None
        return token, user_id
