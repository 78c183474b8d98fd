# frontend/streamlit_app/core/state.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Tab-scoped session state for the kiosk website.

Streamlit keeps one `st.session_state` per browser tab and clears it when the
tab's session ends, which is exactly the lifetime the admin login needs. This
module wraps that mapping in a small `SessionStore` with an explicit
subscribe/notify interface so that the credential gate, the admin actor
initializer and the router can react to login changes without reading
ambient globals.

Design notes
------------
- The backing mapping is injected. The app passes `st.session_state`; tests
  pass a plain `dict`.
- Values are opaque strings (the login flag is stored as "true").
- Writes outside a batch notify subscribers synchronously after the write.
  Inside `batch()` notifications are queued and delivered once the whole
  batch is written, so nobody observes the login flag without its token.
- `ensure_defaults()` is idempotent and safe to call on every rerun.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping, MutableMapping
from contextlib import contextmanager
from typing import Any, Final

import streamlit as st

# Persisted keys (tab-scoped, string values, no schema versioning).
LOGIN_FLAG_KEY: Final[str] = "official_login_session"
USER_ID_KEY: Final[str] = "official_user_id"
ADMIN_TOKEN_KEY: Final[str] = "official_admin_token"
PENDING_PATH_KEY: Final[str] = "pending_path"
LANG_KEY: Final[str] = "lang"

# Where the store object itself lives inside st.session_state.
_STORE_SLOT: Final[str] = "_kiosk_session_store"

# Canonical set of non-auth keys and their initial values.
DEFAULTS: Final[Mapping[str, str]] = {
    # Selected site language ("hi" or "en").
    LANG_KEY: "hi",
}

Subscriber = Callable[[str, "str | None"], None]

__all__ = [
    "ADMIN_TOKEN_KEY",
    "DEFAULTS",
    "LANG_KEY",
    "LOGIN_FLAG_KEY",
    "PENDING_PATH_KEY",
    "SessionStore",
    "USER_ID_KEY",
    "ensure_defaults",
    "get_session_store",
]


class SessionStore:
    """Key/value area with synchronous change notification."""

    def __init__(
        self, backing: MutableMapping[str, Any] | None = None, *, namespace: str = "kiosk"
    ) -> None:
        self._data: MutableMapping[str, Any] = backing if backing is not None else {}
        self._prefix = f"{namespace}:"
        self._subscribers: list[Subscriber] = []
        self._batch_depth = 0
        self._pending: list[tuple[str, str | None]] = []

    def _slot(self, key: str) -> str:
        return self._prefix + key

    # ── Reads / writes ─────────────────────────────────────────────────────

    def read(self, key: str, default: str | None = None) -> str | None:
        return self._data.get(self._slot(key), default)

    def read_flag(self, key: str) -> bool:
        return self.read(key) == "true"

    def write(self, key: str, value: str) -> None:
        self._data[self._slot(key)] = value
        self._emit(key, value)

    def clear(self, key: str) -> None:
        slot = self._slot(key)
        if slot not in self._data:
            return
        del self._data[slot]
        self._emit(key, None)

    def write_many(self, pairs: Iterable[tuple[str, str]]) -> None:
        """Write pairs in the given order, notifying only after the last one."""
        with self.batch():
            for key, value in pairs:
                self.write(key, value)

    def clear_many(self, keys: Iterable[str]) -> None:
        with self.batch():
            for key in keys:
                self.clear(key)

    # ── Notification ───────────────────────────────────────────────────────

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register `callback(key, value)`; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    @contextmanager
    def batch(self) -> Iterator[None]:
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
        if self._batch_depth == 0:
            self._flush()

    def _emit(self, key: str, value: str | None) -> None:
        self._pending.append((key, value))
        if self._batch_depth == 0:
            self._flush()

    def _flush(self) -> None:
        pending, self._pending = self._pending, []
        # Copy: callbacks may (un)subscribe while we iterate.
        for key, value in pending:
            for callback in list(self._subscribers):
                callback(key, value)


def ensure_defaults(store: SessionStore, *, lang: str | None = None) -> None:
    """Ensure all expected non-auth keys exist with sane defaults.

    Existing values (written by widgets or earlier reruns) are preserved.
    """
    for key, default_value in DEFAULTS.items():
        if store.read(key) is None:
            value = lang if key == LANG_KEY and lang in ("hi", "en") else default_value
            store.write(key, value)


def get_session_store() -> SessionStore:
    """Return this tab's `SessionStore`, creating it on the first rerun."""
    store = st.session_state.get(_STORE_SLOT)
    if store is None:
        store = SessionStore(st.session_state)
        st.session_state[_STORE_SLOT] = store
    return store
