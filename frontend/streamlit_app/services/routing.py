# frontend/streamlit_app/services/routing.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""Route guard: public site vs admin panel, decided from path + login flag."""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from core.state import LOGIN_FLAG_KEY, PENDING_PATH_KEY, SessionStore

PUBLIC_ROOT: Final[str] = "/"
ADMIN_PATH: Final[str] = "/admin"


class View(str, Enum):
    PUBLIC = "public"
    ADMIN = "admin"


@dataclass(frozen=True)
class RouteDecision:
    view: View
    path: str
    # Set when the browser should be sent elsewhere before rendering.
    redirect_to: str | None = None


def normalize_path(path: str | None) -> str:
    p = (path or "").strip().split("?", 1)[0].split("#", 1)[0]
    if not p.startswith("/"):
        p = "/" + p
    while "//" in p:
        p = p.replace("//", "/")
    if len(p) > 1:
        p = p.rstrip("/")
    return p.lower()


def is_admin_path(path: str) -> bool:
    p = normalize_path(path)
    return p == ADMIN_PATH or p.startswith(ADMIN_PATH + "/")


def resolve_route(path: str | None, logged_in: bool) -> RouteDecision:
    p = normalize_path(path)
    if is_admin_path(p):
        if logged_in:
            return RouteDecision(View.ADMIN, p)
        return RouteDecision(View.PUBLIC, PUBLIC_ROOT, redirect_to=PUBLIC_ROOT)
    return RouteDecision(View.PUBLIC, p)


def path_from_query(page: str | None) -> str:
    """Streamlit carries the SPA path in `?page=...` (e.g. ?page=admin)."""
    return normalize_path(page or PUBLIC_ROOT)


def query_from_path(path: str) -> str | None:
    p = normalize_path(path)
    return None if p == PUBLIC_ROOT else p.lstrip("/")


class Router:
    """Guard with deep-link replay across the bootstrap boundary."""

    def __init__(self, store: SessionStore) -> None:
        self._store = store
        self._bootstrapped = False

    @property
    def bootstrapped(self) -> bool:
        return self._bootstrapped

    def request(self, path: str | None) -> RouteDecision | None:
        """Route now, or remember the path until `complete_bootstrap()`."""
        if not self._bootstrapped:
            self._store.write(PENDING_PATH_KEY, normalize_path(path))
            return None
        return self.decide(path)

    def complete_bootstrap(self) -> RouteDecision | None:
        self._bootstrapped = True
        pending = self._store.read(PENDING_PATH_KEY)
        if pending is None:
            return None
        self._store.clear(PENDING_PATH_KEY)
        return self.decide(pending)

    def decide(self, path: str | None) -> RouteDecision:
        return resolve_route(path, self._store.read_flag(LOGIN_FLAG_KEY))
