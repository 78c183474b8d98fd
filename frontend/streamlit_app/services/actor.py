# frontend/streamlit_app/services/actor.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Admin actor initializer.

Before the admin panel may list, update or delete inquiries it needs a store
client that the store recognises as an admin. Getting one is a strictly
sequential three step flow:

  1) connect   build a client bound to the official user id, health-check it
  2) elevate   `elevate_privilege(secret, user_id)`; "already elevated" is fine
  3) verify    `is_caller_admin()` must return True

Observable states: idle → initializing → (verifying) → ready | failed.

Failure policy
--------------
- Authorization errors fail immediately and are never retried automatically.
- Transient errors (store stopped or unreachable) are retried up to
  `max_retries` times with exponential backoff (2s, 4s, 8s by default).
- Steps 1+2 race a single wall-clock timeout (30s by default). On expiry the
  worker thread is abandoned, not aborted; whatever it returns later is
  ignored.
- Leaving `failed` requires an explicit `retry()`.

The ready/failed result is cached per session identity (token + user id).
A different identity, or `reset()` on logout, invalidates it; a run that
finishes for an identity that is no longer current is discarded.
"""

import concurrent.futures
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from core.state import ADMIN_TOKEN_KEY, LOGIN_FLAG_KEY, USER_ID_KEY, SessionStore
from services.errors import (
    ActorNotReadyError,
    AuthorizationError,
    ErrorKind,
    InitTimeoutError,
    StoreError,
    normalize_error,
)

log = logging.getLogger(__name__)

# (admin token, user id)
Identity = tuple[str, str]
# caller id -> store client
ClientFactory = Callable[[str], Any]


class ActorStatus(str, Enum):
    IDLE = "idle"
    INITIALIZING = "initializing"
    VERIFYING = "verifying"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class AdminActor:
    """Store client that has completed elevation and verification."""

    client: Any
    token: str
    user_id: str
    elevated: bool = True


class AdminActorInitializer:
    def __init__(
        self,
        client_factory: ClientFactory,
        *,
        timeout_s: float = 30.0,
        max_retries: int = 3,
        backoff_base_s: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client_factory = client_factory
        self.timeout_s = timeout_s
        self.max_retries = max_retries
        self.backoff_base_s = backoff_base_s
        self._sleep = sleep

        self._status = ActorStatus.IDLE
        self._error: StoreError | None = None
        self._actor: AdminActor | None = None
        self._identity: Identity | None = None
        self._running: Identity | None = None
        self._generation = 0
        self.attempts = 0

    # ── Observable state ───────────────────────────────────────────────────

    @property
    def status(self) -> ActorStatus:
        return self._status

    @property
    def error(self) -> StoreError | None:
        return self._error

    @property
    def actor(self) -> AdminActor | None:
        return self._actor

    @property
    def identity(self) -> Identity | None:
        return self._identity

    def require_ready(self) -> AdminActor:
        if self._status is ActorStatus.READY and self._actor is not None:
            return self._actor
        raise ActorNotReadyError(
            f"Admin session is {self._status.value}; inquiries are unavailable until it is ready"
        )

    # ── Transitions ────────────────────────────────────────────────────────

    def ensure_ready(self, token: str, user_id: str) -> AdminActor | None:
        """Return the cached actor for this identity, initializing if needed.

        A cached failure is returned as-is (None); only `retry()` reruns it.
        """
        identity = (token, user_id)
        if self._running == identity:
            return None
        if identity == self._identity and self._status in (ActorStatus.READY, ActorStatus.FAILED):
            return self._actor
        return self._run(identity)

    def retry(self) -> AdminActor | None:
        """User-triggered rerun: drop the cached handle and start over."""
        if self._identity is None:
            return None
        identity = self._identity
        log.info("Admin actor retry requested for %s", identity[1])
        self._actor = None
        return self._run(identity)

    def invalidate(self) -> None:
        """Forget the cached handle; the next `ensure_ready` starts fresh."""
        self._generation += 1
        self._running = None
        self._actor = None
        self._error = None
        self._set_status(ActorStatus.IDLE)

    def reset(self) -> None:
        """Logout: discard everything, back to idle."""
        self.invalidate()
        self._identity = None
        self.attempts = 0

    def attach(self, store: SessionStore) -> Callable[[], None]:
        """Follow login/logout in the session store. Returns the unsubscriber."""

        def _on_change(key: str, value: str | None) -> None:
            if key == LOGIN_FLAG_KEY and value is None:
                self.reset()
            elif key in (ADMIN_TOKEN_KEY, USER_ID_KEY) and value is not None:
                current = (store.read(ADMIN_TOKEN_KEY), store.read(USER_ID_KEY))
                if self._identity is not None and current != self._identity:
                    log.info("Session identity changed; discarding admin actor")
                    self.invalidate()

        return store.subscribe(_on_change)

    # ── Internals ──────────────────────────────────────────────────────────

    def _set_status(self, status: ActorStatus) -> None:
        if status is not self._status:
            log.info("Admin actor %s -> %s", self._status.value, status.value)
        self._status = status

    def _is_stale(self, generation: int) -> bool:
        if generation != self._generation:
            log.info("Discarding stale admin actor result (generation %d)", generation)
            return True
        return False

    def _fail(self, error: StoreError) -> None:
        self._error = error
        self._actor = None
        log.warning("Admin actor failed (%s): %s", error.kind.value, error.message)
        self._set_status(ActorStatus.FAILED)
        return None

    def _run(self, identity: Identity) -> AdminActor | None:
        self._generation += 1
        generation = self._generation
        self._identity = identity
        self._running = identity
        self._actor = None
        self._error = None
        self.attempts = 0
        self._set_status(ActorStatus.INITIALIZING)

        token, user_id = identity
        try:
            for attempt in range(self.max_retries + 1):
                self.attempts = attempt + 1
                try:
                    client = self._connect_and_elevate(token, user_id)
                    if self._is_stale(generation):
                        return None
                    self._set_status(ActorStatus.VERIFYING)
                    is_admin = client.is_caller_admin()
                    if self._is_stale(generation):
                        return None
                    if not is_admin:
                        raise AuthorizationError("The inquiry store did not confirm admin rights for this session")
                    self._actor = AdminActor(client=client, token=token, user_id=user_id)
                    self._set_status(ActorStatus.READY)
                    return self._actor
                except Exception as e:
                    if self._is_stale(generation):
                        return None
                    err = normalize_error(e)
                    if not err.retryable or attempt >= self.max_retries:
                        return self._fail(err)
                    delay = self.backoff_base_s * (2**attempt)
                    log.warning(
                        "Inquiry store unavailable (attempt %d/%d); retrying in %.1fs",
                        attempt + 1,
                        self.max_retries + 1,
                        delay,
                    )
                    self._set_status(ActorStatus.INITIALIZING)
                    self._sleep(delay)
                    if self._is_stale(generation):
                        return None
            return None  # unreachable: the loop always returns
        finally:
            if generation == self._generation:
                self._running = None

    def _connect_and_elevate(self, token: str, user_id: str) -> Any:
        def _sequence() -> Any:
            client = self._client_factory(user_id)
            client.health()
            try:
                client.elevate_privilege(token, user_id)
            except Exception as e:
                err = normalize_error(e)
                if err.kind is not ErrorKind.ALREADY_ELEVATED:
                    raise err from e
                log.info("Privilege already elevated for %s; verifying", user_id)
            return client

        executor = concurrent.futures.ThreadPoolExecutor(max_workers=1, thread_name_prefix="admin-actor")
        future = executor.submit(_sequence)
        try:
            return future.result(timeout=self.timeout_s)
        except concurrent.futures.TimeoutError as e:
            raise InitTimeoutError(
                f"The inquiry store did not respond within {self.timeout_s:g} seconds"
            ) from e
        finally:
            # Never block on the worker; a late result is simply dropped.
            executor.shutdown(wait=False)
