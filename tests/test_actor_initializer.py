# tests/test_actor_initializer.py
# Admin actor lifecycle: connect → elevate → verify, retries, timeout, staleness.

import socket
import threading

import pytest
import requests

from core.state import ADMIN_TOKEN_KEY, LOGIN_FLAG_KEY, USER_ID_KEY
from services.actor import ActorStatus, AdminActorInitializer
from services.auth import CredentialGate
from services.errors import (
    ActorNotReadyError,
    AuthorizationError,
    ErrorKind,
    TransientError,
)
from services.store_client import InquiryStoreClient

TOKEN, USER = "tok", "kiosk-admin"


@pytest.fixture
def init(factory, sleeps):
    return AdminActorInitializer(factory, timeout_s=5.0, max_retries=3, backoff_base_s=2.0, sleep=sleeps.append)


def test_starts_idle_and_refuses_work(init):
    assert init.status is ActorStatus.IDLE
    with pytest.raises(ActorNotReadyError):
        init.require_ready()


def test_happy_path_runs_steps_in_order(init, fake_client, factory):
    actor = init.ensure_ready(TOKEN, USER)
    assert init.status is ActorStatus.READY
    assert actor is init.require_ready()
    assert actor.token == TOKEN and actor.user_id == USER and actor.elevated
    assert fake_client.calls == [("health",), ("elevate", TOKEN, USER), ("is_admin",)]
    assert factory.built == [USER]


def test_never_ready_when_admin_check_says_no(init, fake_client, sleeps):
    fake_client.admin = False
    assert init.ensure_ready(TOKEN, USER) is None
    assert init.status is ActorStatus.FAILED
    assert init.error.kind is ErrorKind.AUTHORIZATION
    assert init.attempts == 1
    assert sleeps == []
    with pytest.raises(ActorNotReadyError):
        init.require_ready()


def test_authorization_error_is_not_retried(init, fake_client, sleeps):
    fake_client.elevate_error = AuthorizationError("Unauthorized: invalid secret", status=401)
    init.ensure_ready(TOKEN, USER)
    assert init.status is ActorStatus.FAILED
    assert isinstance(init.error, AuthorizationError)
    assert ("is_admin",) not in fake_client.calls
    assert sleeps == []


def test_transient_errors_back_off_then_fail(init, fake_client, sleeps):
    fake_client.health_errors = [TransientError("Inquiry store unavailable") for _ in range(4)]
    init.ensure_ready(TOKEN, USER)
    assert sleeps == [2.0, 4.0, 8.0]
    assert init.attempts == 4
    assert init.status is ActorStatus.FAILED
    assert init.error.kind is ErrorKind.TRANSIENT


def test_transient_errors_recover_within_budget(init, fake_client, sleeps):
    fake_client.health_errors = [
        requests.ConnectionError("connection refused"),
        TransientError("store stopped"),
    ]
    assert init.ensure_ready(TOKEN, USER) is not None
    assert sleeps == [2.0, 4.0]
    assert init.status is ActorStatus.READY


def test_already_elevated_proceeds_to_verification(init, fake_client, already_elevated):
    fake_client.elevate_error = already_elevated
    init.ensure_ready(TOKEN, USER)
    assert init.status is ActorStatus.READY
    assert fake_client.calls[-1] == ("is_admin",)


def test_already_elevated_still_needs_admin_confirmation(init, fake_client, already_elevated):
    fake_client.elevate_error = already_elevated
    fake_client.admin = False
    init.ensure_ready(TOKEN, USER)
    assert init.status is ActorStatus.FAILED


def test_timeout_fails_without_retry_and_ignores_late_result(factory, fake_client, sleeps):
    release = threading.Event()
    fake_client.health = lambda: release.wait(5) and "healthy"
    init = AdminActorInitializer(factory, timeout_s=0.05, sleep=sleeps.append)
    try:
        init.ensure_ready(TOKEN, USER)
        assert init.status is ActorStatus.FAILED
        assert init.error.kind is ErrorKind.TIMEOUT
        assert sleeps == []
    finally:
        release.set()
    assert init.status is ActorStatus.FAILED
    assert init.actor is None


@pytest.fixture
def silent_store():
    """A port that completes the TCP handshake and then never answers."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(8)
    try:
        yield f"http://127.0.0.1:{sock.getsockname()[1]}"
    finally:
        sock.close()


def test_hung_store_read_timeout_reports_timeout_not_unavailable(silent_store, sleeps):
    def _factory(caller_id):
        return InquiryStoreClient(silent_store, caller_id, timeout=0.3)

    init = AdminActorInitializer(_factory, timeout_s=3.0, max_retries=3, backoff_base_s=2.0, sleep=sleeps.append)
    init.ensure_ready(TOKEN, USER)
    assert init.status is ActorStatus.FAILED
    assert init.error.kind is ErrorKind.TIMEOUT
    assert not init.error.retryable
    assert init.attempts == 1
    assert sleeps == []


def test_hung_store_trips_wall_clock_before_http_timeout(silent_store, sleeps):
    def _factory(caller_id):
        return InquiryStoreClient(silent_store, caller_id, timeout=1.0)

    init = AdminActorInitializer(_factory, timeout_s=0.2, max_retries=3, sleep=sleeps.append)
    init.ensure_ready(TOKEN, USER)
    assert init.status is ActorStatus.FAILED
    assert init.error.kind is ErrorKind.TIMEOUT
    assert "0.2 seconds" in init.error.message
    assert init.attempts == 1
    assert sleeps == []


def test_cached_failure_is_not_rerun_until_retry(init, fake_client):
    fake_client.admin = False
    init.ensure_ready(TOKEN, USER)
    calls = len(fake_client.calls)

    assert init.ensure_ready(TOKEN, USER) is None
    assert len(fake_client.calls) == calls

    fake_client.admin = True
    assert init.retry() is not None
    assert init.status is ActorStatus.READY


def test_ready_actor_is_cached_per_identity(init, factory):
    first = init.ensure_ready(TOKEN, USER)
    assert init.ensure_ready(TOKEN, USER) is first
    assert factory.built == [USER]


def test_only_one_run_per_identity_in_flight(init, fake_client, factory):
    nested = []

    def _health():
        nested.append(init.ensure_ready(TOKEN, USER))
        return "healthy"

    fake_client.health = _health
    init.ensure_ready(TOKEN, USER)
    assert nested == [None]
    assert factory.built == [USER]
    assert init.status is ActorStatus.READY


def test_result_for_a_replaced_identity_is_discarded(init, fake_client, store):
    init.attach(store)
    store.write_many([(ADMIN_TOKEN_KEY, TOKEN), (USER_ID_KEY, USER), (LOGIN_FLAG_KEY, "true")])

    def _health():
        # Another login lands while this run is connecting.
        store.write(ADMIN_TOKEN_KEY, "tok-2")
        return "healthy"

    fake_client.health = _health
    assert init.ensure_ready(TOKEN, USER) is None
    assert init.status is ActorStatus.IDLE
    assert init.actor is None

    del fake_client.health
    assert init.ensure_ready("tok-2", USER) is not None
    assert init.require_ready().token == "tok-2"


def test_identity_change_after_ready_invalidates(init, store):
    init.attach(store)
    init.ensure_ready(TOKEN, USER)
    store.write(ADMIN_TOKEN_KEY, "tok-2")
    assert init.status is ActorStatus.IDLE
    with pytest.raises(ActorNotReadyError):
        init.require_ready()


def test_logout_returns_to_idle(init, store):
    gate = CredentialGate(store, user_id=USER, password="pw", admin_token=TOKEN)
    init.attach(store)
    gate.login(USER, "pw")
    init.ensure_ready(*gate.identity())
    assert init.status is ActorStatus.READY

    gate.logout()
    assert init.status is ActorStatus.IDLE
    assert init.identity is None
    assert init.actor is None


def test_unsubscribed_initializer_ignores_store(init, store):
    detach = init.attach(store)
    init.ensure_ready(TOKEN, USER)
    detach()
    store.write(ADMIN_TOKEN_KEY, "tok-2")
    assert init.status is ActorStatus.READY
