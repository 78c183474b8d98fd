# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from backend.store.api import create_app
from backend.store.config import StoreConfig
from core.state import SessionStore
from services.errors import AlreadyElevated, TransientError
from services.store_client import Inquiry, InquiryKind, InquiryStoreClient

ADMIN_SECRET = "test-secret"
OFFICIAL_USER = "kiosk-admin"


@pytest.fixture
def backing() -> dict:
    return {}


@pytest.fixture
def store(backing) -> SessionStore:
    return SessionStore(backing)


class FakeStoreClient:
    """In-memory stand-in for InquiryStoreClient; records every call."""

    def __init__(self, caller_id: str = OFFICIAL_USER) -> None:
        self.caller_id = caller_id
        self.calls: list[tuple] = []
        self.rows: dict[int, Inquiry] = {}
        self.admin = True
        self.health_errors: list[Exception] = []
        self.elevate_error: Exception | None = None
        self.list_errors: list[Exception] = []
        self.fail_set_read: set[int] = set()

    def add(self, inquiry_id: int, **kw) -> Inquiry:
        row = Inquiry(
            id=inquiry_id,
            kind=kw.pop("kind", InquiryKind.CONTACT),
            name=kw.pop("name", f"Customer {inquiry_id}"),
            phone_number=kw.pop("phone_number", "9876543210"),
            message=kw.pop("message", "Hello"),
            **kw,
        )
        self.rows[inquiry_id] = row
        return row

    def health(self) -> str:
        self.calls.append(("health",))
        if self.health_errors:
            raise self.health_errors.pop(0)
        return "healthy"

    def elevate_privilege(self, secret: str, user_id: str | None = None) -> None:
        self.calls.append(("elevate", secret, user_id))
        if self.elevate_error is not None:
            raise self.elevate_error

    def is_caller_admin(self) -> bool:
        self.calls.append(("is_admin",))
        return self.admin

    def list_inquiries(self) -> list[Inquiry]:
        self.calls.append(("list",))
        if self.list_errors:
            raise self.list_errors.pop(0)
        return list(self.rows.values())

    def set_read(self, inquiry_id: int, read: bool) -> None:
        self.calls.append(("set_read", inquiry_id, read))
        if inquiry_id in self.fail_set_read:
            raise TransientError("Inquiry store unavailable")
        self.rows[inquiry_id] = replace(self.rows[inquiry_id], read=read)

    def delete(self, inquiry_id: int) -> None:
        self.calls.append(("delete", inquiry_id))
        del self.rows[inquiry_id]

    def submit_inquiry(self, kind, name, phone_number, email, message, service_category, *, internal=False) -> int:
        self.calls.append(("submit", internal))
        new_id = max(self.rows, default=0) + 1
        self.add(
            new_id,
            kind=kind,
            name=name,
            phone_number=phone_number,
            email=email,
            message=message,
            service_category=service_category,
            internal=internal,
        )
        return new_id


@pytest.fixture
def fake_client() -> FakeStoreClient:
    return FakeStoreClient()


@pytest.fixture
def factory(fake_client) -> Callable[[str], FakeStoreClient]:
    built: list[str] = []

    def _factory(caller_id: str) -> FakeStoreClient:
        built.append(caller_id)
        fake_client.caller_id = caller_id
        return fake_client

    _factory.built = built  # type: ignore[attr-defined]
    return _factory


@pytest.fixture
def sleeps() -> list[float]:
    return []


@pytest.fixture
def already_elevated() -> AlreadyElevated:
    return AlreadyElevated("Caller is already elevated", status=409)


# ── Real store over HTTP (in-memory SQLite) ─────────────────────────────────


def make_store_app(**overrides):
    cfg = StoreConfig(database_url="sqlite://", admin_secret=ADMIN_SECRET, **overrides)
    return create_app(cfg)


@pytest.fixture
def store_app():
    return make_store_app()


@pytest.fixture
def http(store_app) -> TestClient:
    with TestClient(store_app) as c:
        yield c


@pytest.fixture
def admin_headers(http) -> dict[str, str]:
    r = http.post(
        "/rpc/access/elevate",
        json={"secret": ADMIN_SECRET, "user_id": OFFICIAL_USER},
        headers={"X-Caller-Id": OFFICIAL_USER},
    )
    assert r.status_code == 200
    return {"X-Caller-Id": OFFICIAL_USER, "Authorization": f"Bearer {r.json()['session_token']}"}


@pytest.fixture
def client_for(http) -> Callable[[str | None], InquiryStoreClient]:
    def _make(caller_id: str | None = None) -> InquiryStoreClient:
        return InquiryStoreClient("http://testserver", caller_id, session=http)

    return _make
