# tests/test_store_client.py
# InquiryStoreClient against the real store app, end to end through the
# initializer and the list controller.

import pytest
import requests

from conftest import ADMIN_SECRET, OFFICIAL_USER
from services.actor import ActorStatus, AdminActorInitializer
from services.errors import AlreadyElevated, AuthorizationError, NotFoundError, TransientError
from services.inquiries import InquiryListController
from services.store_client import InquiryKind, InquiryStoreClient


def test_anonymous_submission_and_admin_listing(client_for):
    public = client_for()
    assert public.caller_id.startswith("anon-")
    new_id = public.submit_inquiry(
        InquiryKind.CONTACT, "Asha", "9876543210", None, "Need Aadhaar update", None
    )

    admin = client_for(OFFICIAL_USER)
    admin.elevate_privilege(ADMIN_SECRET, OFFICIAL_USER)
    assert admin.is_caller_admin() is True
    rows = admin.list_inquiries()
    assert [(r.id, r.name, r.read, r.kind) for r in rows] == [(new_id, "Asha", False, InquiryKind.CONTACT)]


def test_errors_are_typed(client_for):
    public = client_for()
    with pytest.raises(AuthorizationError):
        public.list_inquiries()
    with pytest.raises(AuthorizationError):
        public.elevate_privilege("wrong")

    admin = client_for(OFFICIAL_USER)
    admin.elevate_privilege(ADMIN_SECRET)
    with pytest.raises(AlreadyElevated):
        admin.elevate_privilege(ADMIN_SECRET)
    with pytest.raises(NotFoundError):
        admin.get_inquiry(999)


def test_bare_caller_id_cannot_reach_admin_routes(client_for):
    admin = client_for(OFFICIAL_USER)
    admin.elevate_privilege(ADMIN_SECRET, OFFICIAL_USER)
    assert admin.list_inquiries() == []

    impostor = client_for(OFFICIAL_USER)
    assert impostor.is_caller_admin() is False
    with pytest.raises(AuthorizationError):
        impostor.list_inquiries()
    with pytest.raises(AuthorizationError):
        impostor.delete(1)


def test_transport_failure_becomes_transient():
    class _Down:
        def request(self, *args, **kwargs):
            raise requests.ConnectionError("connection refused")

    client = InquiryStoreClient("http://store.invalid", "x", session=_Down())
    with pytest.raises(TransientError):
        client.health()


def test_initializer_and_controller_over_http(client_for):
    client_for().submit_inquiry(
        InquiryKind.SERVICE_REQUEST, "Ravi", "9123456780", "ravi@example.com", "Ration card", "Food"
    )
    init = AdminActorInitializer(client_for, sleep=lambda s: None)
    init.ensure_ready(ADMIN_SECRET, OFFICIAL_USER)
    assert init.status is ActorStatus.READY

    controller = InquiryListController(init)
    (row,) = controller.list()
    assert row.service_category == "Food" and row.email == "ravi@example.com"
    controller.set_read(row.id, True)
    assert controller.list()[0].read is True
    controller.delete(row.id)
    (placeholder,) = controller.list()
    assert placeholder.placeholder

    # A second initializer for the same user gets its own session and verifies.
    again = AdminActorInitializer(client_for, sleep=lambda s: None)
    again.ensure_ready(ADMIN_SECRET, OFFICIAL_USER)
    assert again.status is ActorStatus.READY


def test_wrong_secret_fails_initialization(client_for):
    init = AdminActorInitializer(client_for, sleep=lambda s: None)
    init.ensure_ready("not-the-secret", OFFICIAL_USER)
    assert init.status is ActorStatus.FAILED
    assert isinstance(init.error, AuthorizationError)
