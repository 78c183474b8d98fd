# tests/test_errors.py
# normalize_error / error_from_response classification.

import concurrent.futures

import pytest
import requests

from services.errors import (
    AlreadyElevated,
    AuthorizationError,
    ErrorKind,
    InitTimeoutError,
    NotFoundError,
    TransientError,
    UnknownStoreError,
    error_from_response,
    normalize_error,
)


@pytest.mark.parametrize(
    "value, kind",
    [
        ("Unauthorized: only admins can list inquiries", ErrorKind.AUTHORIZATION),
        ("Invalid secret", ErrorKind.AUTHORIZATION),
        ("Caller is already elevated", ErrorKind.ALREADY_ELEVATED),
        ("Inquiry store is stopped", ErrorKind.TRANSIENT),
        ("Service unavailable", ErrorKind.TRANSIENT),
        ("something odd", ErrorKind.UNKNOWN),
        ({"message": "Unauthorized"}, ErrorKind.AUTHORIZATION),
        ({"error": "store unreachable"}, ErrorKind.TRANSIENT),
        ({"weird": 1}, ErrorKind.UNKNOWN),
        (42, ErrorKind.UNKNOWN),
        (ValueError("already initialized"), ErrorKind.ALREADY_ELEVATED),
    ],
)
def test_normalize_classifies(value, kind):
    assert normalize_error(value).kind is kind


def test_store_errors_pass_through_unchanged():
    err = TransientError("x")
    assert normalize_error(err) is err


def test_timeouts_become_init_timeout():
    assert isinstance(normalize_error(concurrent.futures.TimeoutError()), InitTimeoutError)
    assert isinstance(normalize_error(TimeoutError("slow")), InitTimeoutError)


def test_transport_failures_are_transient():
    err = normalize_error(requests.ConnectionError("refused"))
    assert isinstance(err, TransientError)
    assert err.retryable
    # Nobody accepted the connection: same as a stopped store.
    assert isinstance(normalize_error(requests.ConnectTimeout("connect timed out")), TransientError)


@pytest.mark.parametrize("exc", [requests.ReadTimeout("read timed out"), requests.Timeout("timed out")])
def test_unanswered_request_is_a_timeout(exc):
    err = normalize_error(exc)
    assert isinstance(err, InitTimeoutError)
    assert err.kind is ErrorKind.TIMEOUT
    assert not err.retryable


def test_structured_detail_code_wins():
    err = error_from_response(409, {"detail": {"code": "already_elevated", "message": "Caller is already elevated"}})
    assert isinstance(err, AlreadyElevated)
    assert err.status == 409
    assert err.message == "Caller is already elevated"


@pytest.mark.parametrize(
    "status, cls",
    [
        (401, AuthorizationError),
        (403, AuthorizationError),
        (404, NotFoundError),
        (503, TransientError),
        (500, UnknownStoreError),
    ],
)
def test_status_fallback(status, cls):
    assert isinstance(error_from_response(status, {"detail": "nope"}), cls)


def test_validation_list_is_flattened():
    err = error_from_response(422, {"detail": [{"msg": "field required"}, {"msg": "bad phone"}]})
    assert err.kind is ErrorKind.INVALID
    assert err.message == "field required; bad phone"


def test_plain_text_body_uses_markers():
    assert error_from_response(500, "connection refused by upstream").kind is ErrorKind.TRANSIENT
