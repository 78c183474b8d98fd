# frontend/streamlit_app/services/errors.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Error taxonomy for calls against the remote inquiry store.

The store can fail in several shapes: a transport exception from `requests`,
a non-2xx HTTP response carrying a structured `detail`, a plain string, or a
timeout raised by the initializer itself. `normalize_error()` is the single
boundary that folds all of these into one tagged variant:

  • AuthorizationError  bad credential/secret, or admin role denied (no retry)
  • TransientError      store stopped/unreachable (bounded automatic retry)
  • InitTimeoutError    connect + elevate exceeded the wall-clock budget, or the
                        store accepted the connection and never answered
  • AlreadyElevated     elevation was already performed (proceed to verify)
  • UnknownStoreError   anything else

Controller-level failures (`ActorNotReadyError`, `InquiryFetchError`,
`PlaceholderRecordError`) live here too so views can catch one base class.
"""

import concurrent.futures
import json
from enum import Enum
from typing import Any

import requests


class ErrorKind(str, Enum):
    AUTHORIZATION = "authorization"
    TRANSIENT = "transient"
    TIMEOUT = "timeout"
    ALREADY_ELEVATED = "already_elevated"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    NOT_READY = "not_ready"
    FETCH = "fetch"
    PLACEHOLDER = "placeholder"
    UNKNOWN = "unknown"


class StoreError(Exception):
    """Base class for every failure surfaced by the admin flow."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    retryable: bool = False

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class AuthorizationError(StoreError):
    kind = ErrorKind.AUTHORIZATION


class TransientError(StoreError):
    kind = ErrorKind.TRANSIENT
    retryable = True


class InitTimeoutError(StoreError):
    kind = ErrorKind.TIMEOUT


class AlreadyElevated(StoreError):
    kind = ErrorKind.ALREADY_ELEVATED


class NotFoundError(StoreError):
    kind = ErrorKind.NOT_FOUND


class InvalidRequestError(StoreError):
    kind = ErrorKind.INVALID


class UnknownStoreError(StoreError):
    kind = ErrorKind.UNKNOWN


class ActorNotReadyError(StoreError):
    kind = ErrorKind.NOT_READY


class InquiryFetchError(StoreError):
    """A list/update/delete failed after the admin session was ready."""

    kind = ErrorKind.FETCH

    def __init__(self, message: str, *, cause: StoreError) -> None:
        super().__init__(message, status=cause.status)
        self.cause = cause


class PlaceholderRecordError(StoreError):
    kind = ErrorKind.PLACEHOLDER


# Substrings the store (or an upstream proxy) uses for each class of failure.
_AUTH_MARKERS = ("unauthorized", "only admins", "invalid secret", "forbidden")
_ELEVATED_MARKERS = ("already elevated", "already initialized")
_TRANSIENT_MARKERS = ("unavailable", "stopped", "unreachable", "connection refused")

_CODE_TO_CLASS: dict[str, type[StoreError]] = {
    "unauthorized": AuthorizationError,
    "already_elevated": AlreadyElevated,
    "unavailable": TransientError,
    "not_found": NotFoundError,
    "invalid": InvalidRequestError,
}


def _from_message(message: str, status: int | None = None) -> StoreError:
    lowered = message.lower()
    if any(m in lowered for m in _ELEVATED_MARKERS):
        return AlreadyElevated(message, status=status)
    if any(m in lowered for m in _AUTH_MARKERS):
        return AuthorizationError(message, status=status)
    if any(m in lowered for m in _TRANSIENT_MARKERS):
        return TransientError(message, status=status)
    return UnknownStoreError(message, status=status)


def error_from_response(status: int, payload: Any) -> StoreError:
    """Map a non-2xx store response to a tagged error.

    `payload` is the decoded JSON body (or raw text when it was not JSON).
    FastAPI wraps our structured errors as {"detail": {"code", "message"}};
    validation failures arrive as {"detail": [...]}.
    """
    detail = payload.get("detail", payload) if isinstance(payload, dict) else payload
    if isinstance(detail, dict):
        message = str(detail.get("message") or detail.get("code") or detail)
        cls = _CODE_TO_CLASS.get(str(detail.get("code", "")))
        if cls is not None:
            return cls(message, status=status)
    elif isinstance(detail, list):
        message = "; ".join(str(d.get("msg", d)) if isinstance(d, dict) else str(d) for d in detail)
    else:
        message = str(detail or f"HTTP {status}")

    if status in (401, 403):
        return AuthorizationError(message, status=status)
    if status == 409:
        return AlreadyElevated(message, status=status)
    if status == 404:
        return NotFoundError(message, status=status)
    if status == 422:
        return InvalidRequestError(message, status=status)
    if status in (502, 503, 504):
        return TransientError(message, status=status)
    return _from_message(message, status)


def normalize_error(value: Any) -> StoreError:
    """Fold any thrown value or error payload into a `StoreError` variant."""
    if isinstance(value, StoreError):
        return value
    if isinstance(value, (concurrent.futures.TimeoutError, TimeoutError)):
        return InitTimeoutError(str(value) or "Timed out waiting for the inquiry store")
    # ConnectTimeout is also a ConnectionError: nobody accepted the connection.
    if isinstance(value, requests.ConnectionError):
        return TransientError(f"Inquiry store unreachable: {value}")
    # Connected but no answer: the store is hung, not stopped.
    if isinstance(value, requests.Timeout):
        return InitTimeoutError(f"The inquiry store did not answer in time: {value}")
    if isinstance(value, requests.HTTPError) and value.response is not None:
        resp = value.response
        try:
            payload: Any = resp.json()
        except ValueError:
            payload = resp.text
        return error_from_response(resp.status_code, payload)
    if isinstance(value, dict):
        if "status" in value and isinstance(value["status"], int):
            return error_from_response(value["status"], value)
        message = value.get("message") or value.get("error")
        if isinstance(message, str):
            return _from_message(message)
        try:
            return UnknownStoreError(json.dumps(value, default=str))
        except (TypeError, ValueError):
            return UnknownStoreError("An unknown error occurred")
    if isinstance(value, str):
        return _from_message(value)
    if isinstance(value, BaseException):
        return _from_message(str(value) or type(value).__name__)
    return UnknownStoreError("An unknown error occurred")
