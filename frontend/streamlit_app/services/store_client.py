# frontend/streamlit_app/services/store_client.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
HTTP client for the remote inquiry store (backend/store).

`InquiryStoreClient` is the capability object the admin panel calls through.
It is bound to one caller identity, sent as the `X-Caller-Id` header. A
successful `elevate_privilege()` returns a session token that the client then
sends as `Authorization: Bearer` on every call; the store accepts admin calls
only with both. The public form uses an anonymous client; the admin panel
uses one bound to the official user id.

Every failure leaves this module as a `services.errors.StoreError` variant;
callers never see raw `requests` exceptions.
"""

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

import requests

from services.errors import error_from_response, normalize_error


class InquiryKind(str, Enum):
    CONTACT = "contact"
    SERVICE_REQUEST = "serviceRequest"


@dataclass(frozen=True)
class Inquiry:
    id: int
    kind: InquiryKind
    name: str
    phone_number: str
    message: str
    email: str | None = None
    service_category: str | None = None
    read: bool = False
    internal: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    # Display-only record synthesized client side; never sent to the store.
    placeholder: bool = False

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> Inquiry:
        created = data.get("created_at")
        if isinstance(created, str):
            created_at = datetime.fromisoformat(created.replace("Z", "+00:00"))
        elif isinstance(created, datetime):
            created_at = created
        else:
            created_at = datetime.now(timezone.utc)
        return cls(
            id=int(data["id"]),
            kind=InquiryKind(data.get("inquiry_type", InquiryKind.CONTACT.value)),
            name=data.get("name", ""),
            phone_number=data.get("phone_number", ""),
            message=data.get("message", ""),
            email=data.get("email") or None,
            service_category=data.get("service_category") or None,
            read=bool(data.get("read", False)),
            internal=bool(data.get("internal", False)),
            created_at=created_at,
        )

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["kind"] = self.kind.value
        out["created_at"] = self.created_at.isoformat()
        return out


def anonymous_caller_id() -> str:
    return f"anon-{uuid.uuid4().hex}"


class InquiryStoreClient:
    """RPC-style wrapper over the store's HTTP JSON routes."""

    def __init__(
        self,
        base_url: str,
        caller_id: str | None = None,
        *,
        timeout: float = 10.0,
        session: Any | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.caller_id = caller_id or anonymous_caller_id()
        self.timeout = timeout
        # Anything with `.request(method, url, json=, headers=, timeout=)`;
        # tests hand in a FastAPI TestClient.
        self._session = session if session is not None else requests.Session()
        self._session_token: str | None = None

    def _headers(self) -> dict[str, str]:
        headers = {"X-Caller-Id": self.caller_id}
        if self._session_token:
            headers["Authorization"] = f"Bearer {self._session_token}"
        return headers

    def _call(self, method: str, path: str, payload: dict[str, Any] | None = None) -> Any:
        try:
            resp = self._session.request(
                method,
                f"{self.base_url}{path}",
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except Exception as e:
            raise normalize_error(e) from e

        if resp.status_code >= 400:
            try:
                body: Any = resp.json()
            except ValueError:
                body = resp.text
            raise error_from_response(resp.status_code, body)
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # ── Public operations ──────────────────────────────────────────────────

    def health(self) -> str:
        return str(self._call("GET", "/health").get("status", "unknown"))

    def submit_inquiry(
        self,
        kind: InquiryKind,
        name: str,
        phone_number: str,
        email: str | None,
        message: str,
        service_category: str | None,
        *,
        internal: bool = False,
    ) -> int:
        body = {
            "inquiry_type": InquiryKind(kind).value,
            "name": name,
            "phone_number": phone_number,
            "email": email,
            "message": message,
            "service_category": service_category,
        }
        path = "/rpc/inquiries/internal" if internal else "/rpc/inquiries"
        return int(self._call("POST", path, body)["id"])

    # ── Admin operations ───────────────────────────────────────────────────

    def list_inquiries(self) -> list[Inquiry]:
        return [Inquiry.from_payload(row) for row in self._call("GET", "/rpc/inquiries")]

    def get_inquiry(self, inquiry_id: int) -> Inquiry:
        return Inquiry.from_payload(self._call("GET", f"/rpc/inquiries/{int(inquiry_id)}"))

    def set_read(self, inquiry_id: int, read: bool) -> None:
        self._call("PUT", f"/rpc/inquiries/{int(inquiry_id)}/read", {"read": bool(read)})

    def delete(self, inquiry_id: int) -> None:
        self._call("DELETE", f"/rpc/inquiries/{int(inquiry_id)}")

    def elevate_privilege(self, secret: str, user_id: str | None = None) -> None:
        body = self._call("POST", "/rpc/access/elevate", {"secret": secret, "user_id": user_id})
        token = (body or {}).get("session_token")
        if token:
            self._session_token = str(token)

    def is_caller_admin(self) -> bool:
        return bool(self._call("GET", "/rpc/access/is-admin").get("is_admin", False))
