# frontend/streamlit_app/services/forms.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""Validation for the public inquiry form (no Streamlit imports)."""

import re
from dataclasses import dataclass

from services.store_client import InquiryKind

# Indian mobile numbers: 10 digits starting with 6-9.
PHONE_RE = re.compile(r"^[6-9]\d{9}$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class InquiryDraft:
    kind: InquiryKind
    name: str
    phone_number: str
    email: str | None
    message: str
    service_category: str | None


def validate_inquiry(
    kind: InquiryKind | str,
    name: str,
    phone_number: str,
    email: str,
    message: str,
    service_category: str | None,
) -> tuple[InquiryDraft | None, dict[str, str]]:
    """Return (cleaned draft, {}) or (None, {field: error key})."""
    errors: dict[str, str] = {}
    kind = InquiryKind(kind)
    name = (name or "").strip()
    phone = (phone_number or "").strip()
    email = (email or "").strip()
    message = (message or "").strip()

    if not name:
        errors["name"] = "err_name"
    if not phone:
        errors["phone_number"] = "err_phone_required"
    elif not PHONE_RE.match(phone):
        errors["phone_number"] = "err_phone_invalid"
    if email and not EMAIL_RE.match(email):
        errors["email"] = "err_email"
    if not message:
        errors["message"] = "err_message"

    if errors:
        return None, errors

    category = (service_category or "").strip() or None
    return (
        InquiryDraft(
            kind=kind,
            name=name,
            phone_number=phone,
            email=email or None,
            message=message,
            # Only service requests carry a category.
            service_category=category if kind is InquiryKind.SERVICE_REQUEST else None,
        ),
        {},
    )
