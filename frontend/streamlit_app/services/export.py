# frontend/streamlit_app/services/export.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Export fetched inquiries for offline follow-up.

Both helpers return bytes ready for `st.download_button`. The display-only
placeholder record is never exported.
"""

import csv
import io
import json
from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone

from services.store_client import Inquiry, InquiryKind

CSV_HEADERS = [
    "ID",
    "Timestamp",
    "Type",
    "Name",
    "Phone",
    "Email",
    "Service Category",
    "Message",
    "Internal",
    "Read",
]

# Timestamps are shown in Indian Standard Time.
IST = timezone(timedelta(hours=5, minutes=30), "IST")


def _real(inquiries: Iterable[Inquiry]) -> list[Inquiry]:
    return [i for i in inquiries if not i.placeholder]


def format_timestamp(ts: datetime) -> str:
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(IST).strftime("%d/%m/%Y, %I:%M %p")


def export_filename(ext: str, today: date | None = None) -> str:
    return f"inquiries-{(today or date.today()).isoformat()}.{ext}"


def to_json_bytes(inquiries: Iterable[Inquiry]) -> bytes:
    rows = []
    for inq in _real(inquiries):
        row = inq.to_dict()
        row.pop("placeholder", None)
        rows.append(row)
    return json.dumps(rows, indent=2, ensure_ascii=False).encode("utf-8")


def to_csv_bytes(inquiries: Iterable[Inquiry]) -> bytes:
    # csv quotes fields containing commas, quotes or newlines (doubling quotes).
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for inq in _real(inquiries):
        writer.writerow(
            [
                inq.id,
                format_timestamp(inq.created_at),
                "Contact" if inq.kind is InquiryKind.CONTACT else "Service Request",
                inq.name,
                inq.phone_number,
                inq.email or "",
                inq.service_category or "",
                inq.message,
                "Yes" if inq.internal else "No",
                "Yes" if inq.read else "No",
            ]
        )
    # BOM so spreadsheet apps pick UTF-8 for Devanagari text.
    return ("\ufeff" + buf.getvalue()).encode("utf-8")
