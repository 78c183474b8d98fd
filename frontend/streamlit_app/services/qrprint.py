# frontend/streamlit_app/services/qrprint.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
QR images and contact links for the public site.

This module provides:
  • High-quality PNG QR generation (via qrcode[pil])
  • `tel:` and WhatsApp (`wa.me`) link builders for the kiosk's numbers

All bytes are in-memory; the caller hands them to `st.image`.
"""

import io
import re
from urllib.parse import quote

import qrcode


def digits_only(s: str) -> str:
    return re.sub(r"\D", "", s or "")


def tel_link(phone: str) -> str:
    return f"tel:{digits_only(phone)}"


def whatsapp_link(number: str, text: str | None = None) -> str:
    """Return a wa.me deep link, optionally prefilled with `text`."""
    url = f"https://wa.me/{digits_only(number)}"
    if text:
        url += f"?text={quote(text)}"
    return url


def make_qr_png(data: str, box_size: int = 10, border: int = 2) -> bytes:
    """Generate a PNG QR code for `data`.

    Uses medium error correction (M) to balance density and scannability
    on printed counter cards and phone screens.
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
