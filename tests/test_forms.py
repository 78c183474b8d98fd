# tests/test_forms.py
# Public form validation, bilingual copy lookup and contact links.

import pytest

from core.constants import LANGS, SERVICE_CATEGORIES, UI_TEXT, tr
from services.forms import validate_inquiry
from services.qrprint import make_qr_png, tel_link, whatsapp_link
from services.store_client import InquiryKind


def test_valid_contact_is_cleaned():
    draft, errors = validate_inquiry("contact", "  Asha ", "9876543210", "", " Need Aadhaar update ", "Aadhaar")
    assert errors == {}
    assert draft.kind is InquiryKind.CONTACT
    assert draft.name == "Asha"
    assert draft.email is None
    assert draft.message == "Need Aadhaar update"
    # Contact inquiries never carry a category.
    assert draft.service_category is None


def test_service_request_keeps_category():
    draft, _ = validate_inquiry(
        InquiryKind.SERVICE_REQUEST, "Ravi", "6000000000", "ravi@example.com", "Ration card", "Food"
    )
    assert draft.service_category == "Food"
    assert draft.email == "ravi@example.com"


@pytest.mark.parametrize(
    "phone, key",
    [
        ("", "err_phone_required"),
        ("5876543210", "err_phone_invalid"),
        ("987654321", "err_phone_invalid"),
        ("98765432100", "err_phone_invalid"),
        ("98765-4321", "err_phone_invalid"),
    ],
)
def test_phone_rules(phone, key):
    draft, errors = validate_inquiry("contact", "Asha", phone, "", "hi", None)
    assert draft is None
    assert errors == {"phone_number": key}


def test_all_errors_reported_together():
    draft, errors = validate_inquiry("contact", "", "", "not-an-email", "", None)
    assert draft is None
    assert errors == {
        "name": "err_name",
        "phone_number": "err_phone_required",
        "email": "err_email",
        "message": "err_message",
    }


def test_every_error_key_has_copy_in_both_languages():
    for key in ("err_name", "err_phone_required", "err_phone_invalid", "err_email", "err_message"):
        for lang in LANGS:
            assert tr(key, lang) != key
    assert tr("submit_ok", "hi") != tr("submit_ok", "en")


def test_translation_falls_back():
    assert tr("no-such-key", "en") == "no-such-key"
    some_key = next(iter(UI_TEXT))
    assert tr(some_key, "fr") == tr(some_key, "hi")


def test_categories_are_unique():
    assert len(SERVICE_CATEGORIES) == len(set(SERVICE_CATEGORIES))


def test_contact_links():
    assert tel_link("+91 98765-00000") == "tel:919876500000"
    assert whatsapp_link("+91 98765 00000") == "https://wa.me/919876500000"
    assert whatsapp_link("919876500000", "नमस्ते hi") == "https://wa.me/919876500000?text=%E0%A4%A8%E0%A4%AE%E0%A4%B8%E0%A5%8D%E0%A4%A4%E0%A5%87%20hi"


def test_qr_png():
    png = make_qr_png("https://wa.me/919876500000")
    assert png.startswith(b"\x89PNG\r\n\x1a\n")
