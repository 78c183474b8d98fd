# frontend/streamlit_app/views/inquiry_form.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Streamlit view: public inquiry form.

Visitors choose "general contact" or "service request", fill in their name,
mobile number, optional email and message, and submit. Submission goes
through the anonymous store client; a service category is only asked for
(and only stored) for service requests.
"""

import logging

import streamlit as st

from core.clients import get_public_client
from core.constants import SERVICE_CATEGORIES, tr
from services.errors import StoreError
from services.forms import validate_inquiry
from services.store_client import InquiryKind
from ui.keys import k

log = logging.getLogger(__name__)

_SUCCESS_FLAG = k("form", "submitted")


def render(ctx: dict) -> None:
    lang = ctx["lang"]

    if st.session_state.pop(_SUCCESS_FLAG, False):
        st.success(tr("submit_ok", lang))

    # Kind lives outside the form so the category select can appear/disappear.
    kind = st.radio(
        tr("inquiry_type", lang),
        [InquiryKind.CONTACT, InquiryKind.SERVICE_REQUEST],
        format_func=lambda v: tr("type_contact" if v is InquiryKind.CONTACT else "type_service", lang),
        horizontal=True,
        key=k("form", "kind"),
    )

    with st.form(k("form", "inquiry"), clear_on_submit=False):
        category = None
        if kind is InquiryKind.SERVICE_REQUEST:
            category = st.selectbox(
                tr("service_category", lang), ["", *SERVICE_CATEGORIES], key=k("form", "category")
            )
        name = st.text_input(tr("name", lang), key=k("form", "name"))
        phone = st.text_input(tr("phone", lang), max_chars=10, key=k("form", "phone"))
        email = st.text_input(tr("email", lang), key=k("form", "email"))
        message = st.text_area(tr("message", lang), height=140, key=k("form", "message"))
        submitted = st.form_submit_button(tr("submit", lang), type="primary", use_container_width=True)

    if not submitted:
        return

    draft, errors = validate_inquiry(kind, name, phone, email, message, category)
    if draft is None:
        for error_key in errors.values():
            st.error(tr(error_key, lang))
        return

    try:
        with st.spinner("…"):
            inquiry_id = get_public_client().submit_inquiry(
                draft.kind,
                draft.name,
                draft.phone_number,
                draft.email,
                draft.message,
                draft.service_category,
            )
    except StoreError as e:
        log.warning("Inquiry submission failed (%s): %s", e.kind.value, e.message)
        st.error(tr("submit_failed", lang))
        return

    log.info("Inquiry #%d submitted", inquiry_id)
    # Reset the fields on the next run and show the thank-you note there.
    for field_name in ("name", "phone", "email", "message", "category"):
        st.session_state.pop(k("form", field_name), None)
    st.session_state[_SUCCESS_FLAG] = True
    st.rerun()
