# frontend/streamlit_app/views/admin.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Streamlit view: Admin Panel

Purpose
-------
Lets the kiosk operator read and triage inquiries submitted on the public
site:
  • read / unread tabs with counts, free-text search, type and category filters
  • mark read / unread and delete per inquiry
  • bulk mark read / unread for ticked inquiries
  • CSV / JSON export of the fetched set
  • file an internal inquiry for a walk-in customer

Flow
----
The router only renders this view for a logged-in tab. The view then drives
the admin actor initializer to `ready` (spinner while connecting) and only
afterwards asks the inquiry controller for data. Initialization failures and
data-fetch failures are shown separately, each with Retry and Logout.

Error Handling
--------------
Mutations run in button callbacks. Their failures are parked in session
state as a flash message and shown on the next rerun; nothing is dropped.
"""

import logging

import streamlit as st

from core.clients import get_admin_initializer, get_credential_gate, get_inquiry_controller
from core.constants import SERVICE_CATEGORIES, tr
from services.actor import ActorStatus
from services.errors import ActorNotReadyError, InquiryFetchError, StoreError
from services.export import export_filename, to_csv_bytes, to_json_bytes
from services.forms import validate_inquiry
from services.inquiries import InquiryFilter, categories_of, filter_inquiries, unread_count
from services.store_client import Inquiry, InquiryKind
from ui.components import error_panel, inquiry_card
from ui.keys import k

log = logging.getLogger(__name__)

_FLASH = k("admin", "flash")


def _flash(level: str, message: str) -> None:
    st.session_state[_FLASH] = (level, message)


def _show_flash() -> None:
    flash = st.session_state.pop(_FLASH, None)
    if flash is None:
        return
    level, message = flash
    {"success": st.success, "warning": st.warning, "error": st.error}.get(level, st.info)(message)


def _logout() -> None:
    get_credential_gate().logout()
    st.query_params.clear()


def _toggle_read(inquiry: Inquiry) -> None:
    try:
        get_inquiry_controller().set_read(inquiry.id, not inquiry.read)
    except StoreError as e:
        _flash("error", e.message)


def _delete(inquiry: Inquiry, lang: str) -> None:
    try:
        get_inquiry_controller().delete(inquiry.id)
    except StoreError as e:
        _flash("error", e.message)
    else:
        _flash("success", tr("deleted", lang))


def _bulk(ids: list[int], read: bool, lang: str) -> None:
    try:
        result = get_inquiry_controller().bulk_set_read(ids, read)
    except StoreError as e:
        _flash("error", e.message)
        return
    if not result.ok:
        failed = ", ".join(f"#{i}" for i in result.failed)
        _flash("warning", f"{tr('bulk_partial', lang)}: {failed}")


def _internal_inquiry_form(lang: str) -> None:
    with st.expander(tr("internal_title", lang)):
        with st.form(k("admin", "internal"), clear_on_submit=True):
            kind = st.selectbox(
                tr("inquiry_type", lang),
                [InquiryKind.CONTACT, InquiryKind.SERVICE_REQUEST],
                format_func=lambda v: tr("type_contact" if v is InquiryKind.CONTACT else "type_service", lang),
            )
            category = st.selectbox(tr("service_category", lang), ["", *SERVICE_CATEGORIES])
            name = st.text_input(tr("name", lang))
            phone = st.text_input(tr("phone", lang), max_chars=10)
            email = st.text_input(tr("email", lang))
            message = st.text_area(tr("message", lang))
            submitted = st.form_submit_button(tr("submit", lang))
        if not submitted:
            return
        draft, errors = validate_inquiry(kind, name, phone, email, message, category)
        if draft is None:
            for error_key in errors.values():
                st.error(tr(error_key, lang))
            return
        try:
            inquiry_id = get_inquiry_controller().submit_internal(draft)
        except StoreError as e:
            st.error(e.message)
            return
        log.info("Internal inquiry #%d filed", inquiry_id)
        st.rerun()


def _filters(inquiries: list[Inquiry], lang: str) -> InquiryFilter:
    total = len([i for i in inquiries if not i.placeholder])
    unread = unread_count(inquiries)
    labels = {
        "all": f"{tr('all', lang)} ({total})",
        "unread": f"{tr('unread', lang)} ({unread})",
        "read": f"{tr('read', lang)} ({total - unread})",
    }
    status = st.radio(" ", list(labels), format_func=labels.get, horizontal=True, key=k("admin", "status"))
    c1, c2, c3 = st.columns([2, 1, 1])
    with c1:
        search = st.text_input(tr("search", lang), key=k("admin", "search"))
    with c2:
        kind = st.selectbox(
            tr("kind_filter", lang),
            [None, InquiryKind.CONTACT, InquiryKind.SERVICE_REQUEST],
            format_func=lambda v: tr("any", lang)
            if v is None
            else tr("type_contact" if v is InquiryKind.CONTACT else "type_service", lang),
            key=k("admin", "kind"),
        )
    with c3:
        category = st.selectbox(
            tr("category_filter", lang),
            [None, *categories_of(inquiries)],
            format_func=lambda v: tr("any", lang) if v is None else v,
            key=k("admin", "category"),
        )
    return InquiryFilter(status=status, search=search, kind=kind, category=category)


def _ensure_session(lang: str) -> bool:
    """Drive the initializer to ready; render failures. True when ready."""
    identity = get_credential_gate().identity()
    if identity is None:
        return False
    initializer = get_admin_initializer()
    if initializer.status is not ActorStatus.READY or initializer.identity != identity:
        with st.spinner(tr("connecting", lang)):
            initializer.ensure_ready(*identity)

    if initializer.status is ActorStatus.FAILED and initializer.error is not None:
        error_panel(
            tr("init_failed", lang),
            initializer.error,
            lang,
            on_retry=initializer.retry,
            on_logout=_logout,
            key="init",
        )
        return False
    if initializer.status is not ActorStatus.READY:
        st.info(tr("connecting", lang))
        return False
    return True


def render(ctx: dict) -> None:
    """Render the Admin Panel for a logged-in tab."""
    lang = ctx["lang"]
    head, out = st.columns([5, 1])
    with head:
        st.title(f"🛡️ {tr('admin_title', lang)}")
    with out:
        st.button(tr("logout", lang), key=k("admin", "logout"), on_click=_logout, use_container_width=True)

    if not _ensure_session(lang):
        return

    _show_flash()
    controller = get_inquiry_controller()
    try:
        inquiries = controller.list()
    except InquiryFetchError as e:
        error_panel(
            tr("fetch_failed", lang),
            e,
            lang,
            on_retry=get_admin_initializer().retry,
            on_logout=_logout,
            key="fetch",
        )
        return
    except ActorNotReadyError:
        # The one-shot self-heal re-initialized and that failed too.
        initializer = get_admin_initializer()
        error_panel(
            tr("init_failed", lang),
            initializer.error or ActorNotReadyError(tr("init_failed", lang)),
            lang,
            on_retry=initializer.retry,
            on_logout=_logout,
            key="heal",
        )
        return

    _internal_inquiry_form(lang)

    tools = st.columns([1, 1, 1, 3])
    with tools[0]:
        st.button(f"🔄 {tr('refresh', lang)}", key=k("admin", "refresh"), use_container_width=True)
    with tools[1]:
        st.download_button(
            tr("export_csv", lang),
            to_csv_bytes(inquiries),
            file_name=export_filename("csv"),
            mime="text/csv",
            use_container_width=True,
        )
    with tools[2]:
        st.download_button(
            tr("export_json", lang),
            to_json_bytes(inquiries),
            file_name=export_filename("json"),
            mime="application/json",
            use_container_width=True,
        )

    flt = _filters(inquiries, lang)
    visible = filter_inquiries(inquiries, flt)
    if not visible:
        st.info(f"📭 {tr('no_inquiries', lang)}")
        return

    picked: list[int] = []
    for inquiry in visible:
        if inquiry_card(
            inquiry,
            lang,
            on_toggle_read=_toggle_read,
            on_delete=lambda i: _delete(i, lang),
        ):
            picked.append(inquiry.id)

    if picked:
        b1, b2 = st.columns(2)
        with b1:
            st.button(
                f"{tr('bulk_read', lang)} ({len(picked)})",
                key=k("admin", "bulk_read"),
                on_click=_bulk,
                args=(picked, True, lang),
                use_container_width=True,
            )
        with b2:
            st.button(
                f"{tr('bulk_unread', lang)} ({len(picked)})",
                key=k("admin", "bulk_unread"),
                on_click=_bulk,
                args=(picked, False, lang),
                use_container_width=True,
            )
