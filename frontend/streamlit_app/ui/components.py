# frontend/streamlit_app/ui/components.py
# SPDX-License-Identifier: Apache-2.0
"""Reusable Streamlit UI components for the admin panel.

Currently provided:
  • error_panel(): message plus explicit Retry / Logout recovery buttons.
  • inquiry_card(): one inquiry with its read/delete actions.
"""

from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from core.constants import tr
from services.errors import StoreError
from services.export import format_timestamp
from services.store_client import Inquiry, InquiryKind
from ui.keys import k


def error_panel(
    title: str,
    error: StoreError,
    lang: str,
    *,
    on_retry: Callable[[], None] | None = None,
    on_logout: Callable[[], None] | None = None,
    key: str = "error",
) -> None:
    """Show a human-readable failure and the actions that recover from it."""
    st.error(f"**{title}**\n\n{error.message}")
    cols = st.columns(2)
    if on_retry is not None:
        with cols[0]:
            st.button(tr("retry", lang), key=k("admin", f"{key}_retry"), on_click=on_retry, use_container_width=True)
    if on_logout is not None:
        with cols[1]:
            st.button(tr("logout", lang), key=k("admin", f"{key}_logout"), on_click=on_logout, use_container_width=True)


def inquiry_card(
    inquiry: Inquiry,
    lang: str,
    *,
    on_toggle_read: Callable[[Inquiry], None],
    on_delete: Callable[[Inquiry], None],
    selected: bool = False,
) -> bool:
    """Render one inquiry; returns whether its bulk-select box is ticked."""
    with st.container(border=True):
        head, actions = st.columns([4, 1])
        with head:
            badge = "" if inquiry.read else f" :red[{tr('new_badge', lang)}]"
            st.markdown(f"**{inquiry.name}**{badge}")
            kind = tr("type_contact" if inquiry.kind is InquiryKind.CONTACT else "type_service", lang)
            tags = [f"`{kind}`"]
            if inquiry.service_category:
                tags.append(f"`{inquiry.service_category}`")
            if inquiry.internal:
                tags.append(f"`{tr('internal', lang)}`")
            st.caption(f"#{inquiry.id} · {format_timestamp(inquiry.created_at)} · " + " ".join(tags))
            contact = f"📞 [{inquiry.phone_number}](tel:{inquiry.phone_number})"
            if inquiry.email:
                contact += f"  ·  ✉️ [{inquiry.email}](mailto:{inquiry.email})"
            st.markdown(contact)
            st.write(inquiry.message)
            if inquiry.placeholder:
                st.info(tr("demo_note", lang))

        with actions:
            disabled = inquiry.placeholder
            picked = st.checkbox(" ", value=selected, key=k("admin", "pick", inquiry.id), disabled=disabled)
            st.button(
                tr("mark_unread" if inquiry.read else "mark_read", lang),
                key=k("admin", "toggle", inquiry.id),
                on_click=on_toggle_read,
                args=(inquiry,),
                disabled=disabled,
                use_container_width=True,
            )
            st.button(
                tr("delete", lang),
                key=k("admin", "delete", inquiry.id),
                on_click=on_delete,
                args=(inquiry,),
                disabled=disabled,
                type="primary",
                use_container_width=True,
            )
    return picked and not inquiry.placeholder
