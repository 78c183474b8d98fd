# frontend/streamlit_app/views/login.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""Streamlit view: "Official Login" dialog that opens the admin panel."""

import streamlit as st

from core.clients import get_credential_gate
from core.constants import tr
from services.routing import ADMIN_PATH, query_from_path
from ui.keys import k


def _login_form(lang: str) -> None:
    st.caption(tr("login_prompt", lang))
    with st.form(k("login", "form")):
        user_id = st.text_input(tr("user_id", lang), autocomplete="username", key=k("login", "user"))
        password = st.text_input(
            tr("password", lang), type="password", autocomplete="current-password", key=k("login", "pw")
        )
        submitted = st.form_submit_button(tr("login", lang), type="primary", use_container_width=True)

    if not submitted:
        return
    if not get_credential_gate().login(user_id, password):
        st.error(tr("login_failed", lang))
        return

    st.session_state.pop(k("login", "pw"), None)
    st.query_params["page"] = query_from_path(ADMIN_PATH)
    st.rerun()


def render(ctx: dict) -> None:
    """Render the login button; the form opens in a modal dialog."""
    lang = ctx["lang"]

    @st.dialog(tr("login_title", lang))
    def _dialog() -> None:
        _login_form(lang)

    if st.button(f"🔒 {tr('official_login', lang)}", key=k("login", "open"), type="tertiary"):
        _dialog()
