# frontend/streamlit_app/ui/sidebar.py
# SPDX-License-Identifier: Apache-2.0
"""Sidebar composition for the kiosk website.

This module renders the left-hand sidebar shared by the public site and the
admin panel: the Hindi/English switch, in-page navigation links, the
business hours and, for a logged-in tab, the official session with a
logout button.

Returns
-------
`render_sidebar()` returns a context dictionary containing:
- `settings`: the loaded settings dataclass instance.
- `lang`: the active language code ("hi" or "en").
- `logged_in`: whether this tab has passed the official login.
- `store`: this tab's `SessionStore`.

This context object is passed to the view render functions.
"""

from __future__ import annotations

from typing import Any

import streamlit as st

from core.clients import get_credential_gate
from core.config import settings
from core.constants import BUSINESS, LANG_LABELS, LANGS, NAV_LINKS, pick, tr
from core.state import LANG_KEY, USER_ID_KEY, SessionStore
from ui.keys import k


def render_sidebar(store: SessionStore) -> dict[str, Any]:
    """Render the sidebar and return the context dict for views."""
    current = store.read(LANG_KEY) or settings.DEFAULT_LANG
    lang = st.sidebar.radio(
        "भाषा / Language",
        LANGS,
        index=LANGS.index(current) if current in LANGS else 0,
        format_func=lambda code: LANG_LABELS[code],
        horizontal=True,
        key=k("sidebar", "lang"),
    )
    if lang != current:
        store.write(LANG_KEY, lang)

    st.sidebar.markdown(f"### {pick(BUSINESS['name'], lang)}")
    st.sidebar.caption(pick(BUSINESS["hours"], lang))
    st.sidebar.markdown("\n".join(f"- [{pick(label, lang)}](#{anchor})" for anchor, label in NAV_LINKS))

    gate = get_credential_gate()
    logged_in = gate.is_logged_in()
    if logged_in:
        st.sidebar.markdown("---")
        st.sidebar.markdown(f"**{tr('admin_title', lang)}**  \n`{store.read(USER_ID_KEY) or ''}`")
        st.sidebar.button(tr("logout", lang), key=k("sidebar", "logout"), on_click=gate.logout)

    return dict(settings=settings, lang=lang, logged_in=logged_in, store=store)
