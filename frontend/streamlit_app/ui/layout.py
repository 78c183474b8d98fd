# frontend/streamlit_app/ui/layout.py
# SPDX-License-Identifier: Apache-2.0
"""Layout helpers for the kiosk website.

- `configure_page`: set the browser title and layout once per run. Streamlit
  requires `st.set_page_config` before any other element.
- `section`: a consistent anchored heading for the long public page, so the
  sidebar navigation links (`#services`, `#contact`, ...) land on it.
"""

from __future__ import annotations

import streamlit as st


def configure_page(title: str, *, icon: str = "🇮🇳") -> None:
    """Configure global Streamlit page options.

    Args:
      title: Browser tab title.
      icon: Page icon shown in the tab.
    """
    st.set_page_config(page_title=title, page_icon=icon, layout="wide")


def section(anchor: str, title: str, subtitle: str | None = None) -> None:
    """Render an anchored section heading with an optional caption."""
    st.header(title, anchor=anchor)
    if subtitle:
        st.caption(subtitle)
