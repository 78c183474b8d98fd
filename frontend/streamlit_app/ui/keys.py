# frontend/streamlit_app/ui/keys.py
# SPDX-License-Identifier: Apache-2.0
"""Centralized helpers for Streamlit widget keys.

Streamlit widgets need **stable** and **unique** keys to keep their state
across reruns. The admin panel renders one row of buttons per inquiry and the
public page renders several forms, so every key is namespaced by its view and,
where a widget repeats, by the record it belongs to.

Usage
-----
    from ui.keys import k

    st.button("Delete", key=k("admin", "delete", inquiry.id))
"""

from __future__ import annotations


def k(page: str, name: str, item: object | None = None) -> str:
    """Return a stable, namespaced widget key.

    Args:
      page: Logical namespace for the widget ("home", "form", "admin", ...).
      name: Identifier for the widget within that namespace.
      item: Optional record id for widgets repeated per row.

    Returns:
      "<page>:<name>" or "<page>:<name>:<item>".
    """
    base = f"{page}:{name}"
    return base if item is None else f"{base}:{item}"
