# frontend/streamlit_app/app.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

__doc__ = """Vaishnavi e-Mitra & CSC Centre: website and admin panel (Streamlit).

This module is the Streamlit entrypoint. It wires up the page chrome, the
tab-scoped session store, the route guard and the left sidebar, then hands
the main area to exactly one view.

Views:
  1) Public site: hero, services, FAQ, inquiry form, contact (default).
  2) Admin panel: inquiry triage; `?page=admin`, logged-in tabs only.

Design notes:
* We import sibling packages (ui/, views/, core/, services/) by adding this
  directory to sys.path. This avoids requiring an installable package layout
  and keeps local imports explicit and stable inside the container.
* Views live in views/ rather than pages/: Streamlit treats a pages/ folder
  next to the entrypoint as its own multipage navigation.
* The SPA path travels in the `page` query parameter. The first run of a tab
  is the bootstrap: the requested path is parked in the session store and
  replayed once defaults are in place, so a deep link survives it.
* Keep this file intentionally thin. Business logic belongs to services/*.
"""

# ────────────────────── sys.path bootstrap for local packages ─────────────────
# Streamlit executes scripts from the working dir; adding the app directory to
# sys.path allows `from views import ...` style imports without packaging.
import pathlib
import sys

APP_DIR = pathlib.Path(__file__).resolve().parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))
# ──────────────────────────────────────────────────────────────────────────────

import logging
from typing import Final

import streamlit as st

from core.config import settings
from core.state import ensure_defaults, get_session_store
from services.routing import Router, RouteDecision, View, path_from_query, query_from_path
from ui.layout import configure_page
from ui.sidebar import render_sidebar
from views import admin, home

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s: %(message)s",
)
log = logging.getLogger("kiosk.app")

_ROUTER_SLOT: Final[str] = "_kiosk_router"


def _route() -> RouteDecision:
    store = get_session_store()
    router: Router | None = st.session_state.get(_ROUTER_SLOT)
    if router is None:
        router = Router(store)
        st.session_state[_ROUTER_SLOT] = router

    requested = path_from_query(st.query_params.get("page"))
    decision = router.request(requested)
    if decision is None:
        # First run of this tab.
        ensure_defaults(store, lang=settings.DEFAULT_LANG)
        decision = router.complete_bootstrap() or router.decide(requested)
    return decision


# ─────────────────────────────── Page chrome ──────────────────────────────────
configure_page(title="वैष्णवी ई-मित्र एवं CSC केन्द्र | Vaishnavi e-Mitra & CSC Centre")

decision = _route()
if decision.redirect_to is not None:
    log.info("Admin path requested without login; redirecting to %s", decision.redirect_to)
    target = query_from_path(decision.redirect_to)
    st.query_params.clear()
    if target is not None:
        st.query_params["page"] = target
    st.rerun()

# The sidebar returns a dictionary ("ctx") of useful values (settings,
# language, login flag, store), passed to the view to keep state flow explicit.
ctx: dict = render_sidebar(get_session_store())

if decision.view is View.ADMIN and ctx["logged_in"]:
    admin.render(ctx)
else:
    home.render(ctx)
