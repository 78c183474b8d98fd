# frontend/streamlit_app/core/clients.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Client factories for the remote inquiry store.

- `get_public_client()` → anonymous `InquiryStoreClient` used by the public
  inquiry form.
- `get_admin_initializer()` / `get_inquiry_controller()` → the admin actor's
  ready/failed state and the fetched inquiry list.
- `get_credential_gate()` → the gate bound to this tab's `SessionStore`.

Every object here is kept in `st.session_state`, so it is scoped to one
browser tab. Streamlit runs a tab's reruns one at a time, which keeps each
client's `requests.Session` on a single thread; sharing one through
`st.cache_resource` would hand it to every session's script thread at once.

Security notes:
  * The admin secret and the official password come from `core.config` and
    are never logged.
  * Admin clients are never shared across tabs: each initializer builds its
    own client bound to the official user id.
"""

from collections.abc import Callable, MutableMapping
from typing import Any, TypeVar

import streamlit as st

from core.config import settings
from core.state import get_session_store
from services.actor import AdminActorInitializer
from services.auth import CredentialGate
from services.inquiries import InquiryListController
from services.store_client import InquiryStoreClient

_PUBLIC_CLIENT_SLOT = "_kiosk_public_client"
_INITIALIZER_SLOT = "_kiosk_admin_initializer"
_CONTROLLER_SLOT = "_kiosk_inquiry_controller"

T = TypeVar("T")


def tab_scoped(state: MutableMapping[str, Any], slot: str, build: Callable[[], T]) -> T:
    """Return `state[slot]`, building it on first use."""
    obj = state.get(slot)
    if obj is None:
        obj = build()
        state[slot] = obj
    return obj


def admin_http_timeout() -> float:
    # A store that accepts but never answers must trip the initializer's
    # wall-clock timeout, not a shorter per-request one.
    return max(settings.STORE_HTTP_TIMEOUT_S, settings.ACTOR_INIT_TIMEOUT_S)


def get_public_client() -> InquiryStoreClient:
    """This tab's anonymous client for form submissions."""
    return tab_scoped(
        st.session_state,
        _PUBLIC_CLIENT_SLOT,
        lambda: InquiryStoreClient(settings.STORE_URL, timeout=settings.STORE_HTTP_TIMEOUT_S),
    )


def _admin_client(caller_id: str) -> InquiryStoreClient:
    return InquiryStoreClient(settings.STORE_URL, caller_id, timeout=admin_http_timeout())


def get_credential_gate() -> CredentialGate:
    return CredentialGate(
        get_session_store(),
        user_id=settings.OFFICIAL_USER_ID,
        password=settings.OFFICIAL_PASSWORD,
        admin_token=settings.ADMIN_SECRET,
    )


def _build_initializer() -> AdminActorInitializer:
    initializer = AdminActorInitializer(
        _admin_client,
        timeout_s=settings.ACTOR_INIT_TIMEOUT_S,
        max_retries=settings.ACTOR_MAX_RETRIES,
        backoff_base_s=settings.ACTOR_BACKOFF_BASE_S,
    )
    initializer.attach(get_session_store())
    return initializer


def get_admin_initializer() -> AdminActorInitializer:
    """Return this tab's initializer, attached to the session store once."""
    return tab_scoped(st.session_state, _INITIALIZER_SLOT, _build_initializer)


def _build_controller() -> InquiryListController:
    controller = InquiryListController(get_admin_initializer())
    controller.attach(get_session_store())
    return controller


def get_inquiry_controller() -> InquiryListController:
    return tab_scoped(st.session_state, _CONTROLLER_SLOT, _build_controller)
