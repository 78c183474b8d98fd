# frontend/streamlit_app/services/inquiries.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Inquiry list controller for the admin panel.

Every store call goes through `AdminActorInitializer.require_ready()`, so no
list/update/delete can leave this module before the admin actor is ready:
calls made earlier raise `ActorNotReadyError` without touching the network.

Empty store
-----------
When the store returns no inquiries, `list()` hands back exactly one
placeholder record so the panel never looks like it is still loading. The
placeholder exists only on this side of the wire; `set_read()` and
`delete()` refuse it.

Bulk updates
------------
`bulk_set_read()` issues one call per id, in order, and reports which ids
succeeded and which failed. Nothing is rolled back on partial failure.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Final, Literal

from core.state import LOGIN_FLAG_KEY, SessionStore
from services.actor import AdminActorInitializer
from services.errors import (
    InquiryFetchError,
    PlaceholderRecordError,
    StoreError,
    normalize_error,
)
from services.forms import InquiryDraft
from services.store_client import Inquiry, InquiryKind

log = logging.getLogger(__name__)

PLACEHOLDER_ID: Final[int] = 0

ReadFilter = Literal["all", "read", "unread"]


def placeholder_inquiry(now: datetime | None = None) -> Inquiry:
    return Inquiry(
        id=PLACEHOLDER_ID,
        kind=InquiryKind.CONTACT,
        name="Demo / डेमो",
        phone_number="9999999999",
        message=(
            "No inquiries yet. New submissions from the website form will appear here. "
            "अभी तक कोई पूछताछ नहीं आई है।"
        ),
        read=False,
        internal=False,
        created_at=now or datetime.now(timezone.utc),
        placeholder=True,
    )


@dataclass(frozen=True)
class InquiryFilter:
    status: ReadFilter = "all"
    search: str = ""
    kind: InquiryKind | None = None
    category: str | None = None


def filter_inquiries(inquiries: Iterable[Inquiry], flt: InquiryFilter) -> list[Inquiry]:
    """Apply read/unread, free-text (name, phone), kind and category filters."""
    needle = flt.search.strip().casefold()
    out: list[Inquiry] = []
    for inq in inquiries:
        if flt.status == "read" and not inq.read:
            continue
        if flt.status == "unread" and inq.read:
            continue
        if flt.kind is not None and inq.kind is not flt.kind:
            continue
        if flt.category and inq.service_category != flt.category:
            continue
        if needle and needle not in inq.name.casefold() and needle not in inq.phone_number:
            continue
        out.append(inq)
    return out


def unread_count(inquiries: Iterable[Inquiry]) -> int:
    return sum(1 for i in inquiries if not i.read and not i.placeholder)


def categories_of(inquiries: Iterable[Inquiry]) -> list[str]:
    return sorted({i.service_category for i in inquiries if i.service_category})


@dataclass
class BulkResult:
    read: bool
    succeeded: list[int] = field(default_factory=list)
    failed: dict[int, StoreError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class InquiryListController:
    def __init__(self, initializer: AdminActorInitializer) -> None:
        self._initializer = initializer
        self._inquiries: list[Inquiry] = []
        # One automatic self-heal per successful-fetch cycle.
        self._self_heal_spent = False

    @property
    def inquiries(self) -> list[Inquiry]:
        """Last fetched set (may include the placeholder)."""
        return list(self._inquiries)

    def forget(self) -> None:
        """Drop the fetched set; it holds customer contact details."""
        self._inquiries = []
        self._self_heal_spent = False

    def attach(self, store: SessionStore) -> Callable[[], None]:
        """Forget fetched inquiries when the tab logs out. Returns the unsubscriber."""

        def _on_change(key: str, value: str | None) -> None:
            if key == LOGIN_FLAG_KEY and value is None:
                self.forget()

        return store.subscribe(_on_change)

    # ── Reads ──────────────────────────────────────────────────────────────

    def list(self) -> list[Inquiry]:
        actor = self._initializer.require_ready()
        try:
            rows = actor.client.list_inquiries()
        except Exception as e:
            err = normalize_error(e)
            if self._self_heal_spent:
                raise InquiryFetchError(f"Could not load inquiries: {err.message}", cause=err) from e
            self._self_heal_spent = True
            log.warning("Inquiry fetch failed (%s); re-initializing admin session once", err.kind.value)
            self._initializer.retry()
            actor = self._initializer.require_ready()
            try:
                rows = actor.client.list_inquiries()
            except Exception as e2:
                err2 = normalize_error(e2)
                raise InquiryFetchError(f"Could not load inquiries: {err2.message}", cause=err2) from e2

        if self._initializer.actor is not actor:
            # Identity changed while we were waiting; this answer is not ours.
            log.info("Discarding inquiry list fetched for a previous session")
            return self.inquiries

        self._self_heal_spent = False
        rows = sorted(rows, key=lambda i: (i.created_at, i.id), reverse=True)
        self._inquiries = rows if rows else [placeholder_inquiry()]
        return self.inquiries

    # ── Mutations ──────────────────────────────────────────────────────────

    def _guard(self, inquiry_id: int) -> None:
        if inquiry_id == PLACEHOLDER_ID or any(
            i.placeholder and i.id == inquiry_id for i in self._inquiries
        ):
            raise PlaceholderRecordError("The demo record is display-only and cannot be changed")

    def set_read(self, inquiry_id: int, read: bool) -> None:
        self._guard(inquiry_id)
        actor = self._initializer.require_ready()
        try:
            actor.client.set_read(inquiry_id, read)
        except Exception as e:
            err = normalize_error(e)
            raise InquiryFetchError(f"Could not update inquiry #{inquiry_id}: {err.message}", cause=err) from e
        self._inquiries = [replace(i, read=read) if i.id == inquiry_id else i for i in self._inquiries]

    def delete(self, inquiry_id: int) -> None:
        self._guard(inquiry_id)
        actor = self._initializer.require_ready()
        try:
            actor.client.delete(inquiry_id)
        except Exception as e:
            err = normalize_error(e)
            raise InquiryFetchError(f"Could not delete inquiry #{inquiry_id}: {err.message}", cause=err) from e
        self._inquiries = [i for i in self._inquiries if i.id != inquiry_id]

    def submit_internal(self, draft: InquiryDraft) -> int:
        """File an inquiry on a walk-in customer's behalf (marked internal)."""
        actor = self._initializer.require_ready()
        try:
            return actor.client.submit_inquiry(
                draft.kind,
                draft.name,
                draft.phone_number,
                draft.email,
                draft.message,
                draft.service_category,
                internal=True,
            )
        except Exception as e:
            err = normalize_error(e)
            raise InquiryFetchError(f"Could not save internal inquiry: {err.message}", cause=err) from e

    def bulk_set_read(self, inquiry_ids: Sequence[int], read: bool) -> BulkResult:
        # Checked once up front so a not-ready session issues no calls at all.
        self._initializer.require_ready()
        result = BulkResult(read=read)
        for inquiry_id in dict.fromkeys(inquiry_ids):
            try:
                self.set_read(inquiry_id, read)
            except StoreError as e:
                result.failed[inquiry_id] = e
            else:
                result.succeeded.append(inquiry_id)
        if result.failed:
            log.warning("Bulk read=%s: %d ok, %d failed", read, len(result.succeeded), len(result.failed))
        return result
