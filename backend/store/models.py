# backend/store/models.py
# SPDX-License-Identifier: Apache-2.0
"""
SQLAlchemy ORM models for the inquiry store.

- `Inquiry`: one contact-form or service-request submission. Ids are assigned
  by the database and never reused after a delete (AUTOINCREMENT on SQLite).
- `AdminSession`: bearer sessions issued by a successful elevation with the
  admin secret, bound to the caller id that asked for them.

No business logic lives here; the API module owns every write.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

INQUIRY_TYPES = ("contact", "serviceRequest")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Inquiry(Base):
    __tablename__ = "inquiries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    inquiry_type = Column(String(32), nullable=False)
    name = Column(Text, nullable=False)
    phone_number = Column(String(16), nullable=False)
    email = Column(Text, nullable=True)
    message = Column(Text, nullable=False)
    service_category = Column(Text, nullable=True)
    read = Column(Boolean, nullable=False, default=False)
    internal = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        CheckConstraint(
            "inquiry_type IN ('contact', 'serviceRequest')",
            name="ck_inquiries_type",
        ),
        Index("ix_inquiries_created_at", "created_at"),
        {"sqlite_autoincrement": True},
    )


class AdminSession(Base):
    """One successful elevation. Only a hash of the bearer token is stored."""

    __tablename__ = "admin_sessions"

    token_hash = Column(String(64), primary_key=True)
    caller_id = Column(String(128), nullable=False)
    user_id = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (Index("ix_admin_sessions_caller", "caller_id"),)
