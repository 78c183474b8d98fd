# backend/store/api.py
# SPDX-License-Identifier: Apache-2.0
"""
Inquiry store: HTTP JSON RPC service used by the kiosk website.

Endpoints:
- GET    /health
- POST   /rpc/inquiries                 (public submission)
- POST   /rpc/inquiries/internal        (admin; marks the record internal)
- GET    /rpc/inquiries                 (admin)
- GET    /rpc/inquiries/{id}            (admin)
- PUT    /rpc/inquiries/{id}/read       (admin)
- DELETE /rpc/inquiries/{id}            (admin)
- POST   /rpc/access/elevate            (shared secret)
- GET    /rpc/access/is-admin

Callers identify themselves with the `X-Caller-Id` header. Presenting the
admin secret to `elevate` returns a session token; admin routes require it as
`Authorization: Bearer <token>` together with the same caller id. Only a hash
of each token is kept in `admin_sessions`, so sessions survive store restarts.

Every error body has the shape {"detail": {"code": ..., "message": ...}}.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import secrets
from datetime import timezone
from typing import Any, Literal

from fastapi import Depends, FastAPI, Header, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from backend.store.config import StoreConfig
from backend.store.db import make_engine, make_session_factory, session_dependency
from backend.store.models import AdminSession, Base, Inquiry

log = logging.getLogger(__name__)

PHONE_PATTERN = r"^[6-9]\d{9}$"


class InquiryIn(BaseModel):
    inquiry_type: Literal["contact", "serviceRequest"] = "contact"
    name: str = Field(min_length=1, max_length=200)
    phone_number: str = Field(pattern=PHONE_PATTERN)
    email: str | None = None
    message: str = Field(min_length=1, max_length=5000)
    service_category: str | None = None


class ReadIn(BaseModel):
    read: bool


class ElevateIn(BaseModel):
    secret: str
    user_id: str | None = None


def _error(status: int, code: str, message: str) -> HTTPException:
    return HTTPException(status_code=status, detail={"code": code, "message": message})


def _token_hash(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def _bearer(authorization: str | None) -> str | None:
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _serialize(row: Inquiry) -> dict[str, Any]:
    created = row.created_at
    if created is not None and created.tzinfo is None:
        # SQLite drops the offset; values are always written in UTC.
        created = created.replace(tzinfo=timezone.utc)
    return {
        "id": row.id,
        "inquiry_type": row.inquiry_type,
        "name": row.name,
        "phone_number": row.phone_number,
        "email": row.email,
        "message": row.message,
        "service_category": row.service_category,
        "read": bool(row.read),
        "internal": bool(row.internal),
        "created_at": created.isoformat() if created is not None else None,
    }


def _new_inquiry(body: InquiryIn, *, internal: bool) -> Inquiry:
    category = (body.service_category or "").strip() or None
    return Inquiry(
        inquiry_type=body.inquiry_type,
        name=body.name.strip(),
        phone_number=body.phone_number,
        email=(body.email or "").strip() or None,
        message=body.message.strip(),
        # Only service requests carry a category.
        service_category=category if body.inquiry_type == "serviceRequest" else None,
        read=False,
        internal=internal,
    )


def create_app(config: StoreConfig | None = None) -> FastAPI:
    """Build the store app; tests pass their own `StoreConfig`."""
    cfg = config or StoreConfig.from_env()
    engine = make_engine(cfg.database_url)
    Base.metadata.create_all(engine)
    get_db = session_dependency(make_session_factory(engine))

    app = FastAPI(title="Kiosk inquiry store")
    app.state.config = cfg
    app.state.engine = engine

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = "; ".join(
            f"{'.'.join(str(p) for p in e.get('loc', ())[1:])}: {e.get('msg')}" for e in exc.errors()
        )
        return JSONResponse(
            status_code=422,
            content=jsonable_encoder({"detail": {"code": "invalid", "message": message or "Invalid request"}}),
        )

    # ── Dependencies ───────────────────────────────────────────────────────

    def available() -> None:
        if cfg.maintenance:
            raise _error(503, "unavailable", "Inquiry store is unavailable (maintenance)")

    def caller(x_caller_id: str | None = Header(default=None)) -> str | None:
        return (x_caller_id or "").strip() or None

    def admin_session(
        caller_id: str | None = Depends(caller),
        authorization: str | None = Header(default=None),
        db: Session = Depends(get_db),
    ) -> AdminSession | None:
        token = _bearer(authorization)
        if caller_id is None or token is None:
            return None
        row = db.get(AdminSession, _token_hash(token))
        # A token is only good for the caller it was issued to.
        if row is None or not hmac.compare_digest(row.caller_id.encode(), caller_id.encode()):
            return None
        return row

    def require_admin(
        _: None = Depends(available),
        caller_id: str | None = Depends(caller),
        session: AdminSession | None = Depends(admin_session),
    ) -> str:
        if caller_id is None or session is None:
            raise _error(403, "unauthorized", "Unauthorized: only admins can perform this action")
        return caller_id

    def load(db: Session, inquiry_id: int) -> Inquiry:
        row = db.get(Inquiry, inquiry_id)
        if row is None:
            raise _error(404, "not_found", f"Inquiry {inquiry_id} not found")
        return row

    # ── Health ─────────────────────────────────────────────────────────────

    @app.get("/health")
    def health(_: None = Depends(available)) -> dict[str, str]:
        return {"status": "healthy"}

    # ── Inquiries ──────────────────────────────────────────────────────────

    @app.post("/rpc/inquiries", status_code=201)
    def submit_inquiry(body: InquiryIn, db: Session = Depends(get_db)) -> dict[str, int]:
        row = _new_inquiry(body, internal=False)
        db.add(row)
        db.commit()
        log.info("Inquiry #%d stored (%s)", row.id, row.inquiry_type)
        return {"id": row.id}

    @app.post("/rpc/inquiries/internal", status_code=201)
    def submit_internal_inquiry(
        body: InquiryIn,
        caller_id: str = Depends(require_admin),
        db: Session = Depends(get_db),
    ) -> dict[str, int]:
        row = _new_inquiry(body, internal=True)
        db.add(row)
        db.commit()
        log.info("Internal inquiry #%d stored by %s", row.id, caller_id)
        return {"id": row.id}

    @app.get("/rpc/inquiries")
    def list_inquiries(
        _: str = Depends(require_admin), db: Session = Depends(get_db)
    ) -> list[dict[str, Any]]:
        rows = db.query(Inquiry).order_by(Inquiry.created_at.desc(), Inquiry.id.desc()).all()
        return [_serialize(r) for r in rows]

    @app.get("/rpc/inquiries/{inquiry_id}")
    def get_inquiry(
        inquiry_id: int, _: str = Depends(require_admin), db: Session = Depends(get_db)
    ) -> dict[str, Any]:
        return _serialize(load(db, inquiry_id))

    @app.put("/rpc/inquiries/{inquiry_id}/read")
    def set_read(
        inquiry_id: int,
        body: ReadIn,
        _: str = Depends(require_admin),
        db: Session = Depends(get_db),
    ) -> dict[str, Any]:
        row = load(db, inquiry_id)
        row.read = body.read
        db.commit()
        return _serialize(row)

    @app.delete("/rpc/inquiries/{inquiry_id}", status_code=204)
    def delete_inquiry(
        inquiry_id: int, caller_id: str = Depends(require_admin), db: Session = Depends(get_db)
    ) -> Response:
        db.delete(load(db, inquiry_id))
        db.commit()
        log.info("Inquiry #%d deleted by %s", inquiry_id, caller_id)
        return Response(status_code=204)

    # ── Access control ─────────────────────────────────────────────────────

    @app.post("/rpc/access/elevate")
    def elevate(
        body: ElevateIn,
        _: None = Depends(available),
        caller_id: str | None = Depends(caller),
        current: AdminSession | None = Depends(admin_session),
        db: Session = Depends(get_db),
    ) -> dict[str, str]:
        if caller_id is None:
            raise _error(401, "unauthorized", "Unauthorized: missing caller identity")
        if not hmac.compare_digest(body.secret.encode(), cfg.admin_secret.encode()):
            log.warning("Rejected elevation for caller %s", caller_id)
            raise _error(401, "unauthorized", "Unauthorized: invalid secret")
        if current is not None:
            raise _error(409, "already_elevated", "Caller is already elevated")
        token = secrets.token_urlsafe(32)
        db.add(AdminSession(token_hash=_token_hash(token), caller_id=caller_id, user_id=body.user_id))
        db.commit()
        log.info("Caller %s elevated to admin", caller_id)
        return {"status": "elevated", "session_token": token}

    @app.get("/rpc/access/is-admin")
    def is_admin(
        _: None = Depends(available),
        session: AdminSession | None = Depends(admin_session),
    ) -> dict[str, bool]:
        return {"is_admin": session is not None}

    return app
