# backend/store/db.py
# SPDX-License-Identifier: Apache-2.0
"""
Database module for the inquiry store.

Provides:
- `make_engine()` building a SQLAlchemy engine from a URL
- `make_session_factory()` returning a configured `sessionmaker`
- `session_dependency()` producing a `get_db()` generator for FastAPI
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


def make_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty db.
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def session_dependency(factory: sessionmaker[Session]) -> Callable[[], Iterator[Session]]:
    def get_db() -> Iterator[Session]:
        """
        FastAPI dependency:
        - opens a DB session
        - yields it to the request handler
        - always closes it afterwards
        """
        db = factory()
        try:
            yield db
        finally:
            db.close()

    return get_db
