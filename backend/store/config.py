# backend/store/config.py
# SPDX-License-Identifier: Apache-2.0
#
# Purpose
# -------
# Environment-driven settings for the inquiry store service.
#
# Variables
# ---------
#   STORE_DATABASE_URL   SQLAlchemy URL (default: sqlite file next to the cwd)
#   ADMIN_SECRET         shared secret accepted by POST /rpc/access/elevate
#   STORE_MAINTENANCE    "1"/"true" makes every admin RPC answer 503
#   STORE_HOST / PORT    bind address for `python -m backend.store`
#
# Security
# --------
# * ADMIN_SECRET must match the website's ADMIN_SECRET. Never commit it.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATABASE_URL = "sqlite:///./inquiries.db"
DEFAULT_ADMIN_SECRET = "dev-admin-secret-change-me"


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class StoreConfig:
    database_url: str = DEFAULT_DATABASE_URL
    admin_secret: str = DEFAULT_ADMIN_SECRET
    maintenance: bool = False
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> StoreConfig:
        try:
            port = int(os.getenv("STORE_PORT", "8000"))
        except ValueError:
            port = 8000
        return cls(
            database_url=os.getenv("STORE_DATABASE_URL", DEFAULT_DATABASE_URL),
            admin_secret=os.getenv("ADMIN_SECRET", DEFAULT_ADMIN_SECRET),
            maintenance=_env_bool("STORE_MAINTENANCE"),
            host=os.getenv("STORE_HOST", "127.0.0.1"),
            port=port,
        )
