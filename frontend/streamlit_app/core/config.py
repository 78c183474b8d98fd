# frontend/streamlit_app/core/config.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

"""
Centralized, immutable application configuration for the kiosk website.

This module defines a frozen `Settings` dataclass whose fields are populated
from environment variables (loaded via python-dotenv if a `.env` file is
present). The resulting singleton `settings` is imported by other modules to
avoid scattering `os.getenv` calls throughout the codebase.

Design goals
------------
- **Single source of truth**: All tunables live here; other modules consume
  `settings` rather than reading environment variables directly.
- **Immutability**: `@dataclass(frozen=True)` prevents accidental mutation at
  runtime. Tests build their own `Settings(...)` instead of patching this one.
- **Fast import**: Only dotenv load + dataclass construction. No network.

Security notes
--------------
- `OFFICIAL_USER_ID` / `OFFICIAL_PASSWORD` form the single shared credential
  pair of the admin panel. It is a convenience gate for an informational
  site, not a security boundary: there is no lockout and no hashing.
- `ADMIN_SECRET` must match the inquiry store's `ADMIN_SECRET`; it is the
  shared secret used for privilege elevation. Never commit real values.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# `override=False` by default, so pre-set env vars take precedence.
load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """
    Immutable application settings.

    Each attribute is populated from the corresponding environment variable;
    when unset, a documented default is used. See `.env.example`.
    """

    # --- Remote inquiry store ------------------------------------------------
    # Base URL of the FastAPI inquiry store (backend/store).
    STORE_URL: str = os.getenv("STORE_URL", "http://localhost:8000")
    # Per-request HTTP timeout for store calls (seconds).
    STORE_HTTP_TIMEOUT_S: float = _env_float("STORE_HTTP_TIMEOUT_S", 10.0)

    # --- Official login (shared credential pair) -----------------------------
    OFFICIAL_USER_ID: str = os.getenv("OFFICIAL_USER_ID", "kiosk-admin")
    OFFICIAL_PASSWORD: str = os.getenv("OFFICIAL_PASSWORD", "change-me")
    # Shared secret handed to the store's privilege-elevation call.
    ADMIN_SECRET: str = os.getenv("ADMIN_SECRET", "dev-admin-secret-change-me")

    # --- Admin actor initialization ------------------------------------------
    # Wall-clock budget for connect + elevate.
    ACTOR_INIT_TIMEOUT_S: float = _env_float("ACTOR_INIT_TIMEOUT_S", 30.0)
    # Automatic retries for transient (backend unavailable) failures.
    ACTOR_MAX_RETRIES: int = _env_int("ACTOR_MAX_RETRIES", 3)
    # First backoff delay; doubles per retry (2s, 4s, 8s).
    ACTOR_BACKOFF_BASE_S: float = _env_float("ACTOR_BACKOFF_BASE_S", 2.0)

    # --- Presentation --------------------------------------------------------
    # "hi" (Hindi) or "en" (English).
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "hi")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # --- Business contact details (shown on the public site) -----------------
    BUSINESS_PHONE: str = os.getenv("BUSINESS_PHONE", "9876500000")
    # Digits only, with country code, as wa.me expects.
    BUSINESS_WHATSAPP: str = os.getenv("BUSINESS_WHATSAPP", "919876500000")
    BUSINESS_EMAIL: str = os.getenv("BUSINESS_EMAIL", "kiosk@example.com")


# Singleton settings object imported by consumers.
settings = Settings()
