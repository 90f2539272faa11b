"""
Application configuration from environment variables.

All settings have sensible defaults for local development.
A .env file in the project root is loaded automatically (if present).
"""

from __future__ import annotations

import enum
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file before reading any env vars
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# ── Paths ─────────────────────────────────────────────────────────────────

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"

# Flat-file booking ledger (JSON array)
BOOKINGS_FILE: str = os.getenv("BOOKINGS_FILE", str(DATA_DIR / "bookings.json"))

# ── SimplyBook provider ───────────────────────────────────────────────────

SIMPLYBOOK_COMPANY_LOGIN: str = os.getenv("SIMPLYBOOK_COMPANY_LOGIN", "")
SIMPLYBOOK_API_KEY: str = os.getenv("SIMPLYBOOK_API_KEY", "")
SIMPLYBOOK_API_URL: str = os.getenv("SIMPLYBOOK_API_URL", "https://user-api.simplybook.me")
SIMPLYBOOK_LOGIN_URL: str = os.getenv("SIMPLYBOOK_LOGIN_URL", f"{SIMPLYBOOK_API_URL}/login")

SIMPLYBOOK_AUTH_TIMEOUT: float = float(os.getenv("SIMPLYBOOK_AUTH_TIMEOUT", "10"))
SIMPLYBOOK_RPC_TIMEOUT: float = float(os.getenv("SIMPLYBOOK_RPC_TIMEOUT", "15"))

# Provider tokens live for an hour; we refresh well before that.
TOKEN_TTL_SECONDS: float = float(os.getenv("TOKEN_TTL_SECONDS", str(50 * 60)))

# Upper bound on in-flight slot-matrix fetches per availability request.
MAX_CONCURRENT_FETCHES: int = int(os.getenv("MAX_CONCURRENT_FETCHES", "8"))

# "true" forces simulated mode even when credentials are present.
_MOCK_MODE_OVERRIDE: str = os.getenv("MOCK_MODE", "false")

# ── CORS ──────────────────────────────────────────────────────────────────

CORS_ORIGINS: list[str] = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
_cors_extra = os.getenv("CORS_ORIGINS", "")
if _cors_extra:
    CORS_ORIGINS.extend(o.strip() for o in _cors_extra.split(",") if o.strip())


# ── Mode selection ────────────────────────────────────────────────────────


class Mode(str, enum.Enum):
    """Whether provider calls go to SimplyBook or to canned data."""

    REAL = "real"
    SIMULATED = "simulated"


def resolve_mode(
    company_login: str,
    api_key: str,
    mock_override: bool = False,
) -> Mode:
    """Pick the operating mode.

    Missing credentials always force simulated mode, whatever the override
    says. With both credentials present, ``mock_override`` decides.
    """
    if not company_login or not api_key:
        return Mode.SIMULATED
    if mock_override:
        return Mode.SIMULATED
    return Mode.REAL


def configured_mode() -> Mode:
    """Mode derived from the process environment."""
    return resolve_mode(
        SIMPLYBOOK_COMPANY_LOGIN,
        SIMPLYBOOK_API_KEY,
        _MOCK_MODE_OVERRIDE.lower() == "true",
    )
