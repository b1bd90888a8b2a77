"""
Application configuration from environment variables.

All settings have sensible defaults for local development.
A .env file in the project root is loaded automatically (if present).
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file before reading any env vars
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# ── Environment ───────────────────────────────────────────────────────────

APP_VERSION = "0.1.0"
ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Upstream turf API ─────────────────────────────────────────────────────

TURF_API_BASE_URL: str = os.getenv("TURF_API_BASE_URL", "https://api.classic7turf.com")
TURF_API_TIMEOUT: float = float(os.getenv("TURF_API_TIMEOUT", "30"))

# Page size used for list/report calls; the dashboard loads everything at once.
TURF_API_PAGE_SIZE: int = int(os.getenv("TURF_API_PAGE_SIZE", "100"))

# Credentials for the service-token half of the login handshake.
TURF_API_CLIENT_ID: str = os.getenv("TURF_API_CLIENT_ID", "")
TURF_API_CLIENT_SECRET: str = os.getenv("TURF_API_CLIENT_SECRET", "")

# ── Session (JWT cookie) ──────────────────────────────────────────────────

JWT_SECRET: str = os.getenv("JWT_SECRET", "dev-secret-change-me-in-production")
JWT_ALGORITHM: str = "HS256"
SESSION_EXPIRY_HOURS: int = int(os.getenv("SESSION_EXPIRY_HOURS", "12"))
SESSION_COOKIE_NAME = "session"
