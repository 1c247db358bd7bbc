"""Configuration helpers for the Flask application."""

import os
from typing import Any, Dict

from dotenv import load_dotenv

DEFAULT_CLIENT_ORIGIN = "http://localhost:5173"
DEFAULT_SESSION_TTL_SECONDS = 24 * 60 * 60
DEFAULT_USER_ID = "guest"


def load_environment() -> None:
    """Load environment variables from a .env file when available."""
    load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer")


def get_settings() -> Dict[str, Any]:
    """Return application settings derived from environment variables."""
    ttl = _env_int("SESSION_TTL_SECONDS", DEFAULT_SESSION_TTL_SECONDS)
    if ttl < 0:
        raise RuntimeError("SESSION_TTL_SECONDS must not be negative")
    return {
        "client_origin": os.environ.get("CLIENT_ORIGIN", DEFAULT_CLIENT_ORIGIN).rstrip("/"),
        "session_ttl_seconds": ttl,
        "default_user_id": os.environ.get("DEFAULT_USER_ID", DEFAULT_USER_ID).strip() or DEFAULT_USER_ID,
        "seed_catalog": _env_flag("SEED_CATALOG", True),
        "port": _env_int("PORT", 8000),
        "debug": _env_flag("FLASK_DEBUG", False),
    }
