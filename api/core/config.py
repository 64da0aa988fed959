"""
Environment-driven settings.

Values are read lazily so tests can monkeypatch the environment.
A local `.env` is loaded once by `load_env()` (called from `main`).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8888
DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_POOL_MAX_SIZE = 5


def load_env() -> None:
    # Real environment variables win over `.env`.
    load_dotenv(override=False)


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def host() -> str:
    return os.environ.get("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST


def port() -> int:
    return env_int("PORT", DEFAULT_PORT)


def pool_min_size() -> int:
    return max(env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE), 0)


def pool_max_size() -> int:
    return max(env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE), pool_min_size(), 1)


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
