"""
Environment-backed configuration helpers.

Every setting is read lazily so tests can override it with `monkeypatch.setenv`.
"""

from __future__ import annotations

import logging
import os

DEFAULT_GREETING = "Just a starting code 😃"


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def db_pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 0)


def db_pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", 5), db_pool_min_size(), 1)


def db_command_timeout_s() -> float:
    return _env_float("DB_COMMAND_TIMEOUT_S", 30.0)


def cors_origins() -> list[str]:
    """
    Comma-separated CORS_ALLOW_ORIGINS, or ["*"] when unset.
    """
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def log_level() -> str:
    level = _env_str("LOG_LEVEL", "INFO").upper()
    # getLevelName maps known names to ints and unknown ones to "Level X".
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def bcrypt_rounds() -> int:
    # bcrypt accepts a cost factor between 4 and 31.
    return min(max(_env_int("BCRYPT_ROUNDS", 12), 4), 31)


def greeting() -> str:
    return _env_str("GREETING", DEFAULT_GREETING)
