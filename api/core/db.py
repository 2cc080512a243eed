"""
PostgreSQL access for the todo and marketplace repositories.

One asyncpg pool serves the whole process: `main.lifespan` opens it before
the first request and closes it at shutdown. Repositories never touch the
pool directly; each of their operations is a single `fetch_one` or
`fetch_all` call with `$1`-style positional parameters, and rows come back
as plain dicts that FastAPI serializes as-is.
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings

logger = logging.getLogger(__name__)

# libpq-style query params that asyncpg's DSN parser does not accept.
_UNSUPPORTED_DSN_PARAMS = frozenset({"sslmode"})

_pool: asyncpg.Pool | None = None


def _strip_unsupported_params(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url
    kept = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in _UNSUPPORTED_DSN_PARAMS
    ]
    return urlunsplit(parts._replace(query=urlencode(kept)))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _strip_unsupported_params(url)


async def init_pool() -> None:
    """
    Open the process-wide pool; calling it again is a no-op.
    """
    global _pool
    if _pool is not None:
        return
    min_size = settings.db_pool_min_size()
    max_size = settings.db_pool_max_size()
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=min_size,
        max_size=max_size,
        command_timeout=settings.db_command_timeout_s(),
    )
    logger.info("db_pool_ready min_size=%s max_size=%s", min_size, max_size)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return
    closing, _pool = _pool, None
    await closing.close()
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Single row as a dict, or None when the statement matched nothing.

    Writes use this too, with `RETURNING`, so callers get the stored row.
    """
    record = await pool().fetchrow(sql, *args)
    return dict(record) if record is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    return [dict(record) for record in await pool().fetch(sql, *args)]


async def ping() -> bool:
    """
    True when the pool exists and the database answers a trivial query.
    """
    if _pool is None:
        return False
    try:
        row = await fetch_one("SELECT 1 AS ok")
    except (asyncpg.PostgresError, OSError) as exc:
        logger.warning("db_ping_failed error=%s", exc)
        return False
    return row is not None
