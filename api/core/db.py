"""
asyncpg pool for the page reads. Opened and closed by the app lifespan.
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

POOL_MIN_SIZE = 1
POOL_MAX_SIZE = 5
COMMAND_TIMEOUT_SECONDS = 30

# Query params libpq understands but asyncpg's DSN parser rejects.
UNSUPPORTED_DSN_PARAMS = frozenset({"sslmode"})

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


def _strip_unsupported_params(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    kept = [
        (key, value)
        for (key, value) in parse_qsl(parts.query, keep_blank_values=True)
        if key not in UNSUPPORTED_DSN_PARAMS
    ]
    return urlunsplit(parts._replace(query=urlencode(kept)))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _strip_unsupported_params(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=POOL_MIN_SIZE,
        max_size=POOL_MAX_SIZE,
        command_timeout=COMMAND_TIMEOUT_SECONDS,
    )
    logger.info("db_pool_opened min_size=%s max_size=%s", POOL_MIN_SIZE, POOL_MAX_SIZE)


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return
    pool_to_close, _pool = _pool, None
    await pool_to_close.close()
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    row = await pool().fetchrow(sql, *args)
    return None if row is None else dict(row)


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    # One pooled connection per call, so independent reads can run together.
    return [dict(row) for row in await pool().fetch(sql, *args)]
