"""Redis client construction."""

from __future__ import annotations

import redis.asyncio as redis

from .config import REDIS_URL, STORE_TIMEOUT_SECONDS


def build_redis(url: str = REDIS_URL, timeout: float = STORE_TIMEOUT_SECONDS) -> redis.Redis:
    """Create a pooled asyncio Redis client with string responses.

    Connections are opened lazily by the pool on first command.
    """

    return redis.Redis.from_url(
        url,
        decode_responses=True,
        socket_timeout=timeout,
        socket_connect_timeout=timeout,
    )


__all__ = ["build_redis"]
