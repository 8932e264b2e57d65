"""User id and username lookup backed by Redis string keys.

Both directions share one key namespace: ``user_<id>`` holds the username
and ``user_<username>`` holds the id.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from ..core.errors import StoreUnavailable

logger = logging.getLogger(__name__)

_REDIS_FAILURES = (RedisConnectionError, RedisTimeoutError)


def _user_key(token: object) -> str:
    return f"user_{token}"


def _as_user_id(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


class UserDirectory:
    """Bidirectional user-id and username lookup."""

    def __init__(self, redis: Redis) -> None:
        self._redis = redis

    async def _mget(self, tokens: list) -> list:
        try:
            return await self._redis.mget([_user_key(token) for token in tokens])
        except _REDIS_FAILURES as exc:
            logger.warning("User directory unavailable: %s", exc)
            raise StoreUnavailable("User directory is unavailable") from exc

    async def username_of(self, user_id: int) -> Optional[str]:
        return (await self.usernames_of([user_id]))[user_id]

    async def user_id_of(self, username: str) -> Optional[int]:
        return (await self.user_ids_of([username]))[username]

    async def usernames_of(self, user_ids: Iterable[int]) -> Dict[int, Optional[str]]:
        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return {}
        return dict(zip(ids, await self._mget(ids)))

    async def user_ids_of(self, usernames: Iterable[str]) -> Dict[str, Optional[int]]:
        names = list(dict.fromkeys(usernames))
        if not names:
            return {}
        values = await self._mget(names)
        return {name: _as_user_id(value) for name, value in zip(names, values)}


__all__ = ["UserDirectory"]
