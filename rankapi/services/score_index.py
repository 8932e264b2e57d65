"""Per-mode score index backed by Redis sorted sets.

Each mode owns one sorted set (``score_<mode>``) whose members are decimal
user ids and whose scores are the users' current totals. Ranks are never
stored; they are the member's position under ``ZREVRANGE``. Redis orders
equal scores by member in descending lexicographic order, so window order
and ``ZREVRANK`` always agree for a given index state.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from ..core.errors import StoreUnavailable
from .modes import Mode
from .records import ScoreEntry

logger = logging.getLogger(__name__)

_REDIS_FAILURES = (RedisConnectionError, RedisTimeoutError)

# Redis rejects range offsets outside a signed 64-bit integer.
MAX_OFFSET = 2**63 - 1


def _unavailable(exc: Exception) -> StoreUnavailable:
    logger.warning("Score index unavailable: %s", exc)
    return StoreUnavailable("Score index is unavailable")


class ScoreIndex:
    """Read-only queries over the per-mode sorted sets."""

    def __init__(self, redis: Redis) -> None:
        self._redis = redis

    async def rank_window(self, mode: Mode, start: int, end: int) -> List[ScoreEntry]:
        """Entries ranked ``start`` to ``end`` (0-based, inclusive)."""

        # Negative bounds count from the tail in Redis; never ask for that.
        if start < 0 or end < start or start > MAX_OFFSET:
            return []
        end = min(end, MAX_OFFSET)
        try:
            rows = await self._redis.zrevrange(mode.score_key, start, end, withscores=True)
        except _REDIS_FAILURES as exc:
            raise _unavailable(exc) from exc
        return [ScoreEntry(user_id=int(member), score=int(score)) for member, score in rows]

    async def score_of(self, mode: Mode, user_id: int) -> Optional[int]:
        try:
            score = await self._redis.zscore(mode.score_key, str(user_id))
        except _REDIS_FAILURES as exc:
            raise _unavailable(exc) from exc
        return None if score is None else int(score)

    async def rank_of(self, mode: Mode, user_id: int) -> Optional[int]:
        """0-based position of ``user_id``, or ``None`` when unranked."""

        try:
            return await self._redis.zrevrank(mode.score_key, str(user_id))
        except _REDIS_FAILURES as exc:
            raise _unavailable(exc) from exc

    async def scores_of(self, mode: Mode, user_ids: Iterable[int]) -> Dict[int, Optional[int]]:
        """Scores for many users in one pipelined round trip."""

        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return {}
        try:
            async with self._redis.pipeline(transaction=False) as pipe:
                for user_id in ids:
                    pipe.zscore(mode.score_key, str(user_id))
                results = await pipe.execute()
        except _REDIS_FAILURES as exc:
            raise _unavailable(exc) from exc
        return {
            user_id: None if score is None else int(score)
            for user_id, score in zip(ids, results)
        }

    async def ranks_of(self, mode: Mode, user_ids: Iterable[int]) -> Dict[int, Optional[int]]:
        """0-based ranks for many users in one pipelined round trip."""

        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return {}
        try:
            async with self._redis.pipeline(transaction=False) as pipe:
                for user_id in ids:
                    pipe.zrevrank(mode.score_key, str(user_id))
                results = await pipe.execute()
        except _REDIS_FAILURES as exc:
            raise _unavailable(exc) from exc
        return dict(zip(ids, results))


__all__ = ["ScoreIndex"]
