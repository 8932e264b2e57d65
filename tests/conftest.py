"""Shared fixtures: an in-memory Redis double and an in-memory SQL store."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from rankapi.models import PeakRankRow
from rankapi.services import (
    Mode,
    PeakRankStore,
    RankResolver,
    ScoreIndex,
    UserDirectory,
)


class FakePipeline:
    """Queues commands and replays them against the owning FakeRedis."""

    def __init__(self, redis: "FakeRedis"):
        self._redis = redis
        self._queued: List[tuple] = []

    async def __aenter__(self) -> "FakePipeline":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self._queued.clear()

    def zscore(self, key: str, member: str) -> "FakePipeline":
        self._queued.append(("zscore", key, member))
        return self

    def zrevrank(self, key: str, member: str) -> "FakePipeline":
        self._queued.append(("zrevrank", key, member))
        return self

    async def execute(self) -> list:
        self._redis.round_trips += 1
        self._redis._check()
        results = []
        for name, key, member in self._queued:
            results.append(getattr(self._redis, f"_{name}")(key, member))
        self._queued.clear()
        return results


class FakeRedis:
    """Sorted sets and string keys with redis-py's decoded return types."""

    def __init__(self):
        self.zsets: Dict[str, Dict[str, float]] = {}
        self.strings: Dict[str, str] = {}
        self.round_trips = 0
        self.down = False

    def _check(self) -> None:
        if self.down:
            raise RedisConnectionError("Connection refused")

    # Seeding helpers
    def add_scores(self, mode: Mode, scores: Dict[int, int]) -> None:
        zset = self.zsets.setdefault(mode.score_key, {})
        for user_id, score in scores.items():
            zset[str(user_id)] = float(score)

    def add_user(self, user_id: int, username: str) -> None:
        self.strings[f"user_{user_id}"] = username
        self.strings[f"user_{username}"] = str(user_id)

    # Command semantics
    def _ordered(self, key: str) -> List[tuple]:
        items = self.zsets.get(key, {}).items()
        return sorted(items, key=lambda item: (item[1], item[0]), reverse=True)

    def _zscore(self, key: str, member: str) -> Optional[float]:
        return self.zsets.get(key, {}).get(member)

    def _zrevrank(self, key: str, member: str) -> Optional[int]:
        for index, (candidate, _) in enumerate(self._ordered(key)):
            if candidate == member:
                return index
        return None

    # Async client surface
    async def zrevrange(self, key: str, start: int, end: int, withscores: bool = False):
        self.round_trips += 1
        self._check()
        if not all(-(2**63) <= bound < 2**63 for bound in (start, end)):
            raise ResponseError("value is not an integer or out of range")
        rows = self._ordered(key)[start : end + 1]
        if withscores:
            return [(member, score) for member, score in rows]
        return [member for member, _ in rows]

    async def zscore(self, key: str, member: str) -> Optional[float]:
        self.round_trips += 1
        self._check()
        return self._zscore(key, member)

    async def zrevrank(self, key: str, member: str) -> Optional[int]:
        self.round_trips += 1
        self._check()
        return self._zrevrank(key, member)

    async def mget(self, keys: List[str]) -> List[Optional[str]]:
        self.round_trips += 1
        self._check()
        return [self.strings.get(key) for key in keys]

    def pipeline(self, transaction: bool = True) -> FakePipeline:
        return FakePipeline(self)


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def add_peak(engine):
    """Insert a peak-rank row: ``add_peak(user_id, mode, rank, updated_at=None)``."""

    def _add(user_id: int, mode: Mode, rank: int, updated_at: Optional[datetime] = None):
        with Session(engine) as session:
            session.add(
                PeakRankRow(user_id=user_id, mode=mode.value, rank=rank, updated_at=updated_at)
            )
            session.commit()

    return _add


@pytest.fixture
def resolver(fake_redis, engine) -> RankResolver:
    return RankResolver(
        ScoreIndex(fake_redis),
        UserDirectory(fake_redis),
        PeakRankStore(engine),
        timeout=2.0,
    )


@pytest.fixture
def scenario_a(fake_redis, add_peak):
    """Mode osu index {5: 1000, 9: 950, 2: 900}; user 999 unranked with peak 10."""

    fake_redis.add_scores(Mode.OSU, {5: 1000, 9: 950, 2: 900})
    fake_redis.add_user(5, "alpha")
    fake_redis.add_user(9, "bravo")
    fake_redis.add_user(2, "charlie")
    fake_redis.add_user(999, "ghost")
    add_peak(5, Mode.OSU, 1, datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc))
    add_peak(999, Mode.OSU, 10, datetime(2023, 7, 14, 8, 30, 0, tzinfo=timezone.utc))
    return fake_redis
