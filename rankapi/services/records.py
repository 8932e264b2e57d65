"""Value types produced by the rank resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from ..core.time import isoformat_utc


@dataclass(frozen=True)
class ScoreEntry:
    """One member of a mode's score index."""

    user_id: int
    score: int


@dataclass(frozen=True)
class PeakRank:
    """Best-ever rank. ``rank == 0`` with no timestamp means never ranked."""

    rank: int = 0
    achieved_at: Optional[datetime] = None

    @classmethod
    def never(cls) -> "PeakRank":
        return cls()


@dataclass(frozen=True)
class Ranking:
    """Current standing of one user in one mode."""

    rank: int
    user_id: int
    username: Optional[str]
    score: int
    peak: PeakRank = field(default_factory=PeakRank.never)

    @classmethod
    def empty(cls) -> "Ranking":
        """Sentinel rendered when no entry matches the query."""

        return cls(rank=0, user_id=0, username=None, score=0)


def peak_to_dict(peak: PeakRank) -> Dict[str, Any]:
    return {"rank": peak.rank, "updated_at": isoformat_utc(peak.achieved_at)}


def ranking_to_dict(ranking: Ranking) -> Dict[str, Any]:
    """Serialise a ranking to the public JSON shape.

    A missing username is rendered as ``0`` for compatibility with existing
    clients.
    """

    return {
        "rank": ranking.rank,
        "user_id": ranking.user_id,
        "username": ranking.username if ranking.username is not None else 0,
        "score": ranking.score,
        "rank_highest": peak_to_dict(ranking.peak),
    }


__all__ = ["PeakRank", "Ranking", "ScoreEntry", "peak_to_dict", "ranking_to_dict"]
