"""Rank resolution for the three query shapes.

Absence travels as ``None`` from the stores up to the record assembly in
this module, where it is rendered once: an unranked user gets rank 0 and
score 0, and a query with no matching entry gets :meth:`Ranking.empty`.
Peak ranks are looked up independently, so an unranked user can still
carry a historical peak.

Every store call is bounded by a timeout. A timeout or store failure fails
the whole request with :class:`StoreUnavailable` instead of producing
zero-valued records.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, List, Optional, Sequence, TypeVar

from ..core.config import STORE_TIMEOUT_SECONDS
from ..core.errors import StoreUnavailable, ValidationError
from .modes import Mode
from .params import MAX_PAGE, MIN_PAGE, Selector, parse_user_id
from .peak_ranks import PeakRankStore
from .records import PeakRank, Ranking
from .score_index import ScoreIndex
from .users import UserDirectory

logger = logging.getLogger(__name__)

T = TypeVar("T")

PAGE_SIZE = 50
MAX_USERS_PER_QUERY = 100


class RankResolver:
    """Builds :class:`Ranking` records from the score, user and peak stores."""

    def __init__(
        self,
        scores: ScoreIndex,
        users: UserDirectory,
        peaks: PeakRankStore,
        *,
        timeout: float = STORE_TIMEOUT_SECONDS,
    ) -> None:
        self._scores = scores
        self._users = users
        self._peaks = peaks
        self._timeout = timeout

    async def _call(self, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, self._timeout)
        except asyncio.TimeoutError as exc:
            logger.warning("Store call exceeded %.1fs", self._timeout)
            raise StoreUnavailable("Backing store timed out") from exc

    async def resolve_by_rank(self, mode: Mode, rank: int) -> Ranking:
        """Return the user holding 1-based ``rank``, or the empty sentinel."""

        if rank < 1:
            return Ranking.empty()

        window = await self._call(self._scores.rank_window(mode, rank - 1, rank - 1))
        if not window:
            return Ranking.empty()

        entry = window[0]
        username, peak = await asyncio.gather(
            self._call(self._users.username_of(entry.user_id)),
            self._call(self._peaks.peak_of(entry.user_id, mode)),
        )
        return Ranking(
            rank=rank,
            user_id=entry.user_id,
            username=username,
            score=entry.score,
            peak=peak,
        )

    async def resolve_by_users(
        self,
        mode: Mode,
        identifiers: Sequence[str],
        selector: Selector = Selector.USER_ID,
    ) -> List[Ranking]:
        """Return one record per identifier, in input order.

        Identifiers that do not resolve to a user id (unknown username,
        non-numeric id) yield the empty sentinel at their position.
        """

        if len(identifiers) > MAX_USERS_PER_QUERY:
            raise ValidationError(f"Too many users. Max limit is {MAX_USERS_PER_QUERY}.")

        resolved: List[Optional[int]]
        if selector is Selector.USERNAME:
            lookup = await self._call(self._users.user_ids_of(identifiers))
            resolved = [lookup.get(name) for name in identifiers]
        else:
            resolved = [parse_user_id(token) for token in identifiers]

        user_ids = [user_id for user_id in resolved if user_id is not None]
        if not user_ids:
            return [Ranking.empty() for _ in identifiers]

        scores, ranks, usernames, peaks = await asyncio.gather(
            self._call(self._scores.scores_of(mode, user_ids)),
            self._call(self._scores.ranks_of(mode, user_ids)),
            self._call(self._users.usernames_of(user_ids)),
            self._call(self._peaks.peaks_of(user_ids, mode)),
        )

        results: List[Ranking] = []
        for user_id in resolved:
            if user_id is None:
                results.append(Ranking.empty())
                continue
            rank = ranks.get(user_id)
            score = scores.get(user_id)
            results.append(
                Ranking(
                    rank=0 if rank is None else rank + 1,
                    user_id=user_id,
                    username=usernames.get(user_id),
                    score=0 if score is None else score,
                    peak=peaks.get(user_id, PeakRank.never()),
                )
            )
        return results

    async def resolve_page(
        self, mode: Mode, page: int, page_size: int = PAGE_SIZE
    ) -> List[Ranking]:
        """Return one leaderboard page, shorter than ``page_size`` at the tail.

        The rank of each entry is its window position; the index is not
        queried again per entry.
        """

        if page < MIN_PAGE or page > MAX_PAGE:
            page = MIN_PAGE

        start = (page - 1) * page_size
        window = await self._call(self._scores.rank_window(mode, start, start + page_size - 1))
        if not window:
            return []

        user_ids = [entry.user_id for entry in window]
        usernames, peaks = await asyncio.gather(
            self._call(self._users.usernames_of(user_ids)),
            self._call(self._peaks.peaks_of(user_ids, mode)),
        )
        return [
            Ranking(
                rank=start + offset + 1,
                user_id=entry.user_id,
                username=usernames.get(entry.user_id),
                score=entry.score,
                peak=peaks.get(entry.user_id, PeakRank.never()),
            )
            for offset, entry in enumerate(window)
        ]


__all__ = ["MAX_USERS_PER_QUERY", "PAGE_SIZE", "RankResolver"]
