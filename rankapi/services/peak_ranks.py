"""Historical best-rank lookup backed by the SQL store."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Iterable, List

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from ..core.errors import StoreUnavailable
from ..models import PeakRankRow
from .modes import Mode
from .records import PeakRank

logger = logging.getLogger(__name__)


class PeakRankStore:
    """Best-ever rank per (user, mode).

    A missing row is a normal answer ("never ranked") and is returned as
    :meth:`PeakRank.never`, unlike the score index which reports absence.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def _fetch(self, user_ids: List[int], mode: Mode) -> Dict[int, PeakRank]:
        with Session(self._engine) as session:
            rows = session.exec(
                select(PeakRankRow).where(
                    col(PeakRankRow.user_id).in_(user_ids),
                    PeakRankRow.mode == mode.value,
                )
            ).all()
        found = {
            row.user_id: PeakRank(rank=row.rank, achieved_at=row.updated_at) for row in rows
        }
        return {user_id: found.get(user_id, PeakRank.never()) for user_id in user_ids}

    async def peaks_of(self, user_ids: Iterable[int], mode: Mode) -> Dict[int, PeakRank]:
        """Peaks for many users with one query, run off the event loop."""

        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return {}
        try:
            return await asyncio.to_thread(self._fetch, ids, mode)
        except SQLAlchemyError as exc:
            logger.warning("Peak rank store unavailable: %s", exc)
            raise StoreUnavailable("Peak rank store is unavailable") from exc

    async def peak_of(self, user_id: int, mode: Mode) -> PeakRank:
        return (await self.peaks_of([user_id], mode))[user_id]


__all__ = ["PeakRankStore"]
