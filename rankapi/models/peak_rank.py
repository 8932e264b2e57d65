"""Database model for historical best ranks."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel


class PeakRankRow(SQLModel, table=True):
    """Best-ever rank a user reached in one mode."""

    __tablename__ = "osu_score_rank_highest"

    user_id: int = ORMField(primary_key=True)
    mode: int = ORMField(primary_key=True)
    rank: int
    updated_at: Optional[datetime] = None


__all__ = ["PeakRankRow"]
