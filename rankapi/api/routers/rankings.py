"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from ...core.errors import ValidationError
from ...services import Mode, RankResolver, parse_page, parse_rank, ranking_to_dict
from ..deps import get_mode, get_resolver

router = APIRouter(tags=["rankings"])


@router.get("/rank/{rank}")
async def get_rank(
    rank: str,
    mode: Mode = Depends(get_mode),
    resolver: RankResolver = Depends(get_resolver),
) -> List[Dict[str, Any]]:
    """Get the user holding a rank position, wrapped in a one-item list."""

    position = parse_rank(rank)
    if position is None:
        raise ValidationError("Rank must be an integer")

    ranking = await resolver.resolve_by_rank(mode, position)
    return [ranking_to_dict(ranking)]


@router.get("/rankings")
async def get_rankings(
    page: Optional[str] = Query(None),
    mode: Mode = Depends(get_mode),
    resolver: RankResolver = Depends(get_resolver),
) -> List[Dict[str, Any]]:
    """Get one page of up to 50 leaderboard entries."""

    rankings = await resolver.resolve_page(mode, parse_page(page))
    return [ranking_to_dict(ranking) for ranking in rankings]


__all__ = ["router"]
