"""User standing endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from ...services import (
    Mode,
    RankResolver,
    parse_selector,
    ranking_to_dict,
    split_identifiers,
)
from ..deps import get_mode, get_resolver

router = APIRouter(tags=["users"])


@router.get("/u/{users}")
async def get_users(
    users: str,
    s: Optional[str] = Query(None, description="Identifier type: user_id or username"),
    mode: Mode = Depends(get_mode),
    resolver: RankResolver = Depends(get_resolver),
) -> List[Dict[str, Any]]:
    """Get current standings for a comma-separated list of users."""

    rankings = await resolver.resolve_by_users(
        mode, split_identifiers(users), parse_selector(s)
    )
    return [ranking_to_dict(ranking) for ranking in rankings]


__all__ = ["router"]
