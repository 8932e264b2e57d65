"""Request-scoped dependencies shared by the routers."""

from __future__ import annotations

from typing import Optional

from fastapi import Query, Request

from ..services import Mode, RankResolver, resolve_mode


def get_resolver(request: Request) -> RankResolver:
    """Return the resolver built by the application lifespan."""

    return request.app.state.resolver


def get_mode(
    request: Request,
    mode: Optional[str] = Query(None, description="Mode name, e.g. osu or mania"),
    m: Optional[str] = Query(None, description="Numeric mode code, 0-3"),
) -> Mode:
    """Canonical mode for the request; ``m`` wins over ``mode``."""

    return resolve_mode(mode, m, request.app.state.default_mode)


__all__ = ["get_mode", "get_resolver"]
