"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from . import models  # noqa: F401 - ensure models are registered with SQLModel
from .api import register_error_handlers, register_routes
from .core import (
    ALLOWED_CORS_ORIGINS,
    API_HOST,
    API_PORT,
    DB_INIT,
    DEFAULT_MODE,
    LOG_LEVEL,
    build_engine,
    build_redis,
    setup_logging,
)
from .services import (
    Mode,
    PeakRankStore,
    RankResolver,
    ScoreIndex,
    UserDirectory,
    mode_from_name,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.resolver is not None:
        yield
        return

    redis = build_redis()
    engine = build_engine()
    if DB_INIT:
        SQLModel.metadata.create_all(engine)

    app.state.resolver = RankResolver(
        ScoreIndex(redis), UserDirectory(redis), PeakRankStore(engine)
    )
    logger.info("Rank resolver ready (default mode %s)", app.state.default_mode.label)
    try:
        yield
    finally:
        app.state.resolver = None
        await redis.aclose()
        engine.dispose()


def create_app(
    resolver: Optional[RankResolver] = None,
    default_mode: Optional[Mode] = None,
) -> FastAPI:
    """Build the application.

    Passing ``resolver`` skips store construction in the lifespan, which is
    how tests substitute in-memory stores.
    """

    setup_logging(LOG_LEVEL)

    if default_mode is None:
        try:
            default_mode = mode_from_name(DEFAULT_MODE)
        except ValueError as exc:
            raise RuntimeError(f"DEFAULT_MODE is not a known mode: {DEFAULT_MODE}") from exc

    app = FastAPI(title="Rankings API", version="0.3.0", lifespan=lifespan)
    app.state.resolver = resolver
    app.state.default_mode = default_mode

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_CORS_ORIGINS,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("rankapi.app:app", host=API_HOST, port=API_PORT)
