"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    API_HOST,
    API_PORT,
    DATABASE_URL,
    DB_INIT,
    DEFAULT_MODE,
    LOG_LEVEL,
    REDIS_URL,
    STORE_TIMEOUT_SECONDS,
)
from .database import build_engine
from .errors import RankApiError, StoreUnavailable, ValidationError
from .logging import setup_logging
from .redis_client import build_redis
from .time import isoformat_utc

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "API_HOST",
    "API_PORT",
    "DATABASE_URL",
    "DB_INIT",
    "DEFAULT_MODE",
    "LOG_LEVEL",
    "REDIS_URL",
    "STORE_TIMEOUT_SECONDS",
    "RankApiError",
    "StoreUnavailable",
    "ValidationError",
    "build_engine",
    "build_redis",
    "isoformat_utc",
    "setup_logging",
]
