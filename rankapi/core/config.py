"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Backing stores -------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = Path(os.getenv("DATA_DIR", str(_PROJECT_ROOT / "data")))

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DATA_DIR / 'app.db'}"
DB_POOL_SIZE = _env_int("DB_POOL_SIZE", 5)
DB_INIT = _env_bool("DB_INIT", False)

# Seconds allowed for a single store call before the request fails with 503.
STORE_TIMEOUT_SECONDS = _env_float("STORE_TIMEOUT_SECONDS", 5.0)


# Query behaviour ------------------------------------------------------------
# Unknown mode names fall back to this one; it must itself be a known name.
DEFAULT_MODE = (os.getenv("DEFAULT_MODE") or "osu").strip().lower()


# HTTP -----------------------------------------------------------------------
ALLOWED_CORS_ORIGINS = _unique(_split_csv(os.getenv("ALLOWED_CORS_ORIGINS")) or ["*"])
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = _env_int("API_PORT", 3000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "API_HOST",
    "API_PORT",
    "DATABASE_URL",
    "DATA_DIR",
    "DB_INIT",
    "DB_POOL_SIZE",
    "DEFAULT_MODE",
    "LOG_LEVEL",
    "REDIS_URL",
    "STORE_TIMEOUT_SECONDS",
]
