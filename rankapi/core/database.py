"""Database engine construction."""

from __future__ import annotations

from pathlib import Path

from sqlalchemy.engine import Engine, make_url
from sqlmodel import create_engine

from .config import DATABASE_URL, DB_POOL_SIZE


def build_engine(url: str = DATABASE_URL, pool_size: int = DB_POOL_SIZE) -> Engine:
    """Create the SQL engine backing the peak-rank store."""

    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_size=pool_size, pool_pre_ping=True)


__all__ = ["build_engine"]
