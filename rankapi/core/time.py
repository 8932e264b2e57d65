"""Datetime helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    """Render a datetime as ISO-8601 with a trailing ``Z``.

    Naive values are taken to be UTC already, which is how the peak-rank
    table stores them.
    """

    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat() + "Z"


__all__ = ["isoformat_utc"]
