"""Normalisation of raw query parameters."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

MIN_PAGE = 1
MAX_PAGE = 200


class Selector(str, Enum):
    """How identifiers in a user lookup are interpreted."""

    USER_ID = "user_id"
    USERNAME = "username"


def parse_page(raw: Optional[str]) -> int:
    """Return the requested page, or 1 when it is missing or out of range."""

    if raw is None:
        return MIN_PAGE
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return MIN_PAGE
    page = int(text)
    if page < MIN_PAGE or page > MAX_PAGE:
        return MIN_PAGE
    return page


def parse_selector(raw: Optional[str]) -> Selector:
    if raw in {selector.value for selector in Selector}:
        return Selector(raw)
    return Selector.USER_ID


def split_identifiers(raw: str) -> List[str]:
    """Split a comma-separated path segment, keeping order and duplicates."""

    return [part.strip() for part in raw.split(",")]


def parse_rank(raw: str) -> Optional[int]:
    """Parse a rank path segment; ASCII digits with an optional leading ``-``."""

    digits = raw[1:] if raw.startswith("-") else raw
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(raw)


def parse_user_id(raw: str) -> Optional[int]:
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


__all__ = [
    "MAX_PAGE",
    "MIN_PAGE",
    "Selector",
    "parse_page",
    "parse_rank",
    "parse_selector",
    "parse_user_id",
    "split_identifiers",
]
