"""Ruleset modes and their canonical lookup."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Ruleset variant. The value is the numeric code used in storage."""

    OSU = 0
    TAIKO = 1
    FRUITS = 2
    MANIA = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def score_key(self) -> str:
        """Redis sorted-set key holding this mode's scores."""
        return f"score_{self.label}"


_BY_NAME: Dict[str, Mode] = {mode.label: mode for mode in Mode}
_BY_CODE: Dict[str, Mode] = {str(mode.value): mode for mode in Mode}


def mode_from_name(name: str) -> Mode:
    """Strict lookup used for configuration values."""

    try:
        return _BY_NAME[name.strip().lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown mode: {name!r}") from exc


def resolve_mode(
    name: Optional[str],
    code: Optional[str],
    default: Mode = Mode.OSU,
) -> Mode:
    """Canonicalise the ``mode``/``m`` query pair into a :class:`Mode`.

    When ``code`` is supplied it alone decides: a known code maps to its
    mode and anything else falls back to ``default``. Without a code, a
    known ``name`` is used. Unknown or missing input never raises; it
    silently yields ``default``.
    """

    if code is not None:
        mode = _BY_CODE.get(code.strip())
        if mode is None:
            logger.debug("Unknown mode code %r, using %s", code, default.label)
            return default
        return mode

    if name is None:
        return default
    mode = _BY_NAME.get(name.strip().lower())
    if mode is None:
        logger.debug("Unknown mode name %r, using %s", name, default.label)
        return default
    return mode


__all__ = ["Mode", "mode_from_name", "resolve_mode"]
