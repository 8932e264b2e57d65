"""Process-wide logging configuration."""

from __future__ import annotations

import logging
import sys


def setup_logging(level_name: str | None = None) -> None:
    """Install a single stdout handler on the root logger.

    Calling it again (reload, tests) only adjusts the level.
    """

    level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = ["setup_logging"]
