"""Error types shared by the services and the HTTP layer."""

from __future__ import annotations


class RankApiError(Exception):
    """Base class for all service errors."""


class ValidationError(RankApiError):
    """Request input is structurally invalid and cannot be normalised."""


class StoreUnavailable(RankApiError):
    """A backing store timed out or refused the connection."""


__all__ = ["RankApiError", "StoreUnavailable", "ValidationError"]
