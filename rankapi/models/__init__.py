"""Database model exports."""

from .peak_rank import PeakRankRow

__all__ = ["PeakRankRow"]
