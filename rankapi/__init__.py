"""Read-only ranking API over a Redis score index and a SQL peak-rank table."""

__version__ = "0.3.0"
