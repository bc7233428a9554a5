"""Pydantic models for API I/O."""

from .stats import SeriesResponse, StatsResponse, YearsResponse

__all__ = [
    "SeriesResponse",
    "StatsResponse",
    "YearsResponse",
]
