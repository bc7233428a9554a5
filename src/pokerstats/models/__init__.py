"""Typed records produced and consumed by the stats pipeline."""

from .session import (
    ChartRow,
    PerformanceSeries,
    PlayerReview,
    PlayerStat,
    PlayerSummary,
    SeriesPoint,
    Session,
)

__all__ = [
    "ChartRow",
    "PerformanceSeries",
    "PlayerReview",
    "PlayerStat",
    "PlayerSummary",
    "SeriesPoint",
    "Session",
]
