"""Canonical session and player models shared across ingestion and stats layers."""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class Session(BaseModel):
    """One player's result for one game on one calendar day."""

    date: dt.date
    player: str = Field(..., min_length=1)
    buy_in: float = Field(..., ge=0.0)
    profit: float

    model_config = ConfigDict(frozen=True)

    @field_validator("date", mode="before")
    @classmethod
    def _calendar_day(cls, value: Any) -> Any:
        # Only the calendar day matters; drop any time-of-day component.
        if isinstance(value, dt.datetime):
            return value.date()
        return value


class PlayerSummary(BaseModel):
    """Lifetime figures supplied alongside the session grid."""

    player: str = Field(..., min_length=1)
    total_winnings: float
    session_count: int

    model_config = ConfigDict(frozen=True)


class PlayerStat(BaseModel):
    player: str
    sessions: int = Field(..., ge=1)
    total_profit: float
    total_buy_in: float
    highest_single_winning: float
    total_winnings: float
    avg_profit: float
    roi: float

    model_config = ConfigDict(frozen=True)


class SeriesPoint(BaseModel):
    date: dt.date
    cumulative: float
    day_profit: float

    model_config = ConfigDict(frozen=True)


class PerformanceSeries(BaseModel):
    """Per-player cumulative series plus the shared x-axis domain."""

    series: Dict[str, List[SeriesPoint]] = Field(default_factory=dict)
    domain: List[dt.date] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ChartRow(BaseModel):
    date: dt.date
    cumulative: Dict[str, float] = Field(default_factory=dict)
    day_profit: Dict[str, float] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class PlayerReview(BaseModel):
    """Year-in-review figures for a single player."""

    slug: str
    first_name: str
    stat: PlayerStat
    win_rate: float = Field(..., ge=0.0, le=100.0)
    winning_sessions: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)
