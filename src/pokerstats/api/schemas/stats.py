from __future__ import annotations

from datetime import date
from typing import Dict, List

from pydantic import BaseModel, Field

from pokerstats.models import ChartRow, PlayerStat, SeriesPoint


class YearsResponse(BaseModel):
    years: List[int]


class StatsResponse(BaseModel):
    year: int | None = None
    players: int
    sessions: int
    stats: List[PlayerStat]


class SeriesResponse(BaseModel):
    year: int | None = None
    domain: List[date]
    series: Dict[str, List[SeriesPoint]]
    rows: List[ChartRow] = Field(default_factory=list)
