"""Cumulative profit series for charting player performance over time."""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Sequence, Tuple

from pokerstats.models import ChartRow, PerformanceSeries, SeriesPoint, Session


DayKey = Tuple[int, int, int]


def day_key(value: date) -> DayKey:
    """Calendar-day identity used for every date comparison in this module."""

    return (value.year, value.month, value.day)


def _group_by_player(sessions: Iterable[Session]) -> Dict[str, List[Session]]:
    groups: Dict[str, List[Session]] = {}
    for session in sessions:
        groups.setdefault(session.player, []).append(session)
    return groups


def derive_series(sessions: Sequence[Session]) -> Dict[str, List[SeriesPoint]]:
    """Map each player to one point per session, in date order.

    ``cumulative`` is the running total after the session and ``day_profit``
    is that session's own result. Sessions sharing a date keep their input
    order.
    """

    series: Dict[str, List[SeriesPoint]] = {}
    for player, player_sessions in _group_by_player(sessions).items():
        ordered = sorted(player_sessions, key=lambda session: day_key(session.date))
        cumulative = 0.0
        points: List[SeriesPoint] = []
        for session in ordered:
            cumulative += session.profit
            points.append(
                SeriesPoint(date=session.date, cumulative=cumulative, day_profit=session.profit)
            )
        series[player] = points
    return series


def date_domain(sessions: Iterable[Session]) -> List[date]:
    """Sorted union of every distinct calendar day across all players."""

    days: Dict[DayKey, date] = {}
    for session in sessions:
        days.setdefault(day_key(session.date), session.date)
    return [days[key] for key in sorted(days)]


def build_performance(sessions: Sequence[Session]) -> PerformanceSeries:
    return PerformanceSeries(series=derive_series(sessions), domain=date_domain(sessions))


def chart_rows(performance: PerformanceSeries, *, hold: bool = False) -> List[ChartRow]:
    """Lay the sparse per-player series out on the shared date domain.

    A player shows up on a row only for days they played, with the last
    cumulative value of that day and the sum of that day's results. With
    ``hold`` a player who has already started keeps their last cumulative
    value on days they skipped, so lines never drop back to zero.
    """

    by_day: Dict[str, Dict[DayKey, Tuple[float, float]]] = {}
    for player, points in performance.series.items():
        days: Dict[DayKey, Tuple[float, float]] = {}
        for point in points:
            key = day_key(point.date)
            _, day_total = days.get(key, (0.0, 0.0))
            days[key] = (point.cumulative, day_total + point.day_profit)
        by_day[player] = days

    last_seen: Dict[str, float] = {}
    rows: List[ChartRow] = []
    for day in performance.domain:
        key = day_key(day)
        cumulative: Dict[str, float] = {}
        day_profit: Dict[str, float] = {}
        for player in sorted(by_day):
            entry = by_day[player].get(key)
            if entry is not None:
                cumulative[player], day_profit[player] = entry
                last_seen[player] = entry[0]
            elif hold and player in last_seen:
                cumulative[player] = last_seen[player]
        rows.append(ChartRow(date=day, cumulative=cumulative, day_profit=day_profit))
    return rows


__all__ = [
    "build_performance",
    "chart_rows",
    "date_domain",
    "day_key",
    "derive_series",
]
