"""Fold sessions into per-player lifetime statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Literal, Optional, Sequence

from pokerstats.models import PlayerStat, PlayerSummary, Session


SortKey = Literal[
    "total_winnings",
    "total_profit",
    "sessions",
    "avg_profit",
    "roi",
    "highest_single_winning",
    "total_buy_in",
]


@dataclass
class _Accumulator:
    """Running totals for one player during a single aggregation pass."""

    sessions: int
    total_profit: float
    total_buy_in: float
    highest_single_winning: float

    @classmethod
    def start(cls, session: Session) -> "_Accumulator":
        return cls(
            sessions=1,
            total_profit=session.profit,
            total_buy_in=session.buy_in,
            highest_single_winning=session.profit,
        )

    def add(self, session: Session) -> None:
        self.sessions += 1
        self.total_profit += session.profit
        self.total_buy_in += session.buy_in
        # Plain maximum: a player who never won keeps their smallest loss here.
        self.highest_single_winning = max(self.highest_single_winning, session.profit)


def _summaries_by_player(summaries: Iterable[PlayerSummary]) -> Dict[str, PlayerSummary]:
    lookup: Dict[str, PlayerSummary] = {}
    for summary in summaries:
        lookup.setdefault(summary.player, summary)
    return lookup


def _roi(total_profit: float, total_buy_in: float) -> float:
    if total_buy_in == 0:
        return 0.0
    return total_profit / total_buy_in * 100


def aggregate(
    sessions: Sequence[Session],
    summaries: Sequence[PlayerSummary] = (),
) -> List[PlayerStat]:
    """Return one ``PlayerStat`` per player that appears in ``sessions``.

    ``total_winnings`` comes from the player's ``PlayerSummary`` when one is
    supplied and falls back to the summed session profit otherwise. Players
    that only appear in ``summaries`` are not reported.
    """

    groups: Dict[str, _Accumulator] = {}
    for session in sessions:
        existing = groups.get(session.player)
        if existing is None:
            groups[session.player] = _Accumulator.start(session)
        else:
            existing.add(session)

    lookup = _summaries_by_player(summaries)
    stats: List[PlayerStat] = []
    for player, totals in groups.items():
        summary = lookup.get(player)
        if summary is not None:
            total_winnings = summary.total_winnings
        else:
            total_winnings = totals.total_profit
        stats.append(
            PlayerStat(
                player=player,
                sessions=totals.sessions,
                total_profit=totals.total_profit,
                total_buy_in=totals.total_buy_in,
                highest_single_winning=totals.highest_single_winning,
                total_winnings=total_winnings,
                avg_profit=totals.total_profit / totals.sessions,
                roi=_roi(totals.total_profit, totals.total_buy_in),
            )
        )
    return stats


def rank_stats(
    stats: Iterable[PlayerStat],
    *,
    key: SortKey = "total_winnings",
    descending: bool = True,
) -> List[PlayerStat]:
    """Order stats for display; ties fall back to the player name."""

    ordered = sorted(stats, key=lambda stat: stat.player)
    ordered.sort(key=lambda stat: float(getattr(stat, key)), reverse=descending)
    return ordered


def available_years(sessions: Iterable[Session]) -> List[int]:
    """Distinct session years, newest first."""

    return sorted({session.date.year for session in sessions}, reverse=True)


def filter_by_year(sessions: Iterable[Session], year: Optional[int]) -> List[Session]:
    if year is None:
        return list(sessions)
    return [session for session in sessions if session.date.year == year]


def win_rate(sessions: Sequence[Session]) -> float:
    """Percentage of sessions that finished with a positive profit."""

    if not sessions:
        return 0.0
    winners = sum(1 for session in sessions if session.profit > 0)
    return winners / len(sessions) * 100


__all__ = [
    "SortKey",
    "aggregate",
    "available_years",
    "filter_by_year",
    "rank_stats",
    "win_rate",
]
