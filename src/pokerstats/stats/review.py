"""Single-player year-in-review lookups."""

from __future__ import annotations

import re
from typing import Optional, Sequence

from pokerstats.models import PlayerReview, PlayerSummary, Session

from .summary import aggregate, win_rate


_WHITESPACE = re.compile(r"\s+")


def player_slug(name: str) -> str:
    """URL-friendly key, e.g. ``"Mary Jane"`` -> ``"mary_jane"``."""

    return _WHITESPACE.sub("_", name.strip().lower())


def first_name(name: str) -> str:
    parts = name.split()
    return parts[0] if parts else name


def review_player(
    sessions: Sequence[Session],
    summaries: Sequence[PlayerSummary],
    slug: str,
) -> Optional[PlayerReview]:
    wanted = slug.strip().lower()
    stat = next((s for s in aggregate(sessions, summaries) if player_slug(s.player) == wanted), None)
    if stat is None:
        return None

    player_sessions = [session for session in sessions if session.player == stat.player]
    return PlayerReview(
        slug=wanted,
        first_name=first_name(stat.player),
        stat=stat,
        win_rate=win_rate(player_sessions),
        winning_sessions=sum(1 for session in player_sessions if session.profit > 0),
    )
