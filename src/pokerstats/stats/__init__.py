"""Aggregations over parsed poker sessions."""

from .review import first_name, player_slug, review_player
from .series import build_performance, chart_rows, date_domain, day_key, derive_series
from .summary import aggregate, available_years, filter_by_year, rank_stats, win_rate

__all__ = [
    "aggregate",
    "available_years",
    "build_performance",
    "chart_rows",
    "date_domain",
    "day_key",
    "derive_series",
    "filter_by_year",
    "first_name",
    "player_slug",
    "rank_stats",
    "review_player",
    "win_rate",
]
