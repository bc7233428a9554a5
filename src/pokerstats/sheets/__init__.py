"""Tabular source adapters."""

from .client import SheetConfig, SheetFetchError, fetch_grid, fetch_poker_stats

__all__ = [
    "SheetConfig",
    "SheetFetchError",
    "fetch_grid",
    "fetch_poker_stats",
]
