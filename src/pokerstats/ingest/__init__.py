"""Input adapters that normalize raw spreadsheet grids."""

from .grid import (
    GridParseResult,
    load_grid_csv,
    load_sessions_from_csv,
    parse_currency,
    parse_date,
    parse_grid,
    read_grid_csv,
)

__all__ = [
    "GridParseResult",
    "load_grid_csv",
    "load_sessions_from_csv",
    "parse_currency",
    "parse_date",
    "parse_grid",
    "read_grid_csv",
]
