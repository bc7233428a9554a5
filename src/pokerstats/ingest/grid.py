"""Helpers to turn a spreadsheet grid of text cells into canonical records."""

from __future__ import annotations

import csv
import logging
import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from io import StringIO
from pathlib import Path
from typing import List, Optional, Sequence

from pokerstats.models import PlayerSummary, Session


logger = logging.getLogger(__name__)

# Row 0 holds labels and dates, row 1 the buy-in per date, rows 2+ the players.
HEADER_ROW = 0
BUY_IN_ROW = 1
FIRST_PLAYER_ROW = 2

WINNINGS_COLUMN = 0
COUNT_COLUMN = 1
NAME_COLUMN = 2
FIRST_DATE_COLUMN = 3

DATE_FORMATS: tuple[str, ...] = (
    "%m/%d/%y",
    "%m/%d/%Y",
    "%Y-%m-%d",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d-%b-%Y",
)

_CURRENCY_NOISE = re.compile(r"[$,\s]")


@dataclass(frozen=True)
class GridParseResult:
    sessions: List[Session] = field(default_factory=list)
    player_summaries: List[PlayerSummary] = field(default_factory=list)


@dataclass(frozen=True)
class DateColumn:
    index: int
    date: date
    buy_in: float


def _cell(row: Sequence[str], index: int) -> str:
    if index >= len(row):
        return ""
    value = row[index]
    if value is None:
        return ""
    return str(value).strip()


def parse_currency(raw: Optional[str]) -> float:
    """Parse ``"$1,234.50"`` style text, returning 0.0 for anything unusable."""

    if raw is None:
        return 0.0
    text = _CURRENCY_NOISE.sub("", str(raw))
    negative = False
    if text.startswith("(") and text.endswith(")"):
        negative = True
        text = text[1:-1]
    if not text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return -value if negative else value


def parse_count(raw: Optional[str]) -> int:
    value = parse_currency(raw)
    return int(value)


def parse_date(raw: str) -> Optional[date]:
    text = raw.strip()
    if not text:
        return None
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _date_columns(header: Sequence[str], buy_ins: Sequence[str]) -> List[DateColumn]:
    columns: List[DateColumn] = []
    for index in range(FIRST_DATE_COLUMN, len(header)):
        label = _cell(header, index)
        if not label:
            continue
        parsed = parse_date(label)
        if parsed is None:
            logger.warning("Skipping column %d: unrecognised date header %r", index, label)
            continue
        columns.append(DateColumn(index=index, date=parsed, buy_in=parse_currency(_cell(buy_ins, index))))
    return columns


def parse_grid(rows: Sequence[Sequence[str]]) -> GridParseResult:
    """Convert the raw sheet grid into sessions and lifetime summaries.

    Malformed numeric cells become ``0`` and blank profit cells mean the
    player sat that date out, so no row can make the parse fail.
    """

    if len(rows) < FIRST_PLAYER_ROW + 1:
        return GridParseResult()

    columns = _date_columns(rows[HEADER_ROW], rows[BUY_IN_ROW])

    sessions: List[Session] = []
    summaries: List[PlayerSummary] = []
    for row_number, row in enumerate(rows[FIRST_PLAYER_ROW:], start=FIRST_PLAYER_ROW):
        name = _cell(row, NAME_COLUMN)
        if not name:
            logger.debug("Skipping row %d: no player name", row_number)
            continue

        summaries.append(
            PlayerSummary(
                player=name,
                total_winnings=parse_currency(_cell(row, WINNINGS_COLUMN)),
                session_count=parse_count(_cell(row, COUNT_COLUMN)),
            )
        )

        for column in columns:
            profit_text = _cell(row, column.index)
            if not profit_text:
                continue
            sessions.append(
                Session(
                    date=column.date,
                    player=name,
                    buy_in=max(0.0, column.buy_in),
                    profit=parse_currency(profit_text),
                )
            )

    logger.debug(
        "Parsed %d sessions for %d players across %d dates",
        len(sessions),
        len(summaries),
        len(columns),
    )
    return GridParseResult(sessions=sessions, player_summaries=summaries)


def read_grid_csv(text: str) -> List[List[str]]:
    """Split CSV export text into trimmed rows, dropping blank trailing lines."""

    reader = csv.reader(StringIO(text))
    rows = [[cell.strip() for cell in row] for row in reader]
    while rows and not any(rows[-1]):
        rows.pop()
    return rows


def load_grid_csv(path: Path) -> List[List[str]]:
    return read_grid_csv(path.read_text(encoding="utf-8"))


def load_sessions_from_csv(path: Path) -> GridParseResult:
    return parse_grid(load_grid_csv(path))
