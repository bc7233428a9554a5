"""Command-line interface for summarising poker results."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from pokerstats.config import load_settings
from pokerstats.ingest import GridParseResult, load_sessions_from_csv
from pokerstats.models import PlayerStat
from pokerstats.sheets import SheetConfig, SheetFetchError, fetch_poker_stats
from pokerstats.stats import aggregate, build_performance, chart_rows, filter_by_year, rank_stats


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Summarise poker results from a sheet export")
    parser.add_argument("--csv", type=Path, default=None, help="Local CSV export of the results sheet")
    parser.add_argument("--sheet-id", default=None, help="Google Sheet ID (defaults to POKERSTATS_SHEET_ID)")
    parser.add_argument("--sheet-name", default=None, help="Sheet tab name (defaults to POKERSTATS_SHEET_NAME)")
    parser.add_argument("--year", type=int, default=None, help="Only include sessions from this year")
    parser.add_argument(
        "--sort",
        default="total_winnings",
        choices=["total_winnings", "total_profit", "sessions", "avg_profit", "roi", "highest_single_winning"],
        help="Column used to rank players",
    )
    parser.add_argument("--report", type=Path, default=None, help="Optional path to write stats JSON")
    parser.add_argument("--series", type=Path, default=None, help="Optional path to write cumulative series JSON")
    parser.add_argument("--hold", action="store_true", help="Carry cumulative values across skipped dates in --series")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")
    return parser.parse_args(argv)


def _load(args: argparse.Namespace) -> GridParseResult:
    if args.csv:
        return load_sessions_from_csv(args.csv)

    settings = load_settings()
    sheet_id = args.sheet_id or settings.sheet_id
    if not sheet_id:
        raise SystemExit("Provide --csv or --sheet-id (or set POKERSTATS_SHEET_ID)")
    config = SheetConfig(
        sheet_id=sheet_id,
        sheet_name=args.sheet_name or settings.sheet_name,
        api_key=settings.api_key,
        timeout=settings.timeout,
    )
    try:
        return fetch_poker_stats(config)
    except SheetFetchError as exc:
        raise SystemExit(str(exc)) from exc


def _format_table(stats: Sequence[PlayerStat]) -> str:
    header = f"{'Player':<20} {'Sessions':>8} {'Winnings':>11} {'Profit':>11} {'Avg':>9} {'Best':>9} {'ROI':>8}"
    lines = [header, "-" * len(header)]
    for stat in stats:
        lines.append(
            f"{stat.player[:20]:<20} {stat.sessions:>8d} {stat.total_winnings:>11.2f} "
            f"{stat.total_profit:>11.2f} {stat.avg_profit:>9.2f} "
            f"{stat.highest_single_winning:>9.2f} {stat.roi:>7.1f}%"
        )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    data = _load(args)
    sessions = filter_by_year(data.sessions, args.year)
    if not sessions:
        print("No sessions found")
        return

    stats = rank_stats(aggregate(sessions, data.player_summaries), key=args.sort)
    print(_format_table(stats))

    if args.report:
        payload = [stat.model_dump() for stat in stats]
        args.report.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote stats report to {args.report}")

    if args.series:
        performance = build_performance(sessions)
        payload = {
            "domain": [day.isoformat() for day in performance.domain],
            "series": {
                player: [point.model_dump(mode="json") for point in points]
                for player, points in performance.series.items()
            },
            "rows": [row.model_dump(mode="json") for row in chart_rows(performance, hold=args.hold)],
        }
        args.series.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote cumulative series to {args.series}")


if __name__ == "__main__":
    main()
