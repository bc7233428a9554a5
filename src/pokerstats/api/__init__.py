"""REST API exposing poker stats derived from the results sheet."""

from __future__ import annotations

import logging
from typing import Callable, List

from fastapi import FastAPI, HTTPException, Query

from pokerstats.api.schemas import SeriesResponse, StatsResponse, YearsResponse
from pokerstats.config import load_settings
from pokerstats.ingest import GridParseResult, parse_grid
from pokerstats.models import PlayerReview
from pokerstats.sheets import SheetFetchError, fetch_grid
from pokerstats.stats import (
    aggregate,
    available_years,
    build_performance,
    chart_rows,
    filter_by_year,
    rank_stats,
    review_player,
)


logger = logging.getLogger("uvicorn.error")

GridLoader = Callable[[], List[List[str]]]

FETCH_FAILED_DETAIL = (
    "Failed to load poker stats. Make sure the Google Sheet is publicly "
    "accessible and the API key is set."
)


def _default_grid_loader() -> List[List[str]]:
    return fetch_grid(load_settings().sheet_config())


def create_app(grid_loader: GridLoader | None = None) -> FastAPI:
    app = FastAPI(title="pokerstats API")
    loader = grid_loader or _default_grid_loader

    def _load() -> GridParseResult:
        try:
            rows = loader()
        except SheetFetchError as exc:
            logger.warning("Sheet fetch failed: %s", exc)
            raise HTTPException(status_code=502, detail=FETCH_FAILED_DETAIL) from exc
        except ValueError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return parse_grid(rows)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/years", response_model=YearsResponse)
    def years():
        data = _load()
        return YearsResponse(years=available_years(data.sessions))

    @app.get("/stats", response_model=StatsResponse)
    def stats(year: int | None = Query(default=None)):
        data = _load()
        sessions = filter_by_year(data.sessions, year)
        ranked = rank_stats(aggregate(sessions, data.player_summaries))
        return StatsResponse(year=year, players=len(ranked), sessions=len(sessions), stats=ranked)

    @app.get("/series", response_model=SeriesResponse)
    def series(year: int | None = Query(default=None), hold: bool = Query(default=False)):
        data = _load()
        performance = build_performance(filter_by_year(data.sessions, year))
        return SeriesResponse(
            year=year,
            domain=performance.domain,
            series=performance.series,
            rows=chart_rows(performance, hold=hold),
        )

    @app.get("/players/{slug}/review", response_model=PlayerReview)
    def player_review(slug: str, year: int | None = Query(default=None)):
        data = _load()
        review = review_player(filter_by_year(data.sessions, year), data.player_summaries, slug)
        if review is None:
            raise HTTPException(status_code=404, detail="Player not found")
        return review

    return app


__all__ = ["create_app"]
