"""Fetch the results grid from Google Sheets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

from pokerstats.ingest import GridParseResult, parse_grid, read_grid_csv


logger = logging.getLogger(__name__)

CSV_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq"
VALUES_API_URL = "https://sheets.googleapis.com/v4/spreadsheets/{sheet_id}/values/{sheet_name}"


class SheetFetchError(RuntimeError):
    """Raised when the sheet cannot be retrieved; nothing downstream runs."""


@dataclass(frozen=True)
class SheetConfig:
    sheet_id: str
    sheet_name: str = "data"
    api_key: Optional[str] = None
    timeout: float = 10.0


def _stringify(rows: Any) -> List[List[str]]:
    if not rows:
        return []
    return [["" if cell is None else str(cell) for cell in row] for row in rows]


def _fetch_csv(client: httpx.Client, config: SheetConfig) -> List[List[str]]:
    url = CSV_EXPORT_URL.format(sheet_id=config.sheet_id)
    params = {"tqx": "out:csv", "sheet": config.sheet_name}
    try:
        resp = client.get(url, params=params)
    except httpx.HTTPError as exc:
        raise SheetFetchError(f"Failed to fetch sheet data: {exc}") from exc
    if resp.is_error:
        raise SheetFetchError(
            "Failed to fetch sheet data. Make sure the Google Sheet is publicly "
            "accessible (Anyone with the link can view)."
        )
    return read_grid_csv(resp.text)


def _fetch_values(client: httpx.Client, config: SheetConfig) -> List[List[str]]:
    url = VALUES_API_URL.format(
        sheet_id=config.sheet_id,
        sheet_name=quote(config.sheet_name, safe=""),
    )
    try:
        resp = client.get(url, params={"key": config.api_key})
    except httpx.HTTPError as exc:
        raise SheetFetchError(f"Failed to fetch sheet data via API: {exc}") from exc
    if resp.is_error:
        raise SheetFetchError(f"Failed to fetch sheet data via API (HTTP {resp.status_code})")
    try:
        payload = resp.json()
    except ValueError as exc:
        raise SheetFetchError("Sheets API returned a non-JSON body") from exc
    if not isinstance(payload, dict):
        raise SheetFetchError("Sheets API returned an unexpected payload")
    return _stringify(payload.get("values"))


def fetch_grid(config: SheetConfig, *, client: httpx.Client | None = None) -> List[List[str]]:
    """Return the sheet as rows of text cells.

    Uses the Sheets API when an API key is configured and the public CSV
    export otherwise.
    """

    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=config.timeout, follow_redirects=True)
    try:
        if config.api_key:
            return _fetch_values(client, config)
        return _fetch_csv(client, config)
    except SheetFetchError as exc:
        logger.error("Error fetching sheet %s: %s", config.sheet_id, exc)
        raise
    finally:
        if owns_client:
            client.close()


def fetch_poker_stats(config: SheetConfig, *, client: httpx.Client | None = None) -> GridParseResult:
    return parse_grid(fetch_grid(config, client=client))
