"""Environment-driven settings for the sheet source."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from pokerstats.sheets import SheetConfig


logger = logging.getLogger(__name__)

_SHEET_ID_ENV = "POKERSTATS_SHEET_ID"
_SHEET_NAME_ENV = "POKERSTATS_SHEET_NAME"
_API_KEY_ENV = "POKERSTATS_SHEETS_API_KEY"
_TIMEOUT_ENV = "POKERSTATS_TIMEOUT"

_SHEET_NAME_DEFAULT = "data"
_TIMEOUT_DEFAULT = 10.0


@dataclass(frozen=True)
class Settings:
    sheet_id: Optional[str]
    sheet_name: str = _SHEET_NAME_DEFAULT
    api_key: Optional[str] = None
    timeout: float = _TIMEOUT_DEFAULT

    def sheet_config(self) -> SheetConfig:
        if not self.sheet_id:
            raise ValueError(f"No sheet configured; set {_SHEET_ID_ENV}")
        return SheetConfig(
            sheet_id=self.sheet_id,
            sheet_name=self.sheet_name,
            api_key=self.api_key,
            timeout=self.timeout,
        )


def _env_str(env: Mapping[str, str], name: str) -> Optional[str]:
    raw = env.get(name)
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _env_float(
    env: Mapping[str, str],
    name: str,
    default: float,
    *,
    clamp_min: float | None = None,
) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if env is None else env
    return Settings(
        sheet_id=_env_str(env, _SHEET_ID_ENV),
        sheet_name=_env_str(env, _SHEET_NAME_ENV) or _SHEET_NAME_DEFAULT,
        api_key=_env_str(env, _API_KEY_ENV),
        timeout=_env_float(env, _TIMEOUT_ENV, _TIMEOUT_DEFAULT, clamp_min=1.0),
    )
