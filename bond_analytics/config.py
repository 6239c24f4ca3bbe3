"""
Runtime settings loaded from environment variables.

Every variable is prefixed ``BOND_ANALYTICS_``:

BOND_ANALYTICS_FRED_API_KEY : str
    FRED API key. The unprefixed ``FRED_API_KEY`` is honoured as well.
BOND_ANALYTICS_FRED_BASE_URL : str
    Observations endpoint.
BOND_ANALYTICS_FRED_TIMEOUT : float
    Request timeout in seconds (default 10).
BOND_ANALYTICS_REFERENCE_SERIES : str
    Series used for the reference yield (default "DGS10").
BOND_ANALYTICS_LOG_LEVEL : str
    DEBUG, INFO, WARNING or ERROR.

The API key is never stored in source.
"""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

ENV_PREFIX = "BOND_ANALYTICS_"
FRED_OBSERVATIONS_URL = "https://api.stlouisfed.org/fred/series/observations"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_env(key: str, default: Any, value_type: type = str) -> Any:
    """Read ``BOND_ANALYTICS_<key>`` and convert it; malformed values raise ValueError."""
    raw = os.environ.get(ENV_PREFIX + key.upper())
    if raw is None or raw == "":
        return default

    try:
        if value_type == float:
            return float(raw)
        if value_type == int:
            return int(raw)
        return raw
    except (TypeError, ValueError) as e:
        raise ValueError(f"{ENV_PREFIX}{key.upper()}={raw!r} is not a valid {value_type.__name__}") from e


@dataclass(frozen=True)
class Settings:
    fred_api_key: Optional[str] = None
    fred_base_url: str = FRED_OBSERVATIONS_URL
    fred_timeout: float = 10.0
    reference_series: str = "DGS10"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        api_key = _get_env("FRED_API_KEY", None) or os.environ.get("FRED_API_KEY") or None
        timeout = _get_env("FRED_TIMEOUT", 10.0, float)
        if not math.isfinite(timeout) or timeout <= 0:
            raise ValueError(f"{ENV_PREFIX}FRED_TIMEOUT must be a positive number of seconds, got {timeout}")
        return cls(
            fred_api_key=api_key,
            fred_base_url=_get_env("FRED_BASE_URL", FRED_OBSERVATIONS_URL),
            fred_timeout=timeout,
            reference_series=_get_env("REFERENCE_SERIES", "DGS10"),
            log_level=_get_env("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply LOG_LEVEL to the package logger. Never touches the root logger."""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger("bond_analytics")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
