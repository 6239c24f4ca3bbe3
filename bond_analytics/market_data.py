"""
Reference yield retrieval from FRED (Federal Reserve Economic Data).

One request per call, no retry, no cached or default value: any failure
surfaces as UpstreamDataUnavailable.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Optional

import requests

from .config import Settings, get_settings
from .errors import UpstreamDataUnavailable, describe

logger = logging.getLogger(__name__)

MISSING_VALUE = "."


def valid_observations(observations: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Drop FRED's '.' placeholders for missing readings."""
    return [o for o in observations if o.get("value") != MISSING_VALUE]


def latest_observation_value(payload: Mapping[str, Any], series_id: str = "?") -> float:
    """
    Value of the last non-missing observation, as a float percentage.

    Observations are assumed to be in FRED's default ascending date order.
    """
    observations = payload.get("observations") if isinstance(payload, Mapping) else None
    if not isinstance(observations, list):
        raise UpstreamDataUnavailable(series_id, "response has no 'observations' list")

    if not all(isinstance(o, Mapping) for o in observations):
        raise UpstreamDataUnavailable(series_id, "observations must be JSON objects")

    usable = valid_observations(observations)
    if not usable:
        raise UpstreamDataUnavailable(series_id, "no non-missing observation")

    latest = usable[-1]
    try:
        value = float(latest["value"])
    except (KeyError, TypeError, ValueError) as e:
        raise UpstreamDataUnavailable(series_id, f"unparseable observation {latest!r}") from e

    if not math.isfinite(value):
        raise UpstreamDataUnavailable(series_id, f"non-finite observation {latest!r}")
    return value


class FredClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.api_key = api_key or settings.fred_api_key
        self.base_url = base_url or settings.fred_base_url
        self.timeout = timeout if timeout is not None else settings.fred_timeout
        self.session = session or requests.Session()

    def observations(self, series_id: str) -> Dict[str, Any]:
        if not self.api_key:
            raise UpstreamDataUnavailable(series_id, "FRED API key not configured (set FRED_API_KEY)")

        params = {
            "series_id": series_id,
            "api_key": self.api_key,
            "file_type": "json",
        }

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.warning("FRED request for %s failed: %s", series_id, describe(e))
            raise UpstreamDataUnavailable(series_id, describe(e)) from e
        except ValueError as e:
            logger.warning("FRED response for %s is not JSON", series_id)
            raise UpstreamDataUnavailable(series_id, "malformed JSON response") from e

    def latest_yield(self, series_id: str) -> float:
        value = latest_observation_value(self.observations(series_id), series_id)
        logger.info("Fetched %s = %.3f%%", series_id, value)
        return value


def fetch_reference_yield(
    series_id: Optional[str] = None,
    api_key: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> float:
    """Most recent yield (percent) for a FRED series, default from settings (DGS10)."""
    settings = get_settings()
    client = FredClient(api_key=api_key, session=session, settings=settings)
    return client.latest_yield(series_id or settings.reference_series)
