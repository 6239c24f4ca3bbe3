from __future__ import annotations

from typing import Optional


class BondAnalyticsError(Exception):
    """Base class for every error raised by the engine."""


class InvalidInput(BondAnalyticsError, ValueError):
    """Bond parameters rejected before any cash flow is built."""


class DegenerateSchedule(BondAnalyticsError, ValueError):
    """
    Price is zero or negative, so duration/convexity would divide by it.

    Typically periods == 0 (nothing left to pay).
    """

    def __init__(self, price: float, periods: int):
        self.price = price
        self.periods = periods
        super().__init__(f"Degenerate schedule: price={price!r} with periods={periods}.")


class UpstreamDataUnavailable(BondAnalyticsError, RuntimeError):
    """Reference yield could not be obtained. Single attempt, no fallback."""

    def __init__(self, series_id: str, reason: str):
        self.series_id = series_id
        self.reason = reason
        super().__init__(f"{series_id}: {reason}")


def describe(exc: Optional[BaseException]) -> str:
    if exc is None:
        return "unknown error"
    return f"{type(exc).__name__}: {exc}"
