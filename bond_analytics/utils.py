from __future__ import annotations

import math
import numbers
from typing import Optional

import pandas as pd

from .errors import InvalidInput

DAYS_PER_YEAR = 365.25


def yearfrac(start: pd.Timestamp, end: pd.Timestamp) -> float:
    """
    Year fraction between two dates, ACT/365.25.

    Deliberately coarse: the engine counts whole coupon periods, so no
    day-count convention is applied beyond this.
    """
    start = pd.Timestamp(start)
    end = pd.Timestamp(end)
    return (end - start) / pd.Timedelta(days=1) / DAYS_PER_YEAR


def periods_to_maturity(
    maturity: pd.Timestamp,
    freq: int,
    as_of: Optional[pd.Timestamp] = None,
) -> int:
    """
    Remaining coupon periods, years * freq rounded half up. Matured bonds give 0.
    """
    if as_of is None:
        as_of = pd.Timestamp.today().normalize()

    check_frequency(freq)
    years = yearfrac(as_of, maturity)
    if years <= 0:
        return 0
    return int(math.floor(years * freq + 0.5))


def _check_finite(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(f"{name} must be a real number, got {value!r}.")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInput(f"{name} must be finite, got {value!r}.")
    return value


def _check_count(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidInput(f"{name} must be an integer, got {value!r}.")
    return int(value)


def check_periods(periods) -> int:
    periods = _check_count("periods", periods)
    if periods < 0:
        raise InvalidInput(f"periods must be >= 0, got {periods}.")
    return periods


def check_frequency(freq) -> int:
    freq = _check_count("freq", freq)
    if freq <= 0:
        raise InvalidInput(f"freq must be positive, got {freq}.")
    return freq


def validate_bond_inputs(face, coupon_rate, freq, ytm, periods, coupon_name: str = "coupon_rate") -> None:
    """
    Reject anything the pricing formulas cannot take as-is.

    coupon_name labels the second argument in messages: the pricer passes
    the per-period coupon amount, which obeys the same rules as the rate.
    Raises InvalidInput; values are never clamped.
    """
    face = _check_finite("face", face)
    coupon_rate = _check_finite(coupon_name, coupon_rate)
    ytm = _check_finite("ytm", ytm)
    freq = check_frequency(freq)
    periods = check_periods(periods)

    if face <= 0:
        raise InvalidInput(f"face must be positive, got {face}.")
    if coupon_rate < 0:
        raise InvalidInput(f"{coupon_name} must be >= 0, got {coupon_rate}.")
    check_discount_base(ytm, freq)


def check_discount_base(ytm: float, freq: int) -> float:
    """Per-period growth factor 1 + ytm/(100*freq); must be positive."""
    ytm = _check_finite("ytm", ytm)
    freq = check_frequency(freq)
    base = 1.0 + ytm / (100.0 * freq)
    if base <= 0:
        raise InvalidInput(f"ytm={ytm} gives a non-positive discount base for freq={freq}.")
    return base


def fmt_currency(x: float) -> str:
    return f"${x:,.2f}"


def fmt_ratio(x: float) -> str:
    return f"{x:.3f}"
