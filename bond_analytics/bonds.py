from __future__ import annotations

import logging
from dataclasses import dataclass, replace

import numpy as np
from scipy.optimize import brentq

from .errors import InvalidInput
from .utils import check_discount_base, check_periods, validate_bond_inputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BondSpec:
    face: float = 1000.0
    coupon_rate: float = 5.0  # percent, e.g. 5.0 = 5%
    freq: int = 2
    ytm: float = 5.0  # percent
    periods: int = 10

    @property
    def coupon(self) -> float:
        """Per-period coupon amount."""
        return coupon_amount(self.face, self.coupon_rate, self.freq)

    @property
    def years(self) -> float:
        return self.periods / self.freq

    def validate(self) -> "BondSpec":
        validate_bond_inputs(self.face, self.coupon_rate, self.freq, self.ytm, self.periods)
        return self

    def with_yield(self, ytm: float) -> "BondSpec":
        return replace(self, ytm=ytm)

    def price(self) -> float:
        return bond_price(self.face, self.coupon, self.ytm, self.freq, self.periods)


def coupon_amount(face: float, coupon_rate: float, freq: int) -> float:
    return face * coupon_rate / 100.0 / freq


def build_cashflows(face: float, coupon: float, periods: int) -> np.ndarray:
    """
    Cash flow per period 1..periods: the coupon, with face added to the last one.
    Empty when periods == 0.
    """
    periods = check_periods(periods)
    cfs = np.full(periods, coupon, dtype=float)
    if periods > 0:
        cfs[-1] += face
    return cfs


def discount_factors(ytm: float, freq: int, periods: int, offset: int = 0) -> np.ndarray:
    """1 / (1+r)^(t+offset) for t = 1..periods, with r = ytm / (100*freq)."""
    base = check_discount_base(ytm, freq)
    periods = check_periods(periods)
    t = np.arange(1, periods + 1, dtype=float)
    return base ** -(t + offset)


def bond_price(face: float, coupon: float, ytm: float, freq: int, periods: int) -> float:
    """
    Present value of the schedule under flat periodic discounting.

    periods == 0 prices at 0.0 (empty sum). Inputs are validated first, so a
    NaN or zero frequency raises InvalidInput instead of leaking into the sum.
    """
    validate_bond_inputs(face, coupon, freq, ytm, periods, coupon_name="coupon")
    cfs = build_cashflows(face, coupon, periods)
    dfs = discount_factors(ytm, freq, periods)
    return float(np.sum(cfs * dfs))


def yield_from_price(
    price: float,
    face: float,
    coupon: float,
    freq: int,
    periods: int,
    lo: float = -50.0,
    hi: float = 100.0,
) -> float:
    """
    Yield (percent, annualised) that reprices the bond at `price`.

    Price is monotone in yield, so a bracketed root is unique.
    """
    if periods <= 0:
        raise InvalidInput("Cannot solve for yield with no remaining cash flows.")
    if price <= 0:
        raise InvalidInput(f"Target price must be positive, got {price}.")

    lo = max(lo, -100.0 * freq + 1e-6)

    def residual(y: float) -> float:
        return bond_price(face, coupon, y, freq, periods) - price

    f_lo, f_hi = residual(lo), residual(hi)
    if f_lo * f_hi > 0:
        raise InvalidInput(f"Price {price} not attainable for yields in [{lo}, {hi}].")

    ytm = brentq(residual, lo, hi, maxiter=300, xtol=1e-12)
    logger.debug("Solved yield %.6f%% for price %.6f", ytm, price)
    return float(ytm)
