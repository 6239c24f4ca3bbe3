from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict

import numpy as np

from .bonds import BondSpec, bond_price, build_cashflows, discount_factors
from .errors import DegenerateSchedule
from .utils import fmt_currency, fmt_ratio

logger = logging.getLogger(__name__)

SHOCK_100BP = 0.01


@dataclass(frozen=True)
class AnalyticsResult:
    price: float
    macaulay: float  # years
    modified: float
    convexity: float
    dp_up: float  # currency change for +100bp
    dp_down: float  # currency change for -100bp

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def to_display(self) -> Dict[str, str]:
        return {
            "Price": fmt_currency(self.price),
            "Macaulay Duration": f"{fmt_ratio(self.macaulay)} years",
            "Modified Duration": fmt_ratio(self.modified),
            "Convexity": fmt_ratio(self.convexity),
            "Estimated dPrice (+100bps)": fmt_currency(self.dp_up),
            "Estimated dPrice (-100bps)": fmt_currency(self.dp_down),
        }


def _priced_schedule(face: float, coupon: float, ytm: float, freq: int, periods: int):
    price = bond_price(face, coupon, ytm, freq, periods)
    if not price > 0:
        logger.debug("Degenerate schedule: price=%r periods=%d", price, periods)
        raise DegenerateSchedule(price, periods)
    return price, build_cashflows(face, coupon, periods)


def macaulay_duration(face: float, coupon: float, ytm: float, freq: int, periods: int) -> float:
    """
    Macaulay duration in years:
      sum(t * CF_t / (1+r)^t) / price / freq
    """
    price, cfs = _priced_schedule(face, coupon, ytm, freq, periods)
    t = np.arange(1, periods + 1, dtype=float)
    weighted = float(np.sum(t * cfs * discount_factors(ytm, freq, periods)))
    return weighted / price / freq


def modified_duration(macaulay: float, ytm: float, freq: int) -> float:
    return macaulay / (1.0 + ytm / (100.0 * freq))


def convexity(face: float, coupon: float, ytm: float, freq: int, periods: int) -> float:
    """
    Annualised convexity:
      sum(t*(t+1) * CF_t / (1+r)^(t+2)) / price / freq^2
    """
    price, cfs = _priced_schedule(face, coupon, ytm, freq, periods)
    t = np.arange(1, periods + 1, dtype=float)
    weighted = float(np.sum(t * (t + 1) * cfs * discount_factors(ytm, freq, periods, offset=2)))
    return weighted / price / (freq * freq)


def price_change(mod_dur: float, conv: float, delta: float) -> float:
    """
    Fractional price change for a yield move `delta` (decimal, 0.01 = +100bp),
    duration plus convexity terms. Multiply by price for currency.
    """
    return -mod_dur * delta + 0.5 * conv * delta * delta


def dv01(face: float, coupon: float, ytm: float, freq: int, periods: int, bp: float = 1.0) -> float:
    """Central bump-and-reprice value of one basis point (positive for plain bonds)."""
    bump = bp / 100.0
    p_down = bond_price(face, coupon, ytm - bump, freq, periods)
    p_up = bond_price(face, coupon, ytm + bump, freq, periods)
    return (p_down - p_up) / (2.0 * bp)


def analyze_bond(bond: BondSpec) -> AnalyticsResult:
    bond.validate()

    coupon = bond.coupon
    price = bond_price(bond.face, coupon, bond.ytm, bond.freq, bond.periods)
    mac = macaulay_duration(bond.face, coupon, bond.ytm, bond.freq, bond.periods)
    mod = modified_duration(mac, bond.ytm, bond.freq)
    conv = convexity(bond.face, coupon, bond.ytm, bond.freq, bond.periods)

    return AnalyticsResult(
        price=price,
        macaulay=mac,
        modified=mod,
        convexity=conv,
        dp_up=price * price_change(mod, conv, SHOCK_100BP),
        dp_down=price * price_change(mod, conv, -SHOCK_100BP),
    )
