from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from .bonds import BondSpec, bond_price
from .errors import InvalidInput
from .risk import analyze_bond


def sample_yield_range(
    face: float,
    coupon: float,
    ytm: float,
    freq: int,
    periods: int,
    price: float,
    mod_dur: float,
    conv: float,
    width: float = 2.0,
    step: float = 0.1,
) -> pd.DataFrame:
    """
    Exact price vs. duration / duration+convexity estimates over ytm +/- width.

    Base price, modified duration and convexity stay fixed at the input
    yield; only the shift d = (y - ytm)/100 varies along the grid.
    """
    if not (np.isfinite(width) and width > 0 and np.isfinite(step) and step > 0):
        raise InvalidInput(f"width and step must be positive, got width={width}, step={step}.")

    n = int(round(2 * width / step)) + 1
    yields = ytm + np.linspace(-width, width, n)

    actual = np.array([bond_price(face, coupon, y, freq, periods) for y in yields], dtype=float)
    d = (yields - ytm) / 100.0
    duration_est = price * (1.0 - mod_dur * d)
    convexity_est = duration_est + 0.5 * conv * price * d**2

    return pd.DataFrame({
        "yield": yields,
        "actual": actual,
        "duration_est": duration_est,
        "convexity_est": convexity_est,
    })


def sample_bond(bond: BondSpec, width: float = 2.0, step: float = 0.1) -> pd.DataFrame:
    res = analyze_bond(bond)
    return sample_yield_range(
        bond.face, bond.coupon, bond.ytm, bond.freq, bond.periods,
        res.price, res.modified, res.convexity, width=width, step=step,
    )


def shock_table(
    bond: BondSpec,
    shocks_bp: Sequence[float] = (-200, -100, -50, 50, 100, 200),
) -> pd.DataFrame:
    """
    Full repricing vs. Taylor estimates for a set of parallel yield shocks.
    """
    res = analyze_bond(bond)

    rows = []
    for bp in shocks_bp:
        delta = bp / 10000.0
        actual = bond_price(bond.face, bond.coupon, bond.ytm + bp / 100.0, bond.freq, bond.periods)
        duration_est = res.price * (1.0 - res.modified * delta)
        convexity_est = duration_est + 0.5 * res.convexity * res.price * delta**2
        rows.append(
            {
                "shock_bp": bp,
                "actual": actual,
                "duration_est": duration_est,
                "convexity_est": convexity_est,
                "estimate_error": convexity_est - actual,
            }
        )

    return pd.DataFrame(rows)
