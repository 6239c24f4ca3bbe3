"""
Bond Analytics Engine

Single-bond price and rate-risk analytics:
- bonds: bond spec + cash flows + flat-yield pricing + yield solver
- risk: Macaulay/modified duration, convexity, Taylor price change, DV01
- scenarios: yield-range sampler + shock table
- market_data: reference yield from FRED
- charts: actual vs. estimated price chart
- config / errors / utils: settings, error taxonomy, validation + formatting

The math modules are pure; market_data is the only one doing I/O.
"""
from .bonds import BondSpec, bond_price, build_cashflows, yield_from_price
from .errors import BondAnalyticsError, DegenerateSchedule, InvalidInput, UpstreamDataUnavailable
from .risk import (
    AnalyticsResult,
    analyze_bond,
    convexity,
    dv01,
    macaulay_duration,
    modified_duration,
    price_change,
)
from .scenarios import sample_bond, sample_yield_range, shock_table

__version__ = "0.1.0"
