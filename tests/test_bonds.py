import numpy as np
import pytest

from bond_analytics.bonds import (
    BondSpec,
    bond_price,
    build_cashflows,
    coupon_amount,
    yield_from_price,
)
from bond_analytics.errors import InvalidInput


@pytest.fixture(scope="module")
def par_bond():
    return BondSpec(face=1000.0, coupon_rate=5.0, freq=2, ytm=5.0, periods=10)


def test_cashflows_coupon_then_face():
    cfs = build_cashflows(1000.0, 25.0, 4)
    assert list(cfs) == [25.0, 25.0, 25.0, 1025.0]


def test_cashflows_empty_schedule():
    cfs = build_cashflows(1000.0, 25.0, 0)
    assert len(cfs) == 0


def test_single_period_schedule_repays_face():
    assert list(build_cashflows(100.0, 3.0, 1)) == [103.0]


def test_coupon_amount_percent_per_period(par_bond):
    assert coupon_amount(1000.0, 5.0, 2) == pytest.approx(25.0)
    assert par_bond.coupon == pytest.approx(25.0)
    assert par_bond.years == pytest.approx(5.0)


def test_par_bond_prices_at_face(par_bond):
    assert par_bond.price() == pytest.approx(1000.0, abs=1e-8), "coupon == yield should price at par"


def test_zero_coupon_zero_yield_prices_at_face():
    price = bond_price(1000.0, 0.0, 0.0, 2, 20)
    assert price == 1000.0, "No discounting at zero yield"


def test_zero_periods_prices_at_zero():
    assert bond_price(1000.0, 25.0, 5.0, 2, 0) == 0.0


def test_premium_and_discount(par_bond):
    assert par_bond.with_yield(4.0).price() > 1000.0
    assert par_bond.with_yield(6.0).price() < 1000.0


def test_price_strictly_decreasing_in_yield(par_bond):
    yields = np.linspace(0.0, 15.0, 61)
    prices = np.array([par_bond.with_yield(y).price() for y in yields])
    assert np.all(np.diff(prices) < 0.0), "Price must fall as yield rises"


def test_price_matches_annuity_formula():
    face, rate, freq, ytm, n = 100.0, 6.0, 4, 7.5, 28
    c = coupon_amount(face, rate, freq)
    r = ytm / (100 * freq)
    expected = c * (1 - (1 + r) ** -n) / r + face * (1 + r) ** -n
    assert bond_price(face, c, ytm, freq, n) == pytest.approx(expected, rel=1e-12)


def test_discount_base_must_be_positive():
    with pytest.raises(InvalidInput):
        bond_price(1000.0, 25.0, -200.0, 2, 10)


def test_yield_from_price_inverts_pricer(par_bond):
    target = par_bond.with_yield(6.37).price()
    ytm = yield_from_price(target, par_bond.face, par_bond.coupon, par_bond.freq, par_bond.periods)
    assert ytm == pytest.approx(6.37, abs=1e-8)


def test_yield_from_price_rejects_empty_schedule():
    with pytest.raises(InvalidInput):
        yield_from_price(950.0, 1000.0, 25.0, 2, 0)


def test_yield_from_price_rejects_unbracketed_price(par_bond):
    # more than the undiscounted sum of cash flows is unattainable at the lower bound
    with pytest.raises(InvalidInput):
        yield_from_price(1e9, par_bond.face, par_bond.coupon, par_bond.freq, par_bond.periods, lo=0.0)


@pytest.mark.parametrize(
    "args",
    [
        (1000.0, 25.0, float("nan"), 2, 10),
        (1000.0, 25.0, 5.0, 0, 10),
        (1000.0, 25.0, 5.0, 2, -3),
        (1000.0, float("nan"), 5.0, 2, 10),
        (1000.0, -25.0, 5.0, 2, 10),
        (0.0, 25.0, 5.0, 2, 10),
    ],
)
def test_pricer_rejects_bad_inputs(args):
    with pytest.raises(InvalidInput):
        bond_price(*args)


def test_cashflows_reject_negative_periods():
    with pytest.raises(InvalidInput):
        build_cashflows(1000.0, 25.0, -1)
