from __future__ import annotations

import math

import numpy as np
import pytest

from pool_payout.curve.prize_curve import anchor_first_prize, calibrate_alpha, raw_prize_curve
from pool_payout.errors import ErrorKind, InsufficientPool


def test_curve_has_one_value_per_rank() -> None:
    curve = raw_prize_curve(20, 5000, 1100, 50)
    assert len(curve) == 20


def test_first_value_equals_prize1() -> None:
    curve = raw_prize_curve(20, 5000, 1000, 50)
    assert curve[0] == pytest.approx(1000)


def test_curve_sums_to_pool() -> None:
    curve = raw_prize_curve(50, 10000, 2200, 50)
    assert math.isclose(float(curve.sum()), 10000, rel_tol=1e-9)


def test_curve_is_decreasing() -> None:
    curve = raw_prize_curve(50, 10000, 2200, 50)
    assert np.all(np.diff(curve) <= 0)


def test_curve_respects_floor() -> None:
    curve = raw_prize_curve(50, 20000, 4400, 100)
    assert np.all(curve >= 100)


def test_insufficient_pool_raises() -> None:
    with pytest.raises(InsufficientPool) as excinfo:
        raw_prize_curve(100, 1000, 220, 100)
    assert excinfo.value.kind == ErrorKind.INSUFFICIENT_POOL


def test_pool_equal_to_floor_raises() -> None:
    with pytest.raises(InsufficientPool):
        raw_prize_curve(10, 100, 20, 10)


def test_prize1_below_average_has_no_root() -> None:
    with pytest.raises(InsufficientPool, match="average"):
        raw_prize_curve(10, 1000, 90, 10)


def test_prize1_too_close_to_pool_has_no_root() -> None:
    with pytest.raises(InsufficientPool, match="minimum"):
        raw_prize_curve(10, 1000, 950, 10)


def test_prize1_at_average_gives_flat_curve() -> None:
    assert calibrate_alpha(10, 1000, 100, 10) == 0.0
    curve = raw_prize_curve(10, 1000, 100, 10)
    assert np.allclose(curve, 100.0)


def test_alpha_within_bracket() -> None:
    alpha = calibrate_alpha(100, 100000, 22000, 100)
    assert 0.0 < alpha < 50.0


def test_steeper_curve_for_larger_first_prize() -> None:
    assert calibrate_alpha(100, 100000, 30000, 100) > calibrate_alpha(100, 100000, 22000, 100)


def test_anchor_keeps_feasible_prize1() -> None:
    assert anchor_first_prize(22000, 100, 100000, 100) == 22000


def test_anchor_lifts_prize1_above_average() -> None:
    # 22% of 1000 is below the 250 average for 4 winners.
    assert anchor_first_prize(220, 4, 1000, 10) == 300


def test_anchor_lowers_prize1_below_cap() -> None:
    # Others need 9 * 90 = 810, so rank 1 must stay under 190.
    assert anchor_first_prize(220, 10, 1000, 90) == 175


def test_anchor_uses_midpoint_when_no_nice_value_fits() -> None:
    anchor = anchor_first_prize(2200, 100, 10001, 100)
    assert anchor == pytest.approx((100.01 + 101) / 2)
    assert raw_prize_curve(100, 10001, anchor, 100).sum() == pytest.approx(10001)
