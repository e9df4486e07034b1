"""
Calibrated power-law prize curve.

    P(i) = min_coins + (prize1 - min_coins) / i^alpha,   i = 1..winners

P(1) is pinned to prize1 and every P(i) stays above the floor. alpha is
solved by bisection so the curve sums to the pool. The sum falls
monotonically in alpha, from winners * prize1 at alpha = 0 towards
winners * min_coins + (prize1 - min_coins) as alpha grows, so a root
exists exactly when

    total / winners  <  prize1  <  total - (winners - 1) * min_coins
"""

import math
import numpy as np
import logging
from typing import Union

from .bisection import bisect, BisectionError
from ..errors import InsufficientPool
from ..rounding.nice import floor_nice, next_nice

logger = logging.getLogger(__name__)


def _check_pool(winners: int, total_coins: float, min_coins: float) -> None:
    if total_coins <= winners * min_coins:
        raise InsufficientPool(
            f"Prize pool {total_coins} must be greater than winners * minimum "
            f"({winners} * {min_coins} = {winners * min_coins})"
        )


def anchor_first_prize(
    prize1: Union[int, float],
    winners: int,
    total_coins: int,
    min_coins: int
) -> Union[int, float]:
    """
    Move prize1 into the region where a calibrated curve exists.

    Inside the open interval (total / winners, total - (winners - 1) * min)
    prize1 is returned unchanged. Otherwise the closest nice number inside
    the interval is used, or the interval midpoint when none fits (tiny
    pools barely above the floor).
    """
    _check_pool(winners, total_coins, min_coins)

    lo = total_coins / winners
    hi = total_coins - (winners - 1) * min_coins

    if lo < prize1 < hi:
        return prize1

    if prize1 <= lo:
        candidate = next_nice(lo)
    else:
        candidate = floor_nice(math.ceil(hi) - 1)

    if lo < candidate < hi:
        logger.debug(f"First prize {prize1} outside ({lo:.2f}, {hi}); using {candidate}")
        return candidate

    midpoint = (lo + hi) / 2
    logger.debug(f"First prize {prize1} outside ({lo:.2f}, {hi}); using midpoint {midpoint:.4f}")
    return midpoint


def calibrate_alpha(
    winners: int,
    total_coins: float,
    prize1: float,
    min_coins: float,
    alpha_max: float = 50.0,
    tolerance: float = 1e-12,
    max_iterations: int = 200
) -> float:
    """
    Solve for the decay exponent that makes the curve sum to the pool.

    Args:
        winners: Number of paid ranks
        total_coins: Pool the curve must sum to
        prize1: Curve value at rank 1
        min_coins: Curve floor
        alpha_max: Upper end of the [0, alpha_max] search bracket
        tolerance: Bisection tolerance
        max_iterations: Bisection iteration cap

    Returns:
        alpha >= 0

    Raises:
        InsufficientPool: Pool at or below the floor, or no alpha in the
            bracket makes the curve sum to the pool
    """
    _check_pool(winners, total_coins, min_coins)

    ranks = np.arange(1, winners + 1, dtype=np.float64)
    spread = float(prize1) - float(min_coins)
    floor_total = winners * float(min_coins)

    def excess(alpha: float) -> float:
        return floor_total + spread * float(np.sum(ranks ** -alpha)) - total_coins

    if excess(0.0) < 0:
        raise InsufficientPool(
            f"First prize {prize1} does not exceed the average award "
            f"{total_coins / winners:.2f}; no decreasing curve sums to the pool"
        )
    if excess(alpha_max) > 0:
        raise InsufficientPool(
            f"First prize {prize1} leaves less than the minimum for the other "
            f"{winners - 1} winners; no curve sums to the pool"
        )

    try:
        alpha = bisect(excess, 0.0, alpha_max, tolerance=tolerance, max_iterations=max_iterations)
    except BisectionError as e:
        raise InsufficientPool(f"Could not calibrate prize curve: {e}") from e

    logger.debug(f"Calibrated alpha={alpha:.6f} (residual {excess(alpha):.3e})")
    return alpha


def raw_prize_curve(
    winners: int,
    total_coins: float,
    prize1: float,
    min_coins: float,
    alpha_max: float = 50.0,
    tolerance: float = 1e-12,
    max_iterations: int = 200
) -> np.ndarray:
    """
    Unrounded per-rank prizes P(1..winners) summing to total_coins.

    Returns:
        [winners] float64, non-increasing, P[0] == prize1
    """
    alpha = calibrate_alpha(
        winners, total_coins, prize1, min_coins,
        alpha_max=alpha_max, tolerance=tolerance, max_iterations=max_iterations
    )

    ranks = np.arange(1, winners + 1, dtype=np.float64)
    return min_coins + (prize1 - min_coins) * ranks ** -alpha
