"""
Leftover reconciliation.

Rounding every bucket down leaves part of the pool unpaid. One call to
spend_leftover() is one pass; the engine repeats passes until nothing
is left. Within a pass:

1. Wide buckets (more than one rank), widest first, are raised to the
   largest nice award they can afford that stays strictly below the
   bucket above.
2. The stand-alone ranks 2-4, top-down, are raised to the largest
   affordable nice award not above the rank above them.
3. If 1-2 moved nothing, both are repeated with single-unit increments.
4. If that moved nothing either, rank 1 takes the rest.

Every pass strictly lowers the leftover and no step can break ordering
or the floor (awards only rise, and only up to their upper neighbour).
"""

import logging
from typing import List, Sequence, Tuple

from ..config import FIXED_TOP_RANKS
from ..errors import ReconciliationFailure
from ..rounding.nice import floor_nice

logger = logging.getLogger(__name__)


def _raise_to(price: int, allowance: int, nice_only: bool) -> int:
    """New award after spending up to `allowance` per winner (price if no move)."""
    if allowance <= 0:
        return price
    target = price + allowance
    if nice_only:
        target = floor_nice(target)
    return target if target > price else price


def _raise_wide_buckets(
    prices: List[int],
    sizes: Sequence[int],
    leftover: int,
    nice_only: bool
) -> int:
    order = sorted(
        (b for b in range(1, len(sizes)) if sizes[b] > 1),
        key=lambda b: (-sizes[b], -b)
    )

    for b in order:
        width = int(sizes[b])
        if leftover < width:
            continue

        headroom = prices[b - 1] - 1 - prices[b]
        new_price = _raise_to(prices[b], min(headroom, leftover // width), nice_only)

        leftover -= (new_price - prices[b]) * width
        prices[b] = new_price

    return leftover


def _raise_top_singles(
    prices: List[int],
    sizes: Sequence[int],
    leftover: int,
    fixed_top_ranks: int,
    nice_only: bool
) -> int:
    for b in range(1, min(len(sizes), fixed_top_ranks + 1)):
        if sizes[b] != 1 or leftover <= 0:
            continue

        headroom = prices[b - 1] - prices[b]
        new_price = _raise_to(prices[b], min(headroom, leftover), nice_only)

        leftover -= new_price - prices[b]
        prices[b] = new_price

    return leftover


def spend_leftover(
    prices: Sequence[int],
    sizes: Sequence[int],
    leftover: int,
    fixed_top_ranks: int = FIXED_TOP_RANKS
) -> Tuple[List[int], int]:
    """
    Run one reconciliation pass.

    Args:
        prices: Per-bucket award, non-increasing
        sizes: Rank span per bucket
        leftover: Pool minus current payout total
        fixed_top_ranks: Ranks that always stand alone

    Returns:
        (new prices, remaining leftover). Remaining leftover is strictly
        smaller than `leftover` unless it was already zero.

    Raises:
        ReconciliationFailure: leftover is negative (pricing over-promised)
    """
    if leftover < 0:
        raise ReconciliationFailure(
            f"Bucket awards exceed the pool by {-leftover}; cannot reconcile downwards"
        )

    prices = [int(p) for p in prices]
    if leftover == 0 or not prices:
        return prices, leftover

    start = leftover

    for nice_only in (True, False):
        leftover = _raise_wide_buckets(prices, sizes, leftover, nice_only)
        leftover = _raise_top_singles(prices, sizes, leftover, fixed_top_ranks, nice_only)
        if leftover < start:
            return prices, leftover

    logger.debug(f"No bucket below rank 1 can absorb {leftover}; adding it to first place")
    prices[0] += leftover
    return prices, 0
