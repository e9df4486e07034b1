"""
Bucket pricing.

Turns the unrounded per-rank curve into one nice, rounded-down award per
bucket. Uses prefix sums over the curve for O(1) bucket means:
bucket_sum = prefix[end] - prefix[start].
"""

import numpy as np
from typing import List, Optional, Sequence

from ..config import FIRST_PRIZE_FRACTION
from ..rounding.nice import floor_nice, round_down_to_nice


def first_prize(total_coins: int, fraction: float = FIRST_PRIZE_FRACTION) -> int:
    """Rank-1 award before curve calibration: fraction of the pool, rounded down to nice."""
    target = fraction * total_coins
    return floor_nice(target)


def payout_total(prices: Sequence[int], sizes: Sequence[int]) -> int:
    """Total paid: sum of price * bucket width."""
    return int(sum(int(p) * int(s) for p, s in zip(prices, sizes)))


def price_buckets(
    sizes: Sequence[int],
    curve: np.ndarray,
    min_coins: int,
    nice: Optional[np.ndarray] = None
) -> List[int]:
    """
    Price every bucket from the raw curve.

    For each bucket:
    1. Sample the curve at the bucket's first rank, capped by the mean of
       the curve over the bucket. Every rank in the bucket is paid the
       sample, so the cap keeps the bucket within what the curve
       allots it in aggregate.
    2. Round down to a nice number.
    3. Clamp to no more than the previous bucket and no less than min_coins.

    Since every price is <= its bucket mean (min_coins <= curve), the
    priced total never exceeds the curve total.

    Args:
        sizes: Rank span per bucket, summing to len(curve)
        curve: [winners] per-rank prizes from raw_prize_curve()
        min_coins: Award floor
        nice: Optional ascending nice-number table. When omitted, awards
            are rounded arithmetically with floor_nice(), which needs no
            table and so works for pools of any size.

    Returns:
        Per-bucket award, non-increasing, each >= min_coins
    """
    curve = np.asarray(curve, dtype=np.float64)
    if int(sum(sizes)) != len(curve):
        raise ValueError(
            f"Bucket sizes cover {int(sum(sizes))} ranks but the curve has {len(curve)}"
        )

    prefix = np.concatenate(([0.0], np.cumsum(curve)))

    prices: List[int] = []
    start = 0
    for size in sizes:
        end = start + int(size)

        first_value = curve[start]
        mean_value = (prefix[end] - prefix[start]) / size
        sample = min(first_value, mean_value)

        price = floor_nice(sample) if nice is None else round_down_to_nice(sample, nice)
        if prices:
            price = min(price, prices[-1])
        price = max(price, int(min_coins))

        prices.append(int(price))
        start = end

    return prices
