"""
Summary metrics for a finished distribution.

First/last prize, how top-heavy the payout is, and totals for sanity
checks against the pool.
"""

import numpy as np
from typing import List

from ..types import Bucket, DistributionMetrics


def compute_distribution_metrics(buckets: List[Bucket]) -> DistributionMetrics:
    """
    Compute summary metrics from a bucket sequence.

    Args:
        buckets: Distribution ordered by rank

    Returns:
        DistributionMetrics with first_prize, last_prize, prize_ratio,
        n_buckets, total_winners, total_payout

    Raises:
        ValueError: buckets is empty
    """
    if not buckets:
        raise ValueError("Cannot compute metrics for an empty distribution")

    coins = np.array([b.coins for b in buckets], dtype=np.int64)
    widths = np.array([b.width for b in buckets], dtype=np.int64)

    first_prize = int(coins[0])
    last_prize = int(coins[-1])

    return DistributionMetrics(
        first_prize=first_prize,
        last_prize=last_prize,
        prize_ratio=first_prize / last_prize if last_prize > 0 else float('inf'),
        n_buckets=len(buckets),
        total_winners=int(widths.sum()),
        total_payout=int((coins * widths).sum()),
    )
