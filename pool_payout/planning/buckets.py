"""
Bucket planning.

Decides how many buckets a distribution uses and how many ranks each
bucket spans. The top ranks always stand alone; after them, spans grow
geometrically so the long tail is covered by a handful of wide buckets.
"""

import math
import numpy as np
from typing import List, Tuple

from ..config import FIXED_TOP_RANKS, GROWTH_RATIO

# Fields this small pay every rank individually.
SMALL_FIELD_LIMIT = 4


def bucket_count(
    winners: int,
    growth_ratio: float = GROWTH_RATIO,
    fixed_top_ranks: int = FIXED_TOP_RANKS
) -> int:
    """
    Number of buckets for a field of `winners` paid ranks.

    Small fields (<= 4, or no more than the fixed top ranks) get one
    bucket per rank. Larger fields get the fixed top ranks plus m
    geometric buckets, where m is the number of ratio-r spans whose
    total roughly covers the remaining ranks:

        1 * r + r^2 + ... + r^m  ~  r^m * r / (r - 1)  =  winners - top

    For larger fields the count is logarithmic in `winners` and never
    reaches `winners`.

    Args:
        winners: Number of paid ranks
        growth_ratio: Span growth factor between consecutive buckets
        fixed_top_ranks: Ranks that are never grouped

    Returns:
        Bucket count
    """
    if winners <= max(SMALL_FIELD_LIMIT, fixed_top_ranks):
        return winners

    tail = (winners - fixed_top_ranks) * (growth_ratio - 1) / growth_ratio
    n_grouped = max(1, int(math.floor(math.log(tail) / math.log(growth_ratio))))

    return min(fixed_top_ranks + n_grouped, winners - 1)


def bucket_sizes(
    winners: int,
    n_buckets: int,
    growth_ratio: float = GROWTH_RATIO,
    fixed_top_ranks: int = FIXED_TOP_RANKS
) -> List[int]:
    """
    Rank span of every bucket, summing exactly to `winners`.

    The first `fixed_top_ranks` spans are 1. Each following span is the
    previous one times `growth_ratio`, rounded half-up and capped at
    `winners`. Rounding rarely lands on `winners`, so the tail is
    reconciled:
    - shortfall: the last bucket absorbs it
    - overshoot: the last buckets shrink, never below 1 and never
      touching the fixed top ranks

    `n_buckets` is clamped to [fixed_top_ranks + 1, winners].

    Args:
        winners: Number of paid ranks
        n_buckets: Requested bucket count
        growth_ratio: Span growth factor between consecutive buckets
        fixed_top_ranks: Ranks that are never grouped

    Returns:
        List of spans, or [] when winners <= fixed_top_ranks
    """
    if winners <= fixed_top_ranks:
        return []

    n_buckets = max(fixed_top_ranks + 1, min(n_buckets, winners))

    sizes = [1] * fixed_top_ranks
    prev = 1
    while len(sizes) < n_buckets:
        prev = min(winners, max(1, int(math.floor(prev * growth_ratio + 0.5))))
        sizes.append(prev)

    diff = winners - sum(sizes)

    if diff > 0:
        sizes[-1] += diff
    elif diff < 0:
        excess = -diff
        i = len(sizes) - 1
        while excess > 0 and i >= fixed_top_ranks:
            take = min(sizes[i] - 1, excess)
            sizes[i] -= take
            excess -= take
            i -= 1

    return sizes


def bucket_ranges(sizes: List[int]) -> List[Tuple[int, int]]:
    """
    Convert spans into inclusive (start_rank, end_rank) pairs from rank 1.

    Uses prefix sums: end = cumsum(sizes), start = end - size + 1
    """
    if not sizes:
        return []

    ends = np.cumsum(np.asarray(sizes, dtype=np.int64))
    starts = ends - np.asarray(sizes, dtype=np.int64) + 1

    return [(int(s), int(e)) for s, e in zip(starts, ends)]
