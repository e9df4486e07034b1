"""
Full pipeline orchestration for prize distribution.

Wires planning, curve calibration, pricing and reconciliation together
for end-to-end execution.
"""

import math
import numpy as np
from typing import List, Optional
import logging

from .types import Bucket, DistributionConfig, DistributionResult
from .config import DEFAULT_CONFIG
from .errors import (
    InvalidWinnerCount, InvalidAmount, InsufficientPool, ReconciliationFailure,
    PrizeDistributionError
)
from .planning.buckets import bucket_count, bucket_sizes, bucket_ranges
from .curve.prize_curve import anchor_first_prize, raw_prize_curve
from .pricing.pricer import first_prize, price_buckets, payout_total
from .pricing.leftover import spend_leftover
from .serialization import distribution_to_json

logger = logging.getLogger(__name__)


def _whole_number(value, name: str, error_cls) -> int:
    """Coerce ints, numpy integers and integral floats; reject everything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise error_cls(f"{name} must be a whole number, got {value!r}")
    if isinstance(value, (float, np.floating)):
        if not math.isfinite(value) or not float(value).is_integer():
            raise error_cls(f"{name} must be a whole number, got {value!r}")
    return int(value)


def validate_inputs(
    winners,
    total_coins,
    min_coins,
    config: Optional[DistributionConfig] = None
) -> tuple:
    """
    Check and normalize distribution inputs.

    Returns:
        (winners, total_coins, min_coins) as ints

    Raises:
        InvalidWinnerCount: winners not whole or below config.min_winners
        InvalidAmount: pool or minimum not a positive whole number
        InsufficientPool: pool <= winners * min_coins
    """
    config = config or DEFAULT_CONFIG

    # The planner needs at least one rank beyond the fixed top ranks.
    min_winners = max(config.min_winners, config.fixed_top_ranks + 1)

    winners = _whole_number(winners, "Number of winners", InvalidWinnerCount)
    if winners < min_winners:
        raise InvalidWinnerCount(
            f"Number of winners must be at least {min_winners}, got {winners}"
        )

    total_coins = _whole_number(total_coins, "Prize pool", InvalidAmount)
    if total_coins <= 0:
        raise InvalidAmount(f"Prize pool must be positive, got {total_coins}")

    min_coins = _whole_number(min_coins, "Minimum prize", InvalidAmount)
    if min_coins <= 0:
        raise InvalidAmount(f"Minimum prize must be positive, got {min_coins}")

    if total_coins <= winners * min_coins:
        raise InsufficientPool(
            f"Prize pool must be greater than winners * minimum prize: need at least "
            f"{winners * min_coins + 1:,} for {winners} winners with {min_coins} minimum"
        )

    return winners, total_coins, min_coins


def reconcile_leftover(
    prices: List[int],
    sizes: List[int],
    total_coins: int,
    config: Optional[DistributionConfig] = None
) -> List[int]:
    """
    Re-run leftover passes until the payout equals the pool exactly.

    Raises:
        ReconciliationFailure: pricing over-promised, or the leftover is
            still non-zero after config.max_reconcile_passes
    """
    config = config or DEFAULT_CONFIG

    leftover = total_coins - payout_total(prices, sizes)
    initial_leftover = leftover
    passes = 0

    while leftover != 0:
        if passes >= config.max_reconcile_passes:
            raise ReconciliationFailure(
                f"Leftover {leftover} remains after {passes} reconciliation passes"
            )
        prices, leftover = spend_leftover(
            prices, sizes, leftover, fixed_top_ranks=config.fixed_top_ranks
        )
        passes += 1

    logger.info(f"Reconciled leftover {initial_leftover} in {passes} passes")
    return prices


def _check_distribution(buckets: List[Bucket], winners: int, total_coins: int, min_coins: int) -> None:
    """Final guard: never hand back a distribution that breaks an invariant."""
    paid = sum(b.total for b in buckets)
    if paid != total_coins:
        raise ReconciliationFailure(f"Distribution pays {paid}, expected {total_coins}")

    expected_start = 1
    prev_coins = None
    for b in buckets:
        if b.start_rank != expected_start or b.end_rank < b.start_rank:
            raise ReconciliationFailure(f"Bucket {b} breaks the rank partition")
        if b.coins < min_coins or (prev_coins is not None and b.coins > prev_coins):
            raise ReconciliationFailure(f"Bucket {b} breaks ordering or the minimum")
        expected_start = b.end_rank + 1
        prev_coins = b.coins

    if expected_start != winners + 1:
        raise ReconciliationFailure(f"Buckets cover ranks 1..{expected_start - 1}, expected 1..{winners}")


def compute_distribution(
    winners: int,
    total_coins: int,
    min_coins: int,
    config: Optional[DistributionConfig] = None
) -> List[Bucket]:
    """
    Full prize distribution pipeline.

    Steps:
    1. Validate inputs
    2. Plan bucket count and spans
    3. Anchor first prize at a share of the pool
    4. Calibrate the raw prize curve
    5. Price buckets (nice, rounded down, monotone, floored)
    6. Reconcile leftover until the payout equals the pool

    Args:
        winners: Number of paid ranks (>= config.min_winners)
        total_coins: Pool to pay out exactly
        min_coins: Floor on every award
        config: Pipeline configuration (default: DEFAULT_CONFIG)

    Returns:
        Buckets partitioning ranks 1..winners, awards non-increasing,
        every award >= min_coins, total payout == total_coins. Rank 1 may
        end on a non-nice award: it absorbs any remainder no other
        bucket can take.

    Raises:
        PrizeDistributionError: any stage failure; no partial result
    """
    config = config or DEFAULT_CONFIG
    winners, total_coins, min_coins = validate_inputs(winners, total_coins, min_coins, config)

    n_buckets = bucket_count(winners, config.growth_ratio, config.fixed_top_ranks)
    sizes = bucket_sizes(winners, n_buckets, config.growth_ratio, config.fixed_top_ranks)
    logger.info(f"Planned {len(sizes)} buckets for {winners} winners: {sizes}")

    prize1 = first_prize(total_coins, config.first_prize_fraction)
    anchor = anchor_first_prize(prize1, winners, total_coins, min_coins)

    curve = raw_prize_curve(
        winners, total_coins, anchor, min_coins,
        alpha_max=config.alpha_max,
        tolerance=config.bisect_tolerance,
        max_iterations=config.bisect_max_iterations,
    )

    prices = price_buckets(sizes, curve, min_coins)
    logger.debug(f"Rounded bucket awards: {prices}")

    prices = reconcile_leftover(prices, sizes, total_coins, config)

    buckets = [
        Bucket(start_rank=start, end_rank=end, coins=int(coins))
        for (start, end), coins in zip(bucket_ranges(sizes), prices)
    ]
    _check_distribution(buckets, winners, total_coins, min_coins)

    return buckets


def try_compute_distribution(
    winners: int,
    total_coins: int,
    min_coins: int,
    config: Optional[DistributionConfig] = None
) -> DistributionResult:
    """compute_distribution() returning a DistributionResult instead of raising."""
    try:
        buckets = compute_distribution(winners, total_coins, min_coins, config)
    except PrizeDistributionError as e:
        logger.info(f"Distribution failed ({e.kind.value}): {e}")
        return DistributionResult(error=e)
    return DistributionResult(buckets=buckets)


def prize_distribution_json(
    winners: int,
    total_coins: int,
    min_coins: int,
    config: Optional[DistributionConfig] = None
) -> str:
    """Text entry point: the distribution encoded as a JSON array of {from, to, coins}."""
    return distribution_to_json(compute_distribution(winners, total_coins, min_coins, config))
