"""
Prize-pool payout builder.

Splits a pool of indivisible units across paid ranks: a few rank
buckets, awards decreasing with rank, rounded to nice numbers, never
below a minimum, and summing to the pool exactly.
"""

from .types import Bucket, PrizePool, DistributionConfig, DistributionResult, DistributionMetrics
from .errors import (
    ErrorKind,
    PrizeDistributionError,
    InvalidWinnerCount,
    InvalidAmount,
    InsufficientPool,
    ReconciliationFailure,
)
from .config import DEFAULT_CONFIG, POOL_PRESETS
from .engine import compute_distribution, try_compute_distribution, prize_distribution_json
from .serialization import distribution_to_json, distribution_from_json
from .metrics import compute_distribution_metrics

__all__ = [
    "Bucket",
    "PrizePool",
    "DistributionConfig",
    "DistributionResult",
    "DistributionMetrics",
    "ErrorKind",
    "PrizeDistributionError",
    "InvalidWinnerCount",
    "InvalidAmount",
    "InsufficientPool",
    "ReconciliationFailure",
    "DEFAULT_CONFIG",
    "POOL_PRESETS",
    "compute_distribution",
    "try_compute_distribution",
    "prize_distribution_json",
    "distribution_to_json",
    "distribution_from_json",
    "compute_distribution_metrics",
]
