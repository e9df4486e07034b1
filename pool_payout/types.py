"""
Core data structures for the prize-pool payout builder.

A distribution is an ordered list of Buckets; each bucket covers a
contiguous range of ranks that all receive the same award.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict

from .errors import ErrorKind, PrizeDistributionError


@dataclass(frozen=True)
class Bucket:
    """
    A contiguous range of ranks sharing one per-winner award.

    Attributes:
        start_rank: First rank covered (1-indexed)
        end_rank: Last rank covered (inclusive, >= start_rank)
        coins: Award paid to every rank in the range
    """
    start_rank: int
    end_rank: int
    coins: int

    @property
    def width(self) -> int:
        """Number of winners in this bucket."""
        return self.end_rank - self.start_rank + 1

    @property
    def total(self) -> int:
        """Total paid out by this bucket."""
        return self.coins * self.width

    def to_dict(self) -> Dict[str, int]:
        return {'from': self.start_rank, 'to': self.end_rank, 'coins': self.coins}


@dataclass(frozen=True)
class PrizePool:
    """
    Inputs for one distribution.

    Attributes:
        winners: Number of paid ranks
        total_coins: Pool to be paid out exactly
        min_coins: Floor on every award
    """
    winners: int
    total_coins: int
    min_coins: int
    name: str = "custom"

    @property
    def floor_total(self) -> int:
        """Amount needed to pay every winner the minimum."""
        return self.winners * self.min_coins


@dataclass(frozen=True)
class DistributionConfig:
    """
    Tunable constants of the distribution pipeline.

    Defaults live in config.py; override individual fields with
    dataclasses.replace() or load_config_from_json().
    """
    first_prize_fraction: float = 0.22
    growth_ratio: float = 2.5
    fixed_top_ranks: int = 3
    min_winners: int = 4
    alpha_max: float = 50.0
    bisect_tolerance: float = 1e-12
    bisect_max_iterations: int = 200
    max_reconcile_passes: int = 256

    def __post_init__(self) -> None:
        if not 0 < self.first_prize_fraction < 1:
            raise ValueError(
                f"first_prize_fraction must be in (0, 1), got {self.first_prize_fraction}"
            )
        if self.growth_ratio <= 1:
            raise ValueError(
                f"growth_ratio must be greater than 1 so bucket spans grow, got {self.growth_ratio}"
            )
        if self.fixed_top_ranks < 1:
            raise ValueError(f"fixed_top_ranks must be at least 1, got {self.fixed_top_ranks}")
        if self.min_winners < 1:
            raise ValueError(f"min_winners must be at least 1, got {self.min_winners}")
        if self.alpha_max <= 0:
            raise ValueError(f"alpha_max must be positive, got {self.alpha_max}")
        if self.bisect_tolerance <= 0:
            raise ValueError(f"bisect_tolerance must be positive, got {self.bisect_tolerance}")
        if self.bisect_max_iterations < 1:
            raise ValueError(
                f"bisect_max_iterations must be at least 1, got {self.bisect_max_iterations}"
            )
        if self.max_reconcile_passes < 1:
            raise ValueError(
                f"max_reconcile_passes must be at least 1, got {self.max_reconcile_passes}"
            )


@dataclass
class DistributionResult:
    """
    Outcome of a distribution call: either buckets or an error.

    Callers branch on `kind` instead of parsing messages.
    """
    buckets: List[Bucket] = field(default_factory=list)
    error: Optional[PrizeDistributionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""


@dataclass
class DistributionMetrics:
    """Summary statistics of a finished distribution."""
    first_prize: int
    last_prize: int
    prize_ratio: float
    n_buckets: int
    total_winners: int
    total_payout: int
