from __future__ import annotations

import pytest

from pool_payout import compute_distribution, compute_distribution_metrics
from pool_payout.types import Bucket


def test_metrics_from_buckets() -> None:
    metrics = compute_distribution_metrics([Bucket(1, 1, 1000), Bucket(2, 2, 500), Bucket(3, 10, 100)])

    assert metrics.first_prize == 1000
    assert metrics.last_prize == 100
    assert metrics.prize_ratio == pytest.approx(10.0)
    assert metrics.n_buckets == 3
    assert metrics.total_winners == 10
    assert metrics.total_payout == 2300


def test_metrics_match_distribution() -> None:
    buckets = compute_distribution(100, 100000, 100)
    metrics = compute_distribution_metrics(buckets)

    assert metrics.total_payout == 100000
    assert metrics.total_winners == 100
    assert metrics.last_prize >= 100
    assert metrics.prize_ratio > 1.0


def test_empty_distribution_raises() -> None:
    with pytest.raises(ValueError, match="empty"):
        compute_distribution_metrics([])
