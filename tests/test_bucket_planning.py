from __future__ import annotations

import pytest

from pool_payout.planning.buckets import bucket_count, bucket_ranges, bucket_sizes


def test_bucket_count_small_fields_pay_every_rank() -> None:
    for winners in range(1, 5):
        assert bucket_count(winners) == winners


def test_bucket_count_reasonable_for_larger_fields() -> None:
    n = bucket_count(100)
    assert 3 < n < 100


def test_bucket_count_grows_sublinearly() -> None:
    assert bucket_count(500) < bucket_count(50) * 10


def test_bucket_count_is_monotonic_and_below_winners() -> None:
    prev = 0
    for winners in range(1, 3000):
        n = bucket_count(winners)
        assert n >= prev
        if winners > 4:
            assert n < winners
        prev = n


def test_bucket_sizes_empty_below_four_winners() -> None:
    assert bucket_sizes(3, 3) == []
    assert bucket_sizes(2, 2) == []


def test_first_three_buckets_are_single_ranks() -> None:
    sizes = bucket_sizes(20, 5)
    assert sizes[:3] == [1, 1, 1]


def test_shortfall_extends_last_bucket() -> None:
    # 1, 1, 1, 3, 8 covers 14 ranks; the last bucket takes the other 6.
    assert bucket_sizes(20, 5) == [1, 1, 1, 3, 14]


def test_overshoot_shrinks_last_bucket() -> None:
    # 1, 1, 1, 3, 8, 20, 50, 125 covers 209 ranks; 109 too many.
    assert bucket_sizes(100, 8) == [1, 1, 1, 3, 8, 20, 50, 16]


def test_overshoot_spills_into_earlier_buckets() -> None:
    assert bucket_sizes(10, 8) == [1, 1, 1, 3, 1, 1, 1, 1]


def test_bucket_count_is_clamped_to_valid_range() -> None:
    assert bucket_sizes(20, 2) == [1, 1, 1, 17]
    assert bucket_sizes(5, 50) == [1, 1, 1, 1, 1]


def test_sizes_sum_to_winners_for_planned_counts() -> None:
    for winners in range(4, 1500):
        sizes = bucket_sizes(winners, bucket_count(winners))
        assert sum(sizes) == winners
        assert sizes[:3] == [1, 1, 1]
        assert min(sizes) >= 1


@pytest.mark.parametrize("n_buckets", range(4, 51))
def test_sizes_sum_to_winners_for_any_count(n_buckets: int) -> None:
    sizes = bucket_sizes(50, n_buckets)
    assert sum(sizes) == 50
    assert len(sizes) == n_buckets
    assert min(sizes) >= 1


def test_custom_growth_ratio() -> None:
    sizes = bucket_sizes(40, 5, growth_ratio=2.0)
    # 1, 1, 1, 2, 4 -> last bucket absorbs the remaining 31
    assert sizes == [1, 1, 1, 2, 35]


def test_bucket_ranges_walk_from_rank_one() -> None:
    assert bucket_ranges([1, 1, 1, 3, 14]) == [(1, 1), (2, 2), (3, 3), (4, 6), (7, 20)]
    assert bucket_ranges([]) == []


def test_sizes_one_bucket_per_rank() -> None:
    assert bucket_sizes(1000, 1000) == [1] * 1000


def test_sizes_with_many_requested_buckets() -> None:
    sizes = bucket_sizes(2000, 1500)
    assert len(sizes) == 1500
    assert sum(sizes) == 2000
    assert sizes[:3] == [1, 1, 1]
    assert min(sizes) >= 1
