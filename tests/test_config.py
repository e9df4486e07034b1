from __future__ import annotations

import json
from dataclasses import replace

import pytest

from pool_payout.config import (
    DEFAULT_CONFIG,
    POOL_PRESETS,
    load_config_from_json,
    load_pool_from_json,
    save_config_to_json,
)
from pool_payout.types import DistributionConfig


def test_default_config_matches_dataclass_defaults() -> None:
    assert DEFAULT_CONFIG == DistributionConfig()


def test_presets_have_room_above_floor() -> None:
    for pool in POOL_PRESETS.values():
        assert pool.total_coins > pool.floor_total


def test_save_and_load_config(tmp_path) -> None:
    path = tmp_path / "config.json"
    config = replace(DEFAULT_CONFIG, first_prize_fraction=0.25, growth_ratio=3.0)

    save_config_to_json(config, str(path))

    assert load_config_from_json(str(path)) == config


def test_partial_config_uses_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"fixed_top_ranks": 5}))

    config = load_config_from_json(str(path))

    assert config.fixed_top_ranks == 5
    assert config.growth_ratio == DEFAULT_CONFIG.growth_ratio


def test_unknown_config_keys_rejected(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"growth_ratio": 2.0, "bucket_ratio": 3.0}))

    with pytest.raises(ValueError, match="bucket_ratio"):
        load_config_from_json(str(path))


def test_load_pool(tmp_path) -> None:
    path = tmp_path / "pool.json"
    path.write_text(json.dumps({"name": "Weekly", "winners": 50, "total_coins": 10000, "min_coins": 50}))

    pool = load_pool_from_json(str(path))

    assert (pool.name, pool.winners, pool.total_coins, pool.min_coins) == ("Weekly", 50, 10000, 50)


def test_load_pool_default_name(tmp_path) -> None:
    path = tmp_path / "pool.json"
    path.write_text(json.dumps({"winners": 50, "total_coins": 10000, "min_coins": 50}))
    assert load_pool_from_json(str(path)).name == "custom"


def test_load_pool_missing_key(tmp_path) -> None:
    path = tmp_path / "pool.json"
    path.write_text(json.dumps({"winners": 50}))
    with pytest.raises(KeyError):
        load_pool_from_json(str(path))


@pytest.mark.parametrize(
    "overrides",
    [
        {"growth_ratio": 1.0},
        {"growth_ratio": 0.5},
        {"first_prize_fraction": 0.0},
        {"first_prize_fraction": 1.0},
        {"fixed_top_ranks": 0},
        {"min_winners": 0},
        {"alpha_max": 0.0},
        {"bisect_tolerance": 0.0},
        {"bisect_max_iterations": 0},
        {"max_reconcile_passes": 0},
    ],
)
def test_out_of_range_settings_rejected(overrides) -> None:
    field_name = next(iter(overrides))
    with pytest.raises(ValueError, match=field_name):
        replace(DEFAULT_CONFIG, **overrides)


def test_out_of_range_config_file_rejected(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"growth_ratio": 1.0}))

    with pytest.raises(ValueError, match="growth_ratio"):
        load_config_from_json(str(path))
