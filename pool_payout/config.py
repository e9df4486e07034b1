"""
Configuration management for the prize-pool payout builder.

Pipeline defaults, named pool presets, and JSON loading utilities.
"""

import json
from dataclasses import asdict, fields
from typing import Dict

from .types import DistributionConfig, PrizePool


# =============================================================================
# Pipeline Defaults
# =============================================================================

# First place is anchored at this share of the pool before the curve is fit.
FIRST_PRIZE_FRACTION = 0.22

# Each grouped bucket spans roughly this many times the ranks of the previous one.
GROWTH_RATIO = 2.5

# Ranks 1..FIXED_TOP_RANKS always get a bucket of their own.
FIXED_TOP_RANKS = 3

MIN_WINNERS = 4

DEFAULT_CONFIG = DistributionConfig(
    first_prize_fraction=FIRST_PRIZE_FRACTION,
    growth_ratio=GROWTH_RATIO,
    fixed_top_ranks=FIXED_TOP_RANKS,
    min_winners=MIN_WINNERS,
    alpha_max=50.0,
    bisect_tolerance=1e-12,
    bisect_max_iterations=200,
    max_reconcile_passes=256,
)


# =============================================================================
# Pool Presets
# =============================================================================

POOL_PRESETS: Dict[str, PrizePool] = {
    'small': PrizePool(
        name="Small Tournament",
        winners=20,
        total_coins=5000,
        min_coins=50,
    ),
    'medium': PrizePool(
        name="Medium Tournament",
        winners=100,
        total_coins=25000,
        min_coins=100,
    ),
    'large': PrizePool(
        name="Large Tournament",
        winners=500,
        total_coins=100000,
        min_coins=50,
    ),
    'lottery': PrizePool(
        name="Lottery",
        winners=1000,
        total_coins=500000,
        min_coins=100,
    ),
}


# =============================================================================
# JSON Loading Utilities
# =============================================================================

def load_config_from_json(path: str) -> DistributionConfig:
    """
    Load pipeline configuration from JSON file.

    Expected format (every key optional, missing keys use DEFAULT_CONFIG):
    {
        "first_prize_fraction": 0.22,
        "growth_ratio": 2.5,
        "fixed_top_ranks": 3,
        "min_winners": 4,
        "alpha_max": 50.0,
        "bisect_tolerance": 1e-12,
        "bisect_max_iterations": 200,
        "max_reconcile_passes": 256
    }
    """
    with open(path, 'r') as f:
        data = json.load(f)

    known = {f.name for f in fields(DistributionConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    defaults = asdict(DEFAULT_CONFIG)
    defaults.update(data)
    return DistributionConfig(**defaults)


def save_config_to_json(config: DistributionConfig, path: str):
    """Save pipeline configuration to JSON file."""
    with open(path, 'w') as f:
        json.dump(asdict(config), f, indent=2)


def load_pool_from_json(path: str) -> PrizePool:
    """
    Load pool inputs from JSON file.

    Expected format:
    {
        "name": "Weekly Leaderboard",
        "winners": 50,
        "total_coins": 10000,
        "min_coins": 50
    }
    """
    with open(path, 'r') as f:
        data = json.load(f)

    return PrizePool(
        name=data.get('name', 'custom'),
        winners=data['winners'],
        total_coins=data['total_coins'],
        min_coins=data['min_coins'],
    )
