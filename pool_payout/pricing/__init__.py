"""Bucket pricing and leftover reconciliation."""

from .pricer import first_prize, price_buckets, payout_total
from .leftover import spend_leftover

__all__ = ["first_prize", "price_buckets", "payout_total", "spend_leftover"]
