"""Bucket count and rank-span planning."""

from .buckets import bucket_count, bucket_sizes, bucket_ranges

__all__ = ["bucket_count", "bucket_sizes", "bucket_ranges"]
