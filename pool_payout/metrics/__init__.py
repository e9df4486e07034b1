"""Summary metrics for finished distributions."""

from .distribution import compute_distribution_metrics

__all__ = ['compute_distribution_metrics']
