"""Human-friendly award magnitudes."""

from .nice import is_nice, nice_numbers, round_down_to_nice, floor_nice, next_nice

__all__ = ["is_nice", "nice_numbers", "round_down_to_nice", "floor_nice", "next_nice"]
