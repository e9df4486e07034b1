"""Prize-curve calibration."""

from .bisection import bisect, BisectionError
from .prize_curve import raw_prize_curve, calibrate_alpha, anchor_first_prize

__all__ = [
    "bisect",
    "BisectionError",
    "raw_prize_curve",
    "calibrate_alpha",
    "anchor_first_prize",
]
