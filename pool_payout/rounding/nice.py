"""
Nice-number table.

Awards are rounded to magnitudes people read easily. The allowed step
widens with magnitude:

    1..9      every integer
    10..99    multiples of 5
    100..249  multiples of 25
    250+      multiples of 50

Every band starts on a multiple of its own step, so flooring within a
band never drops below the band start.
"""

import math
import numpy as np
from typing import Sequence, Union

# (band start, step), ascending
NICE_BANDS = (
    (1, 1),
    (10, 5),
    (100, 25),
    (250, 50),
)

Number = Union[int, float, np.integer, np.floating]


def _step_for(n: int) -> int:
    """Step of the band containing n (n >= 1)."""
    step = NICE_BANDS[0][1]
    for start, band_step in NICE_BANDS:
        if n >= start:
            step = band_step
    return step


def is_nice(n: Number) -> bool:
    """True if n is a positive whole number on its band's step."""
    if isinstance(n, (float, np.floating)):
        if not float(n).is_integer():
            return False
        n = int(n)
    n = int(n)
    if n <= 0:
        return False
    return n % _step_for(n) == 0


def nice_numbers(max_value: Number) -> np.ndarray:
    """
    All nice numbers in [1, max_value], ascending.

    Built band by band with arange rather than by filtering integers.

    Args:
        max_value: Inclusive upper bound

    Returns:
        int64 array, empty when max_value < 1
    """
    upper = int(math.floor(max_value)) + 1 if max_value >= 1 else 1

    parts = []
    for i, (start, step) in enumerate(NICE_BANDS):
        band_stop = NICE_BANDS[i + 1][0] if i + 1 < len(NICE_BANDS) else upper
        stop = min(band_stop, upper)
        if start >= stop:
            break
        parts.append(np.arange(start, stop, step, dtype=np.int64))

    if not parts:
        return np.array([], dtype=np.int64)
    return np.concatenate(parts)


def round_down_to_nice(value: Number, nice: Sequence[int]) -> int:
    """
    Largest entry of `nice` that is <= value.

    Returns 0 for an empty table (or a value below its first entry) and
    the table maximum when value exceeds it.

    Args:
        value: Value to round
        nice: Ascending nice-number table, e.g. from nice_numbers()
    """
    table = np.asarray(nice)
    if table.size == 0:
        return 0

    idx = int(np.searchsorted(table, value, side='right')) - 1
    if idx < 0:
        return 0
    return int(table[idx])


def floor_nice(value: Number) -> int:
    """Arithmetic round_down_to_nice with an unbounded table (0 below 1)."""
    if value < 1:
        return 0
    n = int(math.floor(value))
    return n - n % _step_for(n)


def next_nice(value: Number) -> int:
    """Smallest nice number strictly greater than value."""
    n = int(math.floor(value)) + 1
    if n < 1:
        return 1
    step = _step_for(n)
    return -(-n // step) * step
