"""
Bisection root finder.

Generic: works on any single-argument numeric function whose values at
the bracket ends have opposite signs.
"""

from typing import Callable


class BisectionError(ValueError):
    """Bracket does not contain a sign change, or iterations ran out."""


def bisect(
    f: Callable[[float], float],
    lo: float,
    hi: float,
    tolerance: float = 1e-12,
    max_iterations: int = 200
) -> float:
    """
    Find a root of f in [lo, hi] by repeated halving.

    Stops when the half-width of the bracket or |f(mid)| drops below
    `tolerance`. Running out of iterations raises instead of returning
    an unconverged value.

    Args:
        f: Function to solve f(x) = 0 for
        lo: Lower bracket end
        hi: Upper bracket end
        tolerance: Convergence threshold for both bracket width and |f|
        max_iterations: Safety bound on halvings

    Returns:
        x with f(x) ~ 0

    Raises:
        BisectionError: f(lo) and f(hi) have the same sign, or no
            convergence within max_iterations
    """
    if lo > hi:
        lo, hi = hi, lo

    f_lo = f(lo)
    if abs(f_lo) < tolerance:
        return lo
    f_hi = f(hi)
    if abs(f_hi) < tolerance:
        return hi

    if (f_lo < 0) == (f_hi < 0):
        raise BisectionError(
            f"Root not bracketed: f({lo})={f_lo} and f({hi})={f_hi} have the same sign"
        )

    for _ in range(max_iterations):
        half_width = (hi - lo) / 2
        mid = lo + half_width
        f_mid = f(mid)

        if abs(f_mid) < tolerance or half_width < tolerance:
            return mid

        if (f_mid < 0) == (f_lo < 0):
            lo, f_lo = mid, f_mid
        else:
            hi = mid

    raise BisectionError(
        f"No convergence after {max_iterations} iterations (bracket [{lo}, {hi}])"
    )
