"""
Error kinds raised by the distribution pipeline.

Every error carries an ErrorKind so callers can branch on the kind
rather than on message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_WINNER_COUNT = "invalid_winner_count"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_POOL = "insufficient_pool"
    RECONCILIATION_FAILURE = "reconciliation_failure"


class PrizeDistributionError(ValueError):
    """Base class for all distribution errors."""
    kind: ErrorKind


class InvalidWinnerCount(PrizeDistributionError):
    """Winner count is not a whole number or is below the accepted floor."""
    kind = ErrorKind.INVALID_WINNER_COUNT


class InvalidAmount(PrizeDistributionError):
    """Pool or minimum award is not a positive whole number."""
    kind = ErrorKind.INVALID_AMOUNT


class InsufficientPool(PrizeDistributionError):
    """Pool cannot cover the minimum for every winner, or no curve fits it."""
    kind = ErrorKind.INSUFFICIENT_POOL


class ReconciliationFailure(PrizeDistributionError):
    """Leftover could not be paid out without breaking an invariant."""
    kind = ErrorKind.RECONCILIATION_FAILURE
