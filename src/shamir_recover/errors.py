"""Exception hierarchy for share recovery."""
from __future__ import annotations


class ShareRecoveryError(Exception):
    """Base class for all share recovery failures."""


class InvalidShareEncoding(ShareRecoveryError, ValueError):
    """A share value is not a valid numeral in its stated base."""

    def __init__(self, message: str, *, digits: str | None = None, base: int | None = None) -> None:
        super().__init__(message)
        self.digits = digits
        self.base = base


class SharesInsufficient(ShareRecoveryError, ValueError):
    """Fewer shares were supplied than the threshold requires."""

    def __init__(self, available: int, threshold: int) -> None:
        super().__init__(f"Not enough shares: need {threshold}, got {available}")
        self.available = available
        self.threshold = threshold


class InvalidThreshold(ShareRecoveryError, ValueError):
    """Threshold is not a positive integer."""


class DivisionByZero(ShareRecoveryError, ZeroDivisionError):
    """A rational was built with, or divided by, zero."""


class NotAnInteger(ShareRecoveryError, ValueError):
    """An exact rational was requested as an integer but has a denominator."""


class TooManyCombinations(ShareRecoveryError, RuntimeError):
    """The number of k-subsets exceeds the configured ceiling."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"{count} combinations exceed the configured limit of {limit}")
        self.count = count
        self.limit = limit


class CaseFormatError(ShareRecoveryError, ValueError):
    """A case document could not be read or validated."""


__all__ = [
    "ShareRecoveryError",
    "InvalidShareEncoding",
    "SharesInsufficient",
    "InvalidThreshold",
    "DivisionByZero",
    "NotAnInteger",
    "TooManyCombinations",
    "CaseFormatError",
]
