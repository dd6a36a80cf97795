"""Recover Shamir-shared secrets with exact Lagrange interpolation."""
from .arith import ExactRational
from .checker import ConsistencyChecker, reconstruct
from .combinations import CombinationEnumerator, combination_count
from .decoder import decode, decode_share
from .errors import (
    CaseFormatError,
    DivisionByZero,
    InvalidShareEncoding,
    InvalidThreshold,
    NotAnInteger,
    SharesInsufficient,
    ShareRecoveryError,
    TooManyCombinations,
)
from .interpolation import interpolate_at_zero
from .logging import install_library_defaults
from .models import Consistent, Inconsistent, Reconstruction, Share
from .version import __version__

install_library_defaults()

__all__ = [
    "ExactRational",
    "ConsistencyChecker",
    "reconstruct",
    "CombinationEnumerator",
    "combination_count",
    "decode",
    "decode_share",
    "interpolate_at_zero",
    "Share",
    "Consistent",
    "Inconsistent",
    "Reconstruction",
    "ShareRecoveryError",
    "CaseFormatError",
    "InvalidShareEncoding",
    "InvalidThreshold",
    "SharesInsufficient",
    "DivisionByZero",
    "NotAnInteger",
    "TooManyCombinations",
    "__version__",
]
