"""Decode share values written in an arbitrary base."""
from __future__ import annotations

from .errors import InvalidShareEncoding
from .models import Share

MIN_BASE = 2
MAX_BASE = 36


def _digit_value(char: str) -> int:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    lowered = char.lower()
    if "a" <= lowered <= "z":
        return ord(lowered) - ord("a") + 10
    return -1


def decode(digits: str, base: int) -> int:
    """Interpret ``digits`` as an unsigned integer in ``base``.

    Digits are ``0-9`` followed by ``a-z`` (case-insensitive). The value is
    accumulated left to right, so leading zeros are accepted.

    Raises
    ------
    InvalidShareEncoding
        If ``base`` is outside ``[2, 36]``, ``digits`` is empty, or a
        character is not a digit of ``base``.
    """

    if isinstance(base, bool) or not isinstance(base, int) or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidShareEncoding(
            f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base!r}", digits=digits, base=None
        )
    if not digits:
        raise InvalidShareEncoding("Share value is empty", digits=digits, base=base)
    result = 0
    for position, char in enumerate(digits):
        value = _digit_value(char)
        if value < 0 or value >= base:
            raise InvalidShareEncoding(
                f"Invalid digit {char!r} at position {position} for base {base}",
                digits=digits,
                base=base,
            )
        result = result * base + value
    return result


def decode_share(index: int, digits: str, base: int) -> Share:
    if index < 1:
        raise InvalidShareEncoding(f"Share index must be positive, got {index}", digits=digits, base=base)
    return Share(index=index, value=decode(digits, base))


__all__ = ["decode", "decode_share", "MIN_BASE", "MAX_BASE"]
