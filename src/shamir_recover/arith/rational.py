"""Exact rational numbers over Python integers.

Every instance is kept in lowest terms with a positive denominator, so two
values are equal exactly when their numerator and denominator are equal.
"""
from __future__ import annotations

from functools import total_ordering
from math import gcd
from typing import Tuple, Union

from ..errors import DivisionByZero, NotAnInteger

RationalLike = Union["ExactRational", int]


@total_ordering
class ExactRational:
    """Immutable reduced fraction ``numerator / denominator``."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        if isinstance(numerator, bool) or not isinstance(numerator, int):
            raise TypeError(f"numerator must be int, not {type(numerator).__name__}")
        if isinstance(denominator, bool) or not isinstance(denominator, int):
            raise TypeError(f"denominator must be int, not {type(denominator).__name__}")
        if denominator == 0:
            raise DivisionByZero(f"Zero denominator for numerator {numerator}")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = gcd(numerator, denominator)
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor

    @classmethod
    def coerce(cls, value: RationalLike) -> "ExactRational":
        if isinstance(value, ExactRational):
            return value
        return cls(value)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def as_pair(self) -> Tuple[int, int]:
        return self._numerator, self._denominator

    def is_integer(self) -> bool:
        return self._denominator == 1

    def to_integer(self) -> int:
        """Return the value as an ``int``.

        Raises
        ------
        NotAnInteger
            If the value has a denominator other than one.
        """

        if self._denominator != 1:
            raise NotAnInteger(f"{self} is not an integer")
        return self._numerator

    def __add__(self, other: RationalLike) -> "ExactRational":
        if not isinstance(other, (ExactRational, int)):
            return NotImplemented
        rhs = ExactRational.coerce(other)
        return ExactRational(
            self._numerator * rhs._denominator + rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    __radd__ = __add__

    def __sub__(self, other: RationalLike) -> "ExactRational":
        if not isinstance(other, (ExactRational, int)):
            return NotImplemented
        return self + (-ExactRational.coerce(other))

    def __rsub__(self, other: RationalLike) -> "ExactRational":
        if not isinstance(other, (ExactRational, int)):
            return NotImplemented
        return ExactRational.coerce(other) - self

    def __mul__(self, other: RationalLike) -> "ExactRational":
        if not isinstance(other, (ExactRational, int)):
            return NotImplemented
        rhs = ExactRational.coerce(other)
        return ExactRational(self._numerator * rhs._numerator, self._denominator * rhs._denominator)

    __rmul__ = __mul__

    def __truediv__(self, other: RationalLike) -> "ExactRational":
        if not isinstance(other, (ExactRational, int)):
            return NotImplemented
        rhs = ExactRational.coerce(other)
        if rhs._numerator == 0:
            raise DivisionByZero(f"Cannot divide {self} by zero")
        return ExactRational(self._numerator * rhs._denominator, self._denominator * rhs._numerator)

    def __rtruediv__(self, other: RationalLike) -> "ExactRational":
        if not isinstance(other, (ExactRational, int)):
            return NotImplemented
        return ExactRational.coerce(other) / self

    def __neg__(self) -> "ExactRational":
        return ExactRational(-self._numerator, self._denominator)

    def __abs__(self) -> "ExactRational":
        return ExactRational(abs(self._numerator), self._denominator)

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExactRational):
            return self.as_pair() == other.as_pair()
        if isinstance(other, int) and not isinstance(other, bool):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __lt__(self, other: RationalLike) -> bool:
        if not isinstance(other, (ExactRational, int)) or isinstance(other, bool):
            return NotImplemented
        rhs = ExactRational.coerce(other)
        # denominators are positive, so cross-multiplication keeps the order
        return self._numerator * rhs._denominator < rhs._numerator * self._denominator

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"ExactRational({self._numerator}, {self._denominator})"

    def __reduce__(self):
        return (ExactRational, self.as_pair())


ZERO = ExactRational(0)

__all__ = ["ExactRational", "RationalLike", "ZERO"]
