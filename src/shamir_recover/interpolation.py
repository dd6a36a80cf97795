"""Lagrange interpolation at zero over exact rationals."""
from __future__ import annotations

from typing import Sequence

from .arith import ZERO, ExactRational
from .errors import DivisionByZero
from .models import Share


def interpolate_at_zero(points: Sequence[Share]) -> ExactRational:
    """Value at ``x = 0`` of the polynomial through ``points``.

    Computes ``sum_i y_i * prod_{j != i} (0 - x_j) / (x_i - x_j)`` with no
    rounding. Terms are accumulated in the order the points are given.

    Raises
    ------
    DivisionByZero
        If two points share the same index.
    ValueError
        If ``points`` is empty.
    """

    if not points:
        raise ValueError("At least one point is required")
    secret = ZERO
    for i, share in enumerate(points):
        term = ExactRational(share.value)
        for j, other in enumerate(points):
            if i == j:
                continue
            try:
                factor = ExactRational(-other.index, share.index - other.index)
            except DivisionByZero as exc:
                raise DivisionByZero(f"Duplicate share index {share.index}") from exc
            term = term * factor
        secret = secret + term
    return secret


__all__ = ["interpolate_at_zero"]
