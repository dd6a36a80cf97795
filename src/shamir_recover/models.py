"""Shared domain models used across share recovery."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .arith import ExactRational


@dataclass(frozen=True, slots=True)
class Share:
    index: int
    value: int


@dataclass(frozen=True, slots=True)
class Consistent:
    """Every combination of shares agreed on ``secret``."""

    secret: ExactRational
    combinations: int

    @property
    def is_consistent(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Inconsistent:
    """Combinations disagreed; ``candidates`` are in discovery order."""

    candidates: Tuple[ExactRational, ...]
    combinations: int

    @property
    def is_consistent(self) -> bool:
        return False


Reconstruction = Union[Consistent, Inconsistent]

__all__ = ["Share", "Consistent", "Inconsistent", "Reconstruction"]
