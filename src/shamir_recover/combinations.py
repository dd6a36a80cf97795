"""Lexicographic enumeration of k-element index subsets."""
from __future__ import annotations

from itertools import combinations
from math import comb
from typing import Iterator, Tuple

CombinationSet = Tuple[int, ...]


def combination_count(n: int, k: int) -> int:
    if n < 0 or k < 0:
        raise ValueError(f"n and k must be non-negative, got n={n}, k={k}")
    return comb(n, k)


class CombinationEnumerator:
    """Every ``k``-subset of ``range(n)`` as a strictly increasing tuple.

    Subsets come out in lexicographic order, starting at ``(0, 1, ..., k-1)``.
    Each call to ``iter()`` starts a new pass, and ``k > n`` yields nothing.
    """

    __slots__ = ("n", "k")

    def __init__(self, n: int, k: int) -> None:
        if n < 0 or k < 0:
            raise ValueError(f"n and k must be non-negative, got n={n}, k={k}")
        self.n = n
        self.k = k

    def __iter__(self) -> Iterator[CombinationSet]:
        return combinations(range(self.n), self.k)

    def __len__(self) -> int:
        return combination_count(self.n, self.k)

    def __repr__(self) -> str:
        return f"CombinationEnumerator(n={self.n}, k={self.k})"


__all__ = ["CombinationEnumerator", "CombinationSet", "combination_count"]
