from __future__ import annotations

import string
from pathlib import Path
from typing import Callable, List, Sequence

import pytest

from shamir_recover.models import Share

_ALPHABET = string.digits + string.ascii_lowercase


def _evaluate(coefficients: Sequence[int], x: int) -> int:
    # lowest-degree coefficient first
    y = 0
    for coefficient in reversed(coefficients):
        y = y * x + coefficient
    return y


def _encode(value: int, base: int) -> str:
    if value == 0:
        return "0"
    digits: List[str] = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))


@pytest.fixture(scope="session")
def make_shares() -> Callable[[Sequence[int], Sequence[int]], List[Share]]:
    def build(coefficients: Sequence[int], xs: Sequence[int]) -> List[Share]:
        return [Share(index=x, value=_evaluate(coefficients, x)) for x in xs]

    return build


@pytest.fixture(scope="session")
def encode_base() -> Callable[[int, int], str]:
    return _encode


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    return Path(__file__).resolve().parent / "fixtures"
