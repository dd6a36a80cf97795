from fractions import Fraction
from math import comb, gcd

from hypothesis import given, settings, strategies as st

from shamir_recover.arith import ExactRational
from shamir_recover.checker import reconstruct
from shamir_recover.combinations import CombinationEnumerator
from shamir_recover.decoder import decode
from shamir_recover.models import Consistent, Share

_ints = st.integers(min_value=-(10**30), max_value=10**30)
_nonzero = _ints.filter(lambda value: value != 0)


@given(_ints, _nonzero)
def test_rational_always_normalised(numerator: int, denominator: int) -> None:
    value = ExactRational(numerator, denominator)
    assert value.denominator > 0
    assert gcd(value.numerator, value.denominator) == 1
    assert Fraction(value.numerator, value.denominator) == Fraction(numerator, denominator)


@given(_ints, _nonzero, _ints, _nonzero)
def test_rational_arithmetic_agrees_with_fraction(a: int, b: int, c: int, d: int) -> None:
    left, right = ExactRational(a, b), ExactRational(c, d)
    expected_left, expected_right = Fraction(a, b), Fraction(c, d)
    assert (left + right).as_pair() == (expected_left + expected_right).as_integer_ratio()
    assert (left * right).as_pair() == (expected_left * expected_right).as_integer_ratio()
    assert (left < right) == (expected_left < expected_right)


@st.composite
def polynomial_shares(draw):
    k = draw(st.integers(min_value=1, max_value=5))
    n = draw(st.integers(min_value=k, max_value=7))
    coefficients = draw(st.lists(st.integers(min_value=0, max_value=2**256), min_size=k, max_size=k))
    xs = draw(st.lists(st.integers(min_value=1, max_value=1000), min_size=n, max_size=n, unique=True))
    shares = []
    for x in xs:
        y = 0
        for coefficient in reversed(coefficients):
            y = y * x + coefficient
        shares.append(Share(index=x, value=y))
    return coefficients[0], k, shares


@settings(max_examples=50, deadline=None)
@given(polynomial_shares())
def test_genuine_shares_always_agree(case) -> None:
    secret, k, shares = case
    result = reconstruct(shares, k)
    assert isinstance(result, Consistent)
    assert result.secret.to_integer() == secret
    assert result.combinations == comb(len(shares), k)


@given(st.integers(min_value=0, max_value=10), st.integers(min_value=0, max_value=10))
def test_enumerator_count_symmetry(n: int, k: int) -> None:
    if k > n:
        assert list(CombinationEnumerator(n, k)) == []
        return
    assert len(list(CombinationEnumerator(n, k))) == comb(n, k) == len(CombinationEnumerator(n, n - k))


@given(st.integers(min_value=0, max_value=2**512), st.integers(min_value=2, max_value=36))
def test_decode_agrees_with_int(value: int, base: int) -> None:
    digits = []
    remaining = value
    while True:
        remaining, digit = divmod(remaining, base)
        digits.append("0123456789abcdefghijklmnopqrstuvwxyz"[digit])
        if not remaining:
            break
    text = "".join(reversed(digits))
    assert decode(text, base) == value == int(text, base)
