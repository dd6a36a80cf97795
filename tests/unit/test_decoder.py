import pytest

from shamir_recover.decoder import decode, decode_share
from shamir_recover.errors import InvalidShareEncoding
from shamir_recover.models import Share


@pytest.mark.parametrize(
    ("digits", "base", "expected"),
    [
        ("111", 2, 7),
        ("ff", 16, 255),
        ("FF", 16, 255),
        ("fF", 16, 255),
        ("213", 4, 39),
        ("z", 36, 35),
        ("10", 36, 36),
        ("0007", 8, 7),
    ],
)
def test_decode_known_values(digits: str, base: int, expected: int) -> None:
    assert decode(digits, base) == expected


@pytest.mark.parametrize("base", range(2, 37))
def test_decode_zero_in_every_base(base: int) -> None:
    assert decode("0", base) == 0


def test_decode_large_value_is_exact() -> None:
    digits = "1" + "0" * 200
    assert decode(digits, 10) == 10**200
    assert decode("f" * 64, 16) == 2**256 - 1


@pytest.mark.parametrize("base", [0, 1, 37, -16])
def test_decode_rejects_out_of_range_base(base: int) -> None:
    with pytest.raises(InvalidShareEncoding):
        decode("1", base)


@pytest.mark.parametrize(
    ("digits", "base"),
    [("2", 2), ("19a", 10), ("g", 16), ("12 3", 10), ("-5", 10), ("", 10), ("é", 36)],
)
def test_decode_rejects_invalid_digits(digits: str, base: int) -> None:
    with pytest.raises(InvalidShareEncoding):
        decode(digits, base)


def test_invalid_encoding_is_value_error() -> None:
    with pytest.raises(ValueError) as info:
        decode("8", 8)
    assert info.value.base == 8
    assert info.value.digits == "8"


def test_decode_share() -> None:
    assert decode_share(3, "ff", 16) == Share(index=3, value=255)
    with pytest.raises(InvalidShareEncoding):
        decode_share(0, "1", 10)
