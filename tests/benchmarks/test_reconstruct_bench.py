import pytest

from shamir_recover.checker import reconstruct
from shamir_recover.models import Share


@pytest.mark.bench
def test_reconstruct_throughput(benchmark):
    coefficients = [2**255 - 19, 3**100, 5**80, 7**60, 11**40]
    shares = []
    for x in range(1, 11):
        y = 0
        for coefficient in reversed(coefficients):
            y = y * x + coefficient
        shares.append(Share(x, y))
    result = benchmark(lambda: reconstruct(shares, 5))
    assert result.secret == 2**255 - 19
