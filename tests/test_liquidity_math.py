import pytest

from univ3math.errors import AddDeltaOverflowError
from univ3math.liquidity_math import U128_MAX, add_delta


@pytest.mark.parametrize("x", [0, 1, 12345, 1 << 100, U128_MAX])
def test_adding_zero_keeps_value(x):
    assert add_delta(x, 0) == x


@pytest.mark.parametrize(
    "x, y",
    [(1, 1), (1, -1), (10, -3), (1 << 64, 1 << 63), (1 << 127, -(1 << 127))],
)
def test_delta_is_applied(x, y):
    result = add_delta(x, y)
    assert result - x == y
    assert add_delta(result, -y) == x


def test_reaches_upper_bound_exactly():
    assert add_delta(U128_MAX - 15, 15) == U128_MAX


def test_overflow_raises():
    with pytest.raises(AddDeltaOverflowError):
        add_delta(U128_MAX - 14, 15)


@pytest.mark.parametrize("x, y", [(0, -1), (3, -4), (1 << 100, -(1 << 101))])
def test_underflow_raises(x, y):
    with pytest.raises(AddDeltaOverflowError):
        add_delta(x, y)