import pytest

from univ3math.bit_math import least_significant_bit, most_significant_bit

U256_MAX = (1 << 256) - 1
U160_MAX = (1 << 160) - 1


def test_most_significant_bit_throws_for_zero():
    with pytest.raises(ValueError, match="overflow"):
        most_significant_bit(0)


@pytest.mark.parametrize("i", range(256))
def test_most_significant_bit_powers_of_two(i):
    assert most_significant_bit(1 << i) == i


@pytest.mark.parametrize("i", range(1, 256))
def test_most_significant_bit_all_ones(i):
    assert most_significant_bit((1 << i) - 1) == i - 1


def test_most_significant_bit_max():
    assert most_significant_bit(U256_MAX) == 255


def test_most_significant_bit_examples():
    assert most_significant_bit(int("101010", 2)) == 5
    assert most_significant_bit(U160_MAX) == 159


@pytest.mark.parametrize("i", range(256))
def test_least_significant_bit_powers_of_two(i):
    assert least_significant_bit(1 << i) == i


@pytest.mark.parametrize("i", range(1, 256))
def test_least_significant_bit_all_ones(i):
    assert least_significant_bit((1 << i) - 1) == 0


def test_least_significant_bit_max():
    assert least_significant_bit(U256_MAX) == 0


def test_least_significant_bit_examples():
    assert least_significant_bit(int("101010", 2)) == 1
    assert least_significant_bit(1 << 42) == 42


def test_least_significant_bit_zero_raises():
    with pytest.raises(ValueError):
        least_significant_bit(0)