import pytest

from univ3math.errors import InvalidSqrtPriceError, InvalidTickError
from univ3math.tick_math import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)


def test_min_tick():
    assert MIN_TICK == -887272
    assert get_tick_at_sqrt_ratio(MIN_SQRT_RATIO) == -887272
    with pytest.raises(InvalidTickError):
        get_sqrt_ratio_at_tick(-887273)


def test_max_tick():
    assert MAX_TICK == 887272
    assert get_sqrt_ratio_at_tick(887272) == MAX_SQRT_RATIO
    with pytest.raises(InvalidTickError):
        get_sqrt_ratio_at_tick(887273)


def test_get_sqrt_ratio_at_tick_throws_for_tick_too_small():
    with pytest.raises(InvalidTickError, match=r"InvalidTick\(-887273\)") as info:
        get_sqrt_ratio_at_tick(MIN_TICK - 1)
    assert info.value.tick == -887273


def test_get_sqrt_ratio_at_tick_throws_for_tick_too_large():
    with pytest.raises(InvalidTickError, match=r"InvalidTick\(887273\)") as info:
        get_sqrt_ratio_at_tick(MAX_TICK + 1)
    assert info.value.tick == 887273


def test_returns_correct_value_for_min_tick():
    assert get_sqrt_ratio_at_tick(MIN_TICK) == MIN_SQRT_RATIO


def test_returns_correct_value_for_tick_zero():
    assert get_sqrt_ratio_at_tick(0) == 1 << 96


def test_returns_correct_value_for_max_tick():
    assert get_sqrt_ratio_at_tick(MAX_TICK) == MAX_SQRT_RATIO


def test_returns_correct_value_for_sqrt_ratio_at_min_tick():
    assert get_tick_at_sqrt_ratio(MIN_SQRT_RATIO) == MIN_TICK


def test_returns_correct_value_for_sqrt_ratio_at_max_tick():
    assert get_tick_at_sqrt_ratio(MAX_SQRT_RATIO - 1) == MAX_TICK - 1


def test_get_tick_at_sqrt_ratio_rejects_too_small():
    with pytest.raises(InvalidSqrtPriceError):
        get_tick_at_sqrt_ratio(MIN_SQRT_RATIO - 1)


def test_get_tick_at_sqrt_ratio_rejects_max():
    with pytest.raises(InvalidSqrtPriceError):
        get_tick_at_sqrt_ratio(MAX_SQRT_RATIO)


@pytest.mark.parametrize(
    "tick",
    [MIN_TICK, MIN_TICK + 1, -276225, -74959, -50, -1, 0, 1, 50, 74959, 276225, MAX_TICK - 1],
)
def test_tick_round_trip(tick):
    assert get_tick_at_sqrt_ratio(get_sqrt_ratio_at_tick(tick)) == tick


@pytest.mark.parametrize("tick", [-74959, -1, 0, 1, 74959, MAX_TICK - 2])
def test_tick_is_floor_of_ratio(tick):
    next_ratio = get_sqrt_ratio_at_tick(tick + 1)
    assert get_tick_at_sqrt_ratio(next_ratio - 1) == tick


@pytest.mark.parametrize("tick", [MIN_TICK, -100000, -3, 0, 3, 100000, MAX_TICK - 1])
def test_sqrt_ratio_is_strictly_increasing(tick):
    assert get_sqrt_ratio_at_tick(tick) < get_sqrt_ratio_at_tick(tick + 1)