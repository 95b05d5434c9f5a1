"""Signed liquidity delta arithmetic."""

from .errors import AddDeltaOverflowError

U128_MAX = (1 << 128) - 1


def add_delta(x, y):
    """Add the signed delta ``y`` to the liquidity ``x``.

    Raises ``AddDeltaOverflowError`` if the result leaves the uint128 range.
    """
    result = x + y
    if not 0 <= result <= U128_MAX:
        raise AddDeltaOverflowError()
    return result