"""Encoding a token amount ratio as a Q64.96 sqrt price."""

import math


def encode_sqrt_ratio_x96(amount1, amount0):
    """Return floor(sqrt(amount1 / amount0) * 2**96).

    Raises ``ZeroDivisionError`` if ``amount0`` is zero and ``ValueError``
    if the ratio is negative.
    """
    numerator = int(amount1) << 192
    denominator = int(amount0)
    if denominator == 0:
        raise ZeroDivisionError("amount0 must not be zero")
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0) and quotient != 0:
        raise ValueError("cannot take the square root of a negative ratio")
    return math.isqrt(quotient)