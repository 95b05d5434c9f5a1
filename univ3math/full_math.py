"""Full-precision 512-bit multiply-divide on 256-bit unsigned values."""

from .constants import Q96, U256_MAX
from .errors import MulDivOverflowError

_Q352 = Q96 << 256


def _check_u256(name, value):
    if not 0 <= value <= U256_MAX:
        raise ValueError(f"{name} is not a uint256: {value}")


def mul_div(a, b, denominator):
    """Return floor(a*b/denominator).

    Raises ``MulDivOverflowError`` if the result overflows 256 bits or the
    denominator is zero.
    """
    _check_u256("a", a)
    _check_u256("b", b)
    _check_u256("denominator", denominator)
    product = a * b
    if denominator <= product >> 256:
        raise MulDivOverflowError()
    return product // denominator


def mul_div_rounding_up(a, b, denominator):
    """Return ceil(a*b/denominator).

    Raises ``MulDivOverflowError`` if the result overflows 256 bits or the
    denominator is zero.
    """
    result = mul_div(a, b, denominator)
    if (a * b) % denominator == 0:
        return result
    if result == U256_MAX:
        raise MulDivOverflowError()
    return result + 1


def mul_div_q96(a, b):
    """Return floor(a*b / 2**96), raising ``MulDivOverflowError`` on overflow."""
    _check_u256("a", a)
    _check_u256("b", b)
    product = a * b
    if product >= _Q352:
        raise MulDivOverflowError()
    return product >> 96