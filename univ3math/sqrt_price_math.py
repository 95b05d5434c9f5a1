"""Sqrt price transitions and token amount deltas between sqrt prices."""

from .constants import Q96, U160_MAX, U256_MAX
from .errors import (
    InsufficientLiquidityError,
    InvalidPriceError,
    InvalidPriceOrLiquidityError,
    PriceOverflowError,
    SafeCastToU160OverflowError,
)
from .full_math import mul_div, mul_div_q96, mul_div_rounding_up


def _div_ceil(a, b):
    return -(-a // b)


def get_next_sqrt_price_from_amount_0_rounding_up(sqrt_price_x96, liquidity, amount, add):
    """Return the sqrt price after adding or removing ``amount`` of token0.

    Always rounds up.
    """
    if amount == 0:
        return sqrt_price_x96
    numerator_1 = liquidity << 96
    product = amount * sqrt_price_x96
    product_fits = product <= U256_MAX

    if add:
        if product_fits:
            denominator = numerator_1 + product
            if denominator <= U256_MAX:
                return mul_div_rounding_up(numerator_1, sqrt_price_x96, denominator)
        divisor = (numerator_1 // sqrt_price_x96 + amount) & U256_MAX
        return _div_ceil(numerator_1, divisor)

    if not (product_fits and numerator_1 > product):
        raise PriceOverflowError()
    result = mul_div_rounding_up(numerator_1, sqrt_price_x96, numerator_1 - product)
    if result > U160_MAX:
        raise SafeCastToU160OverflowError()
    return result


def get_next_sqrt_price_from_amount_1_rounding_down(sqrt_price_x96, liquidity, amount, add):
    """Return the sqrt price after adding or removing ``amount`` of token1.

    Always rounds down.
    """
    if add:
        if amount <= U160_MAX:
            quotient = (amount << 96) // liquidity
        else:
            quotient = mul_div(amount, Q96, liquidity)
        result = (sqrt_price_x96 + quotient) & U256_MAX
        if result > U160_MAX:
            raise SafeCastToU160OverflowError()
        return result

    if amount <= U160_MAX:
        quotient = _div_ceil(amount << 96, liquidity)
    else:
        quotient = mul_div_rounding_up(amount, Q96, liquidity)
    if sqrt_price_x96 <= quotient:
        raise InsufficientLiquidityError()
    return sqrt_price_x96 - quotient


def _check_price_and_liquidity(sqrt_price_x96, liquidity):
    if sqrt_price_x96 == 0 or liquidity == 0:
        raise InvalidPriceOrLiquidityError()


def get_next_sqrt_price_from_input(sqrt_price_x96, liquidity, amount_in, zero_for_one):
    """Return the sqrt price after swapping ``amount_in`` of token0 or token1 in."""
    _check_price_and_liquidity(sqrt_price_x96, liquidity)
    if zero_for_one:
        return get_next_sqrt_price_from_amount_0_rounding_up(
            sqrt_price_x96, liquidity, amount_in, True
        )
    return get_next_sqrt_price_from_amount_1_rounding_down(
        sqrt_price_x96, liquidity, amount_in, True
    )


def get_next_sqrt_price_from_output(sqrt_price_x96, liquidity, amount_out, zero_for_one):
    """Return the sqrt price after swapping ``amount_out`` of token1 or token0 out."""
    _check_price_and_liquidity(sqrt_price_x96, liquidity)
    if zero_for_one:
        return get_next_sqrt_price_from_amount_1_rounding_down(
            sqrt_price_x96, liquidity, amount_out, False
        )
    return get_next_sqrt_price_from_amount_0_rounding_up(
        sqrt_price_x96, liquidity, amount_out, False
    )


def get_amount_0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, round_up):
    """Return the amount of token0 for ``liquidity`` between two sqrt prices."""
    lower, upper = sorted((sqrt_ratio_a_x96, sqrt_ratio_b_x96))
    if lower == 0:
        raise InvalidPriceError()
    numerator_1 = liquidity << 96
    numerator_2 = upper - lower
    if round_up:
        return _div_ceil(mul_div_rounding_up(numerator_1, numerator_2, upper), lower)
    return mul_div(numerator_1, numerator_2, upper) // lower


def get_amount_1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, round_up):
    """Return the amount of token1 for ``liquidity`` between two sqrt prices."""
    lower, upper = sorted((sqrt_ratio_a_x96, sqrt_ratio_b_x96))
    numerator = upper - lower
    amount_1 = mul_div_q96(liquidity, numerator)
    carry = round_up and (liquidity * numerator) % Q96 > 0
    return (amount_1 + int(carry)) & U256_MAX


def get_amount_0_delta_signed(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity):
    """Return the signed token0 amount for a signed liquidity change."""
    if liquidity >= 0:
        return get_amount_0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, True)
    return -get_amount_0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, -liquidity, False)


def get_amount_1_delta_signed(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity):
    """Return the signed token1 amount for a signed liquidity change."""
    if liquidity >= 0:
        return get_amount_1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, True)
    return -get_amount_1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, -liquidity, False)