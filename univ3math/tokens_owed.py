"""Fees owed to a position."""

from .constants import Q128, U256_MAX


def get_tokens_owed(
    fee_growth_inside_0_last_x128,
    fee_growth_inside_1_last_x128,
    liquidity,
    fee_growth_inside_0_x128,
    fee_growth_inside_1_x128,
):
    """Return the amounts of token0 and token1 owed to a position.

    Differences and products wrap modulo 2**256, as fee growth counters do.
    """

    def owed(current, last):
        delta = (current - last) & U256_MAX
        return ((delta * liquidity) & U256_MAX) // Q128

    return (
        owed(fee_growth_inside_0_x128, fee_growth_inside_0_last_x128),
        owed(fee_growth_inside_1_x128, fee_growth_inside_1_last_x128),
    )