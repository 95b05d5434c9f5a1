"""Fee growth inside a tick range."""

from dataclasses import dataclass

from .constants import U256_MAX


@dataclass(frozen=True)
class FeeGrowthOutside:
    """Fee growth recorded on the other side of a tick, per token, as X128."""

    fee_growth_outside0_x128: int = 0
    fee_growth_outside1_x128: int = 0


def get_fee_growth_inside(
    lower,
    upper,
    tick_lower,
    tick_upper,
    tick_current,
    fee_growth_global0_x128,
    fee_growth_global1_x128,
):
    """Return the fee growth of both tokens inside ``[tick_lower, tick_upper)``.

    Arithmetic wraps modulo 2**256, as fee growth counters do.
    """
    if tick_current < tick_lower:
        inside0 = lower.fee_growth_outside0_x128 - upper.fee_growth_outside0_x128
        inside1 = lower.fee_growth_outside1_x128 - upper.fee_growth_outside1_x128
    elif tick_current >= tick_upper:
        inside0 = upper.fee_growth_outside0_x128 - lower.fee_growth_outside0_x128
        inside1 = upper.fee_growth_outside1_x128 - lower.fee_growth_outside1_x128
    else:
        inside0 = (
            fee_growth_global0_x128
            - lower.fee_growth_outside0_x128
            - upper.fee_growth_outside0_x128
        )
        inside1 = (
            fee_growth_global1_x128
            - lower.fee_growth_outside1_x128
            - upper.fee_growth_outside1_x128
        )
    return inside0 & U256_MAX, inside1 & U256_MAX