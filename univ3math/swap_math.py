"""Single swap steps and full swaps across initialized ticks."""

from dataclasses import dataclass

from .full_math import mul_div, mul_div_rounding_up
from .liquidity_math import add_delta
from .sqrt_price_math import (
    get_amount_0_delta,
    get_amount_1_delta,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)
from .tick_math import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)

MAX_FEE = 1_000_000

_I256_OFFSET = 1 << 255
_I256_MODULUS = 1 << 256


def _wrap_i256(value):
    return (value + _I256_OFFSET) % _I256_MODULUS - _I256_OFFSET


@dataclass
class SwapState:
    """The running state of a swap."""

    amount_specified_remaining: int
    amount_calculated: int
    sqrt_price_x96: int
    tick_current: int
    liquidity: int


def compute_swap_step(
    sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, amount_remaining, fee_pips
):
    """Compute one swap step towards a target sqrt price.

    A non-negative ``amount_remaining`` is an exact input, a negative one an
    exact output. Returns ``(sqrt_ratio_next_x96, amount_in, amount_out,
    fee_amount)``.
    """
    if not 0 <= fee_pips <= MAX_FEE:
        raise ValueError(f"fee_pips out of range: {fee_pips}")
    fee_complement = MAX_FEE - fee_pips
    zero_for_one = sqrt_ratio_current_x96 >= sqrt_ratio_target_x96

    if amount_remaining >= 0:
        amount_remaining_less_fee = mul_div(amount_remaining, fee_complement, MAX_FEE)
        if zero_for_one:
            amount_in = get_amount_0_delta(
                sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, True
            )
        else:
            amount_in = get_amount_1_delta(
                sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, True
            )

        if amount_remaining_less_fee >= amount_in:
            sqrt_ratio_next_x96 = sqrt_ratio_target_x96
            fee_amount = mul_div_rounding_up(amount_in, fee_pips, fee_complement)
        else:
            amount_in = amount_remaining_less_fee
            sqrt_ratio_next_x96 = get_next_sqrt_price_from_input(
                sqrt_ratio_current_x96, liquidity, amount_in, zero_for_one
            )
            fee_amount = amount_remaining - amount_in

        if zero_for_one:
            amount_out = get_amount_1_delta(
                sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, False
            )
        else:
            amount_out = get_amount_0_delta(
                sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, False
            )
        return sqrt_ratio_next_x96, amount_in, amount_out, fee_amount

    amount_remaining_abs = -amount_remaining
    if zero_for_one:
        amount_out = get_amount_1_delta(
            sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, False
        )
    else:
        amount_out = get_amount_0_delta(
            sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, False
        )

    if amount_remaining_abs >= amount_out:
        sqrt_ratio_next_x96 = sqrt_ratio_target_x96
    else:
        amount_out = amount_remaining_abs
        sqrt_ratio_next_x96 = get_next_sqrt_price_from_output(
            sqrt_ratio_current_x96, liquidity, amount_out, zero_for_one
        )

    if zero_for_one:
        amount_in = get_amount_0_delta(sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, True)
    else:
        amount_in = get_amount_1_delta(sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, True)
    fee_amount = mul_div_rounding_up(amount_in, fee_pips, fee_complement)
    return sqrt_ratio_next_x96, amount_in, amount_out, fee_amount


def v3_swap(
    fee,
    sqrt_price_x96,
    tick_current,
    liquidity,
    tick_spacing,
    tick_data_provider,
    zero_for_one,
    amount_specified,
    sqrt_price_limit_x96=None,
):
    """Simulate a swap through the ticks supplied by ``tick_data_provider``.

    The provider must offer ``get_tick(index)`` and
    ``next_initialized_tick_within_one_word(tick, lte, tick_spacing)``.
    Returns the final ``SwapState``.
    """
    if sqrt_price_limit_x96 is None:
        sqrt_price_limit_x96 = MIN_SQRT_RATIO + 1 if zero_for_one else MAX_SQRT_RATIO - 1

    if zero_for_one:
        if not sqrt_price_limit_x96 > MIN_SQRT_RATIO:
            raise ValueError("RATIO_MIN")
        if not sqrt_price_limit_x96 < sqrt_price_x96:
            raise ValueError("RATIO_CURRENT")
    else:
        if not sqrt_price_limit_x96 < MAX_SQRT_RATIO:
            raise ValueError("RATIO_MAX")
        if not sqrt_price_limit_x96 > sqrt_price_x96:
            raise ValueError("RATIO_CURRENT")

    exact_input = amount_specified >= 0
    state = SwapState(
        amount_specified_remaining=amount_specified,
        amount_calculated=0,
        sqrt_price_x96=sqrt_price_x96,
        tick_current=tick_current,
        liquidity=liquidity,
    )

    while state.amount_specified_remaining != 0 and state.sqrt_price_x96 != sqrt_price_limit_x96:
        sqrt_price_start_x96 = state.sqrt_price_x96

        # Each step rounds, so the contract's word-by-word traversal must be replicated.
        tick_next, initialized = tick_data_provider.next_initialized_tick_within_one_word(
            state.tick_current, zero_for_one, tick_spacing
        )
        tick_next = min(max(tick_next, MIN_TICK), MAX_TICK)
        sqrt_price_next_x96 = get_sqrt_ratio_at_tick(tick_next)

        if zero_for_one:
            target = max(sqrt_price_next_x96, sqrt_price_limit_x96)
        else:
            target = min(sqrt_price_next_x96, sqrt_price_limit_x96)

        state.sqrt_price_x96, amount_in, amount_out, fee_amount = compute_swap_step(
            state.sqrt_price_x96,
            target,
            state.liquidity,
            state.amount_specified_remaining,
            fee,
        )

        if exact_input:
            state.amount_specified_remaining = _wrap_i256(
                state.amount_specified_remaining - amount_in - fee_amount
            )
            state.amount_calculated = _wrap_i256(state.amount_calculated - amount_out)
        else:
            state.amount_specified_remaining = _wrap_i256(
                state.amount_specified_remaining + amount_out
            )
            state.amount_calculated = _wrap_i256(
                state.amount_calculated + amount_in + fee_amount
            )

        if state.sqrt_price_x96 == sqrt_price_next_x96:
            if initialized:
                liquidity_net = tick_data_provider.get_tick(tick_next).liquidity_net
                # Moving leftward, liquidity_net applies with the opposite sign.
                if zero_for_one:
                    liquidity_net = -liquidity_net
                state.liquidity = add_delta(state.liquidity, liquidity_net)
            state.tick_current = tick_next - 1 if zero_for_one else tick_next
        elif state.sqrt_price_x96 != sqrt_price_start_x96:
            state.tick_current = get_tick_at_sqrt_ratio(state.sqrt_price_x96)

    return state