# univ3math

Integer-only math for concentrated-liquidity pools. It covers tick and sqrt
price conversions, fixed-point sqrt price updates, swap steps and liquidity
helpers. Values are plain Python `int`s. Where the pool contracts work in
fixed-width integers, such as 256-bit fee growth counters or the running
amounts of a swap, the functions wrap or range-check the way those contracts do.

## Install

```
pip install univ3math
```

## Modules

- `univ3math.tick_math`
  - `get_sqrt_ratio_at_tick`, `get_tick_at_sqrt_ratio`
  - `MIN_TICK`, `MAX_TICK`, `MIN_SQRT_RATIO`, `MAX_SQRT_RATIO`
- `univ3math.sqrt_price_math`
  - `get_next_sqrt_price_from_input`, `get_next_sqrt_price_from_output`
  - `get_next_sqrt_price_from_amount_0_rounding_up`,
    `get_next_sqrt_price_from_amount_1_rounding_down`
  - `get_amount_0_delta`, `get_amount_1_delta`
  - `get_amount_0_delta_signed`, `get_amount_1_delta_signed`
- `univ3math.swap_math`
  - `compute_swap_step`: one step towards a target sqrt price. A non-negative
    amount is an exact input and a negative amount is an exact output.
  - `v3_swap`: the full swap loop. It returns a `SwapState`.
- `univ3math.tick_list`
  - `Tick`
  - `TickList`: a sequence of ticks sorted by index. It offers
    `validate_list`, `binary_search_by_tick`, `next_initialized_tick`,
    `get_tick` and `next_initialized_tick_within_one_word`, so it can serve as
    the tick data provider for `v3_swap`.
- `univ3math.full_math`: `mul_div`, `mul_div_rounding_up`, `mul_div_q96`
- `univ3math.max_liquidity_for_amounts`
  - `max_liquidity_for_amounts`
  - `max_liquidity_for_amount0_precise`, `max_liquidity_for_amount0_imprecise`
  - `max_liquidity_for_amount1`
- `univ3math.fee_growth`: `FeeGrowthOutside`, `get_fee_growth_inside`
- `univ3math.tokens_owed`: `get_tokens_owed`
- `univ3math.nearest_usable_tick`: `nearest_usable_tick`
- `univ3math.encode_sqrt_ratio_x96`: `encode_sqrt_ratio_x96`
- `univ3math.liquidity_math`: `add_delta`
- `univ3math.bit_math`: `most_significant_bit`, `least_significant_bit`
- `univ3math.constants`
  - `Q96`, `Q128`, `Q192`, `U160_MAX`, `U256_MAX`
  - `MethodParameters`: holds calldata and value.
- `univ3math.errors`: the package's exceptions, all derived from `UniswapMathError`.

## Example

```python
from univ3math.encode_sqrt_ratio_x96 import encode_sqrt_ratio_x96
from univ3math.nearest_usable_tick import nearest_usable_tick
from univ3math.swap_math import v3_swap
from univ3math.tick_list import Tick, TickList
from univ3math.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio

price = encode_sqrt_ratio_x96(100, 1)      # sqrt(100) as Q64.96
tick = get_tick_at_sqrt_ratio(price)
assert get_sqrt_ratio_at_tick(tick) <= price

assert nearest_usable_tick(5, 10) == 10

ticks = TickList([
    Tick(index=-887220, liquidity_gross=10**18, liquidity_net=10**18),
    Tick(index=887220, liquidity_gross=10**18, liquidity_net=-10**18),
])
ticks.validate_list(60)
state = v3_swap(3000, encode_sqrt_ratio_x96(1, 1), 0, 10**18, 60,
                ticks, True, 10**15)
print(state.amount_calculated, state.tick_current)
```

## Errors

The numeric routines raise exceptions from `univ3math.errors`. Some examples:

- `get_sqrt_ratio_at_tick` raises `InvalidTickError` for a tick beyond ±887272.
- `get_tick_at_sqrt_ratio` raises `InvalidSqrtPriceError` for a sqrt price
  outside `[MIN_SQRT_RATIO, MAX_SQRT_RATIO)`.
- `mul_div` raises `MulDivOverflowError` when the result does not fit in 256 bits.
- `TickList` searches raise `BelowSmallestError`, `AtOrAboveLargestError` or
  `NotContainedError`.

Some checks raise `ValueError` with a short code instead:

- `TickList.validate_list`
- `nearest_usable_tick`: `TICK_SPACING`, `TICK_BOUND`
- `v3_swap`: `RATIO_MIN`, `RATIO_MAX`, `RATIO_CURRENT`

## What it does not do

This package is math only. It does not:

- read pool state or tick data from a chain;
- model tokens, prices or positions;
- compute pool addresses;
- encode transaction calldata.

To simulate a swap, you supply the pool's sqrt price, tick, liquidity and initialized ticks yourself.

## Tests

```
pip install -e .[test]
pytest
```