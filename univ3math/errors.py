"""Exceptions raised by the pool math routines."""


class UniswapMathError(Exception):
    """Base class for every error raised by this package."""


class MulDivOverflowError(UniswapMathError):
    """The result of a full-precision multiply-divide does not fit in 256 bits."""

    def __init__(self, message="MulDivOverflow"):
        super().__init__(message)


class AddDeltaOverflowError(UniswapMathError):
    """Adding a signed liquidity delta overflowed or underflowed."""

    def __init__(self, message="AddDeltaOverflow"):
        super().__init__(message)


class PriceOverflowError(UniswapMathError):
    """The next sqrt price cannot be computed without overflow."""

    def __init__(self, message="PriceOverflow"):
        super().__init__(message)


class SafeCastToU160OverflowError(UniswapMathError):
    """A value meant to be a 160-bit sqrt price does not fit in 160 bits."""

    def __init__(self, message="SafeCastToU160Overflow"):
        super().__init__(message)


class InsufficientLiquidityError(UniswapMathError):
    """The pool does not hold enough liquidity for the requested amount."""

    def __init__(self, message="InsufficientLiquidity"):
        super().__init__(message)


class InvalidPriceOrLiquidityError(UniswapMathError):
    """The sqrt price or the liquidity is zero."""

    def __init__(self, message="InvalidPriceOrLiquidity"):
        super().__init__(message)


class InvalidPriceError(UniswapMathError):
    """A sqrt price of zero was given."""

    def __init__(self, message="InvalidPrice"):
        super().__init__(message)


class InvalidTickError(UniswapMathError):
    """A tick lies outside the supported range."""

    def __init__(self, tick):
        self.tick = tick
        super().__init__(f"InvalidTick({tick})")


class InvalidSqrtPriceError(UniswapMathError):
    """A sqrt price lies outside the supported range."""

    def __init__(self, sqrt_price):
        self.sqrt_price = sqrt_price
        super().__init__(f"InvalidSqrtPrice({sqrt_price})")


class TickListError(UniswapMathError):
    """Base class for errors raised while searching a sorted tick list."""


class BelowSmallestError(TickListError):
    """The tick is below the smallest tick in the list."""

    def __init__(self, message="BelowSmallest"):
        super().__init__(message)


class AtOrAboveLargestError(TickListError):
    """The tick is at or above the largest tick in the list."""

    def __init__(self, message="AtOrAboveLargest"):
        super().__init__(message)


class NotContainedError(TickListError):
    """The tick is not contained in the list."""

    def __init__(self, message="NotContained"):
        super().__init__(message)