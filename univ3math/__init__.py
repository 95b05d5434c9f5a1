"""Integer math for concentrated-liquidity pools: ticks, sqrt prices, swaps and liquidity."""

__version__ = "0.1.0"