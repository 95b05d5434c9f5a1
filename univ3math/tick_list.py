"""Sorted lists of initialized ticks and searches over them."""

from bisect import bisect_right
from dataclasses import dataclass

from .errors import AtOrAboveLargestError, BelowSmallestError, NotContainedError


@dataclass(frozen=True)
class Tick:
    """An initialized tick with its gross and net liquidity."""

    index: int
    liquidity_gross: int = 0
    liquidity_net: int = 0


class TickList:
    """An immutable sequence of ticks, expected to be sorted by index."""

    def __init__(self, ticks):
        self._ticks = tuple(ticks)
        self._indices = [tick.index for tick in self._ticks]

    def __len__(self):
        return len(self._ticks)

    def __iter__(self):
        return iter(self._ticks)

    def __getitem__(self, position):
        return self._ticks[position]

    def __repr__(self):
        return f"TickList({list(self._ticks)!r})"

    def validate_list(self, tick_spacing):
        """Check the list is usable for ``tick_spacing``; raise ``ValueError`` if not."""
        if tick_spacing <= 0:
            raise ValueError("TICK_SPACING_NONZERO")
        if not self._ticks:
            raise ValueError("LENGTH")
        if any(tick.index % tick_spacing != 0 for tick in self._ticks):
            raise ValueError("TICK_SPACING")
        if any(later < earlier for earlier, later in zip(self._indices, self._indices[1:])):
            raise ValueError("SORTED")
        if sum(tick.liquidity_net for tick in self._ticks) != 0:
            raise ValueError("ZERO_NET")

    def is_below_smallest(self, tick):
        """Return whether ``tick`` lies below the first tick of the list."""
        return tick < self._ticks[0].index

    def is_at_or_above_largest(self, tick):
        """Return whether ``tick`` lies at or above the last tick of the list."""
        return tick >= self._ticks[-1].index

    def binary_search_by_tick(self, tick):
        """Return the position of the largest tick whose index is at most ``tick``.

        Raises ``BelowSmallestError`` if ``tick`` is below the smallest tick.
        """
        if self.is_below_smallest(tick):
            raise BelowSmallestError()
        return bisect_right(self._indices, tick) - 1

    def next_initialized_tick(self, tick, lte):
        """Return the nearest tick at or below ``tick`` (``lte``) or strictly above it."""
        if lte:
            if self.is_below_smallest(tick):
                raise BelowSmallestError()
            if self.is_at_or_above_largest(tick):
                return self._ticks[-1]
            return self._ticks[self.binary_search_by_tick(tick)]
        if self.is_at_or_above_largest(tick):
            raise AtOrAboveLargestError()
        if self.is_below_smallest(tick):
            return self._ticks[0]
        return self._ticks[self.binary_search_by_tick(tick) + 1]

    def get_tick(self, index):
        """Return the tick with exactly this index.

        Raises ``NotContainedError`` if the list holds no such tick.
        """
        tick = self._ticks[self.binary_search_by_tick(index)]
        if tick.index != index:
            raise NotContainedError()
        return tick

    def next_initialized_tick_within_one_word(self, tick, lte, tick_spacing):
        """Return ``(next_tick, initialized)`` limited to one 256-tick bitmap word."""
        compressed = tick // tick_spacing
        if lte:
            word_pos = compressed >> 8
            minimum = (word_pos << 8) * tick_spacing
            if self.is_below_smallest(tick):
                return minimum, False
            index = self.next_initialized_tick(tick, lte).index
            next_tick = max(minimum, index)
            return next_tick, next_tick == index
        word_pos = (compressed + 1) >> 8
        maximum = (((word_pos + 1) << 8) - 1) * tick_spacing
        if self.is_at_or_above_largest(tick):
            return maximum, False
        index = self.next_initialized_tick(tick, lte).index
        next_tick = min(maximum, index)
        return next_tick, next_tick == index