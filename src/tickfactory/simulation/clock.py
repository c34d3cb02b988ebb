"""Logical clock - the single authority on simulated time."""

from __future__ import annotations

from typing import Callable

from .errors import TickOverflowError

# Ticks are unsigned 64-bit in spirit; anything beyond is an exploit attempt.
TICK_MAX = 2**64 - 1


class Clock:
    """
    Monotonic tick counter advanced only through explicit calls.

    Functions that take a clock and may call advance_* take time. Functions
    that only read clock.tick (machine and territory accessors) never advance
    it, they merely bring their own state up to date.
    """

    def __init__(self, log: bool = True):
        """
        Initialize the clock at tick 0.

        Args:
            log: Print the current tick after every advance
        """
        self._tick = 0
        self._log = log

    @property
    def tick(self) -> int:
        """The current tick number."""
        return self._tick

    def cur(self) -> int:
        """Return the current tick number."""
        return self._tick

    def log(self, enabled: bool) -> None:
        """Turn the per-advance notification on or off. Has no effect on results."""
        self._log = enabled

    def advance(self) -> None:
        """Advance by one tick."""
        self.advance_by(1)

    def advance_by(self, ticks: int) -> None:
        """
        Advance by the given number of ticks.

        Raises:
            TypeError: If ticks is not an integer
            ValueError: If ticks is negative
            TickOverflowError: If the tick counter would pass TICK_MAX
        """
        if not isinstance(ticks, int):
            raise TypeError(f"Ticks must be a whole number, got {ticks!r}")
        if ticks < 0:
            raise ValueError(f"Cannot advance by a negative number of ticks: {ticks}")
        new_tick = self._tick + ticks
        if new_tick > TICK_MAX:
            raise TickOverflowError(
                f"Tick overflow advancing {self._tick} by {ticks}. Well done, you've found an exploit!"
            )
        self._tick = new_tick
        if self._log:
            print(self)

    def advance_to(self, target_tick: int) -> None:
        """Advance until target_tick is reached. Does nothing if it is not in the future."""
        if target_tick > self._tick:
            self.advance_by(target_tick - self._tick)

    def advance_until(self, predicate: Callable[[Clock], bool], max_ticks: int) -> bool:
        """
        Advance one tick at a time until predicate(clock) holds.

        The predicate is checked before the first step and after every step.
        Pass TICK_MAX as max_ticks to wait without a practical budget.

        Returns:
            True if the predicate held within max_ticks advances, False otherwise
        """
        start_tick = self._tick
        while not predicate(self):
            if self._tick - start_tick >= max_ticks:
                return False
            self.advance()
        return True

    def __int__(self) -> int:
        return self._tick

    def __index__(self) -> int:
        return self._tick

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            return self._tick == other
        return NotImplemented

    def __lt__(self, other: int) -> bool:
        return self._tick < other

    def __le__(self, other: int) -> bool:
        return self._tick <= other

    def __gt__(self, other: int) -> bool:
        return self._tick > other

    def __ge__(self, other: int) -> bool:
        return self._tick >= other

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"Clock(tick={self._tick})"

    def __str__(self) -> str:
        return f"Tick {self._tick}"
