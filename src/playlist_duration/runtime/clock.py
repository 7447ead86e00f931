"""Clock abstractions used by the tick scheduler.

The poller never reads wall time directly; it only asks a scheduler to call it
back later. Deterministic schedulers measure "later" against a clock that
advances only when told to.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Protocol implemented by clock providers."""

    def now(self) -> float:
        """Return the current time in seconds."""


class SteppedClock:
    """Deterministic clock used for tests.

    Time advances only when :meth:`advance` or :meth:`advance_to` is called.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._current = start

    def now(self) -> float:
        return self._current

    def advance(self, seconds: float) -> float:
        """Advance the clock by ``seconds`` (must be non-negative)."""
        if seconds < 0.0:
            raise ValueError("seconds must be non-negative")
        self._current += seconds
        return self._current

    def advance_to(self, target: float) -> float:
        """Move the clock forward to ``target``; never backwards."""
        if target < self._current:
            raise ValueError("clock cannot move backwards")
        self._current = target
        return self._current
