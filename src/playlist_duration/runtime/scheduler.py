"""Cancellable one-shot callbacks for tick-driven components.

Key guarantees:

- A cancelled call never fires.
- ``SteppedScheduler`` fires due calls in due-time order (ties in scheduling
  order) and never sleeps; tests advance it explicitly.
- ``AsyncioScheduler`` runs callbacks on the event loop thread, so everything
  stays single-threaded.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .clock import SteppedClock

TickCallback = Callable[[], None]


@runtime_checkable
class Cancellable(Protocol):
    def cancel(self) -> None:
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Scheduler contract used by the readiness poller."""

    def call_later(self, delay: float, callback: TickCallback) -> Cancellable:
        """Run ``callback`` once after ``delay`` seconds unless cancelled."""


@dataclass(order=True)
class ScheduledCall:
    due: float
    seq: int
    callback: TickCallback = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class SteppedScheduler:
    """Deterministic scheduler driven by :meth:`advance`."""

    def __init__(self, clock: SteppedClock | None = None) -> None:
        self.clock = clock or SteppedClock()
        self._queue: list[ScheduledCall] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: TickCallback) -> ScheduledCall:
        if delay < 0.0:
            raise ValueError("delay must be non-negative")
        call = ScheduledCall(self.clock.now() + delay, next(self._seq), callback)
        heapq.heappush(self._queue, call)
        return call

    @property
    def pending(self) -> int:
        """Number of scheduled calls that have not fired or been cancelled."""
        return sum(1 for call in self._queue if not call.cancelled)

    def advance(self, seconds: float) -> int:
        """Advance time by ``seconds`` and fire every call due in that window.

        Calls scheduled by a firing callback are also fired when they fall due
        inside the window. Returns the number of callbacks run.
        """

        if seconds < 0.0:
            raise ValueError("seconds must be non-negative")
        target = self.clock.now() + seconds
        fired = 0
        while self._queue and self._queue[0].due <= target:
            call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self.clock.advance_to(call.due)
            call.callback()
            fired += 1
        self.clock.advance_to(target)
        return fired


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop's ``call_later``."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: TickCallback) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
