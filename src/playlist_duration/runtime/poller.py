"""Readiness poller for a lazily rendered playlist.

A freshly (re)rendered list is read on a fixed tick until it is internally
consistent, then summarized once. States::

    IDLE -> POLLING(n) -> STABLE
                       -> TIMED_OUT

Stability: at least one duration indicator is rendered and every item without
a duration signal is a known-unavailable item. A list that keeps growing is
handled by re-arming on every mutation, not by waiting for completeness.

Each :meth:`ReadinessPoller.arm` opens a new generation. The previous pending
tick is cancelled before the new one is scheduled, and a tick that still
arrives for an old generation is dropped, so no result is ever computed for a
superseded render.

A tick that raises is logged and counted as an attempt that did not settle,
so the attempt bound still ends the sequence in TIMED_OUT.
"""

from __future__ import annotations

from playlist_duration.domain.contracts import SummaryPresenter
from playlist_duration.domain.types import PollState, PollStatus
from playlist_duration.infra.exceptions import EmptyListError
from playlist_duration.infra.logging import get_logger

from .aggregation import AggregationEngine
from .context import ViewContext
from .inspector import ItemInspector
from .scheduler import Cancellable, Scheduler


class ReadinessPoller:
    """Bounded-retry poller; one active sequence per view context."""

    def __init__(
        self,
        context: ViewContext,
        inspector: ItemInspector,
        engine: AggregationEngine,
        presenter: SummaryPresenter,
        scheduler: Scheduler,
    ) -> None:
        self._context = context
        self._inspector = inspector
        self._engine = engine
        self._presenter = presenter
        self._scheduler = scheduler
        self._state = PollState.IDLE
        self._attempt = 0
        self._generation = 0
        self._pending: Cancellable | None = None
        self._log = get_logger(__name__, context_id=context.context_id)

    @property
    def interval(self) -> float:
        return self._context.settings.poll_interval_seconds

    @property
    def max_attempts(self) -> int:
        return self._context.settings.max_poll_attempts

    @property
    def status(self) -> PollStatus:
        return PollStatus(state=self._state, attempt=self._attempt, generation=self._generation)

    def arm(self) -> int:
        """Start a new poll generation, superseding any in flight.

        Returns the new generation number.
        """

        superseded = self._state is PollState.POLLING
        self._cancel_pending()
        self._generation += 1
        self._state = PollState.POLLING
        self._attempt = 0
        self._log.debug("poll_armed", generation=self._generation, superseded=superseded)

        self._presenter.on_computing()
        self._schedule_tick()
        return self._generation

    def cancel(self) -> None:
        """Stop polling without a result; the poller returns to IDLE."""
        self._cancel_pending()
        if self._state is PollState.POLLING:
            self._generation += 1
            self._state = PollState.IDLE
            self._log.debug("poll_cancelled", generation=self._generation)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _schedule_tick(self) -> None:
        generation = self._generation
        self._pending = self._scheduler.call_later(self.interval, lambda: self._tick(generation))

    def _tick(self, generation: int) -> None:
        if generation != self._generation or self._state is not PollState.POLLING:
            self._log.debug("poll_tick_stale", generation=generation, current=self._generation)
            return

        self._pending = None
        self._attempt += 1

        try:
            settled = self._check(generation)
        except Exception:
            self._log.exception("poll_tick_failed", generation=generation, attempt=self._attempt)
            if generation != self._generation:
                return
            # A failed tick counts as an attempt that did not settle.
            self._state = PollState.POLLING
            settled = False

        if settled:
            return

        if self._attempt >= self.max_attempts:
            self._state = PollState.TIMED_OUT
            self._log.warning("poll_timed_out", generation=generation, attempt=self._attempt)
            return

        self._schedule_tick()

    def _check(self, generation: int) -> bool:
        items = self._inspector.snapshot()
        missing = self._inspector.count_missing_duration_signal(items)
        unavailable = self._inspector.count_unavailable(items)
        has_indicator = self._inspector.has_duration_indicator(items)

        if not (has_indicator and missing == unavailable):
            self._log.debug(
                "poll_not_ready",
                generation=generation,
                attempt=self._attempt,
                items=len(items),
                missing=missing,
                unavailable=unavailable,
            )
            return False

        self._state = PollState.STABLE
        self._log.info(
            "poll_stable",
            generation=generation,
            attempt=self._attempt,
            items=len(items),
            unavailable=unavailable,
        )
        self._summarize(generation)
        return True

    def _summarize(self, generation: int) -> None:
        try:
            result = self._engine.aggregate_all()
        except EmptyListError:
            # List emptied between the readiness read and the aggregation read.
            self._log.info("aggregation_empty", generation=generation)
            return
        self._log.info(
            "aggregation_complete",
            generation=generation,
            total_seconds=result.total_seconds,
            counted_items=result.counted_items,
            total_videos_in_list=result.total_videos_in_list,
        )
        self._presenter.on_result(result)
