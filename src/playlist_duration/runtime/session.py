"""Session facade wiring one playlist view end to end."""

from __future__ import annotations

from dataclasses import dataclass

from playlist_duration.domain.contracts import PlaylistHost, SummaryPresenter
from playlist_duration.domain.types import PollStatus
from playlist_duration.infra.exceptions import EmptyListError, InvalidRangeError
from playlist_duration.infra.logging import get_logger
from playlist_duration.infra.settings import Settings
from playlist_duration.presentation.summary import RangeSummary

from .aggregation import AggregationEngine
from .context import ViewContext
from .inspector import ItemInspector
from .monitor import ChangeMonitor
from .poller import ReadinessPoller
from .scheduler import Scheduler


@dataclass
class PlaylistSession:
    """Inspector, engine, poller and monitor for a single view context."""

    context: ViewContext
    host: PlaylistHost
    inspector: ItemInspector
    engine: AggregationEngine
    poller: ReadinessPoller
    monitor: ChangeMonitor

    @classmethod
    def create(
        cls,
        host: PlaylistHost,
        presenter: SummaryPresenter,
        scheduler: Scheduler,
        settings: Settings | None = None,
        context_id: str | None = None,
    ) -> PlaylistSession:
        context = ViewContext()
        if settings is not None:
            context.settings = settings
        if context_id is not None:
            context.context_id = context_id

        inspector = ItemInspector(host)
        engine = AggregationEngine(host, inspector)
        poller = ReadinessPoller(context, inspector, engine, presenter, scheduler)
        monitor = ChangeMonitor(context, host, poller)
        return cls(
            context=context,
            host=host,
            inspector=inspector,
            engine=engine,
            poller=poller,
            monitor=monitor,
        )

    @property
    def status(self) -> PollStatus:
        return self.poller.status

    def start(self) -> int:
        """Attach change subscriptions (once) and poll the current render."""
        self.monitor.attach()
        return self.poller.arm()

    def range_duration(self, start: object, end: object) -> int:
        """Seconds over items ``start..end``; raises :class:`InvalidRangeError`."""
        return self.engine.aggregate_range(start, end)

    def range_summary(self, start: object, end: object) -> RangeSummary:
        """Range query outcome ready for display; never raises on bad input."""
        log = get_logger(__name__, context_id=self.context.context_id)
        try:
            seconds = self.range_duration(start, end)
        except InvalidRangeError as exc:
            log.info("range_rejected", start=str(start), end=str(end), reason=exc.reason)
            return RangeSummary.failure(exc.user_message)
        except EmptyListError:
            log.info("range_empty", start=str(start), end=str(end))
            return RangeSummary.empty()
        return RangeSummary.success(seconds)
