from __future__ import annotations

from playlist_duration.domain.types import PollState, WiringState
from playlist_duration.runtime.aggregation import AggregationEngine
from playlist_duration.runtime.context import ViewContext
from playlist_duration.runtime.inspector import ItemInspector
from playlist_duration.runtime.monitor import ChangeMonitor
from playlist_duration.runtime.poller import ReadinessPoller
from tests.util.fake_host import FakePlaylistHost, video


def _wire(host: FakePlaylistHost, presenter, scheduler, settings):
    context = ViewContext(settings=settings)
    inspector = ItemInspector(host)
    poller = ReadinessPoller(context, inspector, AggregationEngine(host, inspector), presenter, scheduler)
    return context, poller, ChangeMonitor(context, host, poller)


def test_attach_is_idempotent_per_context(host, presenter, scheduler, test_settings) -> None:
    context, _, monitor = _wire(host, presenter, scheduler, test_settings)
    assert context.wiring is WiringState.UNWIRED

    assert monitor.attach() is True
    assert monitor.attach() is False
    assert context.is_wired
    assert len(host.mutation_listeners) == 1
    assert len(host.navigation_listeners) == 1


def test_second_monitor_on_same_context_does_not_double_subscribe(host, presenter, scheduler, test_settings) -> None:
    context, poller, monitor = _wire(host, presenter, scheduler, test_settings)
    monitor.attach()
    assert ChangeMonitor(context, host, poller).attach() is False
    assert len(host.mutation_listeners) == 1


def test_mutation_rearms_poller(host, presenter, scheduler, test_settings) -> None:
    _, poller, monitor = _wire(host, presenter, scheduler, test_settings)
    monitor.attach()

    host.render([video("1:00")])

    assert poller.status.state is PollState.POLLING
    assert presenter.events == ["computing"]
    scheduler.advance(1.0)
    assert presenter.results[-1].total_seconds == 60


def test_navigation_rearms_poller(host, presenter, scheduler, test_settings) -> None:
    _, poller, monitor = _wire(host, presenter, scheduler, test_settings)
    monitor.attach()

    host.navigate([video("0:10"), video("0:20")], statistic="2 videos")
    scheduler.advance(1.0)

    assert poller.status.state is PollState.STABLE
    assert presenter.results[-1].total_seconds == 30
    assert presenter.results[-1].total_videos_in_list == 2


def test_rapid_fire_signals_leave_one_pending_tick(host, presenter, scheduler, test_settings) -> None:
    _, poller, monitor = _wire(host, presenter, scheduler, test_settings)
    monitor.attach()

    for n in range(1, 6):
        host.render([video("0:01")] * n)

    assert scheduler.pending == 1
    assert poller.status.generation == 5
    scheduler.advance(1.0)
    assert len(presenter.results) == 1
    assert presenter.results[0].counted_items == 5
