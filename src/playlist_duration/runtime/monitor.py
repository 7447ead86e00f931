"""Change monitor: turns host change signals into poller re-arms."""

from __future__ import annotations

from playlist_duration.domain.contracts import PlaylistHost
from playlist_duration.infra.logging import get_logger

from .context import ViewContext
from .poller import ReadinessPoller


class ChangeMonitor:
    """Re-arms the poller on list mutation or navigation.

    Subscriptions are attached once per :class:`ViewContext`; further
    :meth:`attach` calls are no-ops. Rapid-fire signals each re-arm, and the
    poller keeps only the latest generation.
    """

    def __init__(self, context: ViewContext, host: PlaylistHost, poller: ReadinessPoller) -> None:
        self._context = context
        self._host = host
        self._poller = poller
        self._log = get_logger(__name__, context_id=context.context_id)

    def attach(self) -> bool:
        """Subscribe to host signals. Returns ``False`` when already attached."""
        if not self._context.mark_wired():
            return False
        self._host.on_list_mutated(self._on_list_mutated)
        self._host.on_navigation_finished(self._on_navigation_finished)
        self._log.debug("monitor_attached")
        return True

    def _on_list_mutated(self) -> None:
        self._log.debug("list_mutated")
        self._poller.arm()

    def _on_navigation_finished(self) -> None:
        self._log.debug("navigation_finished")
        self._poller.arm()
