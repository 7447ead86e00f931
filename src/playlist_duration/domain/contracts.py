"""Protocols at the boundary between the core and its host/presentation layers.

The host owns the rendered list; the core only ever reads snapshots of it.
``ListItem`` is the host's own item handle type. The core never looks inside a
handle; it only passes it back to the host that produced it, within a single
render pass.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from .types import AggregationResult

ListItem = TypeVar("ListItem")
ChangeCallback = Callable[[], None]


@runtime_checkable
class PlaylistHost(Protocol[ListItem]):
    """What the core needs from the view that renders the playlist."""

    def read_rendered_items(self) -> Sequence[ListItem]:
        """Return the items rendered right now, in list order."""
        ...

    def read_duration_text(self, item: ListItem) -> str | None:
        """Return the duration indicator text, ``None`` if the indicator is absent."""
        ...

    def read_availability_label(self, item: ListItem) -> str | None:
        """Return the title/label used to spot unavailable items."""
        ...

    def read_list_size_statistic(self) -> str | None:
        """Return the displayed item-count text, ``None`` if not rendered."""
        ...

    def on_list_mutated(self, callback: ChangeCallback) -> None:
        ...

    def on_navigation_finished(self, callback: ChangeCallback) -> None:
        ...


@runtime_checkable
class SummaryPresenter(Protocol):
    """What the core hands results to."""

    def on_computing(self) -> None:
        """Show the neutral placeholder; no data yet."""
        ...

    def on_result(self, result: AggregationResult) -> None:
        """Show the summary for the full rendered list."""
        ...
