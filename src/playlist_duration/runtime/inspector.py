"""Read-only classification of a rendered playlist snapshot.

Each item is one of: has a duration, known-unavailable (private, deleted,
restricted...), or ambiguous (indicator missing, usually still loading). The
inspector only counts; comparing the counts is the poller's job.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic

from playlist_duration.domain.contracts import ListItem, PlaylistHost
from playlist_duration.domain.duration import parse_duration

UNAVAILABLE_MARKERS: frozenset[str] = frozenset(
    {
        "[Private video]",
        "[Deleted video]",
        "[Unavailable]",
        "[Video unavailable]",
        "[Restricted video]",
        "[Age restricted]",
    }
)


class ItemInspector(Generic[ListItem]):
    """Pure reader over whatever items the host has rendered."""

    def __init__(self, host: PlaylistHost[ListItem]) -> None:
        self._host = host

    def snapshot(self) -> list[ListItem]:
        return list(self._host.read_rendered_items())

    def inspect(self, items: Sequence[ListItem]) -> list[int | None]:
        """Durations in list order; ``None`` where text is absent or unparsable."""
        return [parse_duration(self._host.read_duration_text(item)) for item in items]

    def is_unavailable(self, item: ListItem) -> bool:
        label = self._host.read_availability_label(item)
        return label is not None and label.strip() in UNAVAILABLE_MARKERS

    def count_unavailable(self, items: Sequence[ListItem]) -> int:
        return sum(1 for item in items if self.is_unavailable(item))

    def count_missing_duration_signal(self, items: Sequence[ListItem]) -> int:
        """Items whose duration indicator is absent or still empty."""
        missing = 0
        for item in items:
            text = self._host.read_duration_text(item)
            if text is None or not text.strip():
                missing += 1
        return missing

    def has_duration_indicator(self, items: Sequence[ListItem]) -> bool:
        return any(self._host.read_duration_text(item) is not None for item in items)
