"""Aggregation of per-item durations into playlist totals.

Absent durations are left out of both the sum and the counted items: an item
we could not read is not a zero-length item.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Generic

from playlist_duration.domain.contracts import ListItem, PlaylistHost
from playlist_duration.domain.types import AggregationResult
from playlist_duration.infra.exceptions import EmptyListError, InvalidRangeError
from playlist_duration.infra.logging import get_logger

from .inspector import ItemInspector

RANGE_UPPER_BOUND = 1_000_000_000

_NON_DIGITS = re.compile(r"\D")
_DIGITS = re.compile(r"[0-9]+")
_MAX_BOUND_DIGITS = len(str(RANGE_UPPER_BOUND))

_log = get_logger(__name__)


def sum_durations(durations: Iterable[int | None]) -> tuple[int, int]:
    """Return ``(total_seconds, counted_items)`` over the present durations."""
    total = 0
    counted = 0
    for duration in durations:
        if duration is None:
            continue
        total += duration
        counted += 1
    return total, counted


def _coerce_bound(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        # Exactly an integer literal: no sign, no padding, no decimals.
        if len(stripped) > _MAX_BOUND_DIGITS or not _DIGITS.fullmatch(stripped):
            return None
        if str(int(stripped)) == stripped:
            return int(stripped)
    return None


def validate_range(start: object, end: object) -> tuple[int, int]:
    """Validate 1-based inclusive bounds, returning them as ints.

    Bounds may be ints or integer text (as typed into a form). Raises
    :class:`InvalidRangeError` otherwise.
    """

    start_int = _coerce_bound(start)
    end_int = _coerce_bound(end)
    if start_int is None or end_int is None:
        raise InvalidRangeError(start, end, "bounds must be integers")
    for bound in (start_int, end_int):
        if not 1 <= bound <= RANGE_UPPER_BOUND:
            raise InvalidRangeError(start, end, f"bounds must be within 1..{RANGE_UPPER_BOUND}")
    if start_int > end_int:
        raise InvalidRangeError(start, end, "start must not exceed end")
    return start_int, end_int


class AggregationEngine(Generic[ListItem]):
    """Sum durations over the rendered list, or over a slice of it."""

    def __init__(self, host: PlaylistHost[ListItem], inspector: ItemInspector[ListItem] | None = None) -> None:
        self._host = host
        self._inspector = inspector or ItemInspector(host)

    def _aggregate(self, items: Sequence[ListItem]) -> tuple[int, int]:
        if not items:
            raise EmptyListError("no rendered items to aggregate")
        return sum_durations(self._inspector.inspect(items))

    def aggregate_all(self) -> AggregationResult:
        total, counted = self._aggregate(self._inspector.snapshot())
        listed = self.total_videos_in_list()
        if listed is not None and counted > listed:
            # The statistic lags behind the rendered list; treat it as unknown.
            _log.warning("list_statistic_inconsistent", counted_items=counted, listed=listed)
            listed = None
        return AggregationResult(total_seconds=total, counted_items=counted, total_videos_in_list=listed)

    def aggregate_range(self, start: object, end: object) -> int:
        """Total seconds over items ``start..end`` (1-based, inclusive)."""
        start_int, end_int = validate_range(start, end)
        items = self._inspector.snapshot()[start_int - 1 : end_int]
        total, _ = self._aggregate(items)
        return total

    def total_videos_in_list(self) -> int | None:
        raw = self._host.read_list_size_statistic()
        if raw is None:
            return None
        digits = _NON_DIGITS.sub("", raw)
        if not digits:
            return None
        try:
            return int(digits)
        except ValueError:
            _log.warning("list_statistic_unreadable", digits=len(digits))
            return None
