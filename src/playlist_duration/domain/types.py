"""
Shared types for playlist-duration.

Value objects passed between the runtime core and the presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .duration import format_duration


class PollState(str, Enum):
    """States of the readiness poller."""

    IDLE = "idle"
    POLLING = "polling"
    STABLE = "stable"
    TIMED_OUT = "timed_out"


class WiringState(str, Enum):
    """Whether a view context has its change subscriptions attached."""

    UNWIRED = "unwired"
    WIRED = "wired"


@dataclass(frozen=True)
class PollStatus:
    """Snapshot of a poller: its state, the attempt count and the generation."""

    state: PollState
    attempt: int = 0
    generation: int = 0

    @property
    def settled(self) -> bool:
        return self.state in (PollState.STABLE, PollState.TIMED_OUT)


@dataclass(frozen=True)
class AggregationResult:
    """Summary of the durations over one rendered list (or a slice of it)."""

    total_seconds: int
    counted_items: int
    total_videos_in_list: int | None = None

    def __post_init__(self) -> None:
        if self.total_seconds < 0:
            raise ValueError("total_seconds must be non-negative")
        if self.counted_items < 0:
            raise ValueError("counted_items must be non-negative")
        if self.total_videos_in_list is not None and self.counted_items > self.total_videos_in_list:
            raise ValueError("counted_items cannot exceed total_videos_in_list")

    @property
    def formatted_duration(self) -> str:
        return format_duration(self.total_seconds)

    @property
    def uncounted_items(self) -> int | None:
        """Items in the list without a counted duration; ``None`` if unknown."""
        if self.total_videos_in_list is None:
            return None
        return self.total_videos_in_list - self.counted_items
