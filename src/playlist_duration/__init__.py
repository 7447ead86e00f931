"""Readiness-polled duration summaries for lazily rendered playlist views."""

from .domain.duration import format_duration, parse_duration
from .domain.types import AggregationResult, PollState, PollStatus

__version__ = "0.3.0"

__all__ = [
    "AggregationResult",
    "PollState",
    "PollStatus",
    "format_duration",
    "parse_duration",
]
