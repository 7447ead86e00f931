"""
Custom exceptions for playlist-duration.

Per-item parse failures never raise; they are absorbed as absent durations.
Only the outcomes a caller must tell apart get an exception class here.
"""

from __future__ import annotations


class PlaylistDurationError(Exception):
    """Base exception for all playlist-duration errors."""

    pass


class ValidationError(PlaylistDurationError):
    """Raised when user-supplied input fails validation."""

    pass


class InvalidRangeError(ValidationError):
    """Raised when range query bounds are not a proper 1-based interval."""

    user_message = "Please enter proper numbers!"

    def __init__(self, start: object, end: object, reason: str) -> None:
        super().__init__(f"invalid range {start!r}..{end!r}: {reason}")
        self.start = start
        self.end = end
        self.reason = reason


class AggregationError(PlaylistDurationError):
    """Raised when an aggregation cannot produce a result."""

    pass


class EmptyListError(AggregationError):
    """Raised when aggregation is attempted over zero rendered items."""

    pass
