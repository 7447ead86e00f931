"""Clock-notation duration parsing and formatting.

Durations are whole seconds. Text is read the way a thumbnail overlay prints
it (``"1:02:03"``, ``"4:10"``, ``"45"``). Parsing is lenient: a component that
does not start with digits is skipped without advancing the positional
multiplier, so a corrupt separator costs that component and nothing else.
"""

from __future__ import annotations

import re

_LEADING_DIGITS = re.compile(r"\s*(\d+)")
_SECONDS_PER_UNIT = 60


def _leading_int(component: str) -> int | None:
    match = _LEADING_DIGITS.match(component)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Digit run past the interpreter's int conversion limit.
        return None


def parse_duration(text: str | None) -> int | None:
    """Return ``text`` as whole seconds, or ``None`` when nothing is numeric.

    Components are hours:minutes:seconds left to right. They are consumed from
    the right; each numeric component is multiplied by ``60 ** position`` where
    ``position`` counts the numeric components already consumed.
    """

    if not text or not text.strip():
        return None

    total = 0
    multiplier = 1
    consumed = False
    for component in reversed(text.split(":")):
        value = _leading_int(component)
        if value is None:
            continue
        total += value * multiplier
        multiplier *= _SECONDS_PER_UNIT
        consumed = True

    return total if consumed else None


def format_duration(total_seconds: int) -> str:
    """Format whole seconds as ``HH:MM:SS``; hours widen past two digits."""

    if isinstance(total_seconds, bool) or not isinstance(total_seconds, int):
        raise TypeError("total_seconds must be an integer")
    if total_seconds < 0:
        raise ValueError("total_seconds must be non-negative")

    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


__all__ = ["parse_duration", "format_duration"]
