"""
View models for the playlist summary panel.

These mirror what the summary widget shows; styling and placement belong to
whatever renders them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from playlist_duration.domain.duration import format_duration
from playlist_duration.domain.types import AggregationResult

PLACEHOLDER_TEXT = "Calculating..."
SCROLL_HINT_TEXT = "Scroll down to count more videos"
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class SummaryRow:
    label: str
    value: str


@dataclass(frozen=True)
class SummaryView:
    """Rows of the summary panel plus the optional scroll hint."""

    rows: tuple[SummaryRow, ...]
    scroll_hint: str | None = None

    @classmethod
    def from_result(cls, result: AggregationResult, scroll_hint_threshold: int = 100) -> SummaryView:
        uncounted = result.uncounted_items
        rows = (
            SummaryRow("Total duration:", result.formatted_duration),
            SummaryRow("Videos counted:", str(result.counted_items)),
            SummaryRow("Videos not counted:", NOT_AVAILABLE if uncounted is None else str(uncounted)),
        )
        hint = SCROLL_HINT_TEXT if result.counted_items >= scroll_hint_threshold else None
        return cls(rows=rows, scroll_hint=hint)

    def as_dict(self) -> dict[str, object]:
        return {
            "rows": [{"label": row.label, "value": row.value} for row in self.rows],
            "scroll_hint": self.scroll_hint,
        }

    def lines(self) -> list[str]:
        out = [f"{row.label} {row.value}" for row in self.rows]
        if self.scroll_hint:
            out.append(self.scroll_hint)
        return out


@dataclass(frozen=True)
class RangeSummary:
    """Outcome of a custom range query as shown under the summary."""

    ok: bool
    row: SummaryRow
    seconds: int | None = field(default=None)

    @classmethod
    def success(cls, seconds: int) -> RangeSummary:
        return cls(ok=True, row=SummaryRow("Custom duration:", format_duration(seconds)), seconds=seconds)

    @classmethod
    def failure(cls, message: str) -> RangeSummary:
        return cls(ok=False, row=SummaryRow("Error:", message))

    @classmethod
    def empty(cls) -> RangeSummary:
        return cls(ok=True, row=SummaryRow("Custom duration:", NOT_AVAILABLE))

    def as_dict(self) -> dict[str, object]:
        return {"ok": self.ok, "label": self.row.label, "value": self.row.value, "seconds": self.seconds}
