"""Presenters that collect or print what the poller reports."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from playlist_duration.domain.types import AggregationResult

from .summary import PLACEHOLDER_TEXT, SummaryView


@dataclass
class RecordingPresenter:
    """Keeps every signal in order; the latest view is what a widget would show."""

    scroll_hint_threshold: int = 100
    events: list[str] = field(default_factory=list)
    results: list[AggregationResult] = field(default_factory=list)

    def on_computing(self) -> None:
        self.events.append("computing")

    def on_result(self, result: AggregationResult) -> None:
        self.events.append("result")
        self.results.append(result)

    @property
    def showing_placeholder(self) -> bool:
        return bool(self.events) and self.events[-1] == "computing"

    @property
    def latest_view(self) -> SummaryView | None:
        if not self.results or self.showing_placeholder:
            return None
        return SummaryView.from_result(self.results[-1], self.scroll_hint_threshold)


@dataclass
class EchoPresenter:
    """Writes the placeholder and the summary lines through ``echo``."""

    echo: Callable[[str], None]
    scroll_hint_threshold: int = 100
    quiet: bool = False
    last_result: AggregationResult | None = None

    def on_computing(self) -> None:
        if not self.quiet:
            self.echo(PLACEHOLDER_TEXT)

    def on_result(self, result: AggregationResult) -> None:
        self.last_result = result
        if self.quiet:
            return
        for line in SummaryView.from_result(result, self.scroll_hint_threshold).lines():
            self.echo(line)
