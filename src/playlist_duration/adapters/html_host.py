"""
Playlist host backed by a saved playlist page.

Parses the page with BeautifulSoup and answers the core's snapshot reads with
the same selectors the live page uses. Replacing the document through
:meth:`HtmlSnapshotHost.update` or :meth:`HtmlSnapshotHost.navigate` fires the
matching change listeners, which lets a snapshot stand in for a live view.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from playlist_duration.infra.logging import get_logger

_log = get_logger(__name__)


@dataclass(frozen=True)
class PageSelectors:
    """CSS selectors for the playlist page (new and old layouts)."""

    video_element: str = "ytd-playlist-video-renderer"
    video_elements_container: str = "ytd-playlist-video-list-renderer #contents"
    timestamp_container: str = "ytd-thumbnail-overlay-time-status-renderer"
    video_title: str = "a#video-title"
    stats_main: str = ".metadata-stats yt-formatted-string"
    stats_fallback: str = "#stats yt-formatted-string"
    # Anchors telling the new header layout apart from the old sidebar one
    design_anchor_new: str = "ytd-playlist-header-renderer"
    design_anchor_old: str = "ytd-playlist-sidebar-renderer"


class HtmlSnapshotHost:
    """``PlaylistHost`` over an HTML document held in memory."""

    def __init__(self, html: str, selectors: PageSelectors | None = None) -> None:
        self.selectors = selectors or PageSelectors()
        self._soup = BeautifulSoup(html, "html.parser")
        self._mutation_listeners: list[Callable[[], None]] = []
        self._navigation_listeners: list[Callable[[], None]] = []

    @classmethod
    def from_file(cls, path: str | Path, selectors: PageSelectors | None = None) -> HtmlSnapshotHost:
        return cls(Path(path).read_text(encoding="utf-8"), selectors)

    # Snapshot reads ---------------------------------------------------------
    def read_rendered_items(self) -> list[Tag]:
        container = self._soup.select_one(self.selectors.video_elements_container)
        if container is None:
            return []
        return list(container.find_all(self.selectors.video_element))

    def read_duration_text(self, item: Tag) -> str | None:
        indicator = item.select_one(self.selectors.timestamp_container)
        if indicator is None:
            return None
        return indicator.get_text(strip=True)

    def read_availability_label(self, item: Tag) -> str | None:
        title = item.select_one(self.selectors.video_title)
        if title is None:
            return None
        value = title.get("title")
        return value if isinstance(value, str) else None

    def read_list_size_statistic(self) -> str | None:
        selector = self.selectors.stats_main if self.is_new_design() else self.selectors.stats_fallback
        stat = self._soup.select_one(selector)
        if stat is None:
            return None
        return stat.get_text(" ", strip=True)

    def is_new_design(self) -> bool:
        new_anchor = self._soup.select_one(self.selectors.design_anchor_new)
        if new_anchor is None:
            return False
        old_anchor = self._soup.select_one(self.selectors.design_anchor_old)
        return old_anchor is None or old_anchor.has_attr("hidden")

    # Change signals ---------------------------------------------------------
    def on_list_mutated(self, callback: Callable[[], None]) -> None:
        self._mutation_listeners.append(callback)

    def on_navigation_finished(self, callback: Callable[[], None]) -> None:
        self._navigation_listeners.append(callback)

    def update(self, html: str) -> None:
        """Re-render the same list (items appended or removed)."""
        self._soup = BeautifulSoup(html, "html.parser")
        _log.debug("snapshot_updated", listeners=len(self._mutation_listeners))
        for callback in list(self._mutation_listeners):
            callback()

    def navigate(self, html: str) -> None:
        """Replace the page with a different list."""
        self._soup = BeautifulSoup(html, "html.parser")
        _log.debug("snapshot_navigated", listeners=len(self._navigation_listeners))
        for callback in list(self._navigation_listeners):
            callback()
