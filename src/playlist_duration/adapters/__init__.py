"""Host adapters implementing the ``PlaylistHost`` protocol."""

from .html_host import HtmlSnapshotHost, PageSelectors

__all__ = ["HtmlSnapshotHost", "PageSelectors"]
