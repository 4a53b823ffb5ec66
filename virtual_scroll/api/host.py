"""Host collaborator contracts consumed by the scroller."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from virtual_scroll.api.geometry import GridMetrics, Offset, Padding, Size
from virtual_scroll.api.types import PanelSide


class ViewHandle(Protocol):
    """Opaque host view reference; the scroller only relies on identity."""


ViewFactory = Callable[[int], ViewHandle]


class CellObserver(Protocol):
    """Visibility lifecycle notifications delivered for each cell."""

    def on_constructed(self, index: int, handle: ViewHandle) -> None:
        """Called once after the factory created a view for `index`."""

    def on_become_visible(self, index: int, handle: ViewHandle, side: PanelSide) -> None:
        """Called whenever a cell enters the window, fresh or recycled."""

    def on_become_invisible(self, index: int, handle: ViewHandle, side: PanelSide) -> None:
        """Called whenever a cell leaves the window."""


class ViewportGeometry(Protocol):
    """Read-only geometry of the viewport and grid."""

    def viewport_size(self) -> Size:
        """Return visible viewport size."""

    def scroll_offset(self) -> Offset:
        """Return current scroll distance from the content's top-left corner."""

    def grid_metrics(self) -> GridMetrics:
        """Return cell size, spacing and base padding."""

    def container_width(self) -> float:
        """Return content container width used when matching cells per row."""


class ContentSurface(Protocol):
    """Write side of the host layout container."""

    def set_content_size(self, size: Size) -> None:
        """Resize the scrollable content to the full collection extent."""

    def set_padding(self, padding: Padding) -> None:
        """Apply effective padding to the layout container."""

    def set_content_x(self, x: float, *, horizontal_scroll: bool) -> None:
        """Position content horizontally and toggle horizontal scrolling."""

    def set_normalized_position(self, *, horizontal: float | None, vertical: float | None) -> None:
        """Move the viewport; `None` leaves an axis untouched, vertical 1.0 is the top."""

    def place_view(self, handle: ViewHandle, sibling_index: int) -> None:
        """Attach a view under the content container at a sibling position."""

    def park_view(self, handle: ViewHandle) -> None:
        """Detach a view into hidden storage while it waits in the recycle cache."""

    def dispose_view(self, handle: ViewHandle) -> None:
        """Destroy a view permanently."""


class ScrollHost(ViewportGeometry, ContentSurface, CellObserver, Protocol):
    """Full host surface required by `Scroller`."""
