from __future__ import annotations

from dataclasses import dataclass

import pytest

from virtual_scroll.api.geometry import GridMetrics, Offset, Padding, Size
from virtual_scroll.api.types import PanelSide


@dataclass(eq=False)
class FakeView:
    index: int
    serial: int


class FakeHost:
    """In-memory host recording every call the scroller makes."""

    def __init__(
        self,
        *,
        viewport: Size = Size(100.0, 500.0),
        metrics: GridMetrics = GridMetrics(cell_width=100.0, cell_height=50.0),
        container_width: float = 100.0,
    ) -> None:
        self.viewport = viewport
        self.metrics = metrics
        self.container = container_width
        self.offset = Offset()
        self.content_size: Size | None = None
        self.padding: Padding | None = None
        self.content_x: float | None = None
        self.horizontal_scroll: bool | None = None
        self.normalized: list[tuple[float | None, float | None]] = []
        self.children: list[FakeView] = []
        self.parked: list[FakeView] = []
        self.disposed: list[FakeView] = []
        self.events: list[tuple[str, int, PanelSide]] = []
        self.created = 0

    def factory(self, index: int) -> FakeView:
        self.created += 1
        return FakeView(index=index, serial=self.created)

    def scroll_to(self, *, x: float | None = None, y: float | None = None) -> None:
        self.offset = Offset(
            x=self.offset.x if x is None else x,
            y=self.offset.y if y is None else y,
        )

    def child_indices(self) -> list[int]:
        return [view.index for view in self.children]

    def viewport_size(self) -> Size:
        return self.viewport

    def scroll_offset(self) -> Offset:
        return self.offset

    def grid_metrics(self) -> GridMetrics:
        return self.metrics

    def container_width(self) -> float:
        return self.container

    def set_content_size(self, size: Size) -> None:
        self.content_size = size

    def set_padding(self, padding: Padding) -> None:
        self.padding = padding

    def set_content_x(self, x: float, *, horizontal_scroll: bool) -> None:
        self.content_x = x
        self.horizontal_scroll = horizontal_scroll

    def set_normalized_position(self, *, horizontal: float | None, vertical: float | None) -> None:
        self.normalized.append((horizontal, vertical))

    def place_view(self, handle: FakeView, sibling_index: int) -> None:
        if handle in self.parked:
            self.parked.remove(handle)
        self.children.insert(sibling_index, handle)

    def park_view(self, handle: FakeView) -> None:
        self.children.remove(handle)
        self.parked.append(handle)

    def dispose_view(self, handle: FakeView) -> None:
        if handle in self.children:
            self.children.remove(handle)
        if handle in self.parked:
            self.parked.remove(handle)
        self.disposed.append(handle)

    def on_constructed(self, index: int, handle: FakeView) -> None:
        _ = handle
        self.events.append(("constructed", index, PanelSide.NONE))

    def on_become_visible(self, index: int, handle: FakeView, side: PanelSide) -> None:
        _ = handle
        self.events.append(("visible", index, side))

    def on_become_invisible(self, index: int, handle: FakeView, side: PanelSide) -> None:
        _ = handle
        self.events.append(("invisible", index, side))


@pytest.fixture
def list_host() -> FakeHost:
    """Single column, 50px rows, 500px tall viewport."""
    return FakeHost()


@pytest.fixture
def grid_host() -> FakeHost:
    """50px square cells in a 200x200 viewport."""
    return FakeHost(
        viewport=Size(200.0, 200.0),
        metrics=GridMetrics(cell_width=50.0, cell_height=50.0),
        container_width=500.0,
    )
