"""Index, row/column and content-extent helpers for a fixed-size cell grid."""

from __future__ import annotations

from dataclasses import dataclass

from virtual_scroll.api.geometry import CellCoord, GridMetrics, Offset, Rect, Size
from virtual_scroll.ui_runtime.window import WindowBounds, row_count, visible_span


@dataclass(frozen=True, slots=True)
class GridLayout:
    """Row-major layout of `total_count` cells, `cells_per_row` to a row."""

    metrics: GridMetrics
    total_count: int
    cells_per_row: int = 1

    def __post_init__(self) -> None:
        if self.total_count < 0:
            raise ValueError("total_count must be >= 0")
        if self.cells_per_row < 1:
            raise ValueError("cells_per_row must be >= 1")

    @property
    def row_count(self) -> int:
        return row_count(self.total_count, self.cells_per_row)

    def index_of(self, row: int, col: int) -> int:
        return row * self.cells_per_row + col

    def coord_of(self, index: int) -> CellCoord:
        row, col = divmod(index, self.cells_per_row)
        return CellCoord(row=row, col=col)

    def row_indices(self, row: int, first_col: int, last_col: int) -> range:
        """Return existing cell indices of one row between two columns."""
        start = self.index_of(row, first_col)
        end = min(self.index_of(row, last_col), self.total_count - 1)
        return range(start, end + 1)

    def col_indices(self, col: int, first_row: int, last_row: int) -> list[int]:
        """Return existing cell indices of one column between two rows."""
        indices = (self.index_of(row, col) for row in range(first_row, last_row + 1))
        return [index for index in indices if index < self.total_count]

    def cell_rect(self, index: int) -> Rect:
        coord = self.coord_of(index)
        return self.metrics.cell_rect(coord.row, coord.col)

    def content_size(self) -> Size:
        """Return the full scrollable extent, independent of instantiated cells."""
        metrics = self.metrics
        return Size(
            width=_axis_extent(
                self.cells_per_row,
                metrics.cell_width,
                metrics.spacing_x,
                metrics.padding.left + metrics.padding.right,
            ),
            height=_axis_extent(
                self.row_count,
                metrics.cell_height,
                metrics.spacing_y,
                metrics.padding.top + metrics.padding.bottom,
            ),
        )

    def window_at(self, offset: Offset, viewport: Size) -> WindowBounds | None:
        """Return the visible window for a scroll offset, `None` when empty."""
        if self.total_count <= 0:
            return None
        metrics = self.metrics
        first_row, last_row = visible_span(
            offset=offset.y,
            viewport=viewport.height,
            leading_padding=metrics.padding.top,
            cell=metrics.cell_height,
            spacing=metrics.spacing_y,
            count=self.row_count,
        )
        first_col, last_col = visible_span(
            offset=offset.x,
            viewport=viewport.width,
            leading_padding=metrics.padding.left,
            cell=metrics.cell_width,
            spacing=metrics.spacing_x,
            count=self.cells_per_row,
        )
        return WindowBounds(first_row=first_row, last_row=last_row, first_col=first_col, last_col=last_col)


def cells_per_row_for_width(container_width: float, metrics: GridMetrics) -> int:
    """Return how many cells fit side by side in a container width."""
    usable = container_width - metrics.padding.left - metrics.padding.right + metrics.spacing_x
    return max(1, int(usable // metrics.step_x))


def _axis_extent(count: int, cell: float, spacing: float, padding: float) -> float:
    if count <= 0:
        return padding
    return padding + count * cell + (count - 1) * spacing
