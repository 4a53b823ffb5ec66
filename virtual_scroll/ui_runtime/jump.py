"""Normalized scroll positions that bring a target cell into view."""

from __future__ import annotations

from dataclasses import dataclass

from virtual_scroll.api.geometry import Size
from virtual_scroll.api.types import JumpPolicy
from virtual_scroll.runtime.errors import InvalidScrollerArgument
from virtual_scroll.ui_runtime.grid_layout import GridLayout
from virtual_scroll.ui_runtime.window import WindowBounds


@dataclass(frozen=True, slots=True)
class JumpTarget:
    """Normalized positions per axis; `None` leaves that axis where it is.

    Vertical positions count from the bottom of the content (1.0 is the top),
    horizontal positions from the left edge.
    """

    horizontal: float | None
    vertical: float | None

    @property
    def is_noop(self) -> bool:
        return self.horizontal is None and self.vertical is None


def resolve_jump(
    layout: GridLayout,
    *,
    index: int,
    policy: JumpPolicy,
    window: WindowBounds,
    viewport: Size,
    content: Size,
) -> JumpTarget:
    """Return where to scroll so cell `index` obeys `policy`."""
    coord = layout.coord_of(index)
    row, col = coord.row, coord.col
    metrics = layout.metrics
    pad = metrics.padding
    rows = layout.row_count
    scroll_height = content.height - viewport.height
    scroll_width = content.width - viewport.width

    vertical: float | None = None
    horizontal: float | None = None
    if policy is JumpPolicy.CENTER:
        if scroll_height > 0:
            vertical = (
                pad.bottom
                + (rows - row - 0.5) * metrics.cell_height
                + (rows - row - 1) * metrics.spacing_y
                - viewport.height / 2
            ) / scroll_height
        if scroll_width > 0:
            horizontal = (
                pad.left
                + (col + 0.5) * metrics.cell_width
                + col * metrics.spacing_x
                - viewport.width / 2
            ) / scroll_width
    elif policy is JumpPolicy.ON_SCREEN:
        if window.contains(row, col):
            return JumpTarget(horizontal=None, vertical=None)
        if scroll_height > 0 and not window.contains_row(row):
            if row > window.last_row:
                # Bottom edge of the target flush with the viewport bottom.
                vertical = (pad.bottom + (rows - row - 1) * metrics.step_y) / scroll_height
            else:
                vertical = (
                    pad.bottom
                    + (rows - row) * metrics.cell_height
                    + (rows - row - 1) * metrics.spacing_y
                    - viewport.height
                ) / scroll_height
        if scroll_width > 0 and not window.contains_col(col):
            if col > window.last_col:
                horizontal = (
                    pad.left + (col + 1) * metrics.cell_width + col * metrics.spacing_x - viewport.width
                ) / scroll_width
            else:
                horizontal = (pad.left + col * metrics.cell_width + col * metrics.spacing_x) / scroll_width
    else:
        raise InvalidScrollerArgument(f"unsupported jump policy: {policy!r}")
    return JumpTarget(horizontal=_clamp_unit(horizontal), vertical=_clamp_unit(vertical))


def _clamp_unit(value: float | None) -> float | None:
    if value is None:
        return None
    return min(1.0, max(0.0, value))
