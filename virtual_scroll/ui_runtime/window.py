"""Scroll offset to visible index window calculation."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WindowBounds:
    """Inclusive row/column range of cells intersecting the viewport."""

    first_row: int
    last_row: int
    first_col: int
    last_col: int

    def __post_init__(self) -> None:
        if self.first_row > self.last_row or self.first_col > self.last_col:
            raise ValueError(f"inverted window bounds: {self}")

    @property
    def rows(self) -> range:
        return range(self.first_row, self.last_row + 1)

    @property
    def cols(self) -> range:
        return range(self.first_col, self.last_col + 1)

    def contains(self, row: int, col: int) -> bool:
        return self.contains_row(row) and self.contains_col(col)

    def contains_row(self, row: int) -> bool:
        return self.first_row <= row <= self.last_row

    def contains_col(self, col: int) -> bool:
        return self.first_col <= col <= self.last_col

    def is_disjoint(self, other: WindowBounds) -> bool:
        """Return whether the windows share no row or share no column."""
        return (
            other.last_col < self.first_col
            or other.first_col > self.last_col
            or other.first_row > self.last_row
            or other.last_row < self.first_row
        )


def row_count(total_count: int, cells_per_row: int) -> int:
    """Return number of grid rows needed for `total_count` cells."""
    if total_count <= 0:
        return 0
    return -(-total_count // max(1, cells_per_row))


def visible_span(
    *,
    offset: float,
    viewport: float,
    leading_padding: float,
    cell: float,
    spacing: float,
    count: int,
) -> tuple[int, int]:
    """Return the inclusive index span on one axis for a viewport position.

    A cell counts as visible when its rectangle intersects the half-open
    viewport span `[offset, offset + viewport)`; cells only touching an edge
    or hidden inside spacing gaps are excluded. Both ends are clamped to
    `[0, count - 1]` and the last index never precedes the first.
    """
    if count <= 0:
        raise ValueError("count must be > 0")
    step = cell + spacing
    first = math.floor((offset - leading_padding - cell) / step) + 1
    last = math.ceil((offset + viewport - leading_padding) / step) - 1
    first = min(max(first, 0), count - 1)
    last = min(max(last, 0), count - 1)
    return first, max(first, last)
