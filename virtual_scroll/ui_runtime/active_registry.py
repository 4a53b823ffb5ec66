"""Sorted registry of live cells; list order is the on-screen sibling order."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass

from virtual_scroll.api.host import ViewHandle


@dataclass(frozen=True, slots=True)
class Cell:
    index: int
    handle: ViewHandle


@dataclass(frozen=True, slots=True)
class RemovedCell:
    """A cell taken out of the registry with its pre-removal position."""

    position: int
    cell: Cell


def _cell_index(cell: Cell) -> int:
    return cell.index


class ActiveRegistry:
    """Cells ordered strictly by index, located by binary search."""

    def __init__(self) -> None:
        self._cells: list[Cell] = []

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(tuple(self._cells))

    def __contains__(self, index: object) -> bool:
        if not isinstance(index, int):
            return False
        position = self.first_greater(index - 1)
        return position < len(self._cells) and self._cells[position].index == index

    def indices(self) -> list[int]:
        return [cell.index for cell in self._cells]

    def first_greater(self, index: int) -> int:
        """Return position of the first cell whose index is greater than `index`."""
        return bisect_right(self._cells, index, key=_cell_index)

    def insert_sorted(self, index: int, handle: ViewHandle) -> int:
        """Insert a cell and return its position, which is also its sibling index."""
        position = self.first_greater(index)
        if position > 0 and self._cells[position - 1].index == index:
            raise ValueError(f"index already active: {index}")
        self._cells.insert(position, Cell(index=index, handle=handle))
        return position

    def remove_at(self, index: int) -> RemovedCell:
        """Remove the cell for `index`, reporting where it sat before removal."""
        position = self.first_greater(index - 1)
        if position >= len(self._cells) or self._cells[position].index != index:
            raise LookupError(f"index not active: {index}")
        return RemovedCell(position=position, cell=self._cells.pop(position))

    def remove_all(self) -> list[Cell]:
        """Drain every cell front to back in index order."""
        drained = self._cells
        self._cells = []
        return drained
