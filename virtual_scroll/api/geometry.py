"""Public geometry primitives for virtualized scroll content."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """Simple axis-aligned rectangle in content space (y grows downward)."""

    x: float
    y: float
    w: float
    h: float

    def intersects(self, other: Rect) -> bool:
        """Return whether two rectangles overlap with non-zero area."""
        return (
            self.x < other.x + other.w
            and other.x < self.x + self.w
            and self.y < other.y + other.h
            and other.y < self.y + self.h
        )


@dataclass(frozen=True, slots=True)
class CellCoord:
    """Grid cell coordinate in row/column space."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class Offset:
    """Scroll distance of the viewport from the content's top-left corner."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Padding:
    """Author-configured padding around the cell grid."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    def __post_init__(self) -> None:
        if min(self.top, self.bottom, self.left, self.right) < 0:
            raise ValueError("padding edges must be non-negative")


@dataclass(frozen=True, slots=True)
class GridMetrics:
    """Fixed cell size, spacing and base padding of a scroll grid."""

    cell_width: float
    cell_height: float
    spacing_x: float = 0.0
    spacing_y: float = 0.0
    padding: Padding = Padding()

    def __post_init__(self) -> None:
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ValueError("cell size must be > 0")
        if self.spacing_x < 0 or self.spacing_y < 0:
            raise ValueError("spacing must be >= 0")

    @property
    def step_x(self) -> float:
        return self.cell_width + self.spacing_x

    @property
    def step_y(self) -> float:
        return self.cell_height + self.spacing_y

    def cell_rect(self, row: int, col: int) -> Rect:
        """Return content-space rectangle for a grid cell."""
        return Rect(
            x=self.padding.left + col * self.step_x,
            y=self.padding.top + row * self.step_y,
            w=self.cell_width,
            h=self.cell_height,
        )

