"""Public scroller configuration options."""

from __future__ import annotations

from dataclasses import dataclass

from virtual_scroll.api.types import HorizontalAlignment


@dataclass(frozen=True, slots=True)
class ScrollerOptions:
    """Recognized scroller options.

    `items_per_row` is ignored when `match_container_width` is set; the cell
    count per row is then derived from the container width at generate time.
    A single-column list is `items_per_row=1`.
    """

    items_per_row: int = 1
    match_container_width: bool = False
    cache_capacity: int = 0
    horizontal_alignment: HorizontalAlignment = HorizontalAlignment.LEADING
    metrics_enabled: bool = False
