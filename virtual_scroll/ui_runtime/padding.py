"""Effective padding that stands in for cells outside the window."""

from __future__ import annotations

from dataclasses import replace
from typing import TypeAlias

from virtual_scroll.api.geometry import Padding
from virtual_scroll.api.types import PanelSide
from virtual_scroll.ui_runtime.grid_layout import GridLayout
from virtual_scroll.ui_runtime.window import WindowBounds

EffectivePadding: TypeAlias = Padding

_EDGE_BY_SIDE: dict[PanelSide, str] = {
    PanelSide.TOP: "top",
    PanelSide.BOTTOM: "bottom",
    PanelSide.LEFT: "left",
    PanelSide.RIGHT: "right",
}


def derive_effective_padding(layout: GridLayout, window: WindowBounds | None) -> EffectivePadding:
    """Return base padding plus the space reserved for rows/cols around `window`."""
    metrics = layout.metrics
    base = metrics.padding
    if window is None:
        return base
    return Padding(
        top=base.top + window.first_row * metrics.step_y,
        bottom=base.bottom + (layout.row_count - window.last_row - 1) * metrics.step_y,
        left=base.left + window.first_col * metrics.step_x,
        right=base.right + (layout.cells_per_row - window.last_col - 1) * metrics.step_x,
    )


def reserve_step(padding: EffectivePadding, side: PanelSide, layout: GridLayout) -> EffectivePadding:
    """Grow one edge by a cell step after a row/col on that side was retired."""
    return _shift(padding, side, _step_for(side, layout))


def release_step(padding: EffectivePadding, side: PanelSide, layout: GridLayout) -> EffectivePadding:
    """Shrink one edge by a cell step after a row/col on that side was generated."""
    return _shift(padding, side, -_step_for(side, layout))


def _step_for(side: PanelSide, layout: GridLayout) -> float:
    if side in (PanelSide.TOP, PanelSide.BOTTOM):
        return layout.metrics.step_y
    if side in (PanelSide.LEFT, PanelSide.RIGHT):
        return layout.metrics.step_x
    raise ValueError(f"padding has no edge for side {side!r}")


def _shift(padding: EffectivePadding, side: PanelSide, delta: float) -> EffectivePadding:
    edge = _EDGE_BY_SIDE[side]
    # Incremental float steps can undershoot zero by rounding error.
    value = max(0.0, getattr(padding, edge) + delta)
    return replace(padding, **{edge: value})
