from __future__ import annotations

import pytest

from virtual_scroll.api.geometry import GridMetrics, Size
from virtual_scroll.api.types import JumpPolicy
from virtual_scroll.runtime.errors import InvalidScrollerArgument
from virtual_scroll.ui_runtime.grid_layout import GridLayout
from virtual_scroll.ui_runtime.jump import JumpTarget, resolve_jump
from virtual_scroll.ui_runtime.window import WindowBounds

LIST_VIEWPORT = Size(100.0, 500.0)
GRID_VIEWPORT = Size(200.0, 200.0)


def _list_layout() -> GridLayout:
    return GridLayout(metrics=GridMetrics(cell_width=100.0, cell_height=50.0), total_count=1000)


def _grid_layout(total_count: int = 100) -> GridLayout:
    return GridLayout(
        metrics=GridMetrics(cell_width=50.0, cell_height=50.0),
        total_count=total_count,
        cells_per_row=10,
    )


def _jump(layout: GridLayout, index: int, policy: JumpPolicy, window: WindowBounds, viewport: Size) -> JumpTarget:
    return resolve_jump(
        layout,
        index=index,
        policy=policy,
        window=window,
        viewport=viewport,
        content=layout.content_size(),
    )


def test_center_jump_puts_cell_midpoint_at_viewport_center() -> None:
    layout = _list_layout()

    target = _jump(layout, 500, JumpPolicy.CENTER, WindowBounds(0, 9, 0, 0), LIST_VIEWPORT)

    assert target.horizontal is None
    assert target.vertical == pytest.approx(24725.0 / 49500.0)
    scrolled_from_top = (1.0 - target.vertical) * 49500.0
    assert scrolled_from_top + 250.0 == pytest.approx(500 * 50.0 + 25.0)


def test_center_jump_ignores_the_current_window() -> None:
    layout = _list_layout()

    near = _jump(layout, 999, JumpPolicy.CENTER, WindowBounds(0, 9, 0, 0), LIST_VIEWPORT)
    far = _jump(layout, 999, JumpPolicy.CENTER, WindowBounds(990, 999, 0, 0), LIST_VIEWPORT)

    assert near == far == JumpTarget(horizontal=None, vertical=0.0)


def test_on_screen_jump_is_noop_for_visible_cell() -> None:
    target = _jump(_list_layout(), 5, JumpPolicy.ON_SCREEN, WindowBounds(0, 9, 0, 0), LIST_VIEWPORT)
    assert target.is_noop


def test_on_screen_jump_below_aligns_bottom_edges() -> None:
    target = _jump(_list_layout(), 20, JumpPolicy.ON_SCREEN, WindowBounds(0, 9, 0, 0), LIST_VIEWPORT)

    assert target.vertical == pytest.approx(48950.0 / 49500.0)


def test_on_screen_jump_above_aligns_top_edges() -> None:
    target = _jump(_list_layout(), 50, JumpPolicy.ON_SCREEN, WindowBounds(100, 109, 0, 0), LIST_VIEWPORT)

    assert target.vertical == pytest.approx(47000.0 / 49500.0)
    assert (1.0 - target.vertical) * 49500.0 == pytest.approx(50 * 50.0)


def test_on_screen_jump_only_moves_the_axis_that_misses() -> None:
    layout = _grid_layout()

    right = _jump(layout, 9, JumpPolicy.ON_SCREEN, WindowBounds(0, 3, 0, 3), GRID_VIEWPORT)
    left = _jump(layout, 11, JumpPolicy.ON_SCREEN, WindowBounds(0, 3, 5, 8), GRID_VIEWPORT)

    assert right == JumpTarget(horizontal=1.0, vertical=None)
    assert left.vertical is None
    assert left.horizontal == pytest.approx(50.0 / 300.0)


def test_center_jump_clamps_to_unit_range() -> None:
    target = _jump(_grid_layout(), 5, JumpPolicy.CENTER, WindowBounds(0, 3, 0, 3), GRID_VIEWPORT)

    assert target.horizontal == pytest.approx(175.0 / 300.0)
    assert target.vertical == 1.0


def test_jump_skips_axes_that_fit_the_viewport() -> None:
    layout = _grid_layout(total_count=4)

    target = _jump(layout, 3, JumpPolicy.CENTER, WindowBounds(0, 0, 0, 3), Size(600.0, 600.0))

    assert target.is_noop


def test_jump_rejects_unknown_policy() -> None:
    with pytest.raises(InvalidScrollerArgument):
        _jump(_list_layout(), 3, "sideways", WindowBounds(0, 9, 0, 0), LIST_VIEWPORT)  # type: ignore[arg-type]
