from __future__ import annotations

import pytest

from virtual_scroll.api.geometry import GridMetrics, Padding, Rect
from virtual_scroll.ui_runtime.window import WindowBounds, row_count, visible_span


def test_visible_span_first_page_of_uniform_list() -> None:
    span = visible_span(offset=0.0, viewport=500.0, leading_padding=0.0, cell=50.0, spacing=0.0, count=1000)
    assert span == (0, 9)


def test_visible_span_excludes_cells_touching_edges() -> None:
    span = visible_span(offset=100.0, viewport=500.0, leading_padding=0.0, cell=50.0, spacing=0.0, count=1000)
    assert span == (2, 11)


def test_visible_span_includes_partially_visible_cells() -> None:
    span = visible_span(offset=75.0, viewport=500.0, leading_padding=0.0, cell=50.0, spacing=0.0, count=1000)
    assert span == (1, 11)


def test_visible_span_clamps_past_the_end() -> None:
    span = visible_span(offset=10_000.0, viewport=500.0, leading_padding=0.0, cell=50.0, spacing=0.0, count=20)
    assert span == (19, 19)


def test_visible_span_clamps_negative_overscroll() -> None:
    span = visible_span(offset=-300.0, viewport=500.0, leading_padding=0.0, cell=50.0, spacing=0.0, count=1000)
    assert span == (0, 3)


def test_visible_span_rejects_empty_axis() -> None:
    with pytest.raises(ValueError):
        visible_span(offset=0.0, viewport=10.0, leading_padding=0.0, cell=5.0, spacing=0.0, count=0)


def test_visible_span_matches_rectangle_intersection_with_padding_and_spacing() -> None:
    metrics = GridMetrics(cell_width=40.0, cell_height=40.0, spacing_y=10.0, padding=Padding(top=10.0, bottom=5.0))
    count = 30
    viewport = 120.0
    content = 10.0 + count * 40.0 + (count - 1) * 10.0 + 5.0
    for offset in range(0, int(content - viewport) + 1, 3):
        view = Rect(x=0.0, y=float(offset), w=1.0, h=viewport)
        expected = [row for row in range(count) if metrics.cell_rect(row, 0).intersects(view)]
        first, last = visible_span(
            offset=float(offset),
            viewport=viewport,
            leading_padding=metrics.padding.top,
            cell=metrics.cell_height,
            spacing=metrics.spacing_y,
            count=count,
        )
        assert list(range(first, last + 1)) == expected, offset


def test_row_count_rounds_partial_rows_up() -> None:
    assert row_count(0, 4) == 0
    assert row_count(8, 4) == 2
    assert row_count(9, 4) == 3


def test_window_bounds_rejects_inverted_ranges() -> None:
    with pytest.raises(ValueError):
        WindowBounds(first_row=3, last_row=2, first_col=0, last_col=0)


def test_window_bounds_disjoint_when_rows_or_cols_do_not_overlap() -> None:
    window = WindowBounds(first_row=0, last_row=9, first_col=0, last_col=3)

    assert window.is_disjoint(WindowBounds(10, 19, 0, 3))
    assert window.is_disjoint(WindowBounds(5, 12, 4, 7))
    assert not window.is_disjoint(WindowBounds(9, 18, 3, 6))
    assert window.contains(9, 3)
    assert not window.contains(10, 3)
