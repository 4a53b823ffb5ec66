from __future__ import annotations

import pytest

from virtual_scroll.api.types import HorizontalAlignment
from virtual_scroll.runtime.errors import InvalidScrollerArgument
from virtual_scroll.ui_runtime.alignment import ContentPlacement, resolve_content_placement


@pytest.mark.parametrize(
    ("alignment", "expected"),
    [
        (HorizontalAlignment.LEADING, ContentPlacement(x=0.0, horizontal_scroll=True)),
        (HorizontalAlignment.CENTER, ContentPlacement(x=50.0, horizontal_scroll=False)),
        (HorizontalAlignment.TRAILING, ContentPlacement(x=100.0, horizontal_scroll=False)),
    ],
)
def test_narrow_content_is_placed_by_alignment(
    alignment: HorizontalAlignment, expected: ContentPlacement
) -> None:
    placement = resolve_content_placement(alignment, viewport_width=300.0, content_width=200.0)
    assert placement == expected


def test_wide_content_keeps_horizontal_scrolling() -> None:
    placement = resolve_content_placement(
        HorizontalAlignment.TRAILING, viewport_width=300.0, content_width=900.0
    )
    assert placement == ContentPlacement(x=0.0, horizontal_scroll=True)


def test_unknown_alignment_is_rejected() -> None:
    with pytest.raises(InvalidScrollerArgument):
        resolve_content_placement("diagonal", viewport_width=1.0, content_width=1.0)  # type: ignore[arg-type]
