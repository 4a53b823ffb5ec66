"""Horizontal placement of grid content narrower than the viewport."""

from __future__ import annotations

from dataclasses import dataclass

from virtual_scroll.api.types import HorizontalAlignment
from virtual_scroll.runtime.errors import InvalidScrollerArgument


@dataclass(frozen=True, slots=True)
class ContentPlacement:
    x: float
    horizontal_scroll: bool


def resolve_content_placement(
    alignment: HorizontalAlignment,
    *,
    viewport_width: float,
    content_width: float,
) -> ContentPlacement:
    """Return content x offset and whether horizontal scrolling stays enabled."""
    slack = viewport_width - content_width
    if alignment is HorizontalAlignment.LEADING:
        return ContentPlacement(x=0.0, horizontal_scroll=True)
    if alignment is HorizontalAlignment.CENTER:
        if slack > 0:
            return ContentPlacement(x=slack / 2.0, horizontal_scroll=False)
        return ContentPlacement(x=0.0, horizontal_scroll=True)
    if alignment is HorizontalAlignment.TRAILING:
        if slack > 0:
            return ContentPlacement(x=slack, horizontal_scroll=False)
        return ContentPlacement(x=0.0, horizontal_scroll=True)
    raise InvalidScrollerArgument(f"unsupported horizontal alignment: {alignment!r}")
