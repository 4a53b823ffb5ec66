"""Viewport virtualization for index-addressable lists and grids."""

from virtual_scroll.api import (
    GridMetrics,
    HorizontalAlignment,
    JumpPolicy,
    Offset,
    Padding,
    PanelSide,
    ScrollHost,
    ScrollOffsetChanged,
    ScrollerOptions,
    ScrollerState,
    Size,
    create_event_bus,
    create_scroller,
)
from virtual_scroll.runtime.errors import InvalidScrollerArgument

__all__ = [
    "GridMetrics",
    "HorizontalAlignment",
    "InvalidScrollerArgument",
    "JumpPolicy",
    "Offset",
    "Padding",
    "PanelSide",
    "ScrollHost",
    "ScrollOffsetChanged",
    "ScrollerOptions",
    "ScrollerState",
    "Size",
    "create_event_bus",
    "create_scroller",
]
