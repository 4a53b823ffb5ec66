"""Public scroller API contracts."""

from virtual_scroll.api.events import EventBus, ScrollOffsetChanged, Subscription, create_event_bus
from virtual_scroll.api.geometry import CellCoord, GridMetrics, Offset, Padding, Rect, Size
from virtual_scroll.api.host import (
    CellObserver,
    ContentSurface,
    ScrollHost,
    ViewFactory,
    ViewHandle,
    ViewportGeometry,
)
from virtual_scroll.api.logging import ScrollerLoggingConfig
from virtual_scroll.api.options import ScrollerOptions
from virtual_scroll.api.scroller import VirtualScroller, create_scroller
from virtual_scroll.api.types import HorizontalAlignment, JumpPolicy, PanelSide, ScrollerState

__all__ = [
    "CellCoord",
    "CellObserver",
    "ContentSurface",
    "EventBus",
    "GridMetrics",
    "HorizontalAlignment",
    "JumpPolicy",
    "Offset",
    "Padding",
    "PanelSide",
    "Rect",
    "ScrollHost",
    "ScrollOffsetChanged",
    "ScrollerLoggingConfig",
    "ScrollerOptions",
    "ScrollerState",
    "Subscription",
    "ViewFactory",
    "ViewHandle",
    "ViewportGeometry",
    "VirtualScroller",
    "create_event_bus",
    "create_scroller",
]
