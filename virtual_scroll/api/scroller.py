"""Public scroller contract and factory."""

from __future__ import annotations

from typing import Protocol

from virtual_scroll.api.events import EventBus
from virtual_scroll.api.geometry import Padding, Size
from virtual_scroll.api.host import ScrollHost, ViewFactory
from virtual_scroll.api.options import ScrollerOptions
from virtual_scroll.api.types import JumpPolicy, ScrollerState


class VirtualScroller(Protocol):
    """Host-facing surface of a virtualized list/grid scroller."""

    @property
    def state(self) -> ScrollerState:
        """Return lifecycle state."""

    @property
    def initialized(self) -> bool:
        """Return whether the scroller captured its host geometry."""

    @property
    def generated(self) -> bool:
        """Return whether cells are currently generated."""

    @property
    def content_size(self) -> Size:
        """Return full scrollable extent."""

    @property
    def effective_padding(self) -> Padding:
        """Return padding currently pushed to the host."""

    def generate(self, total_count: int, factory: ViewFactory) -> None:
        """Build the initial window."""

    def resize(self, new_total_count: int) -> None:
        """Regenerate for a new item count."""

    def clear(self) -> None:
        """Dispose all live and cached cells."""

    def clear_cache(self) -> None:
        """Dispose cached cells only."""

    def set_cache_capacity(self, capacity: int) -> None:
        """Bound the recycle cache, evicting as needed."""

    def jump_to(self, index: int, policy: JumpPolicy | str = JumpPolicy.ON_SCREEN) -> None:
        """Scroll toward a target cell."""

    def on_scroll(self) -> None:
        """Reconcile live cells with the host scroll offset."""

    def bind(self, bus: EventBus) -> None:
        """Follow `ScrollOffsetChanged` events published on `bus`."""

    def unbind(self) -> None:
        """Stop following scroll events."""

    def active_indices(self) -> list[int]:
        """Return live indices in sibling order."""


def create_scroller(
    host: ScrollHost,
    options: ScrollerOptions | None = None,
    *,
    bus: EventBus | None = None,
) -> VirtualScroller:
    """Create default scroller implementation."""
    from virtual_scroll.ui_runtime.scroller import Scroller

    return Scroller(host, options, bus=bus)
