"""Scroller façade: lifecycle state machine over the window diff engine."""

from __future__ import annotations

import logging

from virtual_scroll.api.events import EventBus, ScrollOffsetChanged, Subscription
from virtual_scroll.api.geometry import GridMetrics, Padding, Size
from virtual_scroll.api.host import ScrollHost, ViewFactory
from virtual_scroll.api.options import ScrollerOptions
from virtual_scroll.api.types import JumpPolicy, ScrollerState
from virtual_scroll.runtime.config import parse_jump_policy, validate_options
from virtual_scroll.runtime.errors import InvalidScrollerArgument, log_ignored_request
from virtual_scroll.runtime.metrics import (
    MetricsSnapshot,
    NoopScrollerMetrics,
    ScrollerMetrics,
    create_scroller_metrics,
)
from virtual_scroll.ui_runtime.alignment import resolve_content_placement
from virtual_scroll.ui_runtime.diff_engine import WindowDiffEngine
from virtual_scroll.ui_runtime.grid_layout import GridLayout, cells_per_row_for_width
from virtual_scroll.ui_runtime.jump import resolve_jump
from virtual_scroll.ui_runtime.padding import EffectivePadding
from virtual_scroll.ui_runtime.window import WindowBounds

logger = logging.getLogger(__name__)


class Scroller:
    """Virtualized list/grid scroller driven by host geometry and scroll events.

    Lifecycle: ``UNINITIALIZED`` until the first `generate`, then ``GENERATED``
    until `clear`, which returns to ``INITIALIZED``. Misuse for the current
    state is logged and ignored; invalid arguments raise
    `InvalidScrollerArgument`.
    """

    def __init__(
        self,
        host: ScrollHost,
        options: ScrollerOptions | None = None,
        *,
        bus: EventBus | None = None,
        metrics: ScrollerMetrics | NoopScrollerMetrics | None = None,
    ) -> None:
        self._host = host
        self._options = validate_options(options or ScrollerOptions())
        self._metrics = metrics or create_scroller_metrics(enabled=self._options.metrics_enabled)
        self._engine = WindowDiffEngine(
            host,
            cache_capacity=self._options.cache_capacity,
            metrics=self._metrics,
        )
        self._state = ScrollerState.UNINITIALIZED
        self._bus = bus
        self._subscription: Subscription | None = None
        self._base_padding: Padding | None = None
        self._factory: ViewFactory | None = None
        self._layout: GridLayout | None = None

    @property
    def state(self) -> ScrollerState:
        return self._state

    @property
    def initialized(self) -> bool:
        return self._state is not ScrollerState.UNINITIALIZED

    @property
    def generated(self) -> bool:
        return self._state is ScrollerState.GENERATED

    @property
    def options(self) -> ScrollerOptions:
        return self._options

    @property
    def total_count(self) -> int:
        return self._layout.total_count if self._layout is not None else 0

    @property
    def row_count(self) -> int:
        return self._layout.row_count if self._layout is not None else 0

    @property
    def cells_per_row(self) -> int:
        if self._layout is not None:
            return self._layout.cells_per_row
        return self._options.items_per_row

    @property
    def window(self) -> WindowBounds | None:
        """Window of currently instantiated cells, `None` when nothing is live."""
        return self._engine.window

    @property
    def content_size(self) -> Size:
        if self._layout is None:
            return Size(0.0, 0.0)
        return self._layout.content_size()

    @property
    def effective_padding(self) -> EffectivePadding:
        return self._engine.padding

    @property
    def cache_capacity(self) -> int:
        return self._engine.cache.capacity

    @property
    def metrics(self) -> MetricsSnapshot:
        return self._metrics.snapshot()

    def active_indices(self) -> list[int]:
        return self._engine.registry.indices()

    def cached_indices(self) -> list[int]:
        """Cached indices from least to most recently used."""
        return list(self._engine.cache.keys())

    def bind(self, bus: EventBus) -> None:
        """Subscribe to `ScrollOffsetChanged` on `bus`, replacing any previous binding."""
        self.unbind()
        self._bus = bus
        self._subscription = bus.subscribe(ScrollOffsetChanged, self._on_offset_changed)

    def unbind(self) -> None:
        if self._bus is not None and self._subscription is not None:
            self._bus.unsubscribe(self._subscription)
        self._subscription = None

    def generate(self, total_count: int, factory: ViewFactory) -> None:
        """Build the initial window for `total_count` cells."""
        if self.generated:
            log_ignored_request(logger, "generate", "already generated")
            return
        if total_count < 0:
            raise InvalidScrollerArgument("total_count must be >= 0")
        if not self.initialized:
            self._initialize()

        self._metrics.begin_update("generate")
        self._factory = factory
        layout = self._build_layout(total_count)
        self._layout = layout
        self._engine.bind(layout, factory)
        self._state = ScrollerState.GENERATED

        content = layout.content_size()
        self._host.set_content_size(content)
        placement = resolve_content_placement(
            self._options.horizontal_alignment,
            viewport_width=self._host.viewport_size().width,
            content_width=content.width,
        )
        self._host.set_content_x(placement.x, horizontal_scroll=placement.horizontal_scroll)

        self._engine.build(self._visible_window(layout))
        self._finish_update()

    def on_scroll(self) -> None:
        """Reconcile live cells with the host's current scroll offset."""
        layout = self._layout
        if not self.generated or layout is None:
            return
        if layout.total_count <= 0:
            return
        window = self._visible_window(layout)
        if window is None or window == self._engine.window:
            return
        self._metrics.begin_update("scroll")
        self._engine.update(window)
        self._finish_update()

    def clear(self) -> None:
        """Dispose every live and cached cell and return to ``INITIALIZED``."""
        if not self.generated:
            log_ignored_request(logger, "clear", "not generated")
            return
        self._metrics.begin_update("clear")
        self._engine.teardown(recycle=False)
        self._engine.clear_cache()
        self._engine.reset_padding(self._require_base_padding())
        self._host.set_content_size(Size(0.0, 0.0))
        self._layout = None
        self._state = ScrollerState.INITIALIZED
        self._finish_update()

    def resize(self, new_total_count: int) -> None:
        """Regenerate from scratch for a new item count."""
        if new_total_count < 0:
            raise InvalidScrollerArgument("total_count must be >= 0")
        if not self.generated or self._factory is None:
            log_ignored_request(logger, "resize", "not generated")
            return
        factory = self._factory
        self.clear()
        self.generate(new_total_count, factory)

    def set_cache_capacity(self, capacity: int) -> None:
        if capacity < 0:
            raise InvalidScrollerArgument("cache capacity must be >= 0")
        self._metrics.begin_update("cache")
        self._engine.set_cache_capacity(capacity)
        self._finish_update()

    def clear_cache(self) -> None:
        self._metrics.begin_update("cache")
        self._engine.clear_cache()
        self._finish_update()

    def jump_to(self, index: int, policy: JumpPolicy | str = JumpPolicy.ON_SCREEN) -> None:
        """Scroll so cell `index` is on screen or centered, per `policy`."""
        resolved = parse_jump_policy(policy)
        layout = self._layout
        if not self.generated or layout is None:
            log_ignored_request(logger, "jump_to", "not generated")
            return
        if not 0 <= index < layout.total_count:
            log_ignored_request(logger, "jump_to", f"index {index} out of range")
            return
        viewport = self._host.viewport_size()
        window = layout.window_at(self._host.scroll_offset(), viewport)
        if window is None:
            return
        target = resolve_jump(
            layout,
            index=index,
            policy=resolved,
            window=window,
            viewport=viewport,
            content=layout.content_size(),
        )
        if target.is_noop:
            return
        self._host.set_normalized_position(horizontal=target.horizontal, vertical=target.vertical)

    def _initialize(self) -> None:
        self._base_padding = self._host.grid_metrics().padding
        if self._bus is not None and self._subscription is None:
            self._subscription = self._bus.subscribe(ScrollOffsetChanged, self._on_offset_changed)
        self._state = ScrollerState.INITIALIZED

    def _build_layout(self, total_count: int) -> GridLayout:
        host_metrics = self._host.grid_metrics()
        metrics = GridMetrics(
            cell_width=host_metrics.cell_width,
            cell_height=host_metrics.cell_height,
            spacing_x=host_metrics.spacing_x,
            spacing_y=host_metrics.spacing_y,
            padding=self._require_base_padding(),
        )
        if self._options.match_container_width:
            cells_per_row = cells_per_row_for_width(self._host.container_width(), metrics)
        else:
            cells_per_row = self._options.items_per_row
        return GridLayout(metrics=metrics, total_count=total_count, cells_per_row=cells_per_row)

    def _visible_window(self, layout: GridLayout) -> WindowBounds | None:
        return layout.window_at(self._host.scroll_offset(), self._host.viewport_size())

    def _on_offset_changed(self, event: ScrollOffsetChanged) -> None:
        _ = event
        self.on_scroll()

    def _finish_update(self) -> None:
        update = self._metrics.end_update()
        if update is None or not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug(
            "scroller.%s window=%s active=%d cached=%d",
            update.kind,
            self._engine.window,
            len(self._engine.registry),
            len(self._engine.cache),
            extra={
                "cells_created": update.created,
                "cells_reused": update.reused,
                "cells_retired": update.retired,
                "cells_disposed": update.disposed,
                "cells_evicted": update.evicted,
                "full_rebuild": update.full_rebuild,
            },
        )

    def _require_base_padding(self) -> Padding:
        if self._base_padding is None:
            raise RuntimeError("scroller is not initialized")
        return self._base_padding
