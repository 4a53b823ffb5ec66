"""Window-to-window diffing that creates, recycles and retires cells."""

from __future__ import annotations

import logging

from virtual_scroll.api.geometry import Padding
from virtual_scroll.api.host import ScrollHost, ViewFactory, ViewHandle
from virtual_scroll.api.types import PanelSide
from virtual_scroll.runtime.metrics import NoopScrollerMetrics, ScrollerMetrics
from virtual_scroll.ui_runtime.active_registry import ActiveRegistry
from virtual_scroll.ui_runtime.grid_layout import GridLayout
from virtual_scroll.ui_runtime.padding import (
    EffectivePadding,
    derive_effective_padding,
    release_step,
    reserve_step,
)
from virtual_scroll.ui_runtime.recycle_cache import RecycleCache
from virtual_scroll.ui_runtime.window import WindowBounds

logger = logging.getLogger(__name__)


class WindowDiffEngine:
    """Keeps live cells in sync with the visible window.

    The engine owns the active registry, the recycle cache and the current
    effective padding. Every entering cell probes the cache before falling
    back to the view factory; every retiring cell is parked and cached.
    """

    def __init__(
        self,
        host: ScrollHost,
        *,
        cache_capacity: int,
        metrics: ScrollerMetrics | NoopScrollerMetrics,
    ) -> None:
        self._host = host
        self._metrics = metrics
        self._registry = ActiveRegistry()
        self._cache: RecycleCache[int, ViewHandle] = RecycleCache(cache_capacity, self._dispose_evicted)
        self._layout: GridLayout | None = None
        self._factory: ViewFactory | None = None
        self._window: WindowBounds | None = None
        self._padding: EffectivePadding = Padding()

    @property
    def window(self) -> WindowBounds | None:
        return self._window

    @property
    def padding(self) -> EffectivePadding:
        return self._padding

    @property
    def registry(self) -> ActiveRegistry:
        return self._registry

    @property
    def cache(self) -> RecycleCache[int, ViewHandle]:
        return self._cache

    def bind(self, layout: GridLayout, factory: ViewFactory) -> None:
        """Attach the layout and factory used by subsequent builds."""
        if self._registry:
            raise RuntimeError("cannot rebind while cells are active")
        self._layout = layout
        self._factory = factory

    def build(self, window: WindowBounds | None) -> None:
        """Generate every cell of `window` in row-major order."""
        layout = self._require_layout()
        if window is not None:
            for row in window.rows:
                for index in layout.row_indices(row, window.first_col, window.last_col):
                    self._enter(index, PanelSide.NONE)
        self._window = window
        self._apply_padding(derive_effective_padding(layout, window))

    def teardown(self, *, recycle: bool) -> None:
        """Retire every active cell; recycled cells go to the cache, others are disposed."""
        for cell in self._registry.remove_all():
            self._host.on_become_invisible(cell.index, cell.handle, PanelSide.NONE)
            if recycle:
                self._host.park_view(cell.handle)
                self._cache.put(cell.index, cell.handle)
                self._metrics.increment("retired")
            else:
                self._host.dispose_view(cell.handle)
                self._metrics.increment("disposed")
        self._window = None

    def reset_padding(self, base: Padding) -> None:
        self._apply_padding(base)

    def update(self, window: WindowBounds) -> None:
        """Move the live window to `window`, rebuilding when nothing overlaps."""
        current = self._window
        if current is None or current == window:
            return
        if current.is_disjoint(window):
            self._metrics.mark_full_rebuild()
            self.teardown(recycle=True)
            self.build(window)
            return
        self._update_cols(current, window)
        self._update_rows(window)
        self._window = window
        self._host.set_padding(self._padding)

    def set_cache_capacity(self, capacity: int) -> None:
        self._cache.set_capacity(capacity)

    def clear_cache(self) -> None:
        self._cache.clear()

    def _update_cols(self, current: WindowBounds, target: WindowBounds) -> None:
        layout = self._require_layout()
        first_row, last_row = current.first_row, current.last_row
        first_col, last_col = current.first_col, current.last_col

        def cells(col: int) -> list[int]:
            return layout.col_indices(col, first_row, last_row)

        if first_col > target.first_col:
            for col in range(first_col - 1, target.first_col - 1, -1):
                self._enter_line(cells(col), PanelSide.LEFT)
            first_col = target.first_col
        if last_col < target.last_col:
            for col in range(last_col + 1, target.last_col + 1):
                self._enter_line(cells(col), PanelSide.RIGHT)
            last_col = target.last_col
        if first_col < target.first_col:
            for col in range(first_col, target.first_col):
                self._exit_line(cells(col), PanelSide.LEFT)
            first_col = target.first_col
        if last_col > target.last_col:
            for col in range(last_col, target.last_col, -1):
                self._exit_line(cells(col), PanelSide.RIGHT)
            last_col = target.last_col
        self._window = WindowBounds(first_row, last_row, first_col, last_col)

    def _update_rows(self, target: WindowBounds) -> None:
        layout = self._require_layout()
        current = self._require_window()
        first_row, last_row = current.first_row, current.last_row

        def cells(row: int) -> range:
            return layout.row_indices(row, target.first_col, target.last_col)

        if first_row > target.first_row:
            for row in range(first_row - 1, target.first_row - 1, -1):
                self._enter_line(cells(row), PanelSide.TOP)
            first_row = target.first_row
        if last_row < target.last_row:
            for row in range(last_row + 1, target.last_row + 1):
                self._enter_line(cells(row), PanelSide.BOTTOM)
            last_row = target.last_row
        if first_row < target.first_row:
            for row in range(first_row, target.first_row):
                self._exit_line(cells(row), PanelSide.TOP)
            first_row = target.first_row
        if last_row > target.last_row:
            for row in range(last_row, target.last_row, -1):
                self._exit_line(cells(row), PanelSide.BOTTOM)
            last_row = target.last_row

    def _enter_line(self, indices: range | list[int], side: PanelSide) -> None:
        for index in indices:
            self._enter(index, side)
        self._padding = release_step(self._padding, side, self._require_layout())

    def _exit_line(self, indices: range | list[int], side: PanelSide) -> None:
        for index in indices:
            self._exit(index, side)
        self._padding = reserve_step(self._padding, side, self._require_layout())

    def _enter(self, index: int, side: PanelSide) -> None:
        handle = self._cache.take(index)
        constructed = handle is None
        if handle is None:
            handle = self._require_factory()(index)
            self._host.on_constructed(index, handle)
            self._metrics.increment("created")
        else:
            self._metrics.increment("reused")
        position = self._registry.insert_sorted(index, handle)
        self._host.place_view(handle, position)
        self._host.on_become_visible(index, handle, side)
        logger.debug(
            "cell.enter index=%d side=%s recycled=%s", index, side.value, not constructed
        )

    def _exit(self, index: int, side: PanelSide) -> None:
        removed = self._registry.remove_at(index)
        handle = removed.cell.handle
        self._host.on_become_invisible(index, handle, side)
        self._host.park_view(handle)
        self._cache.put(index, handle)
        self._metrics.increment("retired")

    def _dispose_evicted(self, index: int, handle: ViewHandle) -> None:
        _ = index
        self._host.dispose_view(handle)
        self._metrics.increment("evicted")

    def _apply_padding(self, padding: EffectivePadding) -> None:
        self._padding = padding
        self._host.set_padding(padding)

    def _require_layout(self) -> GridLayout:
        if self._layout is None:
            raise RuntimeError("diff engine has no layout bound")
        return self._layout

    def _require_factory(self) -> ViewFactory:
        if self._factory is None:
            raise RuntimeError("diff engine has no view factory bound")
        return self._factory

    def _require_window(self) -> WindowBounds:
        if self._window is None:
            raise RuntimeError("diff engine has no current window")
        return self._window
