"""Viewport virtualization engine."""

from virtual_scroll.ui_runtime.active_registry import ActiveRegistry, Cell, RemovedCell
from virtual_scroll.ui_runtime.alignment import ContentPlacement, resolve_content_placement
from virtual_scroll.ui_runtime.diff_engine import WindowDiffEngine
from virtual_scroll.ui_runtime.grid_layout import GridLayout, cells_per_row_for_width
from virtual_scroll.ui_runtime.jump import JumpTarget, resolve_jump
from virtual_scroll.ui_runtime.padding import EffectivePadding, derive_effective_padding
from virtual_scroll.ui_runtime.recycle_cache import RecycleCache
from virtual_scroll.ui_runtime.scroller import Scroller
from virtual_scroll.ui_runtime.window import WindowBounds, row_count, visible_span

__all__ = [
    "ActiveRegistry",
    "Cell",
    "ContentPlacement",
    "EffectivePadding",
    "GridLayout",
    "JumpTarget",
    "RecycleCache",
    "RemovedCell",
    "Scroller",
    "WindowBounds",
    "WindowDiffEngine",
    "cells_per_row_for_width",
    "derive_effective_padding",
    "resolve_content_placement",
    "resolve_jump",
    "row_count",
    "visible_span",
]
