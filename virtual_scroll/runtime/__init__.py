"""Scroller runtime: configuration, logging, events and metrics."""

from virtual_scroll.runtime.config import load_logging_config, load_scroller_options
from virtual_scroll.runtime.errors import InvalidScrollerArgument
from virtual_scroll.runtime.logging import configure_scroller_logging, setup_scroller_logging
from virtual_scroll.runtime.metrics import (
    MetricsSnapshot,
    NoopScrollerMetrics,
    ScrollerMetrics,
    UpdateMetrics,
    create_scroller_metrics,
)

__all__ = [
    "InvalidScrollerArgument",
    "MetricsSnapshot",
    "NoopScrollerMetrics",
    "ScrollerMetrics",
    "UpdateMetrics",
    "configure_scroller_logging",
    "create_scroller_metrics",
    "load_logging_config",
    "load_scroller_options",
    "setup_scroller_logging",
]
