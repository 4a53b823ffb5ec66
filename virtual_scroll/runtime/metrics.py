"""Cell churn metrics for scroller diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class UpdateMetrics:
    """Counters captured for a single scroller update."""

    update_index: int
    kind: str
    created: int = 0
    reused: int = 0
    retired: int = 0
    disposed: int = 0
    evicted: int = 0
    full_rebuild: bool = False

    @property
    def churn(self) -> int:
        """Cells that entered or left the window during the update."""
        return self.created + self.reused + self.retired + self.disposed


@dataclass(frozen=True, slots=True)
class MetricsSnapshot:
    """Read-only snapshot consumable by hosts and loggers."""

    last_update: UpdateMetrics | None
    updates: int
    full_rebuilds: int
    totals: dict[str, int] = field(default_factory=dict)


class NoopScrollerMetrics:
    """No-op collector for zero-impact disabled mode."""

    def begin_update(self, kind: str) -> None:
        _ = kind

    def increment(self, counter: str, count: int = 1) -> None:
        _ = (counter, count)

    def mark_full_rebuild(self) -> None:
        return None

    def end_update(self) -> UpdateMetrics | None:
        return None

    def snapshot(self) -> MetricsSnapshot:
        return MetricsSnapshot(last_update=None, updates=0, full_rebuilds=0)


class ScrollerMetrics:
    """Small in-memory collector of per-update and cumulative cell churn."""

    COUNTERS: tuple[str, ...] = ("created", "reused", "retired", "disposed", "evicted")

    def __init__(self) -> None:
        self._update_index = 0
        self._kind = ""
        self._current: dict[str, int] = dict.fromkeys(self.COUNTERS, 0)
        self._full_rebuild = False
        self._totals: dict[str, int] = dict.fromkeys(self.COUNTERS, 0)
        self._full_rebuilds = 0
        self._last_update: UpdateMetrics | None = None

    def begin_update(self, kind: str) -> None:
        self._update_index += 1
        self._kind = str(kind)
        self._current = dict.fromkeys(self.COUNTERS, 0)
        self._full_rebuild = False

    def increment(self, counter: str, count: int = 1) -> None:
        if counter not in self._current:
            raise KeyError(f"unknown scroller counter: {counter!r}")
        self._current[counter] += int(count)
        self._totals[counter] += int(count)

    def mark_full_rebuild(self) -> None:
        if not self._full_rebuild:
            self._full_rebuilds += 1
        self._full_rebuild = True

    def end_update(self) -> UpdateMetrics:
        self._last_update = UpdateMetrics(
            update_index=self._update_index,
            kind=self._kind,
            full_rebuild=self._full_rebuild,
            **self._current,
        )
        return self._last_update

    def snapshot(self) -> MetricsSnapshot:
        return MetricsSnapshot(
            last_update=self._last_update,
            updates=self._update_index,
            full_rebuilds=self._full_rebuilds,
            totals=dict(self._totals),
        )


def create_scroller_metrics(*, enabled: bool) -> ScrollerMetrics | NoopScrollerMetrics:
    """Factory returning enabled collector or no-op implementation."""
    if not enabled:
        return NoopScrollerMetrics()
    return ScrollerMetrics()
