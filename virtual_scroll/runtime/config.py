"""Centralized scroller configuration sourced from environment."""

from __future__ import annotations

import os
from collections.abc import Mapping

from virtual_scroll.api.logging import ScrollerLoggingConfig
from virtual_scroll.api.options import ScrollerOptions
from virtual_scroll.api.types import HorizontalAlignment, JumpPolicy
from virtual_scroll.runtime.errors import InvalidScrollerArgument


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def parse_alignment(value: str | HorizontalAlignment) -> HorizontalAlignment:
    """Resolve an alignment name, raising for unsupported values."""
    if isinstance(value, HorizontalAlignment):
        return value
    normalized = str(value).strip().lower()
    if normalized in {"left", "start"}:
        return HorizontalAlignment.LEADING
    if normalized in {"right", "end"}:
        return HorizontalAlignment.TRAILING
    try:
        return HorizontalAlignment(normalized)
    except ValueError:
        raise InvalidScrollerArgument(f"unsupported horizontal alignment: {value!r}") from None


def parse_jump_policy(value: str | JumpPolicy) -> JumpPolicy:
    """Resolve a jump policy name, raising for unsupported values."""
    if isinstance(value, JumpPolicy):
        return value
    normalized = str(value).strip().lower().replace("-", "_")
    if normalized == "bring_on_screen":
        return JumpPolicy.ON_SCREEN
    try:
        return JumpPolicy(normalized)
    except ValueError:
        raise InvalidScrollerArgument(f"unsupported jump policy: {value!r}") from None


def validate_options(options: ScrollerOptions) -> ScrollerOptions:
    """Return options with a normalized alignment after range checks."""
    if options.cache_capacity < 0:
        raise InvalidScrollerArgument("cache_capacity must be >= 0")
    if not options.match_container_width and options.items_per_row < 1:
        raise InvalidScrollerArgument("items_per_row must be >= 1")
    alignment = parse_alignment(options.horizontal_alignment)
    if alignment is options.horizontal_alignment:
        return options
    return ScrollerOptions(
        items_per_row=options.items_per_row,
        match_container_width=options.match_container_width,
        cache_capacity=options.cache_capacity,
        horizontal_alignment=alignment,
        metrics_enabled=options.metrics_enabled,
    )


def load_scroller_options(*, env: Mapping[str, str] | None = None) -> ScrollerOptions:
    """Load scroller options from `SCROLLER_*` environment variables."""
    defaults = ScrollerOptions()
    return validate_options(
        ScrollerOptions(
            items_per_row=_int("SCROLLER_ITEMS_PER_ROW", defaults.items_per_row, minimum=1, env=env),
            match_container_width=_flag(
                "SCROLLER_MATCH_CONTAINER_WIDTH", defaults.match_container_width, env=env
            ),
            cache_capacity=_int("SCROLLER_CACHE_CAPACITY", defaults.cache_capacity, minimum=0, env=env),
            horizontal_alignment=parse_alignment(
                _text("SCROLLER_HORIZONTAL_ALIGNMENT", defaults.horizontal_alignment.value, env=env)
            ),
            metrics_enabled=_flag("SCROLLER_METRICS_ENABLED", defaults.metrics_enabled, env=env),
        )
    )


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with scroller-prefixed override."""
    value = _raw("SCROLLER_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_logging_config(*, env: Mapping[str, str] | None = None) -> ScrollerLoggingConfig:
    """Load logging pipeline configuration from environment."""
    file_path = _text("SCROLLER_LOG_FILE", "", env=env)
    return ScrollerLoggingConfig(
        level_name=resolve_log_level_name(env=env),
        console_format=_text("SCROLLER_LOG_FORMAT", "text", env=env).lower(),
        file_path=file_path or None,
        file_format=_text("SCROLLER_LOG_FILE_FORMAT", "json", env=env).lower(),
    )
