"""Shared scroller exception policy helpers."""

from __future__ import annotations

import logging


class InvalidScrollerArgument(ValueError):
    """Raised synchronously for configuration or arguments the scroller cannot honor."""


def log_ignored_request(
    logger: logging.Logger,
    operation: str,
    reason: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit observability for structural misuse tolerated as a no-op."""
    logger.log(level, "scroller.%s ignored: %s", operation, reason, extra={"operation": operation})
