"""Public enums shared by scroller contracts and runtime."""

from __future__ import annotations

from enum import Enum, StrEnum


class PanelSide(StrEnum):
    """Viewport edge a cell crossed when it entered or left the window."""

    NONE = "none"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class JumpPolicy(StrEnum):
    """How `jump_to` moves the viewport toward a target cell."""

    ON_SCREEN = "on_screen"
    CENTER = "center"


class HorizontalAlignment(StrEnum):
    """Placement of grid content narrower than the viewport."""

    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


class ScrollerState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    GENERATED = "generated"
