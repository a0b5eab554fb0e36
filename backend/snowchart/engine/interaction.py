"""Pointer events -> next hover index and click activations.

Each event fully determines the next hover value; the host stores it and
renders a new frame. Nothing is retained here.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from snowchart.engine.context import ORDERED_KEYS, DimensionKey, Frame, Mode, ModeKind
from snowchart.engine.coordinates import Point
from snowchart.engine.hit_test import DEFAULT_TOLERANCE, hit_test

logger = logging.getLogger(__name__)


class PointerKind(str, enum.Enum):
    MOVE = "move"
    LEAVE = "leave"
    CLICK = "click"


@dataclass(frozen=True)
class PointerEvent:
    kind: PointerKind
    # Surface-relative coordinates, unused for LEAVE
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class PointerOutcome:
    hover_index: int | None
    activated: DimensionKey | None = None

    @property
    def hover_key(self) -> DimensionKey | None:
        if self.hover_index is None:
            return None
        return ORDERED_KEYS[self.hover_index]


def handle_pointer(
    frame: Frame,
    event: PointerEvent,
    tolerance: float = DEFAULT_TOLERANCE,
) -> PointerOutcome:
    """Apply one pointer event to ``frame``."""
    if event.kind is PointerKind.LEAVE:
        return PointerOutcome(hover_index=None)

    # Focus mode ignores hover and clicks.
    if frame.mode.kind is ModeKind.FOCUS:
        return PointerOutcome(hover_index=frame.hover_index)

    index = hit_test(Point(event.x, event.y), frame.center, frame.max_radius, tolerance)
    if event.kind is PointerKind.MOVE or index is None:
        return PointerOutcome(hover_index=index)

    key = ORDERED_KEYS[index]
    logger.info("Dimension %s (index %d) activated by click", key.value, index)
    return PointerOutcome(hover_index=index, activated=key)


def next_mode(mode: Mode, outcome: PointerOutcome) -> Mode:
    """Activating a dimension switches to focus on it; otherwise the mode is unchanged."""
    if outcome.activated is not None:
        return Mode.focused(outcome.activated)
    return mode
