"""Frame input — the immutable state a single render is computed from.

Scores, mode and hover index are owned by the host application and passed in
whole on every change. Nothing here is mutated by the renderer.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from snowchart.engine.constants import DIMENSION_COUNT, LABEL_PADDING, MAX_AGGREGATE
from snowchart.engine.coordinates import Point, clamp_score


class DimensionKey(str, enum.Enum):
    VALUE = "value"
    FUTURE = "future"
    PAST = "past"
    HEALTH = "health"
    DIVIDEND = "dividend"


# Definition order is axis order.
ORDERED_KEYS: tuple[DimensionKey, ...] = tuple(DimensionKey)

CHECKLIST_LENGTH = 6


@dataclass(frozen=True)
class Dimension:
    """One scored attribute, with the data the host shows next to the chart."""

    key: DimensionKey
    score: int
    label: str = ""
    description: str = ""
    # Secondary display only; the geometry never reads it.
    checklist: tuple[bool, ...] = (False,) * CHECKLIST_LENGTH

    @property
    def display_label(self) -> str:
        return self.label or self.key.value


@dataclass(frozen=True)
class ScoreSet:
    """Scores for the five dimensions, stored in axis order."""

    scores: tuple[int, ...]

    @classmethod
    def from_mapping(cls, mapping: Mapping[DimensionKey | str, int]) -> ScoreSet:
        by_key = {DimensionKey(k): v for k, v in mapping.items()}
        return cls(tuple(by_key[key] for key in ORDERED_KEYS))

    @classmethod
    def from_dimensions(cls, dimensions: Iterable[Dimension]) -> ScoreSet:
        return cls.from_mapping({d.key: d.score for d in dimensions})

    def __getitem__(self, key: DimensionKey | str) -> int:
        return self.scores[ORDERED_KEYS.index(DimensionKey(key))]

    def clamped(self) -> tuple[float, ...]:
        return tuple(clamp_score(s) for s in self.scores)

    @property
    def aggregate(self) -> float:
        return sum(self.clamped())

    @property
    def max_aggregate(self) -> int:
        return MAX_AGGREGATE


class ModeKind(str, enum.Enum):
    OVERVIEW = "overview"
    FOCUS = "focus"


@dataclass(frozen=True)
class Mode:
    kind: ModeKind = ModeKind.OVERVIEW
    focus: DimensionKey | None = None

    @classmethod
    def overview(cls) -> Mode:
        return cls(ModeKind.OVERVIEW)

    @classmethod
    def focused(cls, key: DimensionKey | str) -> Mode:
        return cls(ModeKind.FOCUS, DimensionKey(key))

    @property
    def is_focus(self) -> bool:
        return self.kind is ModeKind.FOCUS and self.focus is not None

    @property
    def focus_index(self) -> int | None:
        if not self.is_focus:
            return None
        return ORDERED_KEYS.index(self.focus)


@dataclass(frozen=True)
class Frame:
    """Everything one render depends on."""

    scores: ScoreSet
    mode: Mode = field(default_factory=Mode.overview)
    hover_index: int | None = None
    # Logical drawing-surface size in CSS pixels
    width: float = 400.0
    height: float = 400.0
    pixel_ratio: float = 1.0
    # Display metadata for the axes; empty means key names are used.
    dimensions: tuple[Dimension, ...] = ()

    @classmethod
    def from_dimensions(cls, dimensions: Iterable[Dimension], **kwargs) -> Frame:
        dims = tuple(dimensions)
        return cls(scores=ScoreSet.from_dimensions(dims), dimensions=dims, **kwargs)

    @property
    def center(self) -> Point:
        return Point(self.width / 2, self.height / 2)

    @property
    def max_radius(self) -> float:
        return max(min(self.width, self.height) / 2 - LABEL_PADDING, 0.0)

    @property
    def effective_hover(self) -> int | None:
        """Hover only counts in overview mode."""
        if self.mode.kind is ModeKind.FOCUS or self.hover_index is None:
            return None
        if not 0 <= self.hover_index < DIMENSION_COUNT:
            return None
        return self.hover_index
