"""Axis label anchors, pushed out past the outer ring."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from snowchart.engine.context import ORDERED_KEYS, Dimension, DimensionKey
from snowchart.engine.coordinates import Point, axis_angle, to_cartesian

DEFAULT_LABEL_OFFSET = 30.0


@dataclass(frozen=True)
class LabelAnchor:
    key: DimensionKey
    text: str
    position: Point


def label_anchors(
    center: Point,
    max_radius: float,
    offset: float = DEFAULT_LABEL_OFFSET,
    dimensions: Sequence[Dimension] = (),
) -> list[LabelAnchor]:
    """One anchor per axis; text is the dimension's display label, upper-cased."""
    names = {d.key: d.display_label for d in dimensions}
    return [
        LabelAnchor(
            key=key,
            text=names.get(key, key.value).upper(),
            position=to_cartesian(center, max_radius + offset, axis_angle(i)),
        )
        for i, key in enumerate(ORDERED_KEYS)
    ]
