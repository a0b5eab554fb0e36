"""Pointer position -> dimension index.

Each hit zone is centered on its axis: zone 0 spans
[-pi/2 - slice/2, -pi/2 + slice/2). The hover and focus wedge clips use the
same convention, so highlighting and click targets always line up.
"""

from __future__ import annotations

import math

from snowchart.engine.constants import DIMENSION_COUNT, START_ANGLE
from snowchart.engine.coordinates import Point, slice_angle, to_polar
from snowchart.utils.math_helpers import wrap_angle

DEFAULT_TOLERANCE = 20.0


def hit_test(
    pointer: Point,
    center: Point,
    max_radius: float,
    tolerance: float = DEFAULT_TOLERANCE,
    count: int = DIMENSION_COUNT,
) -> int | None:
    """Index of the wedge under ``pointer``, or None outside the interactive radius."""
    distance, angle = to_polar(center, pointer)
    if distance > max_radius + tolerance:
        return None

    wedge = slice_angle(count)
    normalized = wrap_angle(angle - START_ANGLE + wedge / 2)
    return math.floor(normalized / wedge) % count
