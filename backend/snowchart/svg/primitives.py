"""SVG path data for the chart's basic shapes: wedges, spokes, circles."""

from __future__ import annotations

import math
from collections.abc import Iterable

from snowchart.engine.coordinates import Point, to_cartesian
from snowchart.utils.math_helpers import format_number


def _pt(p: Point) -> str:
    return f"{format_number(p.x)},{format_number(p.y)}"


def wedge_path(center: Point, radius: float, start_angle: float, end_angle: float) -> str:
    """Pie slice from ``start_angle`` to ``end_angle`` (clockwise on screen)."""
    start = to_cartesian(center, radius, start_angle)
    end = to_cartesian(center, radius, end_angle)
    sweep = (end_angle - start_angle) % (2 * math.pi)
    large_arc = 1 if sweep > math.pi else 0
    r = format_number(radius)
    return f"M {_pt(center)} L {_pt(start)} A {r} {r} 0 {large_arc} 1 {_pt(end)} Z"


def spokes_path(center: Point, ends: Iterable[Point]) -> str:
    """One subpath per spoke, center -> end."""
    return " ".join(f"M {_pt(center)} L {_pt(end)}" for end in ends)
