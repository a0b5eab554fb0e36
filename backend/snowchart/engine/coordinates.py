"""Polar/Cartesian mapping and the shared axis-angle convention. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from snowchart.engine.constants import (
    DIMENSION_COUNT,
    MAX_SCORE,
    MIN_VERTEX_RADIUS,
    START_ANGLE,
    TWO_PI,
)


class Point(NamedTuple):
    x: float
    y: float


def to_cartesian(center: Point, radius: float, angle: float) -> Point:
    """Standard polar -> Cartesian conversion around ``center``."""
    return Point(center.x + radius * math.cos(angle), center.y + radius * math.sin(angle))


def to_polar(center: Point, point: Point) -> tuple[float, float]:
    """Inverse of ``to_cartesian``: (radius, angle in (-pi, pi])."""
    dx = point.x - center.x
    dy = point.y - center.y
    return math.hypot(dx, dy), math.atan2(dy, dx)


def slice_angle(count: int = DIMENSION_COUNT) -> float:
    return TWO_PI / count


def axis_angle(index: int, count: int = DIMENSION_COUNT) -> float:
    """Angle of axis ``index``: 0 at the top, clockwise on screen."""
    return START_ANGLE + index * slice_angle(count)


def clamp_score(score: float) -> float:
    return min(max(score, 0), MAX_SCORE)


def vertex_radius(score: float, max_radius: float, scale: float = 1.0) -> float:
    """Radius of a vertex, never below MIN_VERTEX_RADIUS."""
    r = clamp_score(score) / MAX_SCORE * max_radius * scale
    return max(r, MIN_VERTEX_RADIUS)


def compute_vertices(
    scores: Sequence[float],
    center: Point,
    max_radius: float,
    scale: float = 1.0,
) -> NDArray[np.float64]:
    """Vertices for ordered scores as an Nx2 array of (x, y).

    ``scale`` enlarges the score radius before the minimum-radius clamp.
    """
    count = len(scores)
    radii = np.array([vertex_radius(s, max_radius, scale) for s in scores], dtype=np.float64)
    angles = START_ANGLE + np.arange(count) * slice_angle(count)
    return np.column_stack([center.x + radii * np.cos(angles), center.y + radii * np.sin(angles)])
