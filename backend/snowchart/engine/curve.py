"""Smooth closed curve through the score vertices.

At each vertex the tangent is perpendicular to the radius from the chart
center, so the blob reads as a deformed circle instead of a polygon. Control
handles are scaled by the chord length between neighbouring vertices.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from snowchart.engine.coordinates import Point, compute_vertices
from snowchart.utils.geometry import bbox, sample_cubic
from snowchart.utils.math_helpers import format_number

DEFAULT_TENSION = 0.35


@dataclass(frozen=True)
class Curve:
    """Closed chain of cubic béziers.

    ``segments`` has shape (N, 4, 2): start, control 1, control 2, end.
    """

    segments: NDArray[np.float64]

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def is_closed(self) -> bool:
        if len(self.segments) == 0:
            return False
        return bool(np.allclose(self.segments[0, 0], self.segments[-1, 3]))

    def sample(self, samples_per_segment: int = 12) -> NDArray[np.float64]:
        """Points along the curve, without duplicating shared segment endpoints."""
        if len(self.segments) == 0:
            return np.empty((0, 2))
        chunks = [sample_cubic(seg, samples_per_segment + 1)[:-1] for seg in self.segments]
        return np.concatenate(chunks)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        return bbox(self.sample())

    def to_path_data(self, digits: int = 2) -> str:
        """SVG path data: ``M x,y C c1 c2 p ... Z``."""
        if len(self.segments) == 0:
            return ""

        def pt(p: NDArray[np.float64]) -> str:
            return f"{format_number(float(p[0]), digits)},{format_number(float(p[1]), digits)}"

        parts = [f"M {pt(self.segments[0, 0])}"]
        for seg in self.segments:
            parts.append(f"C {pt(seg[1])} {pt(seg[2])} {pt(seg[3])}")
        parts.append("Z")
        return " ".join(parts)


def control_points(
    p1: NDArray[np.float64],
    p2: NDArray[np.float64],
    center: Point,
    tension: float = DEFAULT_TENSION,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Control points of the segment p1 -> p2.

    Outgoing tangent at p1 is its radius angle + 90°, incoming tangent at p2
    is its radius angle - 90°.
    """
    angle1 = np.arctan2(p1[1] - center.y, p1[0] - center.x)
    angle2 = np.arctan2(p2[1] - center.y, p2[0] - center.x)
    tan1 = angle1 + np.pi / 2
    tan2 = angle2 - np.pi / 2

    control_dist = float(np.linalg.norm(p2 - p1)) * tension

    cp1 = p1 + control_dist * np.array([np.cos(tan1), np.sin(tan1)])
    cp2 = p2 + control_dist * np.array([np.cos(tan2), np.sin(tan2)])
    return cp1, cp2


def build_curve(
    vertices: NDArray[np.float64],
    center: Point,
    tension: float = DEFAULT_TENSION,
) -> Curve:
    """One cubic segment per consecutive vertex pair, wrapping last -> first."""
    pts = np.asarray(vertices, dtype=np.float64)
    n = len(pts)
    segments = np.empty((n, 4, 2), dtype=np.float64)
    for i in range(n):
        p1 = pts[i]
        p2 = pts[(i + 1) % n]
        cp1, cp2 = control_points(p1, p2, center, tension)
        segments[i] = (p1, cp1, cp2, p2)
    return Curve(segments)


def build_score_curve(
    scores: Sequence[float],
    center: Point,
    max_radius: float,
    tension: float = DEFAULT_TENSION,
    scale: float = 1.0,
) -> Curve:
    """Curve straight from ordered scores.

    ``scale`` enlarges each score radius (not the center) before the
    minimum-radius clamp, so a zero score stays at MIN_VERTEX_RADIUS.
    """
    return build_curve(compute_vertices(scores, center, max_radius, scale), center, tension)
