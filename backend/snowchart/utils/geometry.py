"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def sample_cubic(segment: NDArray[np.float64], samples: int = 12) -> NDArray[np.float64]:
    """Evaluate a cubic bézier (4x2 control array) at ``samples`` evenly spaced t in [0, 1]."""
    t = np.linspace(0.0, 1.0, samples)[:, None]
    p0, p1, p2, p3 = segment
    return (
        (1 - t) ** 3 * p0
        + 3 * (1 - t) ** 2 * t * p1
        + 3 * (1 - t) * t**2 * p2
        + t**3 * p3
    )


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area of a closed point ring.

    Positive = clockwise on screen (y down), negative = counter-clockwise.
    """
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def radial_distances(points: NDArray[np.float64], center: tuple[float, float]) -> NDArray[np.float64]:
    """Distance from ``center`` to each point."""
    cx, cy = center
    return np.sqrt((points[:, 0] - cx) ** 2 + (points[:, 1] - cy) ** 2)
