"""Math helpers — clamp, lerp, angle wrapping, number formatting. No engine imports."""

from __future__ import annotations

import math


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation; t=0 -> start, t=1 -> end."""
    return start * (1 - t) + end * t


def wrap_angle(angle: float) -> float:
    """Normalize an angle into [0, 2pi)."""
    wrapped = angle % (2 * math.pi)
    # -1e-17 % 2pi rounds to exactly 2pi
    if wrapped >= 2 * math.pi:
        return 0.0
    return wrapped


def format_number(value: float, digits: int = 2) -> str:
    """Fixed precision with trailing zeros stripped: 85.4285 -> '85.43', 100.0 -> '100'."""
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text
