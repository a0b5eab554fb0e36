"""Aggregate score -> HSL color on a red-to-green ramp."""

from __future__ import annotations

import colorsys
from typing import NamedTuple

from snowchart.engine.constants import (
    HUE_HIGH,
    HUE_LOW,
    LIGHTNESS_HIGH,
    LIGHTNESS_LOW,
    SATURATION,
)
from snowchart.utils.math_helpers import clamp, format_number, lerp


class HslColor(NamedTuple):
    hue: float  # degrees
    saturation: float  # percent
    lightness: float  # percent

    @property
    def css(self) -> str:
        return (
            f"hsl({format_number(self.hue)}, {format_number(self.saturation)}%, "
            f"{format_number(self.lightness)}%)"
        )

    @property
    def hex(self) -> str:
        r, g, b = colorsys.hls_to_rgb(
            (self.hue % 360) / 360, self.lightness / 100, self.saturation / 100
        )
        return "#{:02x}{:02x}{:02x}".format(*(round(c * 255) for c in (r, g, b)))


def score_ratio(aggregate: float, max_aggregate: float) -> float:
    """Aggregate as a fraction of the maximum, clamped to [0, 1].

    ``max_aggregate`` must be positive.
    """
    return clamp(aggregate / max_aggregate, 0.0, 1.0)


def color_for(aggregate: float, max_aggregate: float) -> HslColor:
    t = score_ratio(aggregate, max_aggregate)
    return HslColor(
        hue=lerp(HUE_LOW, HUE_HIGH, t),
        saturation=SATURATION,
        lightness=lerp(LIGHTNESS_LOW, LIGHTNESS_HIGH, t),
    )
