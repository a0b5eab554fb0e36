"""Snowflake chart geometry engine."""

from snowchart.engine.color import HslColor, color_for
from snowchart.engine.context import ORDERED_KEYS, Dimension, DimensionKey, Frame, Mode, ScoreSet
from snowchart.engine.coordinates import Point, axis_angle, compute_vertices, to_cartesian
from snowchart.engine.curve import Curve, build_curve, build_score_curve
from snowchart.engine.hit_test import hit_test

__all__ = [
    "HslColor",
    "color_for",
    "ORDERED_KEYS",
    "Dimension",
    "DimensionKey",
    "Frame",
    "Mode",
    "ScoreSet",
    "Point",
    "axis_angle",
    "compute_vertices",
    "to_cartesian",
    "Curve",
    "build_curve",
    "build_score_curve",
    "hit_test",
]
