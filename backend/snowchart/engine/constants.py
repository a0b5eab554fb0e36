"""Shared constants for the snowflake geometry.

The chart has a fixed, ordered set of five dimensions. Axis 0 points up
(-90 degrees in screen coordinates, y grows downward) and each following
axis advances clockwise by one slice.
"""

import math

# Five scored dimensions, integer scores 0..7.
DIMENSION_COUNT = 5
MAX_SCORE = 7
MAX_AGGREGATE = DIMENSION_COUNT * MAX_SCORE  # = 35

# Angle of axis 0 ("top") and the angular width of one wedge.
START_ANGLE = -math.pi / 2
SLICE_ANGLE = 2 * math.pi / DIMENSION_COUNT  # = 72 degrees
TWO_PI = 2 * math.pi

# A zero score would put the vertex exactly on the center, where atan2
# has no meaningful angle and the tangent is undefined.
MIN_VERTEX_RADIUS = 2.0

# Space reserved around the chart for axis labels.
LABEL_PADDING = 50.0

# Color ramp: red (hue 0) at a score of zero, green (hue 130) at the maximum.
HUE_LOW = 0.0
HUE_HIGH = 130.0
SATURATION = 100.0
LIGHTNESS_LOW = 58.0
LIGHTNESS_HIGH = 45.0
