"""Scene renderer — draws one frame of the snowflake chart.

``render`` is a pure function of the frame: it keeps nothing between calls
and draws everything from scratch. Layers, bottom to top:

    rings -> axes -> curve (overview) or dimmed curve + popped wedge (focus)
    -> vertex markers -> optional labels
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from snowchart.engine.color import HslColor, color_for
from snowchart.engine.config import RenderConfig
from snowchart.engine.constants import MAX_SCORE
from snowchart.engine.context import Frame
from snowchart.engine.coordinates import (
    Point,
    axis_angle,
    compute_vertices,
    slice_angle,
    to_cartesian,
)
from snowchart.engine.curve import Curve, build_curve, build_score_curve
from snowchart.engine.labels import LabelAnchor, label_anchors
from snowchart.svg.primitives import spokes_path, wedge_path
from snowchart.svg.surface import SvgSurface, acquire_surface

logger = logging.getLogger(__name__)

WHITE = "#ffffff"
BLACK = "#000000"


@dataclass(frozen=True)
class SceneGeometry:
    """Geometry derived from a frame; recomputed on every render."""

    center: Point
    max_radius: float
    vertices: NDArray[np.float64]
    curve: Curve
    # Base curve enlarged by the pop scale, drawn in focus mode
    popped: Curve
    color: HslColor
    aggregate: float
    max_aggregate: float

    @classmethod
    def from_frame(cls, frame: Frame, config: RenderConfig) -> SceneGeometry:
        center = frame.center
        max_radius = frame.max_radius
        scores = frame.scores.scores
        vertices = compute_vertices(scores, center, max_radius)
        aggregate = frame.scores.aggregate
        return cls(
            center=center,
            max_radius=max_radius,
            vertices=vertices,
            curve=build_curve(vertices, center, tension=config.tension),
            popped=build_score_curve(
                scores, center, max_radius, tension=config.tension, scale=config.pop_scale
            ),
            color=color_for(aggregate, frame.scores.max_aggregate),
            aggregate=aggregate,
            max_aggregate=frame.scores.max_aggregate,
        )

    def wedge(self, index: int, radius_factor: float) -> str:
        """Axis-centered pie slice for dimension ``index``."""
        mid = axis_angle(index)
        half = slice_angle() / 2
        return wedge_path(self.center, self.max_radius * radius_factor, mid - half, mid + half)


@dataclass(frozen=True)
class RenderedFrame:
    svg: str
    scene: SceneGeometry
    labels: list[LabelAnchor] = field(default_factory=list)
    elapsed_ms: float = 0.0


def render(frame: Frame, surface: SvgSurface, config: RenderConfig | None = None) -> SceneGeometry:
    """Draw ``frame`` onto ``surface``."""
    config = config or RenderConfig()
    scene = SceneGeometry.from_frame(frame, config)
    focus_index = frame.mode.focus_index

    if config.background:
        surface.fill_rect(0, 0, frame.width, frame.height, config.background)

    _draw_rings(surface, scene, config)
    _draw_axes(surface, scene, config)

    if focus_index is not None:
        _draw_focus(surface, scene, focus_index, config)
    else:
        _draw_overview(surface, scene, frame.effective_hover, config)

    _draw_markers(surface, scene, focus_index, config)

    if config.draw_labels:
        _draw_labels(surface, scene, frame, config)

    logger.debug(
        "Rendered %s frame: aggregate=%s color=%s hover=%s",
        frame.mode.kind.value,
        scene.aggregate,
        scene.color.css,
        frame.effective_hover,
    )
    return scene


def render_frame(frame: Frame, config: RenderConfig | None = None) -> RenderedFrame:
    """Render onto a freshly acquired surface and serialize it."""
    config = config or RenderConfig()
    start = time.perf_counter()
    with acquire_surface(frame.width, frame.height, frame.pixel_ratio) as surface:
        scene = render(frame, surface, config)
        svg = surface.to_svg(
            title="Snowflake chart",
            description=f"Aggregate score {scene.aggregate:g} of {scene.max_aggregate:g}",
        )
    elapsed = (time.perf_counter() - start) * 1000
    return RenderedFrame(
        svg=svg,
        scene=scene,
        labels=label_anchors(
            scene.center, scene.max_radius, config.label_offset, frame.dimensions
        ),
        elapsed_ms=elapsed,
    )


def render_png(frame: Frame, config: RenderConfig | None = None) -> bytes:
    """PNG at the frame's physical pixel size (width * pixel_ratio)."""
    from snowchart.svg.rasterizer import svg_to_png

    return svg_to_png(render_frame(frame, config).svg)


# --- layers ---


def _draw_rings(surface: SvgSurface, scene: SceneGeometry, config: RenderConfig) -> None:
    for i in range(1, config.ring_count + 1):
        r = scene.max_radius / MAX_SCORE * i
        opacity = config.ring_odd_opacity if i % 2 else config.ring_even_opacity
        surface.fill_circle(scene.center, r, WHITE, opacity)
        if i == config.ring_count:
            surface.stroke_circle(
                scene.center, r, WHITE, config.grid_stroke_width, config.grid_stroke_opacity
            )


def _draw_axes(surface: SvgSurface, scene: SceneGeometry, config: RenderConfig) -> None:
    ends = [
        to_cartesian(scene.center, scene.max_radius, axis_angle(i))
        for i in range(len(scene.vertices))
    ]
    surface.stroke_path(
        spokes_path(scene.center, ends),
        WHITE,
        config.grid_stroke_width,
        config.grid_stroke_opacity,
    )


def _draw_overview(
    surface: SvgSurface,
    scene: SceneGeometry,
    hover_index: int | None,
    config: RenderConfig,
) -> None:
    path = scene.curve.to_path_data()
    surface.fill_path(path, scene.color.hex, config.fill_opacity)
    surface.stroke_path(path, scene.color.hex, config.stroke_width)

    if hover_index is None:
        return

    # Lighten the hovered wedge of the curve that is already drawn.
    with surface.saved():
        surface.clip(scene.wedge(hover_index, config.hover_wedge_factor))
        surface.fill_path(path, WHITE, config.hover_overlay_opacity)


def _draw_focus(
    surface: SvgSurface,
    scene: SceneGeometry,
    focus_index: int,
    config: RenderConfig,
) -> None:
    # Dimmed context
    with surface.saved():
        surface.set_alpha(config.focus_context_opacity)
        surface.fill_path(scene.curve.to_path_data(), scene.color.hex)

    # Enlarged curve, clipped to the focused wedge
    popped = scene.popped.to_path_data()
    with surface.saved():
        surface.clip(scene.wedge(focus_index, config.focus_wedge_factor))
        surface.set_shadow(BLACK, config.shadow_opacity, config.shadow_blur)
        surface.fill_path(popped, scene.color.hex)
        surface.stroke_path(
            popped, WHITE, config.focus_stroke_width, config.focus_stroke_opacity
        )


def _draw_markers(
    surface: SvgSurface,
    scene: SceneGeometry,
    focus_index: int | None,
    config: RenderConfig,
) -> None:
    for i, (x, y) in enumerate(scene.vertices):
        dimmed = focus_index is not None and i != focus_index
        opacity = config.dimmed_marker_opacity if dimmed else 1.0
        surface.fill_circle(Point(float(x), float(y)), config.marker_radius, WHITE, opacity)


def _draw_labels(
    surface: SvgSurface,
    scene: SceneGeometry,
    frame: Frame,
    config: RenderConfig,
) -> None:
    anchors = label_anchors(scene.center, scene.max_radius, config.label_offset, frame.dimensions)
    for anchor in anchors:
        surface.text(
            anchor.position,
            anchor.text,
            WHITE,
            size=config.label_font_size,
            opacity=config.label_opacity,
        )
