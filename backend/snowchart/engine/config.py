"""Render configuration: every visual constant of a frame."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Controls how the scene renderer draws a frame."""

    # Curve shape
    tension: float = 0.35  # control distance as a fraction of chord length
    pop_scale: float = 1.05  # enlarged curve in focus mode

    # Wedge clip radius, as a multiple of max_radius
    hover_wedge_factor: float = 1.2
    focus_wedge_factor: float = 1.5

    # Background rings and axes (white)
    ring_count: int = 7
    ring_odd_opacity: float = 0.06
    ring_even_opacity: float = 0.03
    grid_stroke_opacity: float = 0.1
    grid_stroke_width: float = 1.0

    # Base curve
    fill_opacity: float = 0.8
    stroke_width: float = 2.0

    # Overview hover overlay (white)
    hover_overlay_opacity: float = 0.2

    # Focus mode
    focus_context_opacity: float = 0.2
    focus_stroke_opacity: float = 0.8
    focus_stroke_width: float = 3.0
    shadow_opacity: float = 0.5
    shadow_blur: float = 20.0

    # Vertex markers
    marker_radius: float = 4.0
    dimmed_marker_opacity: float = 0.2

    # Labels
    draw_labels: bool = False
    label_offset: float = 30.0
    label_font_size: float = 11.0
    label_opacity: float = 0.6

    # Transparent when empty
    background: str = ""
