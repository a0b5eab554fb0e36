"""Immediate-mode drawing surface that records SVG elements.

The API follows a 2D canvas context: global alpha, clip regions and shadows
are part of a graphics state that is pushed and popped with ``saved()``.
Clip paths and shadow filters become ``<defs>`` entries; every drawn element
carries the state that was active when it was drawn.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any

from snowchart.engine.coordinates import Point
from snowchart.svg.serializer import serialize_svg
from snowchart.utils.math_helpers import clamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphicsState:
    alpha: float = 1.0
    clip_id: str | None = None
    filter_id: str | None = None


class SvgSurface:
    """Drawing target for one frame. Create a new one per frame and per size."""

    def __init__(self, width: float, height: float, pixel_ratio: float = 1.0) -> None:
        self.width = width
        self.height = height
        self.pixel_ratio = pixel_ratio
        self._elements: list[dict[str, Any]] = []
        self._defs: list[dict[str, Any]] = []
        self._state = GraphicsState()
        self._stack: list[GraphicsState] = []
        self._filters: dict[tuple[str, float, float, float, float], str] = {}
        self._clip_count = 0
        self._closed = False

    # --- lifecycle ---

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("Drawing on a released surface")

    # --- graphics state ---

    @property
    def state(self) -> GraphicsState:
        return self._state

    @property
    def depth(self) -> int:
        return len(self._stack)

    @contextmanager
    def saved(self) -> Iterator[SvgSurface]:
        """Push the graphics state; it is restored on every exit path."""
        self._check_open()
        self._stack.append(self._state)
        try:
            yield self
        finally:
            self._state = self._stack.pop()

    def set_alpha(self, alpha: float) -> None:
        self._state = replace(self._state, alpha=clamp(alpha, 0.0, 1.0))

    def clip(self, path_data: str) -> None:
        """Intersect the current clip region with ``path_data``."""
        self._check_open()
        clip_id = f"clip-{self._clip_count}"
        self._clip_count += 1
        clip_def: dict[str, Any] = {"tag": "clipPath", "id": clip_id}
        if self._state.clip_id is not None:
            clip_def["clip-path"] = f"url(#{self._state.clip_id})"
        clip_def["children"] = [{"tag": "path", "d": path_data}]
        self._defs.append(clip_def)
        self._state = replace(self._state, clip_id=clip_id)

    def set_shadow(
        self,
        color: str = "#000000",
        opacity: float = 0.5,
        blur: float = 20.0,
        offset_x: float = 0.0,
        offset_y: float = 0.0,
    ) -> None:
        """Drop shadow for subsequent drawing. ``blur`` follows canvas ``shadowBlur``."""
        self._check_open()
        key = (color, float(opacity), float(blur), float(offset_x), float(offset_y))
        filter_id = self._filters.get(key)
        if filter_id is None:
            filter_id = f"shadow-{len(self._filters)}"
            self._filters[key] = filter_id
            self._defs.append(
                {
                    "tag": "filter",
                    "id": filter_id,
                    "x": "-50%",
                    "y": "-50%",
                    "width": "200%",
                    "height": "200%",
                    "children": [
                        {
                            "tag": "feDropShadow",
                            "dx": float(offset_x),
                            "dy": float(offset_y),
                            # canvas shadowBlur is twice the gaussian standard deviation
                            "stdDeviation": float(blur) / 2,
                            "flood-color": color,
                            "flood-opacity": float(opacity),
                        }
                    ],
                }
            )
        self._state = replace(self._state, filter_id=filter_id)

    # --- drawing ---

    def _emit(self, elem: dict[str, Any]) -> None:
        self._check_open()
        if self._state.alpha < 1.0:
            elem["opacity"] = float(self._state.alpha)
        if self._state.filter_id is not None:
            elem["filter"] = f"url(#{self._state.filter_id})"
        if self._state.clip_id is not None:
            elem["clip-path"] = f"url(#{self._state.clip_id})"
        self._elements.append(elem)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self._emit({"tag": "rect", "x": float(x), "y": float(y), "width": float(w),
                    "height": float(h), "fill": color})

    def fill_path(self, path_data: str, color: str, opacity: float = 1.0) -> None:
        elem: dict[str, Any] = {"tag": "path", "d": path_data, "fill": color}
        if opacity < 1.0:
            elem["fill-opacity"] = float(opacity)
        self._emit(elem)

    def stroke_path(
        self, path_data: str, color: str, width: float = 1.0, opacity: float = 1.0
    ) -> None:
        elem: dict[str, Any] = {
            "tag": "path",
            "d": path_data,
            "fill": "none",
            "stroke": color,
            "stroke-width": float(width),
        }
        if opacity < 1.0:
            elem["stroke-opacity"] = float(opacity)
        self._emit(elem)

    def fill_circle(self, center: Point, radius: float, color: str, opacity: float = 1.0) -> None:
        elem: dict[str, Any] = {
            "tag": "circle",
            "cx": float(center.x),
            "cy": float(center.y),
            "r": float(radius),
            "fill": color,
        }
        if opacity < 1.0:
            elem["fill-opacity"] = float(opacity)
        self._emit(elem)

    def stroke_circle(
        self, center: Point, radius: float, color: str, width: float = 1.0, opacity: float = 1.0
    ) -> None:
        elem: dict[str, Any] = {
            "tag": "circle",
            "cx": float(center.x),
            "cy": float(center.y),
            "r": float(radius),
            "fill": "none",
            "stroke": color,
            "stroke-width": float(width),
        }
        if opacity < 1.0:
            elem["stroke-opacity"] = float(opacity)
        self._emit(elem)

    def text(
        self,
        position: Point,
        content: str,
        color: str = "#ffffff",
        size: float = 11.0,
        opacity: float = 1.0,
    ) -> None:
        elem: dict[str, Any] = {
            "tag": "text",
            "x": float(position.x),
            "y": float(position.y),
            "fill": color,
            "font-size": float(size),
            "font-family": "sans-serif",
            "font-weight": "bold",
            "text-anchor": "middle",
            "dominant-baseline": "middle",
        }
        if opacity < 1.0:
            elem["fill-opacity"] = float(opacity)
        elem["text"] = content
        self._emit(elem)

    # --- output ---

    @property
    def elements(self) -> list[dict[str, Any]]:
        return list(self._elements)

    @property
    def defs(self) -> list[dict[str, Any]]:
        return list(self._defs)

    def to_svg(self, title: str = "", description: str = "") -> str:
        return serialize_svg(
            self._elements,
            canvas_w=float(self.width),
            canvas_h=float(self.height),
            title=title,
            description=description,
            defs=self._defs,
            pixel_w=float(self.width * self.pixel_ratio),
            pixel_h=float(self.height * self.pixel_ratio),
        )


@contextmanager
def acquire_surface(width: float, height: float, pixel_ratio: float = 1.0) -> Iterator[SvgSurface]:
    """Scoped surface: a fresh one at the requested size, released on exit."""
    surface = SvgSurface(width, height, pixel_ratio)
    logger.debug("Acquired %sx%s surface (ratio %s)", width, height, pixel_ratio)
    try:
        yield surface
    finally:
        surface.close()
