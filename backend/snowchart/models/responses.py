"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from snowchart.engine.color import HslColor
from snowchart.engine.context import DimensionKey, ModeKind


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    dimensions: int = 5
    max_score: int = 7


class ColorModel(BaseModel):
    css: str
    hex: str
    hue: float
    saturation: float
    lightness: float

    @classmethod
    def from_color(cls, color: HslColor) -> ColorModel:
        return cls(
            css=color.css,
            hex=color.hex,
            hue=color.hue,
            saturation=color.saturation,
            lightness=color.lightness,
        )


class VertexModel(BaseModel):
    key: DimensionKey
    score: int
    x: float
    y: float


class LabelModel(BaseModel):
    key: DimensionKey
    text: str
    x: float
    y: float


class RenderResponse(BaseModel):
    svg: str
    color: ColorModel
    aggregate: float
    max_aggregate: float
    vertices: list[VertexModel] = Field(default_factory=list)
    labels: list[LabelModel] = Field(default_factory=list)
    # (xmin, ymin, xmax, ymax) of the base curve
    bounds: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    processing_time_ms: float = 0.0


class PointerResponse(BaseModel):
    hover_index: int | None = None
    hover_key: DimensionKey | None = None
    hover_score: str | None = None
    # Aggregate color, for the hover tooltip
    color: ColorModel
    activated: DimensionKey | None = None
    mode: ModeKind = ModeKind.OVERVIEW
    focus: DimensionKey | None = None
