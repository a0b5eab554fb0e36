"""API request models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, field_validator, model_validator

from snowchart.config import Settings
from snowchart.engine.constants import DIMENSION_COUNT, MAX_SCORE
from snowchart.engine.context import ORDERED_KEYS, Dimension, DimensionKey, Frame, Mode, ModeKind
from snowchart.engine.interaction import PointerEvent, PointerKind

Score = Annotated[int, Field(ge=0, le=MAX_SCORE)]


class FrameRequest(BaseModel):
    scores: dict[DimensionKey, Score] = Field(
        ..., description="Score (0-7) for each of value, future, past, health, dividend"
    )
    mode: ModeKind = Field(default=ModeKind.OVERVIEW, description="overview or focus")
    focus: DimensionKey | None = Field(default=None, description="Focused dimension (focus mode)")
    hover_index: int | None = Field(
        default=None, ge=0, lt=DIMENSION_COUNT, description="Hovered slice (overview mode)"
    )
    width: float | None = Field(default=None, gt=0, description="Surface width in CSS pixels")
    height: float | None = Field(default=None, gt=0, description="Surface height in CSS pixels")
    pixel_ratio: float | None = Field(default=None, gt=0, description="Device pixel ratio")
    labels: dict[DimensionKey, str] = Field(
        default_factory=dict, description="Display label per dimension; defaults to the key"
    )

    @field_validator("scores")
    @classmethod
    def _all_dimensions(cls, v: dict[DimensionKey, int]) -> dict[DimensionKey, int]:
        missing = [k.value for k in ORDERED_KEYS if k not in v]
        if missing:
            raise ValueError(f"missing scores for: {', '.join(missing)}")
        return v

    @model_validator(mode="after")
    def _focus_needs_dimension(self) -> FrameRequest:
        if self.mode is ModeKind.FOCUS and self.focus is None:
            raise ValueError("focus mode requires a focus dimension")
        return self

    def to_frame(self, settings: Settings) -> Frame:
        mode = Mode.focused(self.focus) if self.mode is ModeKind.FOCUS else Mode.overview()
        dimensions = [
            Dimension(key=key, score=self.scores[key], label=self.labels.get(key, ""))
            for key in ORDERED_KEYS
        ]
        return Frame.from_dimensions(
            dimensions,
            mode=mode,
            hover_index=self.hover_index,
            width=self.width or settings.canvas_size,
            height=self.height or settings.canvas_size,
            pixel_ratio=self.pixel_ratio or settings.pixel_ratio,
        )


class RenderRequest(FrameRequest):
    draw_labels: bool = Field(default=False, description="Draw axis labels into the SVG")
    background: str = Field(default="", description="Background fill; transparent when empty")


class PointerRequest(FrameRequest):
    event: PointerKind = Field(..., description="move, leave or click")
    x: float = Field(default=0.0, description="Pointer x, surface-relative")
    y: float = Field(default=0.0, description="Pointer y, surface-relative")

    def to_event(self) -> PointerEvent:
        return PointerEvent(kind=self.event, x=self.x, y=self.y)
