"""POST /api/snowflake/render — draw one frame."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from snowchart.config import Settings
from snowchart.dependencies import get_settings
from snowchart.engine.config import RenderConfig
from snowchart.engine.context import ORDERED_KEYS
from snowchart.engine.scene import RenderedFrame, render_frame
from snowchart.models.requests import RenderRequest
from snowchart.models.responses import ColorModel, LabelModel, RenderResponse, VertexModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/snowflake")


def _render(req: RenderRequest, settings: Settings) -> RenderedFrame:
    frame = req.to_frame(settings)
    config = RenderConfig(draw_labels=req.draw_labels, background=req.background)
    return render_frame(frame, config)


@router.post("/render", response_model=RenderResponse)
async def render(
    req: RenderRequest, settings: Settings = Depends(get_settings)
) -> RenderResponse:
    rendered = _render(req, settings)
    scene = rendered.scene

    logger.info(
        "Rendered %s frame in %.1fms (aggregate %s/%s)",
        req.mode.value,
        rendered.elapsed_ms,
        scene.aggregate,
        scene.max_aggregate,
    )

    return RenderResponse(
        svg=rendered.svg,
        color=ColorModel.from_color(scene.color),
        aggregate=scene.aggregate,
        max_aggregate=scene.max_aggregate,
        vertices=[
            VertexModel(key=key, score=req.scores[key], x=float(x), y=float(y))
            for key, (x, y) in zip(ORDERED_KEYS, scene.vertices)
        ],
        labels=[
            LabelModel(key=a.key, text=a.text, x=a.position.x, y=a.position.y)
            for a in rendered.labels
        ],
        bounds=scene.curve.bounds,
        processing_time_ms=round(rendered.elapsed_ms, 1),
    )


@router.post("/render.png")
async def render_png(req: RenderRequest, settings: Settings = Depends(get_settings)) -> Response:
    from snowchart.svg.rasterizer import svg_to_png

    rendered = _render(req, settings)
    return Response(content=svg_to_png(rendered.svg), media_type="image/png")
