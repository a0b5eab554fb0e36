"""POST /api/snowflake/pointer — apply a pointer event to a frame."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from snowchart.config import Settings
from snowchart.dependencies import get_settings
from snowchart.engine.color import color_for
from snowchart.engine.constants import MAX_SCORE
from snowchart.engine.interaction import handle_pointer, next_mode
from snowchart.models.requests import PointerRequest
from snowchart.models.responses import ColorModel, PointerResponse

router = APIRouter(prefix="/snowflake")


@router.post("/pointer", response_model=PointerResponse)
async def pointer(
    req: PointerRequest, settings: Settings = Depends(get_settings)
) -> PointerResponse:
    frame = req.to_frame(settings)
    outcome = handle_pointer(frame, req.to_event(), tolerance=settings.hit_tolerance)
    mode = next_mode(frame.mode, outcome)

    hover_key = outcome.hover_key
    hover_score = None
    if hover_key is not None:
        hover_score = f"{frame.scores[hover_key]}/{MAX_SCORE}"

    return PointerResponse(
        hover_index=outcome.hover_index,
        hover_key=hover_key,
        hover_score=hover_score,
        color=ColorModel.from_color(
            color_for(frame.scores.aggregate, frame.scores.max_aggregate)
        ),
        activated=outcome.activated,
        mode=mode.kind,
        focus=mode.focus,
    )
