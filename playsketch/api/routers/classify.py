"""REST API router for drawn-path classification."""

import logging

from fastapi import APIRouter

from playsketch.api.schemas.classify import (
    ClassifyRequest,
    ClassifyResponse,
    MotionTypeSchema,
    OptionsResponse,
)
from playsketch.catalog.motion import MOTION_CATALOG
from playsketch.catalog.zones import zone_shape
from playsketch.classifiers.dispatch import classify_path
from playsketch.config import get_config
from playsketch.core.enums import DrawTool
from playsketch.core.point import Point
from playsketch.suggestions import get_assignment_options, get_tool_options

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/classify", tags=["classify"])


@router.post("", response_model=ClassifyResponse)
async def classify(request: ClassifyRequest) -> ClassifyResponse:
    """Classify one drawn path and rank alternatives for the dialog."""
    config = get_config()
    if request.field is not None:
        config = request.field.apply(config)

    path = [p.to_point() for p in request.path]
    result = classify_path(
        request.tool,
        path,
        player_side=request.player_side,
        player_start_x=request.player_start_x,
        player_start_y=request.player_start_y,
        config=config,
    )

    zone = None
    if request.tool == DrawTool.COVERAGE:
        origin = path[0] if path else result.endpoint
        start = Point(
            request.player_start_x if request.player_start_x is not None else origin.x,
            request.player_start_y if request.player_start_y is not None else origin.y,
        )
        zone = zone_shape(start, result.label, result.endpoint)

    logger.debug(f"Classified {len(path)}-point {request.tool.value} path as {result.label.value}")
    return ClassifyResponse.from_result(result, get_assignment_options(result, config), zone)


@router.get("/options/{tool}", response_model=OptionsResponse)
async def list_options(tool: DrawTool) -> OptionsResponse:
    """Full option menu for a draw tool."""
    return OptionsResponse(tool=tool, options=get_tool_options(tool))


@router.get("/motion-types", response_model=list[MotionTypeSchema])
async def list_motion_types() -> list[MotionTypeSchema]:
    """Motion catalogue with snap legality."""
    return [MotionTypeSchema.from_model(m) for m in MOTION_CATALOG.values()]
