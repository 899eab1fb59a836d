"""Packing endpoints."""

from typing import Any

from fastapi import APIRouter, Response

from maxrects.infrastructure import PlacementRenderer
from maxrects.web.dependencies import JobConfigDep, PackCommandDep
from maxrects.web.schemas import ErrorResponseSchema, PackResponseSchema

router = APIRouter(prefix="/pack", tags=["pack"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponseSchema, "description": "Unknown heuristic"},
    422: {"model": ErrorResponseSchema, "description": "Invalid packing job"},
}


@router.post("", response_model=PackResponseSchema, responses=ERROR_RESPONSES)
async def pack(config: JobConfigDep, command: PackCommandDep) -> PackResponseSchema:
    """Pack the boxes of a job into its bins.

    Returns:
        Placements, unplaced boxes, final bin states and the packed
        percentage.
    """
    result = command.execute_job(config)
    return PackResponseSchema.from_result(result, command.scorer.name)


@router.post("/svg", responses=ERROR_RESPONSES)
async def pack_svg(config: JobConfigDep, command: PackCommandDep) -> Response:
    """Pack a job and return the placement diagram as SVG."""
    result = command.execute_job(config)
    return Response(
        content=PlacementRenderer().render_svg(result),
        media_type="image/svg+xml",
    )
