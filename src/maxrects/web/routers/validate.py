"""Job validation endpoint."""

from typing import Annotated, Any

from fastapi import APIRouter, Body

from maxrects.application.config import ConfigError, config_to_boxes, load_config_from_dict
from maxrects.web.schemas import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_job(
    job: Annotated[dict[str, Any], Body(description="Packing job to validate")],
) -> ValidationResultSchema:
    """Validate a packing job without running it.

    An invalid job is reported in the response body rather than as an
    error status.
    """
    try:
        config = load_config_from_dict(job)
    except ConfigError as e:
        return ValidationResultSchema(is_valid=False, errors=e.details)

    return ValidationResultSchema(
        is_valid=True,
        box_count=len(config_to_boxes(config)),
        bin_count=len(config.bins),
    )
