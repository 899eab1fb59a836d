"""Heuristic listing endpoint."""

from fastapi import APIRouter

from maxrects.application import DEFAULT_HEURISTIC, ScorerFactory
from maxrects.web.schemas import HeuristicsSchema

router = APIRouter(prefix="/heuristics", tags=["heuristics"])


@router.get("", response_model=HeuristicsSchema)
async def list_heuristics() -> HeuristicsSchema:
    """List the placement heuristics a job may name."""
    return HeuristicsSchema(
        heuristics=ScorerFactory.available_heuristics(),
        default=DEFAULT_HEURISTIC,
    )
