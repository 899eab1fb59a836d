"""Pydantic schemas for the REST API."""

from maxrects.web.schemas.responses import (
    BinStateSchema,
    BoxSchema,
    ErrorResponseSchema,
    HeuristicsSchema,
    PackResponseSchema,
    PlacementSchema,
    RectangleSchema,
    ValidationResultSchema,
)

__all__ = [
    "BinStateSchema",
    "BoxSchema",
    "ErrorResponseSchema",
    "HeuristicsSchema",
    "PackResponseSchema",
    "PlacementSchema",
    "RectangleSchema",
    "ValidationResultSchema",
]
