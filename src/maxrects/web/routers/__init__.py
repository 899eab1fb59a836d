"""API routers for the REST API."""

from maxrects.web.routers.heuristics import router as heuristics_router
from maxrects.web.routers.pack import router as pack_router
from maxrects.web.routers.validate import router as validate_router

__all__ = [
    "heuristics_router",
    "pack_router",
    "validate_router",
]
