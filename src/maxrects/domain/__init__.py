"""Domain layer - geometry, bins and the MaxRects packer."""

from .entities import Bin
from .exceptions import InvalidDimensionError, NoBinsError, PackingError
from .services.max_rects import (
    MaxRectsPacker,
    PlacementResult,
    calculate_packed_percentage,
)
from .services.scoring import (
    BestAreaFitScorer,
    BestLongSideFitScorer,
    BestShortSideFitScorer,
    BottomLeftScorer,
)
from .value_objects import Box, PlacedItem, Rectangle

__all__ = [
    # Geometry
    "Box",
    "PlacedItem",
    "Rectangle",
    # Entities
    "Bin",
    # Packing
    "MaxRectsPacker",
    "PlacementResult",
    "calculate_packed_percentage",
    # Heuristics
    "BestAreaFitScorer",
    "BestLongSideFitScorer",
    "BestShortSideFitScorer",
    "BottomLeftScorer",
    # Errors
    "InvalidDimensionError",
    "NoBinsError",
    "PackingError",
]
