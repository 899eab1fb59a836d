"""Infrastructure layer - rendering and export of packing results."""

from .formatters import JsonExporter, PlacementSummaryFormatter
from .placement_renderer import PlacementRenderer

__all__ = [
    "JsonExporter",
    "PlacementRenderer",
    "PlacementSummaryFormatter",
]
