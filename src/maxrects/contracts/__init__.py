"""Protocols shared between the packing core and its callers."""

from .scoring import PlacementScorer, Score

__all__ = ["PlacementScorer", "Score"]
