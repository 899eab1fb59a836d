"""Scoring protocol for choosing where a box goes.

A scorer ranks the free rectangles a box fits into. The packer evaluates
every candidate in every bin and keeps the one with the lowest score, so a
scorer decides the packing heuristic without the packer knowing which one
is in use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from maxrects.domain.value_objects import Number, Rectangle

Score = tuple[float, ...]


@runtime_checkable
class PlacementScorer(Protocol):
    """Protocol for MaxRects placement heuristics.

    Implementations must be pure: they may not modify the rectangle and
    must return the same score for the same arguments. Scores are compared
    as tuples, so later elements act as tie-breakers.

    Example:
        ```python
        class WidestFirstScorer:
            name = "widest_first"

            def score(self, box_width, box_height, free_rect):
                return (-free_rect.width,)
        ```
    """

    name: str

    def score(
        self,
        box_width: "Number",
        box_height: "Number",
        free_rect: "Rectangle",
    ) -> Score:
        """Score placing a box of the given size into ``free_rect``.

        Args:
            box_width: Width of the box being placed.
            box_height: Height of the box being placed.
            free_rect: A free rectangle the box fits into.

        Returns:
            Comparable score; lower is better.
        """
        ...


__all__ = [
    "PlacementScorer",
    "Score",
]
