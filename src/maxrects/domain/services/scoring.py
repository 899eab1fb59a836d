"""MaxRects placement heuristics.

Each scorer implements ``maxrects.contracts.scoring.PlacementScorer``. Scores
are tuples compared lexicographically; the packer keeps the lowest one and
resolves remaining ties by enumeration order (bins in input order, free
rectangles in the order each bin holds them).
"""

from __future__ import annotations

from ..value_objects import Number, Rectangle


class BestAreaFitScorer:
    """Prefer the free rectangle that leaves the least unused area.

    Ties are broken by the shorter leftover side (Best Short Side Fit).
    This is the default heuristic.
    """

    name = "best_area_fit"

    def score(
        self,
        box_width: Number,
        box_height: Number,
        free_rect: Rectangle,
    ) -> tuple[Number, Number]:
        leftover_area = free_rect.area - box_width * box_height
        short_side = min(free_rect.width - box_width, free_rect.height - box_height)
        return (leftover_area, short_side)


class BestShortSideFitScorer:
    """Prefer the free rectangle whose shorter leftover side is smallest.

    Ties are broken by the longer leftover side.
    """

    name = "best_short_side_fit"

    def score(
        self,
        box_width: Number,
        box_height: Number,
        free_rect: Rectangle,
    ) -> tuple[Number, Number]:
        leftover_w = free_rect.width - box_width
        leftover_h = free_rect.height - box_height
        return (min(leftover_w, leftover_h), max(leftover_w, leftover_h))


class BestLongSideFitScorer:
    """Prefer the free rectangle whose longer leftover side is smallest.

    Ties are broken by the shorter leftover side.
    """

    name = "best_long_side_fit"

    def score(
        self,
        box_width: Number,
        box_height: Number,
        free_rect: Rectangle,
    ) -> tuple[Number, Number]:
        leftover_w = free_rect.width - box_width
        leftover_h = free_rect.height - box_height
        return (max(leftover_w, leftover_h), min(leftover_w, leftover_h))


class BottomLeftScorer:
    """Prefer the placement whose bottom edge is highest, then leftmost.

    With the top-left origin used by bins this is the classic Bottom-Left
    rule mirrored vertically: boxes settle towards the top-left corner.
    """

    name = "bottom_left"

    def score(
        self,
        box_width: Number,
        box_height: Number,
        free_rect: Rectangle,
    ) -> tuple[Number, Number]:
        return (free_rect.y + box_height, free_rect.x)
