"""MaxRects packing of boxes into a fixed set of bins.

The packer sorts boxes by area (largest first) and places them one at a
time. For each box every free rectangle of every bin that can hold it is
scored, the lowest score wins, and the box is committed there. Boxes that
fit nowhere are returned as the remainder. Placements are never revisited.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from maxrects.contracts.scoring import PlacementScorer, Score

from ..entities import Bin
from ..exceptions import NoBinsError
from ..value_objects import Box, Number, PlacedItem, Rectangle
from .scoring import BestAreaFitScorer

logger = logging.getLogger(__name__)


def calculate_packed_percentage(
    placed: Sequence[PlacedItem],
    bins: Sequence[Bin],
) -> float:
    """Percentage of the total bin area covered by placed boxes.

    Args:
        placed: Placements produced by a packing run.
        bins: Bins whose combined area is the denominator.

    Returns:
        Coverage in percent, or 0.0 when there is no bin area.
    """
    total_bin_area = sum(b.area for b in bins)
    if total_bin_area == 0:
        return 0.0
    placed_area = sum(p.box.area for p in placed)
    return placed_area / total_bin_area * 100


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of a packing run.

    Unpacks as ``placed, remaining, bins``.

    Attributes:
        placed: Placements in the order they were committed.
        remaining: Boxes that fit in no bin, in processing order.
        bins: The bins with their final free rectangles and placements,
            in the order they were supplied.
    """

    placed: tuple[PlacedItem, ...]
    remaining: tuple[Box, ...]
    bins: tuple[Bin, ...]

    def __iter__(self) -> Iterator:
        return iter((self.placed, self.remaining, self.bins))

    @property
    def placed_area(self) -> Number:
        """Combined area of all placed boxes."""
        return sum(p.box.area for p in self.placed)

    @property
    def total_bin_area(self) -> Number:
        """Combined area of all bins."""
        return sum(b.area for b in self.bins)

    @property
    def packed_percentage(self) -> float:
        """Percentage of the total bin area covered by placed boxes."""
        return calculate_packed_percentage(self.placed, self.bins)

    def placements_for(self, bin_id: int) -> tuple[PlacedItem, ...]:
        """Placements committed to bins with the given id."""
        return tuple(p for p in self.placed if p.bin_id == bin_id)


class MaxRectsPacker:
    """Greedy MaxRects packer over a fixed set of bins.

    The packer takes ownership of its inputs at construction: it keeps its
    own tuple of boxes and its own copies of the bins, so the caller's bin
    objects are never mutated. ``run`` packs fresh copies of those bins and
    hands them to the caller, which makes repeated runs identical.

    Attributes:
        scorer: Heuristic used to rank candidate free rectangles.
    """

    def __init__(
        self,
        boxes: Iterable[Box],
        bins: Iterable[Bin],
        scorer: PlacementScorer | None = None,
    ) -> None:
        """Initialize the packer.

        Args:
            boxes: Boxes to place, in input order.
            bins: Bins to place them into, in priority order for ties.
            scorer: Placement heuristic. Defaults to Best Area Fit with a
                Best Short Side Fit tie-break.

        Raises:
            NoBinsError: If ``bins`` is empty.
            TypeError: If ``scorer`` does not implement PlacementScorer.
        """
        bins = tuple(bins)
        if not bins:
            raise NoBinsError()
        if scorer is not None and not isinstance(scorer, PlacementScorer):
            raise TypeError(f"{scorer!r} does not implement PlacementScorer")

        self._boxes: tuple[Box, ...] = tuple(boxes)
        self._bins: tuple[Bin, ...] = tuple(b.copy() for b in bins)
        self.scorer: PlacementScorer = scorer or BestAreaFitScorer()

        duplicates = [
            bin_id
            for bin_id, count in Counter(b.bin_id for b in self._bins).items()
            if count > 1
        ]
        if duplicates:
            logger.warning(
                "Duplicate bin ids %s; placements will be ambiguous by id",
                sorted(duplicates),
            )

    @property
    def boxes(self) -> tuple[Box, ...]:
        """Boxes to be packed, in input order."""
        return self._boxes

    @property
    def bins(self) -> tuple[Bin, ...]:
        """Copies of the bins as supplied at construction."""
        return tuple(b.copy() for b in self._bins)

    def run(self) -> PlacementResult:
        """Pack every box, largest area first.

        Returns:
            PlacementResult with the placements, the boxes that fit nowhere
            and the updated bins.
        """
        bins = [b.copy() for b in self._bins]
        placed: list[PlacedItem] = []
        remaining: list[Box] = []

        logger.debug(
            "Packing %d boxes into %d bins using %s",
            len(self._boxes),
            len(bins),
            self.scorer.name,
        )

        for box in self._sort_by_area(self._boxes):
            best = self._find_best_placement(box, bins)
            if best is None:
                logger.debug("Box %sx%s fits in no bin", box.width, box.height)
                remaining.append(box)
                continue

            target, free_rect = best
            placed.append(target.commit(free_rect, box))

        result = PlacementResult(
            placed=tuple(placed),
            remaining=tuple(remaining),
            bins=tuple(bins),
        )

        logger.info(
            "Placed %d of %d boxes, %.1f%% of bin area packed",
            len(placed),
            len(self._boxes),
            result.packed_percentage,
        )
        return result

    def _find_best_placement(
        self,
        box: Box,
        bins: Iterable[Bin],
    ) -> tuple[Bin, Rectangle] | None:
        """Find the lowest-scoring free rectangle for a box across all bins.

        Only a strictly lower score replaces the current best, so ties go to
        the earliest bin and, within it, the earliest free rectangle.

        Args:
            box: The box to place.
            bins: Bins in enumeration order.

        Returns:
            The winning (bin, free rectangle) pair, or None if the box fits
            nowhere.
        """
        best: tuple[Bin, Rectangle] | None = None
        best_score: Score | None = None

        for candidate_bin in bins:
            for free_rect in candidate_bin.candidates(box.width, box.height):
                score = self.scorer.score(box.width, box.height, free_rect)
                if best_score is None or score < best_score:
                    best_score = score
                    best = (candidate_bin, free_rect)

        return best

    @staticmethod
    def _sort_by_area(boxes: Sequence[Box]) -> list[Box]:
        """Sort boxes by area, largest first.

        The sort is stable, so boxes of equal area keep their input order.
        """
        return sorted(boxes, key=lambda b: b.area, reverse=True)
