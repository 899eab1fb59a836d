"""Factory for creating placement scorers by name.

Callers that receive a heuristic as text (CLI options, job files, API
requests) go through ``ScorerFactory`` so the name-to-class mapping lives in
one place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from maxrects.domain.services.scoring import (
    BestAreaFitScorer,
    BestLongSideFitScorer,
    BestShortSideFitScorer,
    BottomLeftScorer,
)

if TYPE_CHECKING:
    from maxrects.contracts.scoring import PlacementScorer

DEFAULT_HEURISTIC = BestAreaFitScorer.name


class ScorerFactory:
    """Creates placement scorers from heuristic names.

    Example:
        ```python
        scorer = ScorerFactory.create("best_short_side_fit")
        packer = MaxRectsPacker(boxes, bins, scorer=scorer)
        ```
    """

    _scorers: dict[str, type] = {
        BestAreaFitScorer.name: BestAreaFitScorer,
        BestShortSideFitScorer.name: BestShortSideFitScorer,
        BestLongSideFitScorer.name: BestLongSideFitScorer,
        BottomLeftScorer.name: BottomLeftScorer,
    }

    @classmethod
    def available_heuristics(cls) -> list[str]:
        """Names accepted by ``create``, default first."""
        names = sorted(cls._scorers)
        names.remove(DEFAULT_HEURISTIC)
        return [DEFAULT_HEURISTIC, *names]

    @classmethod
    def create(cls, name: str | None = None) -> "PlacementScorer":
        """Create a scorer for the given heuristic name.

        Args:
            name: Heuristic name, case-insensitive; hyphens are accepted in
                place of underscores. None selects the default.

        Returns:
            A new scorer instance.

        Raises:
            ValueError: If the name is not a known heuristic.
        """
        if name is None:
            name = DEFAULT_HEURISTIC
        key = name.strip().lower().replace("-", "_")
        scorer_cls = cls._scorers.get(key)
        if scorer_cls is None:
            raise ValueError(
                f"Unknown heuristic: {name}. "
                f"Available: {', '.join(cls.available_heuristics())}"
            )
        return scorer_cls()


__all__ = [
    "DEFAULT_HEURISTIC",
    "ScorerFactory",
]
