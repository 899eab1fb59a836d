"""Application commands (use cases) for packing."""

from __future__ import annotations

import logging
from typing import Sequence

from maxrects.domain import Bin, Box, MaxRectsPacker, PlacementResult

from .config import PackingJobConfig, config_to_bins, config_to_boxes
from .sampling import generate_bins, generate_boxes
from .scoring import ScorerFactory

logger = logging.getLogger(__name__)


class PackCommand:
    """Command to pack boxes into bins with a named heuristic.

    The CLI and the HTTP API both go through this command, so a job packs
    the same way whichever surface it arrives on.
    """

    def __init__(self, heuristic: str | None = None) -> None:
        """Initialize the command.

        Args:
            heuristic: Placement heuristic name. None selects the default.

        Raises:
            ValueError: If the heuristic name is unknown.
        """
        self.scorer = ScorerFactory.create(heuristic)

    def execute(self, boxes: Sequence[Box], bins: Sequence[Bin]) -> PlacementResult:
        """Pack the given boxes into the given bins.

        Raises:
            NoBinsError: If ``bins`` is empty.
        """
        packer = MaxRectsPacker(boxes, bins, scorer=self.scorer)
        return packer.run()

    def execute_job(self, config: PackingJobConfig) -> PlacementResult:
        """Pack a validated job."""
        boxes = config_to_boxes(config)
        bins = config_to_bins(config)
        logger.debug("Job expanded to %d boxes and %d bins", len(boxes), len(bins))
        return self.execute(boxes, bins)

    def execute_sample(
        self,
        box_count: int,
        bin_count: int,
        bin_width: int,
        bin_height: int,
        min_size: int,
        max_size: int,
        seed: int | None = None,
    ) -> PlacementResult:
        """Pack a randomly generated sample.

        Raises:
            ValueError: If a count or size range is invalid.
        """
        boxes = generate_boxes(box_count, min_size, max_size, seed=seed)
        bins = generate_bins(bin_count, bin_width, bin_height)
        return self.execute(boxes, bins)
