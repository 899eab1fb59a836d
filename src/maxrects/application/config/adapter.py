"""Conversion of validated job configs into domain objects."""

from __future__ import annotations

from maxrects.application.config.schema import PackingJobConfig
from maxrects.domain import Bin, Box


def config_to_boxes(config: PackingJobConfig) -> list[Box]:
    """Expand the job's box entries into individual boxes.

    An entry with ``quantity`` greater than 1 yields that many boxes, in
    place, each with a ``#n`` suffix on its label (when it has one).

    Args:
        config: A validated job.

    Returns:
        Boxes in file order.
    """
    boxes: list[Box] = []
    for entry in config.boxes:
        for n in range(1, entry.quantity + 1):
            label = entry.label
            if label and entry.quantity > 1:
                label = f"{label} #{n}"
            boxes.append(Box(width=entry.width, height=entry.height, label=label))
    return boxes


def config_to_bins(config: PackingJobConfig) -> list[Bin]:
    """Create the job's bins.

    Bins without an explicit id are numbered by their position in the list.
    """
    return [
        Bin(
            width=entry.width,
            height=entry.height,
            offset_x=entry.offset_x,
            offset_y=entry.offset_y,
            bin_id=entry.id if entry.id is not None else index,
        )
        for index, entry in enumerate(config.bins)
    ]
