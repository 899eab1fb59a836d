"""Random sample generation for demos and benchmarks.

Boxes get integer sides drawn uniformly from ``[min_size, max_size]``; bins
all share one size, sit at display offset (0, 0) and are numbered from 0.
Pass a seed to make a sample reproducible.
"""

from __future__ import annotations

import random

from maxrects.domain import Bin, Box

DEFAULT_BIN_SIZE = 200
DEFAULT_MIN_BOX_SIZE = 1
DEFAULT_MAX_BOX_SIZE = 99


def generate_boxes(
    count: int,
    min_size: int = DEFAULT_MIN_BOX_SIZE,
    max_size: int = DEFAULT_MAX_BOX_SIZE,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> list[Box]:
    """Generate boxes with random integer sides.

    Args:
        count: Number of boxes, at least 1.
        min_size: Smallest side length, at least 1.
        max_size: Largest side length, at least ``min_size``.
        seed: Seed for a private random generator. Ignored if ``rng`` is given.
        rng: Random generator to draw from.

    Returns:
        List of ``count`` boxes labelled "Box 1", "Box 2", ...

    Raises:
        ValueError: If the count or size range is invalid.
    """
    if count < 1:
        raise ValueError("Box count must be at least 1")
    if min_size < 1:
        raise ValueError("Minimum box size must be at least 1")
    if max_size < min_size:
        raise ValueError("Maximum box size must not be less than minimum box size")

    rng = rng or random.Random(seed)
    return [
        Box(
            width=rng.randint(min_size, max_size),
            height=rng.randint(min_size, max_size),
            label=f"Box {i + 1}",
        )
        for i in range(count)
    ]


def generate_bins(
    count: int,
    width: int = DEFAULT_BIN_SIZE,
    height: int = DEFAULT_BIN_SIZE,
) -> list[Bin]:
    """Generate identical bins with ids ``0..count-1``.

    Raises:
        ValueError: If ``count`` is less than 1.
    """
    if count < 1:
        raise ValueError("Bin count must be at least 1")
    return [Bin(width=width, height=height, bin_id=i) for i in range(count)]
