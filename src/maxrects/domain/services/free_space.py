"""Maintenance of a bin's free rectangles.

MaxRects keeps every maximal free region of a bin, so free rectangles may
overlap each other. After a box is committed, every free rectangle that
overlaps it is split into the parts that remain free, and then rectangles
made redundant by a larger one are pruned. Both functions return new lists
and never modify their input.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..value_objects import Rectangle

logger = logging.getLogger(__name__)


def split_free_rectangle(free: Rectangle, used: Rectangle) -> list[Rectangle]:
    """Split one free rectangle around an occupied region.

    Produces up to four maximal pieces of ``free`` lying above, below, left
    of and right of ``used``. Pieces with no area are discarded. The caller
    must only pass rectangles that intersect.

    Args:
        free: The free rectangle being cut.
        used: The region just occupied by a box.

    Returns:
        Pieces of ``free`` that do not overlap ``used``, in the order
        above, below, left, right.
    """
    pieces: list[Rectangle] = []

    if used.y > free.y:
        pieces.append(Rectangle(free.x, free.y, free.width, used.y - free.y))

    if used.bottom < free.bottom:
        pieces.append(
            Rectangle(free.x, used.bottom, free.width, free.bottom - used.bottom)
        )

    if used.x > free.x:
        pieces.append(Rectangle(free.x, free.y, used.x - free.x, free.height))

    if used.right < free.right:
        pieces.append(
            Rectangle(used.right, free.y, free.right - used.right, free.height)
        )

    return pieces


def split_free_rectangles(
    free_rectangles: Sequence[Rectangle],
    used: Rectangle,
) -> list[Rectangle]:
    """Replace every free rectangle overlapping ``used`` with its pieces.

    Rectangles that do not overlap ``used`` are kept in their original
    order; the pieces of split rectangles are appended after them.

    Args:
        free_rectangles: Current free rectangles of a bin.
        used: The region just occupied by a box.

    Returns:
        New list of free rectangles, none of which overlaps ``used``.
    """
    untouched: list[Rectangle] = []
    pieces: list[Rectangle] = []

    for free in free_rectangles:
        if free.intersects(used):
            pieces.extend(split_free_rectangle(free, used))
        else:
            untouched.append(free)

    logger.debug(
        "Split %d free rectangle(s) into %d piece(s)",
        len(free_rectangles) - len(untouched),
        len(pieces),
    )
    return untouched + pieces


def prune_free_rectangles(free_rectangles: Sequence[Rectangle]) -> list[Rectangle]:
    """Drop free rectangles contained in another free rectangle.

    Exact duplicates are collapsed to their first occurrence. The order of
    the surviving rectangles is preserved.

    Args:
        free_rectangles: Free rectangles, possibly redundant.

    Returns:
        New list in which no rectangle is contained in another.
    """
    kept: list[Rectangle] = []

    for i, candidate in enumerate(free_rectangles):
        redundant = False
        for j, other in enumerate(free_rectangles):
            if i == j or not other.contains(candidate):
                continue
            # Equal rectangles contain each other; keep the earliest one.
            if other != candidate or j < i:
                redundant = True
                break
        if not redundant:
            kept.append(candidate)

    if len(kept) != len(free_rectangles):
        logger.debug(
            "Pruned %d redundant free rectangle(s)",
            len(free_rectangles) - len(kept),
        )
    return kept
