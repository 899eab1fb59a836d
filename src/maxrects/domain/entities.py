"""Domain entities for rectangle packing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from .exceptions import InvalidDimensionError
from .services.free_space import prune_free_rectangles, split_free_rectangles
from .value_objects import Box, Number, PlacedItem, Rectangle, is_valid_length

logger = logging.getLogger(__name__)


@dataclass
class Bin:
    """A rectangular container that tracks its own free space.

    A new bin holds a single free rectangle covering its whole area. Each
    committed box replaces the free list with a freshly split and pruned
    list and appends a ``PlacedItem`` to ``placements``.

    Boxes are anchored at the top-left corner of the free rectangle they
    are committed to.

    Attributes:
        width: Bin width, strictly positive.
        height: Bin height, strictly positive.
        offset_x: Horizontal display offset. Used only when rendering.
        offset_y: Vertical display offset. Used only when rendering.
        bin_id: Identifier reported on every placement in this bin.
        free_rectangles: Maximal free regions, none contained in another.
        placements: Boxes committed to this bin, in commit order.
    """

    width: Number
    height: Number
    offset_x: Number = 0
    offset_y: Number = 0
    bin_id: int = 0
    free_rectangles: list[Rectangle] = field(init=False, default_factory=list)
    placements: list[PlacedItem] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        if not (is_valid_length(self.width) and is_valid_length(self.height)):
            raise InvalidDimensionError("Bin", self.width, self.height)
        self.free_rectangles = [Rectangle(0, 0, self.width, self.height)]

    @property
    def area(self) -> Number:
        """Total area of the bin."""
        return self.width * self.height

    @property
    def used_area(self) -> Number:
        """Area covered by committed boxes."""
        return sum(p.rect.area for p in self.placements)

    @property
    def utilization(self) -> float:
        """Percentage of the bin area covered by committed boxes."""
        return self.used_area / self.area * 100

    def candidates(self, width: Number, height: Number) -> Iterator[Rectangle]:
        """Yield the free rectangles a box of the given size fits into.

        Rectangles are yielded in the order they are held. Nothing is
        yielded when the box fits nowhere in this bin.

        Args:
            width: Box width.
            height: Box height.
        """
        for free in self.free_rectangles:
            if free.width >= width and free.height >= height:
                yield free

    def commit(self, free_rect: Rectangle, box: Box) -> PlacedItem:
        """Place a box at the top-left corner of one of the free rectangles.

        Args:
            free_rect: A rectangle currently in ``free_rectangles``.
            box: The box to place; it must fit inside ``free_rect``.

        Returns:
            The placement that was recorded.

        Raises:
            ValueError: If ``free_rect`` is not free in this bin or the box
                does not fit inside it.
        """
        if free_rect not in self.free_rectangles:
            raise ValueError(f"{free_rect} is not a free rectangle of bin {self.bin_id}")
        if box.width > free_rect.width or box.height > free_rect.height:
            raise ValueError(
                f"Box {box.width}x{box.height} does not fit in free rectangle "
                f"{free_rect.width}x{free_rect.height}"
            )

        used = Rectangle(free_rect.x, free_rect.y, box.width, box.height)
        placement = PlacedItem(box=box, bin_id=self.bin_id, rect=used)
        self.placements.append(placement)
        self.free_rectangles = prune_free_rectangles(
            split_free_rectangles(self.free_rectangles, used)
        )

        logger.debug(
            "Bin %s: placed %sx%s at (%s, %s), %d free rectangle(s) left",
            self.bin_id,
            box.width,
            box.height,
            used.x,
            used.y,
            len(self.free_rectangles),
        )
        return placement

    def copy(self) -> Bin:
        """Return an independent copy of this bin and its current state."""
        clone = Bin(
            width=self.width,
            height=self.height,
            offset_x=self.offset_x,
            offset_y=self.offset_y,
            bin_id=self.bin_id,
        )
        clone.free_rectangles = list(self.free_rectangles)
        clone.placements = list(self.placements)
        return clone
