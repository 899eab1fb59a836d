"""Geometry value objects for rectangle packing.

All classes are frozen dataclasses: they are hashable, compare by value and
cannot be mutated once constructed. Coordinates are bin-local with the
origin at the top-left corner, x growing to the right and y growing down.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .exceptions import InvalidDimensionError

Number = int | float


def is_valid_length(value: Number) -> bool:
    """Check that a width or height is finite and strictly positive."""
    return math.isfinite(value) and value > 0


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by its top-left corner and extent.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent, strictly positive.
        height: Vertical extent, strictly positive.
    """

    x: Number
    y: Number
    width: Number
    height: Number

    def __post_init__(self) -> None:
        if not (is_valid_length(self.width) and is_valid_length(self.height)):
            raise InvalidDimensionError("Rectangle", self.width, self.height)

    @property
    def right(self) -> Number:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> Number:
        """Y coordinate of the bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> Number:
        return self.width * self.height

    def intersects(self, other: Rectangle) -> bool:
        """Check whether the two rectangles share a region of positive area.

        Rectangles that only touch along an edge or at a corner do not
        intersect.
        """
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def contains(self, other: Rectangle) -> bool:
        """Check whether ``other`` lies entirely inside this rectangle.

        Containment is closed: shared edges are allowed and every rectangle
        contains itself.
        """
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def overlap_area(self, other: Rectangle) -> Number:
        """Area of the intersection of the two rectangles (0 if disjoint)."""
        overlap_w = min(self.right, other.right) - max(self.x, other.x)
        overlap_h = min(self.bottom, other.bottom) - max(self.y, other.y)
        if overlap_w <= 0 or overlap_h <= 0:
            return 0
        return overlap_w * overlap_h


@dataclass(frozen=True)
class Box:
    """An item to be packed.

    Boxes are never rotated. Two boxes with the same size are still distinct
    inputs; the packer tracks them by their position in the input sequence.

    Attributes:
        width: Box width, strictly positive.
        height: Box height, strictly positive.
        label: Optional display name.
    """

    width: Number
    height: Number
    label: str = ""

    def __post_init__(self) -> None:
        if not (is_valid_length(self.width) and is_valid_length(self.height)):
            raise InvalidDimensionError("Box", self.width, self.height)

    @property
    def area(self) -> Number:
        """Area of the box."""
        return self.width * self.height


@dataclass(frozen=True)
class PlacedItem:
    """A box committed to a position inside a bin.

    Attributes:
        box: The original box.
        bin_id: Identifier of the bin the box was committed to.
        rect: Occupied region in the bin's local coordinates.
    """

    box: Box
    bin_id: int
    rect: Rectangle

    @property
    def x(self) -> Number:
        return self.rect.x

    @property
    def y(self) -> Number:
        return self.rect.y

    @property
    def width(self) -> Number:
        return self.rect.width

    @property
    def height(self) -> Number:
        return self.rect.height
