"""Exceptions raised by the packing domain.

Every error here is raised while constructing domain objects. A packing run
started with valid inputs never raises; a box that fits nowhere is reported
through ``PlacementResult.remaining`` instead.
"""

from __future__ import annotations

import math


def _is_valid_length(value: float) -> bool:
    return math.isfinite(value) and value > 0


class PackingError(Exception):
    """Base class for packing domain errors."""


class InvalidDimensionError(PackingError, ValueError):
    """Raised when a box, bin or rectangle has an invalid width or height.

    Widths and heights must be finite and strictly positive; NaN and
    infinity are rejected along with zero and negative values.

    Attributes:
        subject: Name of the object being constructed (e.g. "Box").
        width: The rejected width.
        height: The rejected height.
    """

    def __init__(self, subject: str, width: float, height: float) -> None:
        self.subject = subject
        self.width = width
        self.height = height
        width_ok = _is_valid_length(width)
        height_ok = _is_valid_length(height)
        if not width_ok and not height_ok:
            problem = "width and height must be positive and finite"
        elif not width_ok:
            problem = "width must be positive and finite"
        else:
            problem = "height must be positive and finite"
        super().__init__(f"{subject} {problem} (got {width}x{height})")


class NoBinsError(PackingError, ValueError):
    """Raised when a packer is constructed without any bins."""

    def __init__(self) -> None:
        super().__init__("At least one bin is required to pack boxes")
