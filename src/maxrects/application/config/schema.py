"""Pydantic schema for packing job files.

A job file lists the boxes to pack, the bins to pack them into and,
optionally, the placement heuristic:

```json
{
  "schema_version": "1.0",
  "heuristic": "best_area_fit",
  "boxes": [{"width": 5, "height": 6}, {"width": 4, "height": 4, "quantity": 3}],
  "bins": [{"width": 10, "height": 20, "id": 1}]
}
```
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from maxrects.application.scoring import DEFAULT_HEURISTIC, ScorerFactory
from maxrects.domain.value_objects import is_valid_length

# Version 1.0: boxes, bins and heuristic
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


def _require_positive(value: int | float) -> int | float:
    if not is_valid_length(value):
        raise ValueError("must be a finite number greater than 0")
    return value


class BoxConfig(BaseModel):
    """A box, or several identical boxes, to be packed.

    Attributes:
        width: Box width, greater than 0.
        height: Box height, greater than 0.
        quantity: Number of identical boxes (1 to 10000).
        label: Optional display name.
    """

    model_config = ConfigDict(extra="forbid")

    width: int | float
    height: int | float
    quantity: int = Field(default=1, ge=1, le=10000)
    label: str = ""

    @field_validator("width", "height")
    @classmethod
    def validate_positive(cls, v: int | float) -> int | float:
        return _require_positive(v)


class BinConfig(BaseModel):
    """A bin to pack boxes into.

    Attributes:
        width: Bin width, greater than 0.
        height: Bin height, greater than 0.
        offset_x: Horizontal display offset (rendering only).
        offset_y: Vertical display offset (rendering only).
        id: Bin identifier. Defaults to the bin's index in the list.
    """

    model_config = ConfigDict(extra="forbid")

    width: int | float
    height: int | float
    offset_x: int | float = 0
    offset_y: int | float = 0
    id: int | None = None

    @field_validator("width", "height")
    @classmethod
    def validate_positive(cls, v: int | float) -> int | float:
        return _require_positive(v)

    @field_validator("offset_x", "offset_y")
    @classmethod
    def validate_offset(cls, v: int | float) -> int | float:
        if not (math.isfinite(v) and v >= 0):
            raise ValueError("must be a finite number, not negative")
        return v


class PackingJobConfig(BaseModel):
    """Root model of a packing job file.

    Attributes:
        schema_version: Job file format version.
        heuristic: Placement heuristic name.
        boxes: Boxes to pack. May be empty.
        bins: Bins to pack into. At least one is required.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    heuristic: str = DEFAULT_HEURISTIC
    boxes: list[BoxConfig] = Field(default_factory=list)
    bins: list[BinConfig] = Field(..., min_length=1)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported schema version '{v}'. "
                f"Supported: {', '.join(sorted(SUPPORTED_VERSIONS))}"
            )
        return v

    @field_validator("heuristic")
    @classmethod
    def validate_heuristic(cls, v: str) -> str:
        # Raises ValueError with the list of valid names.
        return ScorerFactory.create(v).name

    @model_validator(mode="after")
    def validate_unique_bin_ids(self) -> "PackingJobConfig":
        explicit_ids = [b.id for b in self.bins if b.id is not None]
        if len(explicit_ids) != len(set(explicit_ids)):
            raise ValueError("Bin ids must be unique")
        return self
