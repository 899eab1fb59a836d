"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from maxrects.domain import Bin, PlacementResult


class RectangleSchema(BaseModel):
    """Axis-aligned rectangle in bin-local coordinates."""

    x: float = Field(..., description="Left edge")
    y: float = Field(..., description="Top edge")
    width: float = Field(..., description="Horizontal extent")
    height: float = Field(..., description="Vertical extent")


class PlacementSchema(BaseModel):
    """A box placed in a bin."""

    bin_id: int = Field(..., description="Identifier of the bin holding the box")
    x: float = Field(..., description="Left edge in the bin")
    y: float = Field(..., description="Top edge in the bin")
    width: float = Field(..., description="Box width")
    height: float = Field(..., description="Box height")
    label: str = Field(default="", description="Box label")


class BoxSchema(BaseModel):
    """A box that could not be placed."""

    width: float = Field(..., description="Box width")
    height: float = Field(..., description="Box height")
    label: str = Field(default="", description="Box label")


class BinStateSchema(BaseModel):
    """A bin after packing."""

    id: int = Field(..., description="Bin identifier")
    width: float = Field(..., description="Bin width")
    height: float = Field(..., description="Bin height")
    offset_x: float = Field(default=0, description="Horizontal display offset")
    offset_y: float = Field(default=0, description="Vertical display offset")
    utilization: float = Field(..., description="Percentage of the bin area used")
    placement_count: int = Field(..., description="Number of boxes in the bin")
    free_rectangles: list[RectangleSchema] = Field(
        default_factory=list, description="Maximal free rectangles left in the bin"
    )

    @classmethod
    def from_bin(cls, bin_: Bin) -> "BinStateSchema":
        return cls(
            id=bin_.bin_id,
            width=bin_.width,
            height=bin_.height,
            offset_x=bin_.offset_x,
            offset_y=bin_.offset_y,
            utilization=bin_.utilization,
            placement_count=len(bin_.placements),
            free_rectangles=[
                RectangleSchema(x=r.x, y=r.y, width=r.width, height=r.height)
                for r in bin_.free_rectangles
            ],
        )


class PackResponseSchema(BaseModel):
    """Response for a packing run."""

    heuristic: str = Field(..., description="Heuristic used for placement")
    placements: list[PlacementSchema] = Field(
        default_factory=list, description="Placements in commit order"
    )
    remaining: list[BoxSchema] = Field(
        default_factory=list, description="Boxes that fit in no bin"
    )
    bins: list[BinStateSchema] = Field(
        default_factory=list, description="Bins in the order supplied"
    )
    packed_percentage: float = Field(
        ..., description="Percentage of total bin area covered by boxes"
    )

    @classmethod
    def from_result(cls, result: PlacementResult, heuristic: str) -> "PackResponseSchema":
        return cls(
            heuristic=heuristic,
            placements=[
                PlacementSchema(
                    bin_id=p.bin_id,
                    x=p.x,
                    y=p.y,
                    width=p.width,
                    height=p.height,
                    label=p.box.label,
                )
                for p in result.placed
            ],
            remaining=[
                BoxSchema(width=b.width, height=b.height, label=b.label)
                for b in result.remaining
            ],
            bins=[BinStateSchema.from_bin(b) for b in result.bins],
            packed_percentage=result.packed_percentage,
        )


class HeuristicsSchema(BaseModel):
    """Available placement heuristics."""

    heuristics: list[str] = Field(..., description="Heuristic names")
    default: str = Field(..., description="Heuristic used when none is given")


class ValidationResultSchema(BaseModel):
    """Response for job validation."""

    is_valid: bool = Field(..., description="Whether the job is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors with JSON paths"
    )
    box_count: int = Field(default=0, description="Number of boxes after expansion")
    bin_count: int = Field(default=0, description="Number of bins")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
