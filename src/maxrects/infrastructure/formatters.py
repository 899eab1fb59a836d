"""Output formatters and exporters for packing results."""

from __future__ import annotations

import json
from typing import Any

from maxrects.domain import Bin, PlacedItem, PlacementResult, Rectangle


class PlacementSummaryFormatter:
    """Formats a packing result as a plain-text report."""

    def format(self, result: PlacementResult) -> str:
        """Format placements, per-bin usage and the remainder as a report."""
        lines = [
            "PLACEMENTS",
            "=" * 64,
            f"{'Box':<16} {'Bin':<6} {'X':<8} {'Y':<8} {'Width':<10} {'Height'}",
            "-" * 64,
        ]
        if not result.placed:
            lines.append("No boxes placed.")
        for p in result.placed:
            lines.append(
                f"{p.box.label or '-':<16} {p.bin_id:<6} {p.x:<8} {p.y:<8} "
                f"{p.width:<10} {p.height}"
            )

        lines.extend(["", "BINS", "=" * 64])
        for b in result.bins:
            lines.append(
                f"Bin {b.bin_id} ({b.width}x{b.height}): "
                f"{len(b.placements)} boxes, {b.utilization:.1f}% used, "
                f"{len(b.free_rectangles)} free rectangles"
            )

        lines.append("")
        if result.remaining:
            sizes = ", ".join(f"{box.width}x{box.height}" for box in result.remaining)
            lines.append(f"Remaining: {len(result.remaining)} boxes ({sizes})")
        else:
            lines.append("Remaining: 0 boxes")
        lines.append(f"Percentage Packed: {result.packed_percentage:.2f}%")

        return "\n".join(lines)


class JsonExporter:
    """Exports packing results as JSON-compatible data."""

    def export(self, result: PlacementResult) -> dict[str, Any]:
        """Convert a result into plain dictionaries and lists."""
        return {
            "placements": [self._placement(p) for p in result.placed],
            "remaining": [
                {"width": box.width, "height": box.height, "label": box.label}
                for box in result.remaining
            ],
            "bins": [self._bin(b) for b in result.bins],
            "packed_percentage": result.packed_percentage,
        }

    def to_json(self, result: PlacementResult, indent: int | None = 2) -> str:
        """Export a result as a JSON string."""
        return json.dumps(self.export(result), indent=indent)

    @staticmethod
    def _placement(p: PlacedItem) -> dict[str, Any]:
        return {
            "bin_id": p.bin_id,
            "x": p.x,
            "y": p.y,
            "width": p.width,
            "height": p.height,
            "label": p.box.label,
        }

    @staticmethod
    def _rect(r: Rectangle) -> dict[str, Any]:
        return {"x": r.x, "y": r.y, "width": r.width, "height": r.height}

    def _bin(self, b: Bin) -> dict[str, Any]:
        return {
            "id": b.bin_id,
            "width": b.width,
            "height": b.height,
            "offset_x": b.offset_x,
            "offset_y": b.offset_y,
            "utilization": b.utilization,
            "free_rectangles": [self._rect(r) for r in b.free_rectangles],
        }
