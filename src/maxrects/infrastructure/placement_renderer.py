"""Placement diagram rendering.

SVG output draws every bin of a result side by side on one canvas, each bin
as a grey rectangle with its placed boxes on top. ASCII output draws one
bin per diagram for terminal display.
"""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path

from maxrects.domain import Bin, PlacedItem, PlacementResult

logger = logging.getLogger(__name__)

# Fill colors for placed boxes, cycled in drawing order
BOX_PALETTE: tuple[str, ...] = (
    "#87CEEB",  # Sky blue
    "#90EE90",  # Light green
    "#DDA0DD",  # Plum
    "#F0E68C",  # Khaki
    "#FFB6C1",  # Light pink
    "#FFA07A",  # Light salmon
    "#FFD700",  # Gold
    "#DEB887",  # Burlywood
    "#E6E6FA",  # Lavender
    "#BC8F8F",  # Rosy brown
    "#20B2AA",  # Light sea green
    "#D8BFD8",  # Thistle
)

BIN_FILL = "#C8C8C8"

# Row limits for ASCII diagrams of very short or very tall bins
MIN_ASCII_ROWS = 10
MAX_ASCII_ROWS = 200


class PlacementRenderer:
    """Renders packing results as SVG or ASCII diagrams.

    Attributes:
        scale: Pixels per unit of length in SVG output.
        spacing: Gap between neighbouring bins, in units of length.
        box_stroke: Stroke color for box outlines.
        text_color: Color for labels.
        show_labels: Whether to write box labels (or sizes) inside boxes.
        palette: Fill colors cycled over placed boxes.
    """

    def __init__(
        self,
        scale: float = 1.0,
        spacing: float = 10,
        box_stroke: str = "#000000",
        text_color: str = "#000000",
        show_labels: bool = True,
        palette: tuple[str, ...] = BOX_PALETTE,
    ) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        if spacing < 0:
            raise ValueError("Spacing must not be negative")
        if not palette:
            raise ValueError("Palette must contain at least one color")
        self.scale = scale
        self.spacing = spacing
        self.box_stroke = box_stroke
        self.text_color = text_color
        self.show_labels = show_labels
        self.palette = palette

    def bin_origin(
        self, index: int, bin_: Bin, max_bin_width: float
    ) -> tuple[float, float]:
        """Canvas position of the bin at ``index``, in units of length.

        Bins are laid out left to right in slots ``max_bin_width + spacing``
        wide, each shifted by its own display offset.
        """
        return (
            index * (max_bin_width + self.spacing) + bin_.offset_x,
            bin_.offset_y,
        )

    def render_svg(self, result: PlacementResult) -> str:
        """Generate one SVG canvas showing every bin of a result.

        Args:
            result: A packing result.

        Returns:
            SVG document as a string.
        """
        bins = result.bins
        max_bin_width = max((b.width for b in bins), default=0)
        origins = [self.bin_origin(i, b, max_bin_width) for i, b in enumerate(bins)]

        canvas_width = max(
            (ox + b.width for (ox, _), b in zip(origins, bins)), default=0
        )
        canvas_height = max(
            (oy + b.height for (_, oy), b in zip(origins, bins)), default=0
        )
        svg_width = canvas_width * self.scale
        svg_height = canvas_height * self.scale

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
        ]

        color_index = 0
        for (ox, oy), bin_ in zip(origins, bins):
            parts.append("")
            parts.append(f"  <!-- Bin {bin_.bin_id} -->")
            parts.append(
                f'  <rect x="{ox * self.scale}" y="{oy * self.scale}" '
                f'width="{bin_.width * self.scale}" height="{bin_.height * self.scale}" '
                f'fill="{BIN_FILL}"/>'
            )
            for placement in bin_.placements:
                fill = self.palette[color_index % len(self.palette)]
                color_index += 1
                parts.append(self._render_box(placement, ox, oy, fill))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_box(
        self,
        placement: PlacedItem,
        origin_x: float,
        origin_y: float,
        fill: str,
    ) -> str:
        """Render one placed box as an SVG rect, with a label if it fits."""
        x = (origin_x + placement.x) * self.scale
        y = (origin_y + placement.y) * self.scale
        w = placement.width * self.scale
        h = placement.height * self.scale

        rect = (
            f'<rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{fill}" stroke="{self.box_stroke}"/>'
        )

        font_size = min(12, min(w, h) / 3)
        if not self.show_labels or font_size < 6:
            return f"  {rect}"

        label = placement.box.label or f"{placement.width}x{placement.height}"
        return "\n".join(
            [
                "  <g>",
                f"    {rect}",
                f'    <text x="{x + w / 2}" y="{y + h / 2}" '
                f'text-anchor="middle" dominant-baseline="middle" '
                f'font-family="Arial, sans-serif" font-size="{font_size}" '
                f'fill="{self.text_color}">{escape(label)}</text>',
                "  </g>",
            ]
        )

    def save_svg(self, result: PlacementResult, path: Path) -> Path:
        """Write the SVG diagram of a result to ``path``.

        Returns:
            The path written.
        """
        path = Path(path)
        path.write_text(self.render_svg(result), encoding="utf-8")
        logger.info("Wrote placement diagram to %s", path)
        return path

    def render_ascii(self, bin_: Bin, width: int = 80) -> str:
        """Generate an ASCII diagram of a single bin.

        Args:
            bin_: The bin to draw, with its placements.
            width: Diagram width in characters, borders included.

        Returns:
            Multi-line string with a header line and a bordered grid.
        """
        usable_width = max(width - 2, 10)
        scale_x = usable_width / bin_.width

        # Terminal cells are roughly twice as tall as they are wide
        grid_height = int(usable_width * bin_.height / bin_.width * 0.5)
        grid_height = min(max(grid_height, MIN_ASCII_ROWS), MAX_ASCII_ROWS)
        scale_y = grid_height / bin_.height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for placement in bin_.placements:
            self._draw_box_ascii(grid, placement, scale_x, scale_y)

        lines = [
            f"Bin {bin_.bin_id} ({bin_.width}x{bin_.height}) - "
            f"{len(bin_.placements)} boxes - {bin_.utilization:.1f}% used",
            "+" + "-" * usable_width + "+",
        ]
        lines.extend("|" + "".join(row) + "|" for row in grid)
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def _draw_box_ascii(
        self,
        grid: list[list[str]],
        placement: PlacedItem,
        scale_x: float,
        scale_y: float,
    ) -> None:
        grid_height = len(grid)
        grid_width = len(grid[0])

        x1 = min(int(placement.x * scale_x), grid_width - 1)
        y1 = min(int(placement.y * scale_y), grid_height - 1)
        x2 = min(int((placement.x + placement.width) * scale_x), grid_width - 1)
        y2 = min(int((placement.y + placement.height) * scale_y), grid_height - 1)

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for x, y in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
            grid[y][x] = "+"

        # Size text inside the outline, if there is room
        text = f"{placement.width}x{placement.height}"
        row = y1 + 1
        if row < y2 and len(text) <= x2 - x1 - 1:
            for i, char in enumerate(text):
                grid[row][x1 + 1 + i] = char

    def render_all_ascii(self, result: PlacementResult, width: int = 80) -> str:
        """Generate ASCII diagrams for every bin followed by a totals line."""
        sections = [self.render_ascii(b, width) for b in result.bins]
        sections.append(
            f"Total: {len(result.placed)} placed, {len(result.remaining)} remaining, "
            f"{result.packed_percentage:.2f}% packed"
        )
        return "\n\n".join(sections)
