"""SVG exporter for panel outlines.

Produces a millimetre-unit drawing with one closed path per panel. The Y
axis is flipped so the drawing reads the same way the panels lie on the
machine bed (origin bottom left).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar
from xml.sax.saxutils import escape

from boxmaker.domain.services import layout_bounds
from boxmaker.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from boxmaker.application.dtos import BoxOutput
    from boxmaker.domain import Panel


@ExporterRegistry.register("svg")
class SvgExporter:
    """Exports panel outlines as an SVG drawing.

    Attributes:
        margin: Blank border around the drawing in mm.
        stroke: Outline colour.
        stroke_width: Outline width in mm (hairline for laser software).
        show_labels: Whether to print panel names inside each outline.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(
        self,
        margin: float = 5.0,
        stroke: str = "#FF0000",
        stroke_width: float = 0.1,
        show_labels: bool = True,
    ) -> None:
        self.margin = margin
        self.stroke = stroke
        self.stroke_width = stroke_width
        self.show_labels = show_labels

    def export(self, output: BoxOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: BoxOutput) -> str:
        bounds = layout_bounds(output.panels)
        if bounds is None:
            min_x = min_y = max_y = 0.0
            width = height = 0.0
        else:
            min_x, min_y, max_y = bounds.min_x, bounds.min_y, bounds.max_y
            width, height = bounds.width, bounds.height

        svg_w = width + 2 * self.margin
        svg_h = height + 2 * self.margin

        def to_svg(x: float, y: float) -> tuple[float, float]:
            return x - min_x + self.margin, max_y - y + self.margin

        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'width="{svg_w:.2f}mm" height="{svg_h:.2f}mm" '
            f'viewBox="0 0 {svg_w:.2f} {svg_h:.2f}">',
        ]
        for panel in output.panels:
            lines.extend(self._panel(panel, to_svg))
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    def _panel(self, panel: Panel, to_svg) -> list[str]:
        if not panel.points:
            return []
        coords = [to_svg(p.x, p.y) for p in panel.points]
        d = "M " + " L ".join(f"{x:.3f} {y:.3f}" for x, y in coords) + " Z"
        lines = [
            f'  <g id="panel-{panel.id}">',
            f'    <path d="{d}" fill="none" stroke="{self.stroke}" '
            f'stroke-width="{self.stroke_width}"/>',
        ]
        if self.show_labels:
            bbox = panel.bounding_box
            cx, cy = to_svg((bbox.min_x + bbox.max_x) / 2, (bbox.min_y + bbox.max_y) / 2)
            font_size = max(2.0, min(bbox.width, bbox.height) / 8)
            lines.append(
                f'    <text x="{cx:.2f}" y="{cy:.2f}" text-anchor="middle" '
                f'font-family="Arial, sans-serif" font-size="{font_size:.1f}" '
                f'fill="#0000FF">{escape(panel.name)}</text>'
            )
        lines.append("  </g>")
        return lines
