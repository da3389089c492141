"""DXF exporter for panel outlines.

Generates an R2010 DXF document in millimetres, suitable for laser and CNC
CAM software. Each panel becomes one closed LWPOLYLINE on the OUTLINE
layer; panel names go on a separate LABELS layer so they can be hidden
before cutting.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units

from boxmaker.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from boxmaker.application.dtos import BoxOutput
    from boxmaker.domain import Panel


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "OUTLINE": {"color": 7},  # White - cut lines
    "LABELS": {"color": 5},  # Blue - panel names
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports panel outlines to DXF.

    Attributes:
        include_labels: Whether to write panel names on the LABELS layer.
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(self, include_labels: bool = True) -> None:
        self.include_labels = include_labels

    def export(self, output: BoxOutput, path: Path) -> None:
        doc = self.build_document(output)
        doc.saveas(path)

    def export_string(self, output: BoxOutput) -> str:
        doc = self.build_document(output)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, output: BoxOutput) -> Drawing:
        """Create a DXF document holding every panel of the output."""
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        for name, props in LAYERS.items():
            doc.layers.add(name, color=props["color"])

        msp = doc.modelspace()
        if not output.panels:
            logger.warning("No panels to export")
        for panel in output.panels:
            self._draw_panel(msp, panel)
        return doc

    def _draw_panel(self, msp: Modelspace, panel: Panel) -> None:
        points = [(p.x, p.y) for p in panel.points]
        if len(points) < 2:
            return
        # The closed flag replaces the repeated start point
        if panel.is_closed():
            points = points[:-1]
        msp.add_lwpolyline(points, close=True, dxfattribs={"layer": "OUTLINE"})

        if self.include_labels:
            bbox = panel.bounding_box
            text_height = max(2.0, min(bbox.width, bbox.height) * 0.08)
            msp.add_mtext(
                panel.name,
                dxfattribs={
                    "layer": "LABELS",
                    "char_height": text_height,
                    "insert": ((bbox.min_x + bbox.max_x) / 2, (bbox.min_y + bbox.max_y) / 2),
                    "attachment_point": 5,  # MIDDLE_CENTER
                },
            )
