"""JSON exporter for generated boxes."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from boxmaker.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from boxmaker.application.dtos import BoxOutput
    from boxmaker.domain import BoxParameters, Panel


def _params_to_dict(params: BoxParameters) -> dict[str, Any]:
    data = asdict(params)
    data["box_type"] = params.box_type.value
    data["finger_joint"]["style"] = params.finger_joint.style.value
    return data


def _panel_to_dict(panel: Panel, precision: int) -> dict[str, Any]:
    bbox = panel.bounding_box
    return {
        "id": panel.id,
        "name": panel.name,
        "role": panel.role.value,
        "bounding_box": {
            "min_x": round(bbox.min_x, precision),
            "min_y": round(bbox.min_y, precision),
            "max_x": round(bbox.max_x, precision),
            "max_y": round(bbox.max_y, precision),
            "width": round(bbox.width, precision),
            "height": round(bbox.height, precision),
        },
        "points": [[round(p.x, precision), round(p.y, precision)] for p in panel.points],
    }


def box_output_to_dict(output: BoxOutput, precision: int = 4) -> dict[str, Any]:
    """Convert a BoxOutput into plain JSON-compatible data."""
    data: dict[str, Any] = {
        "params": _params_to_dict(output.params) if output.params else None,
        "layout": {"spacing": output.layout.spacing},
        "panels": [_panel_to_dict(panel, precision) for panel in output.panels],
        "errors": list(output.errors),
    }
    if output.packing_summary is not None:
        summary = output.packing_summary
        data["packing"] = {
            "target_width": round(summary.target_width, precision),
            "rows": summary.rows,
            "used_width": round(summary.used_width, precision),
            "used_height": round(summary.used_height, precision),
            "utilization": round(summary.utilization, precision),
        }
    return data


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports parameters, panel outlines and errors as JSON.

    Attributes:
        indent: Indentation passed to json.dumps.
        precision: Decimal places kept for coordinates.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, indent: int = 2, precision: int = 4) -> None:
        self.indent = indent
        self.precision = precision

    def export(self, output: BoxOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: BoxOutput) -> str:
        return json.dumps(box_output_to_dict(output, self.precision), indent=self.indent)
