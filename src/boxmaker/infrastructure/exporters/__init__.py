"""Exporter framework for generated boxes.

- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- gcode: Laser G-code with homing preamble and multi-pass cutting
- svg: Millimetre SVG drawing of the panel outlines
- dxf: R2010 DXF with OUTLINE and LABELS layers
- json: Parameters, panel outlines and errors

Usage:
    from boxmaker.infrastructure.exporters import ExporterRegistry, ExportManager

    exporter = ExporterRegistry.get("gcode")()
    program = exporter.export_string(output)

    manager = ExportManager(Path("out"))
    files = manager.export_all(["svg", "dxf"], output, project_name="tray")
"""

from boxmaker.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Importing the modules registers their exporters
from boxmaker.infrastructure.exporters.dxf import DxfExporter
from boxmaker.infrastructure.exporters.gcode import GcodeExporter
from boxmaker.infrastructure.exporters.json_exporter import JsonExporter, box_output_to_dict
from boxmaker.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "GcodeExporter",
    "JsonExporter",
    "SvgExporter",
    "box_output_to_dict",
]
