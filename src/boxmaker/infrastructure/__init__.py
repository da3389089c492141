"""Infrastructure layer - exporters and formatters."""

from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    GcodeExporter,
    JsonExporter,
    SvgExporter,
)
from .formatters import PanelSummaryFormatter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "GcodeExporter",
    "JsonExporter",
    "PanelSummaryFormatter",
    "SvgExporter",
]
