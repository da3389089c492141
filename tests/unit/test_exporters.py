"""Tests for the exporter registry, export manager and text exporters."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from boxmaker.application import BoxOutput
from boxmaker.infrastructure.exporters import (
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    SvgExporter,
    box_output_to_dict,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


# =============================================================================
# Registry
# =============================================================================


class TestExporterRegistry:
    def test_builtin_formats(self) -> None:
        assert ExporterRegistry.available_formats() == ["dxf", "gcode", "json", "svg"]

    def test_unknown_format(self) -> None:
        assert not ExporterRegistry.is_registered("stl")
        with pytest.raises(KeyError, match="Available formats"):
            ExporterRegistry.get("stl")

    @pytest.mark.parametrize("format_name", ["dxf", "gcode", "json", "svg"])
    def test_exporters_declare_metadata(self, format_name: str) -> None:
        exporter_class = ExporterRegistry.get(format_name)

        assert exporter_class.format_name == format_name
        assert exporter_class.file_extension
        assert exporter_class.media_type


class TestExportManager:
    def test_export_all(self, box_output: BoxOutput, tmp_path: Path) -> None:
        manager = ExportManager(tmp_path / "out")
        files = manager.export_all(["gcode", "svg", "json"], box_output)

        assert files == {
            "gcode": tmp_path / "out" / "box_gcode.gcode",
            "svg": tmp_path / "out" / "box_svg.svg",
            "json": tmp_path / "out" / "box_json.json",
        }
        assert all(path.exists() for path in files.values())

    def test_project_name(self, box_output: BoxOutput, tmp_path: Path) -> None:
        path = ExportManager(tmp_path).export_single("json", box_output, project_name="tray")

        assert path == tmp_path / "tray_json.json"

    def test_unknown_format_writes_nothing(
        self, box_output: BoxOutput, tmp_path: Path
    ) -> None:
        out_dir = tmp_path / "out"
        with pytest.raises(KeyError):
            ExportManager(out_dir).export_all(["svg", "stl"], box_output)

        assert not out_dir.exists()


# =============================================================================
# SVG
# =============================================================================


class TestSvgExporter:
    def test_valid_xml_with_one_path_per_panel(self, box_output: BoxOutput) -> None:
        root = ET.fromstring(SvgExporter().export_string(box_output))

        assert root.tag == f"{SVG_NS}svg"
        assert root.get("width").endswith("mm")
        paths = root.findall(f".//{SVG_NS}path")
        assert len(paths) == len(box_output.panels)
        assert all(p.get("d").startswith("M ") and p.get("d").endswith(" Z") for p in paths)

    def test_labels(self, box_output: BoxOutput) -> None:
        root = ET.fromstring(SvgExporter().export_string(box_output))
        labels = [t.text for t in root.iter(f"{SVG_NS}text")]

        assert labels == [panel.name for panel in box_output.panels]

    def test_labels_can_be_disabled(self, box_output: BoxOutput) -> None:
        root = ET.fromstring(SvgExporter(show_labels=False).export_string(box_output))

        assert root.findall(f".//{SVG_NS}text") == []

    def test_drawing_fits_viewbox(self, box_output: BoxOutput) -> None:
        root = ET.fromstring(SvgExporter(margin=5.0).export_string(box_output))
        _, _, view_w, view_h = (float(v) for v in root.get("viewBox").split())

        for path in root.iter(f"{SVG_NS}path"):
            numbers = [float(v) for v in path.get("d").replace("M", "").replace("L", "").replace("Z", "").split()]
            xs, ys = numbers[0::2], numbers[1::2]
            assert min(xs) >= 4.99 and max(xs) <= view_w - 4.99
            assert min(ys) >= 4.99 and max(ys) <= view_h - 4.99

    def test_empty_output(self, invalid_output: BoxOutput) -> None:
        root = ET.fromstring(SvgExporter().export_string(invalid_output))

        assert root.findall(f".//{SVG_NS}path") == []


# =============================================================================
# JSON
# =============================================================================


class TestJsonExporter:
    def test_document(self, box_output: BoxOutput) -> None:
        data = json.loads(JsonExporter().export_string(box_output))

        assert data["params"]["x"] == 100.0
        assert data["params"]["box_type"] == "full_box"
        assert data["params"]["finger_joint"]["style"] == "rectangular"
        assert data["layout"] == {"spacing": 5.0}
        assert data["errors"] == []
        assert len(data["panels"]) == 6
        assert "packing" not in data

    def test_panel_entries(self, box_output: BoxOutput) -> None:
        data = box_output_to_dict(box_output)
        first = data["panels"][0]

        assert first["id"] == 0
        assert first["name"] == "Wall 1"
        assert first["role"] == "front"
        assert first["points"][0] == first["points"][-1]
        assert first["bounding_box"]["width"] == pytest.approx(
            box_output.panels[0].bounding_box.width, abs=1e-3
        )

    def test_invalid_output(self, invalid_output: BoxOutput) -> None:
        data = box_output_to_dict(invalid_output)

        assert data["params"] is None
        assert data["panels"] == []
        assert data["errors"]

    def test_packing_summary_included(self, generate_command) -> None:
        from boxmaker.application import BoxInput

        output = generate_command.execute(BoxInput(optimize_layout=True))
        data = box_output_to_dict(output)

        assert data["packing"]["rows"] >= 1
        assert 0 < data["packing"]["utilization"] <= 1
