"""Tests for the DXF exporter."""

from __future__ import annotations

from pathlib import Path

import ezdxf
import pytest

from boxmaker.application import BoxOutput
from boxmaker.infrastructure.exporters import DxfExporter


class TestDxfExporter:
    def test_document_setup(self, box_output: BoxOutput) -> None:
        doc = DxfExporter().build_document(box_output)

        assert doc.dxfversion == "AC1024"  # R2010
        assert doc.units == ezdxf.units.MM
        assert "OUTLINE" in doc.layers
        assert "LABELS" in doc.layers

    def test_one_closed_polyline_per_panel(self, box_output: BoxOutput) -> None:
        msp = DxfExporter().build_document(box_output).modelspace()
        polylines = list(msp.query("LWPOLYLINE"))

        assert len(polylines) == len(box_output.panels)
        assert all(pl.closed for pl in polylines)
        assert all(pl.dxf.layer == "OUTLINE" for pl in polylines)

    def test_closing_point_not_repeated(self, box_output: BoxOutput) -> None:
        msp = DxfExporter().build_document(box_output).modelspace()
        first = next(iter(msp.query("LWPOLYLINE")))
        panel = box_output.panels[0]

        assert len(first) == len(panel.points) - 1
        x, y = first.get_points("xy")[0]
        assert (x, y) == pytest.approx((panel.points[0].x, panel.points[0].y))

    def test_labels_on_label_layer(self, box_output: BoxOutput) -> None:
        msp = DxfExporter().build_document(box_output).modelspace()
        labels = list(msp.query("MTEXT"))

        assert [m.text for m in labels] == [p.name for p in box_output.panels]
        assert all(m.dxf.layer == "LABELS" for m in labels)

    def test_labels_can_be_disabled(self, box_output: BoxOutput) -> None:
        msp = DxfExporter(include_labels=False).build_document(box_output).modelspace()

        assert len(msp.query("MTEXT")) == 0

    def test_export_round_trip(self, box_output: BoxOutput, tmp_path: Path) -> None:
        path = tmp_path / "box.dxf"
        DxfExporter().export(box_output, path)

        doc = ezdxf.readfile(path)
        polylines = doc.modelspace().query("LWPOLYLINE[layer=='OUTLINE']")
        assert len(polylines) == len(box_output.panels)

    def test_export_string(self, box_output: BoxOutput) -> None:
        text = DxfExporter().export_string(box_output)

        assert "LWPOLYLINE" in text
        assert text.rstrip().endswith("EOF")

    def test_empty_output(
        self, invalid_output: BoxOutput, caplog: pytest.LogCaptureFixture
    ) -> None:
        doc = DxfExporter().build_document(invalid_output)

        assert len(doc.modelspace().query("LWPOLYLINE")) == 0
        assert "No panels to export" in caplog.text
