"""G-code exporter for laser cutting.

Emits GRBL-flavoured G-code: millimetre units, absolute positioning, an
optional homing preamble that zeroes G54 at the configured work offset,
then every panel outline cut in the configured number of passes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from boxmaker.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from boxmaker.application.dtos import BoxOutput, LaserSettings
    from boxmaker.domain import BoxParameters, Panel

logger = logging.getLogger(__name__)

FINAL_Z = 10.0


@ExporterRegistry.register("gcode")
class GcodeExporter:
    """Exports panel outlines as laser G-code.

    Attributes:
        format_name: "gcode"
        file_extension: "gcode"
    """

    format_name: ClassVar[str] = "gcode"
    file_extension: ClassVar[str] = "gcode"
    media_type: ClassVar[str] = "text/plain"

    def export(self, output: BoxOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Wrote G-code for {len(output.panels)} panels to {path}")

    def export_string(self, output: BoxOutput) -> str:
        """Render the whole program as a string."""
        laser = output.laser
        lines = self._header(output.params, laser)
        lines.extend(self._preamble(laser))
        for index, panel in enumerate(output.panels, start=1):
            lines.extend(self._panel(index, panel, laser))
        lines.extend(
            [
                "M5 ; Ensure laser off",
                f"G0 Z{FINAL_Z:.1f} ; Move to safe height",
                "G0 X0 Y0 ; Return to origin",
                "M2 ; Program end",
            ]
        )
        return "\n".join(lines) + "\n"

    def _header(self, params: BoxParameters | None, laser: LaserSettings) -> list[str]:
        lines = ["; Tabbed box G-code"]
        if params is not None:
            joint = params.finger_joint
            t = params.thickness
            lines.extend(
                [
                    f"; Box: {params.x:g}x{params.y:g}x{params.h:g} mm",
                    f"; Material thickness: {t:g} mm",
                    f"; Finger width: {joint.finger:g} * thickness = {joint.finger * t:g} mm",
                    f"; Space width: {joint.space:g} * thickness = {joint.space * t:g} mm",
                    f"; Play: {joint.play * t:g} mm",
                ]
            )
        lines.extend(
            [
                f"; Laser passes: {laser.passes}",
                f"; Laser power: S{laser.power}",
                f"; Feed rate: {laser.feed_rate:.0f} mm/min",
                ";",
                "; Initialization",
                "G21 ; Set units to millimeters",
                "G90 ; Absolute positioning",
                "G17 ; XY plane selection",
                "",
            ]
        )
        return lines

    def _preamble(self, laser: LaserSettings) -> list[str]:
        lines: list[str] = []
        if laser.home:
            lines.extend(
                [
                    "; Home and set work coordinate system",
                    "$H ; Home all axes",
                    "G10 L2 P1 X0 Y0 Z0 ; Clear G54 offset",
                    "G54 ; Select work coordinate system 1",
                    f"G0 X{laser.offset_x:.1f} Y{laser.offset_y:.1f} ; Move to work origin",
                    "G10 L20 P1 X0 Y0 Z0 ; Set current position as work zero",
                ]
            )
        lines.append(
            f"G0 Z{laser.safe_z:.2f} F{laser.feed_rate:.0f} ; Move to safe height"
        )
        lines.append("")
        return lines

    def _panel(self, index: int, panel: Panel, laser: LaserSettings) -> list[str]:
        lines = [f"; Panel {index}: {panel.name}"]
        if not panel.points:
            return lines + [""]

        start = panel.points[0]
        lines.append(f"G0 X{start.x:.2f} Y{start.y:.2f} ; Rapid to start")
        for pass_num in range(1, laser.passes + 1):
            lines.append(f"; Pass {pass_num}/{laser.passes}")
            lines.append(f"M3 S{laser.power} ; Laser on")
            for i, point in enumerate(panel.points[1:]):
                move = f"G1 X{point.x:.2f} Y{point.y:.2f}"
                if i == 0:
                    move += f" F{laser.feed_rate:.0f}"
                lines.append(move)
            lines.append("M5 ; Laser off")
            if pass_num < laser.passes:
                lines.append(f"G0 X{start.x:.2f} Y{start.y:.2f} ; Return to start")
        lines.append("")
        return lines
