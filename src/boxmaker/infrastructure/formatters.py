"""Plain-text report formatters for generated boxes."""

from __future__ import annotations

from boxmaker.application.dtos import BoxOutput
from boxmaker.domain.services import layout_bounds


class PanelSummaryFormatter:
    """Formats the generated panels as a table for the terminal."""

    def format(self, output: BoxOutput) -> str:
        """Format a summary of the box and its panels.

        Invalid outputs list their errors instead of panels.
        """
        if not output.is_valid:
            lines = ["BOX GENERATION FAILED", "=" * 70]
            lines.extend(f"  - {error}" for error in output.errors)
            return "\n".join(lines)

        lines = self._header(output)
        if not output.panels:
            lines.append("No panels generated.")
            return "\n".join(lines)

        lines.extend(
            [
                f"{'#':<4} {'Panel':<16} {'Role':<10} {'Width':<10} {'Height':<10} {'Points'}",
                "-" * 70,
            ]
        )
        for panel in output.panels:
            bbox = panel.bounding_box
            lines.append(
                f"{panel.id:<4} {panel.name:<16} {panel.role.value:<10} "
                f"{bbox.width:<10.2f} {bbox.height:<10.2f} {len(panel.points)}"
            )
        lines.append("-" * 70)

        bounds = layout_bounds(output.panels)
        if bounds is not None:
            lines.append(f"Sheet area used: {bounds.width:.1f} x {bounds.height:.1f} mm")
        if output.packing_summary is not None:
            summary = output.packing_summary
            lines.append(
                f"Packed into {summary.rows} row(s), "
                f"utilization {summary.utilization * 100:.1f}%"
            )
        return "\n".join(lines)

    def _header(self, output: BoxOutput) -> list[str]:
        params = output.params
        joint = params.finger_joint
        dims = f"{params.x:g} x {params.y:g} x {params.h:g} mm"
        if params.outside:
            dims += " (outside)"
        return [
            "TABBED BOX",
            "=" * 70,
            f"Dimensions:  {dims}",
            f"Thickness:   {params.thickness:g} mm",
            f"Box type:    {params.box_type.value}",
            f"Fingers:     {joint.finger * params.thickness:g} mm finger / "
            f"{joint.space * params.thickness:g} mm space ({joint.style.value})",
            f"Kerf:        {params.burn:g} mm",
            "",
        ]
