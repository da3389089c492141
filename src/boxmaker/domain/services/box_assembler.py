"""Box assembly: turns global box parameters into laid-out panels."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from boxmaker.domain.entities import Panel, PanelRole
from boxmaker.domain.parameters import BoxParameters
from boxmaker.domain.services.panel_packing import PackingSummary, PanelPacker, layout_bounds
from boxmaker.domain.services.wall_builder import WallPanelBuilder
from boxmaker.domain.value_objects import BoundingBox, LayoutConfig

logger = logging.getLogger(__name__)

# Edge templates in [bottom, right, top, left] order. A jointed character
# degrades to a plain edge when the neighboring panel is absent.
WALL_TEMPLATE = "FFFF"
SIDE_TEMPLATE = "FfFf"
LID_TEMPLATE = "ffff"
DIVIDER_EDGES = "FfeF"


def edge_descriptor(template: str, neighbors: tuple[bool, bool, bool, bool]) -> str:
    """Apply neighbor presence to an edge template.

    Args:
        template: Four edge characters for bottom, right, top, left.
        neighbors: Whether the panel adjoining each of those edges exists.

    Returns:
        The descriptor with absent neighbors replaced by 'e'.
    """
    return "".join(char if present else "e" for char, present in zip(template, neighbors))


@dataclass(frozen=True)
class _PanelSpec:
    name: str
    role: PanelRole
    width: float
    height: float
    edges: str


@dataclass(frozen=True)
class AssemblyResult:
    """Panels of one generate run and how they were laid out.

    Attributes:
        panels: Panels with ids 0..n-1 in generation order.
        packing_summary: Packer statistics when the packed layout was kept.
    """

    panels: list[Panel] = field(default_factory=list)
    packing_summary: PackingSummary | None = None


class BoxAssembler:
    """Builds the panels of a box and lays them out for cutting.

    Walls are placed left to right with a fixed gap between bounding
    boxes. The four side walls form the first row; lids and dividers form
    the second.
    """

    def generate(self, params: BoxParameters, layout: LayoutConfig) -> list[Panel]:
        """Generate every panel for the given box.

        Args:
            params: Validated box parameters.
            layout: Layout settings (panel spacing).

        Returns:
            Panels with ids 0..n-1 in generation order. Empty when the box
            type excludes every panel.
        """
        return self.assemble(params, layout).panels

    def assemble(self, params: BoxParameters, layout: LayoutConfig) -> AssemblyResult:
        """Generate every panel and report how the layout was packed.

        When optimize_layout is set the shelf packer runs, but its result
        is only kept if it is no wider than the row layout.

        Args:
            params: Validated box parameters.
            layout: Layout settings (panel spacing).

        Returns:
            AssemblyResult with the panels and, when packing was kept, the
            packing summary.
        """
        style = params.finger_joint.style
        if not style.has_geometry:
            logger.warning(
                "Finger style '%s' has no distinct geometry; drawing rectangular fingers",
                style.value,
            )

        first_row, second_row = self._panel_specs(params)
        builder = WallPanelBuilder(params.thickness, params.finger_joint, params.burn)

        panels: list[Panel] = []
        row_y = 0.0
        for row in (first_row, second_row):
            if not row:
                continue
            row_height = self._place_row(row, row_y, layout.spacing, builder, panels)
            row_y += row_height + layout.spacing

        logger.debug(
            "Generated %d panels for %s box (%gx%gx%g, t=%g)",
            len(panels),
            params.box_type.value,
            params.x,
            params.y,
            params.h,
            params.thickness,
        )

        if not params.optimize_layout or not panels:
            return AssemblyResult(panels=panels)

        packer = PanelPacker(layout)
        packed = packer.pack(panels)
        row_width = layout_bounds(panels).width
        packed_width = layout_bounds(packed).width
        if packed_width > row_width:
            logger.info(
                "Packed layout is wider than the row layout (%.1fmm > %.1fmm); keeping rows",
                packed_width,
                row_width,
            )
            return AssemblyResult(panels=panels)
        return AssemblyResult(panels=packed, packing_summary=packer.last_summary)

    def _panel_specs(
        self, params: BoxParameters
    ) -> tuple[list[_PanelSpec], list[_PanelSpec]]:
        x, y, h = params.inner_dimensions()
        inc = params.box_type.included_panels()

        first_row: list[_PanelSpec] = []
        if inc.front:
            first_row.append(
                _PanelSpec(
                    "Wall 1",
                    PanelRole.FRONT,
                    x,
                    h,
                    edge_descriptor(WALL_TEMPLATE, (inc.bottom, inc.right, inc.top, inc.left)),
                )
            )
        if inc.right:
            first_row.append(
                _PanelSpec(
                    "Wall 2",
                    PanelRole.RIGHT,
                    y,
                    h,
                    edge_descriptor(SIDE_TEMPLATE, (inc.bottom, inc.back, inc.top, inc.front)),
                )
            )
        if inc.left:
            first_row.append(
                _PanelSpec(
                    "Wall 4",
                    PanelRole.LEFT,
                    y,
                    h,
                    edge_descriptor(SIDE_TEMPLATE, (inc.bottom, inc.front, inc.top, inc.back)),
                )
            )
        if inc.back:
            first_row.append(
                _PanelSpec(
                    "Wall 3",
                    PanelRole.BACK,
                    x,
                    h,
                    edge_descriptor(WALL_TEMPLATE, (inc.bottom, inc.left, inc.top, inc.right)),
                )
            )

        lid_edges = edge_descriptor(
            LID_TEMPLATE, (inc.front, inc.right, inc.back, inc.left)
        )
        second_row: list[_PanelSpec] = []
        if inc.top:
            second_row.append(_PanelSpec("Top", PanelRole.TOP, x, y, lid_edges))
        if inc.bottom:
            second_row.append(_PanelSpec("Bottom", PanelRole.BOTTOM, x, y, lid_edges))

        for i in range(params.dividers_x):
            second_row.append(
                _PanelSpec(f"Divider X {i + 1}", PanelRole.DIVIDER_X, y, h, DIVIDER_EDGES)
            )
        for i in range(params.dividers_y):
            second_row.append(
                _PanelSpec(f"Divider Y {i + 1}", PanelRole.DIVIDER_Y, x, h, DIVIDER_EDGES)
            )
        return first_row, second_row

    def _place_row(
        self,
        row: list[_PanelSpec],
        row_y: float,
        spacing: float,
        builder: WallPanelBuilder,
        panels: list[Panel],
    ) -> float:
        """Build a row of panels and append them to panels.

        Returns:
            Height of the tallest bounding box in the row.
        """
        cursor_x = 0.0
        row_height = 0.0
        for spec in row:
            outline = builder.build(spec.width, spec.height, spec.edges)
            bbox = BoundingBox.of(outline)
            dx = cursor_x - bbox.min_x
            dy = row_y - bbox.min_y
            panels.append(
                Panel(
                    id=len(panels),
                    name=spec.name,
                    role=spec.role,
                    points=tuple(p.translated(dx, dy) for p in outline),
                )
            )
            cursor_x += bbox.width + spacing
            row_height = max(row_height, bbox.height)
        return row_height


def generate_panels(
    params: BoxParameters, layout: LayoutConfig | None = None
) -> list[Panel]:
    """Convenience wrapper around BoxAssembler().generate()."""
    return BoxAssembler().generate(params, layout or LayoutConfig())
