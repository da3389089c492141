"""Domain entities for box construction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .parameters import BoxParameters
from .value_objects import BoundingBox, LayoutConfig, Point

if TYPE_CHECKING:
    from .services.box_assembler import BoxAssembler
    from .services.panel_packing import PackingSummary

CLOSURE_TOLERANCE = 0.01


class PanelRole(str, Enum):
    """Role of a panel within the box."""

    FRONT = "front"
    RIGHT = "right"
    LEFT = "left"
    BACK = "back"
    TOP = "top"
    BOTTOM = "bottom"
    DIVIDER_X = "divider_x"
    DIVIDER_Y = "divider_y"


@dataclass(frozen=True)
class Panel:
    """A single cut-ready panel outline.

    Attributes:
        id: Stable index of the panel within its box.
        name: Human readable label (e.g., "Wall 1", "Top").
        role: The panel's role within the box.
        points: Closed polygon in mm; the last point repeats the first.
    """

    id: int
    name: str
    role: PanelRole
    points: tuple[Point, ...]

    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.of(self.points)

    def is_closed(self, tolerance: float = CLOSURE_TOLERANCE) -> bool:
        """True when the first and last point coincide within tolerance."""
        if len(self.points) < 2:
            return False
        return self.points[0].is_close(self.points[-1], tolerance)

    def translated(self, dx: float, dy: float) -> "Panel":
        return Panel(
            id=self.id,
            name=self.name,
            role=self.role,
            points=tuple(p.translated(dx, dy) for p in self.points),
        )


class TabbedBox:
    """A finger-jointed box and the panels cut for it.

    The panel list is rebuilt in full on every generate() call, so
    repeated calls with the same parameters give identical panels.

    Attributes:
        params: Validated box parameters.
        panels: Panels from the most recent generate() call.
        packing_summary: Packer statistics from that call, if it packed.
    """

    def __init__(
        self,
        params: BoxParameters,
        assembler: "BoxAssembler | None" = None,
    ) -> None:
        if assembler is None:
            from .services.box_assembler import BoxAssembler

            assembler = BoxAssembler()
        self.params = params
        self.panels: list[Panel] = []
        self.packing_summary: "PackingSummary | None" = None
        self._assembler = assembler

    def generate(self, layout: LayoutConfig | None = None) -> list[Panel]:
        """Rebuild all panels from the box parameters.

        Args:
            layout: Layout settings; defaults to LayoutConfig().

        Returns:
            The freshly generated panels (also stored on self.panels).
        """
        result = self._assembler.assemble(self.params, layout or LayoutConfig())
        self.panels = result.panels
        self.packing_summary = result.packing_summary
        return self.panels

    def panel(self, panel_id: int) -> Panel:
        """Look up a panel by id.

        Raises:
            KeyError: If no panel has that id.
        """
        for panel in self.panels:
            if panel.id == panel_id:
                return panel
        raise KeyError(f"No panel with id {panel_id}")

    @property
    def bounding_box(self) -> BoundingBox | None:
        """Bounding box of all panels, or None when there are none."""
        if not self.panels:
            return None
        return BoundingBox.of(p for panel in self.panels for p in panel.points)
