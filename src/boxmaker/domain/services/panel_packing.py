"""Shelf packing of panel outlines for a denser cut layout.

The packer is a greedy shelf heuristic: panels are sorted tallest first
and placed left to right in rows ("shelves") until a row would exceed the
target width, at which point a new row starts above the tallest panel of
the previous one. It does not search for an optimal layout.

Packing never mutates panels in place. plan() produces a mapping from
panel id to translation, and pack() applies it in a single pass while
keeping the original panel order.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from boxmaker.domain.entities import Panel
from boxmaker.domain.value_objects import BoundingBox, LayoutConfig

logger = logging.getLogger(__name__)

# Preferred layout width relative to the square root of the total panel area.
TARGET_ASPECT_FACTOR = 1.5


@dataclass(frozen=True)
class PackItem:
    """A panel's footprint as seen by the packer.

    Attributes:
        panel_id: Id of the panel this item stands for.
        width: Bounding box width in mm.
        height: Bounding box height in mm.
        original_min_x: Bounding box left edge before packing.
        original_min_y: Bounding box bottom edge before packing.
    """

    panel_id: int
    width: float
    height: float
    original_min_x: float
    original_min_y: float

    @classmethod
    def from_panel(cls, panel: Panel) -> "PackItem":
        bbox = panel.bounding_box
        return cls(
            panel_id=panel.id,
            width=bbox.width,
            height=bbox.height,
            original_min_x=bbox.min_x,
            original_min_y=bbox.min_y,
        )

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass
class _Row:
    """Internal row (shelf) state during packing.

    Attributes:
        y: Bottom of the row.
        height: Tallest item placed so far.
    """

    y: float
    height: float = 0.0


@dataclass(frozen=True)
class PackingSummary:
    """Outcome of a packing run.

    Attributes:
        target_width: Row width the packer aimed for.
        rows: Number of rows used.
        used_width: Width of the packed layout.
        used_height: Height of the packed layout.
        panel_area: Sum of all panel bounding box areas.
    """

    target_width: float
    rows: int
    used_width: float
    used_height: float
    panel_area: float

    @property
    def utilization(self) -> float:
        """Fraction of the layout rectangle covered by panel bounding boxes."""
        total = self.used_width * self.used_height
        if total == 0:
            return 0.0
        return self.panel_area / total


class PanelPacker:
    """Greedy shelf packer for panel outlines.

    Attributes:
        layout: Layout settings providing the gap between panels.
    """

    def __init__(self, layout: LayoutConfig | None = None) -> None:
        self.layout = layout or LayoutConfig()
        self.last_summary: PackingSummary | None = None

    @staticmethod
    def target_width(items: Sequence[PackItem]) -> float:
        """Preferred row width: 1.5 x sqrt(total area), never below the widest item."""
        if not items:
            return 0.0
        total_area = sum(item.area for item in items)
        widest = max(item.width for item in items)
        return max(math.sqrt(total_area) * TARGET_ASPECT_FACTOR, widest)

    def plan(self, panels: Sequence[Panel]) -> dict[int, tuple[float, float]]:
        """Compute the translation of every panel.

        Args:
            panels: Panels to pack. Panels without points are skipped.

        Returns:
            Mapping of panel id to (dx, dy).
        """
        items = [PackItem.from_panel(panel) for panel in panels if panel.points]
        if not items:
            self.last_summary = None
            return {}

        # Tallest first; sorted() is stable so equal heights keep input order
        ordered = sorted(items, key=lambda item: item.height, reverse=True)
        target = self.target_width(ordered)
        spacing = self.layout.spacing

        rows = [_Row(y=0.0)]
        current_x = 0.0
        used_width = 0.0
        positions: dict[int, tuple[float, float]] = {}

        for item in ordered:
            row = rows[-1]
            if current_x > 0 and current_x + item.width > target:
                rows.append(_Row(y=row.y + row.height + spacing))
                row = rows[-1]
                current_x = 0.0

            positions[item.panel_id] = (current_x, row.y)
            row.height = max(row.height, item.height)
            used_width = max(used_width, current_x + item.width)
            current_x += item.width + spacing

        logger.debug(
            "Packed %d panels into %d rows (target width %.1fmm)",
            len(items),
            len(rows),
            target,
        )
        self.last_summary = PackingSummary(
            target_width=target,
            rows=len(rows),
            used_width=used_width,
            used_height=rows[-1].y + rows[-1].height,
            panel_area=sum(item.area for item in items),
        )

        return {
            item.panel_id: (
                positions[item.panel_id][0] - item.original_min_x,
                positions[item.panel_id][1] - item.original_min_y,
            )
            for item in items
        }

    def pack(self, panels: Sequence[Panel]) -> list[Panel]:
        """Return the panels translated into a packed layout.

        The returned list keeps the input order; only coordinates change.
        """
        mapping = self.plan(panels)
        return [
            panel.translated(*mapping[panel.id]) if panel.id in mapping else panel
            for panel in panels
        ]


def layout_bounds(panels: Sequence[Panel]) -> BoundingBox | None:
    """Bounding box enclosing every panel, or None for an empty layout."""
    points = [p for panel in panels for p in panel.points]
    if not points:
        return None
    return BoundingBox.of(points)


def find_overlaps(panels: Sequence[Panel]) -> list[tuple[int, int]]:
    """Return id pairs of panels whose bounding boxes overlap."""
    boxes = [(panel.id, panel.bounding_box) for panel in panels if panel.points]
    overlaps: list[tuple[int, int]] = []
    for i, (id_a, box_a) in enumerate(boxes):
        for id_b, box_b in boxes[i + 1 :]:
            if box_a.overlaps(box_b):
                overlaps.append((id_a, id_b))
    return overlaps
