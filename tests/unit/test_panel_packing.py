"""Tests for the shelf packer."""

from __future__ import annotations

import pytest

from boxmaker.domain import LayoutConfig, Panel, PanelRole, Point
from boxmaker.domain.services import (
    PackItem,
    PanelPacker,
    find_overlaps,
    layout_bounds,
)

SIZES = [(100.0, 20.0), (30.0, 80.0), (60.0, 60.0), (20.0, 20.0), (90.0, 40.0), (40.0, 100.0)]


def _rect(panel_id: int, width: float, height: float, x: float = 0.0, y: float = 0.0) -> Panel:
    points = (
        Point(x, y),
        Point(x + width, y),
        Point(x + width, y + height),
        Point(x, y + height),
        Point(x, y),
    )
    return Panel(id=panel_id, name=f"Panel {panel_id}", role=PanelRole.FRONT, points=points)


def _row_major(sizes: list[tuple[float, float]], spacing: float) -> list[Panel]:
    """All panels side by side in one row."""
    panels = []
    x = 0.0
    for i, (w, h) in enumerate(sizes):
        panels.append(_rect(i, w, h, x=x))
        x += w + spacing
    return panels


@pytest.fixture
def panels() -> list[Panel]:
    return _row_major(SIZES, 5.0)


class TestPanelPacker:
    def test_empty_input(self) -> None:
        packer = PanelPacker()

        assert packer.pack([]) == []
        assert packer.plan([]) == {}
        assert packer.last_summary is None

    def test_no_overlaps(self, panels: list[Panel]) -> None:
        packed = PanelPacker(LayoutConfig(spacing=5.0)).pack(panels)

        assert find_overlaps(packed) == []

    def test_spacing_respected(self, panels: list[Panel]) -> None:
        packed = PanelPacker(LayoutConfig(spacing=5.0)).pack(panels)
        boxes = [p.bounding_box for p in packed]

        for i, a in enumerate(boxes):
            for b in boxes[i + 1 :]:
                gap_x = max(b.min_x - a.max_x, a.min_x - b.max_x)
                gap_y = max(b.min_y - a.max_y, a.min_y - b.max_y)
                assert max(gap_x, gap_y) >= 5.0 - 1e-9

    def test_narrower_than_single_row(self, panels: list[Panel]) -> None:
        packed = PanelPacker(LayoutConfig(spacing=5.0)).pack(panels)

        assert layout_bounds(packed).width < layout_bounds(panels).width

    def test_order_and_shapes_preserved(self, panels: list[Panel]) -> None:
        packed = PanelPacker().pack(panels)

        assert [p.id for p in packed] == [p.id for p in panels]
        assert [p.name for p in packed] == [p.name for p in panels]
        for before, after in zip(panels, packed):
            assert after.bounding_box.width == pytest.approx(before.bounding_box.width)
            assert after.bounding_box.height == pytest.approx(before.bounding_box.height)

    def test_tallest_panel_at_origin(self, panels: list[Panel]) -> None:
        packed = PanelPacker().pack(panels)
        tallest = packed[5].bounding_box

        assert tallest.min_x == pytest.approx(0.0)
        assert tallest.min_y == pytest.approx(0.0)

    def test_input_not_mutated(self, panels: list[Panel]) -> None:
        before = [p.points for p in panels]
        PanelPacker().pack(panels)

        assert [p.points for p in panels] == before

    def test_panels_without_points_kept(self) -> None:
        empty = Panel(id=7, name="Empty", role=PanelRole.TOP, points=())
        packed = PanelPacker().pack([_rect(0, 10.0, 10.0, x=50.0), empty])

        assert packed[1] is empty
        assert packed[0].bounding_box.min_x == pytest.approx(0.0)


class TestPackingSummary:
    def test_summary_recorded(self, panels: list[Panel]) -> None:
        packer = PanelPacker(LayoutConfig(spacing=5.0))
        packed = packer.pack(panels)
        summary = packer.last_summary

        assert summary is not None
        assert summary.rows >= 2
        assert summary.used_width <= summary.target_width + 1e-9
        assert summary.used_width == pytest.approx(layout_bounds(packed).width)
        assert summary.used_height == pytest.approx(layout_bounds(packed).height)
        assert summary.panel_area == pytest.approx(sum(w * h for w, h in SIZES))
        assert 0.0 < summary.utilization <= 1.0

    def test_target_width_never_below_widest(self) -> None:
        items = [PackItem(0, 500.0, 10.0, 0.0, 0.0), PackItem(1, 10.0, 10.0, 0.0, 0.0)]

        assert PanelPacker.target_width(items) == 500.0

    def test_target_width_from_area(self) -> None:
        items = [PackItem(i, 20.0, 20.0, 0.0, 0.0) for i in range(9)]

        # sqrt(9 * 400) * 1.5
        assert PanelPacker.target_width(items) == pytest.approx(90.0)

    def test_target_width_empty(self) -> None:
        assert PanelPacker.target_width([]) == 0.0


class TestLayoutHelpers:
    def test_layout_bounds(self) -> None:
        bounds = layout_bounds([_rect(0, 10.0, 10.0), _rect(1, 5.0, 30.0, x=20.0)])

        assert (bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y) == (
            0.0,
            0.0,
            25.0,
            30.0,
        )

    def test_layout_bounds_empty(self) -> None:
        assert layout_bounds([]) is None

    def test_find_overlaps(self) -> None:
        panels = [_rect(0, 10.0, 10.0), _rect(1, 10.0, 10.0, x=5.0), _rect(2, 10.0, 10.0, x=10.0)]

        assert find_overlaps(panels) == [(0, 1), (1, 2)]
