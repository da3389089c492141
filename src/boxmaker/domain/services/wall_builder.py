"""Rectangular wall outlines built from four finger joint edges."""

from __future__ import annotations

from typing import Callable

from boxmaker.domain.services.finger_joint import draw_finger_edge
from boxmaker.domain.value_objects import (
    EdgeKind,
    EdgeStyle,
    FingerJointSettings,
    Point,
)

# Consecutive points closer than this in both axes are merged.
POINT_TOLERANCE = 0.01

Transform = Callable[[Point], Point]


def _append_point(path: list[Point], point: Point) -> None:
    if path and path[-1].is_close(point, POINT_TOLERANCE):
        return
    path.append(point)


def _side_transforms(
    width: float, height: float, origin: Point
) -> tuple[Transform, Transform, Transform, Transform]:
    """Map local edge coordinates into panel space for each side.

    Sides are walked counter-clockwise: bottom, right, top, left.
    """
    ox, oy = origin.x, origin.y
    return (
        lambda p: Point(ox + p.x, oy + p.y),
        lambda p: Point(ox + width - p.y, oy + p.x),
        lambda p: Point(ox + width - p.x, oy + height - p.y),
        lambda p: Point(ox + p.y, oy + height - p.x),
    )


def draw_rectangular_wall(
    width: float,
    height: float,
    edge_style: str | EdgeStyle,
    origin: Point,
    thickness: float,
    settings: FingerJointSettings,
    kerf: float,
) -> list[Point]:
    """Draw a closed wall outline with finger joints on selected edges.

    Args:
        width: Wall width in mm.
        height: Wall height in mm.
        edge_style: Edge kinds in [bottom, right, top, left] order, either as
            an EdgeStyle or a descriptor such as "FfeF".
        origin: Lower-left corner of the nominal wall rectangle.
        thickness: Material thickness in mm.
        settings: Finger joint settings.
        kerf: Kerf width in mm.

    Returns:
        Closed polygon; the last point repeats the first.
    """
    if isinstance(edge_style, str):
        edge_style = EdgeStyle.parse(edge_style)

    half_kerf = kerf / 2.0
    ox, oy = origin.x, origin.y

    # Kerf-offset corners reached after each side
    corners = (
        Point(ox + width + half_kerf, oy - half_kerf),
        Point(ox + width + half_kerf, oy + height + half_kerf),
        Point(ox - half_kerf, oy + height + half_kerf),
        Point(ox - half_kerf, oy - half_kerf),
    )
    lengths = (width, height, width, height)
    transforms = _side_transforms(width, height, origin)

    path: list[Point] = []
    for side, kind in enumerate(edge_style):
        if kind.is_jointed:
            transform = transforms[side]
            edge = draw_finger_edge(
                lengths[side], thickness, settings, kerf, kind is EdgeKind.FINGERS_OUT
            )
            for point in edge:
                _append_point(path, transform(point))
        else:
            _append_point(path, corners[side - 1])
            _append_point(path, corners[side])
        _append_point(path, corners[side])

    if path:
        _append_point(path, path[0])
    return path


class WallPanelBuilder:
    """Builds wall outlines for one material and joint configuration.

    Attributes:
        thickness: Material thickness in mm.
        settings: Finger joint settings.
        kerf: Kerf width in mm.
    """

    def __init__(
        self, thickness: float, settings: FingerJointSettings, kerf: float
    ) -> None:
        self.thickness = thickness
        self.settings = settings
        self.kerf = kerf

    def build(
        self,
        width: float,
        height: float,
        edge_style: str | EdgeStyle,
        origin: Point | None = None,
    ) -> list[Point]:
        """Draw one wall outline; see draw_rectangular_wall."""
        return draw_rectangular_wall(
            width,
            height,
            edge_style,
            origin or Point(0.0, 0.0),
            self.thickness,
            self.settings,
            self.kerf,
        )
