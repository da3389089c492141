"""Domain layer - finger joint geometry and box assembly."""

from .entities import Panel, PanelRole, TabbedBox
from .parameters import BoxParameters, collect_parameter_errors
from .services import (
    BoxAssembler,
    PanelPacker,
    WallPanelBuilder,
    calc_fingers,
    draw_finger_edge,
    draw_rectangular_wall,
)
from .value_objects import (
    BoundingBox,
    BoxParameterError,
    BoxType,
    EdgeKind,
    EdgeStyle,
    FingerJointSettings,
    FingerStyle,
    LayoutConfig,
    PanelInclusion,
    Point,
)

__all__ = [
    "BoundingBox",
    "BoxAssembler",
    "BoxParameterError",
    "BoxParameters",
    "BoxType",
    "EdgeKind",
    "EdgeStyle",
    "FingerJointSettings",
    "FingerStyle",
    "LayoutConfig",
    "Panel",
    "PanelInclusion",
    "PanelPacker",
    "PanelRole",
    "Point",
    "TabbedBox",
    "WallPanelBuilder",
    "calc_fingers",
    "collect_parameter_errors",
    "draw_finger_edge",
    "draw_rectangular_wall",
]
