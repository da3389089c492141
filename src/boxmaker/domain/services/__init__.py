"""Domain services for finger joint synthesis, wall building, assembly and packing."""

from .box_assembler import AssemblyResult, BoxAssembler, edge_descriptor, generate_panels
from .finger_joint import calc_fingers, draw_finger_edge, draw_side
from .panel_packing import (
    PackItem,
    PackingSummary,
    PanelPacker,
    find_overlaps,
    layout_bounds,
)
from .wall_builder import WallPanelBuilder, draw_rectangular_wall

__all__ = [
    "AssemblyResult",
    "BoxAssembler",
    "PackItem",
    "PackingSummary",
    "PanelPacker",
    "WallPanelBuilder",
    "calc_fingers",
    "draw_finger_edge",
    "draw_rectangular_wall",
    "draw_side",
    "edge_descriptor",
    "find_overlaps",
    "generate_panels",
    "layout_bounds",
]
