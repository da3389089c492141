"""Finger joint edge synthesis.

Computes how many fingers fit along an edge and draws the kerf-compensated
zig-zag profile of that edge in local edge coordinates:

- x runs from 0 to the edge length,
- y is the signed depth; the baseline sits at -kerf/2, protruding tabs
  go negative and notches go positive.

Finger and space widths are expressed as multiples of material thickness,
following the approach of the boxes.py generator.
"""

from __future__ import annotations

import math

from boxmaker.domain.value_objects import FingerJointSettings, FingerStyle, Point


def calc_fingers(
    length: float, thickness: float, settings: FingerJointSettings
) -> tuple[int, float]:
    """Calculate the number of fingers and the leftover length of an edge.

    Args:
        length: Edge length in mm (must be positive).
        thickness: Material thickness in mm.
        settings: Finger joint settings.

    Returns:
        Tuple of (finger_count, leftover). The leftover is split evenly
        between both ends of the edge when drawing.
    """
    space = settings.space * thickness
    finger = settings.finger * thickness

    # Plain edge fallback
    if finger == 0 or space + finger <= 0:
        return 0, length

    fingers = math.floor(
        (length - (settings.surrounding_spaces - 1.0) * space) / (space + finger)
    )
    fingers = max(0, fingers)

    # Short edges still get one interlocking tab
    if fingers == 0 and length > finger + thickness:
        fingers = 1

    if fingers > 0:
        leftover = length - fingers * (space + finger) + space
    else:
        leftover = length
    return fingers, leftover


def draw_side(
    x: float,
    y1: float,
    y2: float,
    settings: FingerJointSettings,
    positive: bool,
) -> list[Point]:
    """Draw one finger flank from (x, y1) to (x, y2).

    When dimples are configured and the flank is longer than the dimple,
    the flank gets a bump at its midpoint. The bump always pushes out of
    the solid material of a tab, and into the hole of a notch, so mating
    parts grip each other.

    Returns:
        The flank points, start and end included.
    """
    if not settings.has_dimples or abs(y2 - y1) <= settings.dimple_length:
        return [Point(x, y1), Point(x, y2)]

    mid_y = (y1 + y2) / 2.0
    half_length = settings.dimple_length / 2.0
    direction = 1.0 if y2 > y1 else -1.0

    # Tabs reach toward -y, notches toward +y; the leading flank runs
    # from the baseline out to the tip.
    leading = y2 < y1 if positive else y2 > y1
    bulge = (-1.0 if leading else 1.0) * (1.0 if positive else -1.0)

    return [
        Point(x, y1),
        Point(x, mid_y - half_length * direction),
        Point(x + settings.dimple_height * bulge, mid_y),
        Point(x, mid_y + half_length * direction),
        Point(x, y2),
    ]


def draw_finger_edge(
    length: float,
    thickness: float,
    settings: FingerJointSettings,
    kerf: float,
    positive: bool,
) -> list[Point]:
    """Draw a finger joint edge in local edge coordinates.

    Positive edges carry protruding tabs, negative edges carry the
    matching notches. Tabs grow by the kerf and notches shrink by it, so
    after the beam removes its width both parts end up at nominal size.
    Play only widens notches.

    Args:
        length: Edge length in mm (must be positive).
        thickness: Material thickness in mm.
        settings: Finger joint settings.
        kerf: Kerf width in mm.
        positive: True for tabs out, False for notches in.

    Returns:
        Ordered points starting at (0, -kerf/2) and ending on the same
        baseline near (length, -kerf/2).
    """
    half_kerf = kerf / 2.0
    base_y = -half_kerf

    fingers, leftover = calc_fingers(length, thickness, settings)
    if fingers == 0:
        return [Point(0.0, base_y), Point(length, base_y)]

    space = settings.space * thickness
    finger = settings.finger * thickness
    play = settings.play * thickness
    extra = settings.extra_length * thickness

    if not positive:
        finger += play
        space -= play
        leftover -= play

    if positive:
        finger_draw = finger + kerf
        space_draw = space - kerf
        leftover_draw = leftover - kerf
        tip_y = -thickness - extra - half_kerf
    else:
        finger_draw = finger - kerf
        space_draw = space + kerf
        leftover_draw = leftover + kerf
        tip_y = thickness - half_kerf

    dogbone = settings.style is FingerStyle.DOGBONE and not positive
    overcut = half_kerf

    x = 0.0
    path = [Point(x, base_y)]
    x += leftover_draw / 2.0
    path.append(Point(x, base_y))

    for i in range(fingers):
        if dogbone:
            path.extend(
                [
                    Point(x, base_y),
                    Point(x, tip_y + overcut),
                    Point(x - overcut, tip_y + overcut),
                    Point(x, tip_y),
                ]
            )
        else:
            path.extend(draw_side(x, base_y, tip_y, settings, positive))

        x += finger_draw
        path.append(Point(x, tip_y))

        if dogbone:
            path.extend(
                [
                    Point(x + overcut, tip_y + overcut),
                    Point(x, tip_y + overcut),
                    Point(x, base_y),
                ]
            )
        else:
            path.extend(draw_side(x, tip_y, base_y, settings, positive))

        if i < fingers - 1:
            x += space_draw
            path.append(Point(x, base_y))

    x += leftover_draw / 2.0
    path.append(Point(x, base_y))
    return path
