"""Value objects for the box domain.

This module provides the immutable data types used throughout the box
maker: planar points, bounding boxes, joint settings, layout configuration
and the enums describing box types, finger styles and panel edges.

All coordinates and lengths are in millimeters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class BoxParameterError(ValueError):
    """Raised when box parameters fail validation.

    Attributes:
        category: Kind of failure. One of "dimension_too_small",
            "thickness_out_of_range", "degenerate_finger_ratio",
            "unknown_code", "invalid_value".
    """

    def __init__(self, message: str, category: str) -> None:
        self.category = category
        super().__init__(message)


class BoxType(str, Enum):
    """Which of the six box panels are generated."""

    FULL_BOX = "full_box"
    NO_TOP = "no_top"
    NO_BOTTOM = "no_bottom"
    NO_SIDES = "no_sides"
    NO_FRONT_BACK = "no_front_back"
    NO_LEFT_RIGHT = "no_left_right"

    @property
    def code(self) -> int:
        """Integer code used by the legacy tool and the config file."""
        return _BOX_TYPE_CODES.index(self)

    @classmethod
    def from_code(cls, code: int) -> "BoxType":
        """Look up a box type by integer code.

        Raises:
            BoxParameterError: If the code is unknown.
        """
        if not 0 <= code < len(_BOX_TYPE_CODES):
            raise BoxParameterError(
                f"Unknown box type code: {code} (expected 0-{len(_BOX_TYPE_CODES) - 1})",
                category="unknown_code",
            )
        return _BOX_TYPE_CODES[code]

    def included_panels(self) -> "PanelInclusion":
        """Return which panels exist for this box type."""
        if self is BoxType.NO_TOP:
            return PanelInclusion(top=False)
        if self is BoxType.NO_BOTTOM:
            return PanelInclusion(bottom=False)
        if self in (BoxType.NO_SIDES, BoxType.NO_LEFT_RIGHT):
            return PanelInclusion(left=False, right=False)
        if self is BoxType.NO_FRONT_BACK:
            return PanelInclusion(front=False, back=False)
        return PanelInclusion()


_BOX_TYPE_CODES: tuple[BoxType, ...] = (
    BoxType.FULL_BOX,
    BoxType.NO_TOP,
    BoxType.NO_BOTTOM,
    BoxType.NO_SIDES,
    BoxType.NO_FRONT_BACK,
    BoxType.NO_LEFT_RIGHT,
)


class FingerStyle(str, Enum):
    """Finger joint style.

    Only RECTANGULAR and DOGBONE change the drawn geometry. SPRINGS, BARBS
    and SNAP are accepted but currently draw as RECTANGULAR.
    """

    RECTANGULAR = "rectangular"
    SPRINGS = "springs"
    BARBS = "barbs"
    SNAP = "snap"
    DOGBONE = "dogbone"

    @property
    def code(self) -> int:
        """Integer code used by the legacy tool and the config file."""
        return _FINGER_STYLE_CODES.index(self)

    @property
    def has_geometry(self) -> bool:
        """Whether this style draws differently from a plain rectangular finger."""
        return self in (FingerStyle.RECTANGULAR, FingerStyle.DOGBONE)

    @classmethod
    def from_code(cls, code: int) -> "FingerStyle":
        """Look up a finger style by integer code.

        Raises:
            BoxParameterError: If the code is unknown.
        """
        if not 0 <= code < len(_FINGER_STYLE_CODES):
            raise BoxParameterError(
                f"Unknown finger style code: {code} "
                f"(expected 0-{len(_FINGER_STYLE_CODES) - 1})",
                category="unknown_code",
            )
        return _FINGER_STYLE_CODES[code]


_FINGER_STYLE_CODES: tuple[FingerStyle, ...] = (
    FingerStyle.RECTANGULAR,
    FingerStyle.SPRINGS,
    FingerStyle.BARBS,
    FingerStyle.SNAP,
    FingerStyle.DOGBONE,
)


class EdgeKind(str, Enum):
    """How a single panel edge is cut.

    The values are the characters of the 4-character edge descriptor.
    """

    FINGERS_OUT = "f"
    FINGERS_IN = "F"
    PLAIN = "e"

    @property
    def is_jointed(self) -> bool:
        return self is not EdgeKind.PLAIN

    @property
    def positive(self) -> bool:
        """True when tabs protrude outward from the panel."""
        return self is EdgeKind.FINGERS_OUT


@dataclass(frozen=True)
class EdgeStyle:
    """Edge kinds of a rectangular wall in [bottom, right, top, left] order."""

    bottom: EdgeKind
    right: EdgeKind
    top: EdgeKind
    left: EdgeKind

    @classmethod
    def parse(cls, descriptor: str) -> "EdgeStyle":
        """Parse a descriptor such as "FfeF".

        Raises:
            ValueError: If the descriptor is not four of 'f', 'F', 'e'.
        """
        if len(descriptor) != 4:
            raise ValueError(
                f"Edge descriptor must have exactly 4 characters, got {descriptor!r}"
            )
        try:
            kinds = [EdgeKind(char) for char in descriptor]
        except ValueError:
            raise ValueError(
                f"Edge descriptor {descriptor!r} may only contain 'f', 'F' or 'e'"
            ) from None
        return cls(*kinds)

    def __iter__(self):
        return iter((self.bottom, self.right, self.top, self.left))

    def __str__(self) -> str:
        return "".join(kind.value for kind in self)


@dataclass(frozen=True)
class PanelInclusion:
    """Which of the six box panels exist."""

    top: bool = True
    bottom: bool = True
    front: bool = True
    back: bool = True
    left: bool = True
    right: bool = True

    @property
    def count(self) -> int:
        return sum(
            (self.top, self.bottom, self.front, self.back, self.left, self.right)
        )


@dataclass(frozen=True)
class Point:
    """Planar coordinate in millimeters."""

    x: float
    y: float

    def translated(self, dx: float, dy: float) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def is_close(self, other: "Point", tolerance: float = 0.01) -> bool:
        """True when both coordinates differ by less than the tolerance."""
        return abs(self.x - other.x) < tolerance and abs(self.y - other.y) < tolerance

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def of(cls, points: Iterable[Point]) -> "BoundingBox":
        """Compute the bounding box of a point sequence.

        Raises:
            ValueError: If no points are given.
        """
        pts = list(points)
        if not pts:
            raise ValueError("Cannot compute bounding box of an empty point set")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    def overlaps(self, other: "BoundingBox") -> bool:
        """True when the interiors of the two boxes intersect."""
        return (
            self.min_x < other.max_x
            and other.min_x < self.max_x
            and self.min_y < other.max_y
            and other.min_y < self.max_y
        )


@dataclass(frozen=True)
class FingerJointSettings:
    """Finger joint geometry settings.

    Attributes:
        finger: Finger width in multiples of material thickness.
        space: Space between fingers in multiples of thickness.
        surrounding_spaces: Space at each edge end in multiples of a normal space.
        play: Clearance in multiples of thickness; widens notches.
        extra_length: Extra tab length in multiples of thickness (burn margin).
        style: Finger style.
        dimple_height: Height of the friction-fit bump in mm (0 disables).
        dimple_length: Length of the friction-fit bump in mm (0 disables).
    """

    finger: float = 2.0
    space: float = 2.0
    surrounding_spaces: float = 2.0
    play: float = 0.0
    extra_length: float = 0.0
    style: FingerStyle = FingerStyle.RECTANGULAR
    dimple_height: float = 0.0
    dimple_length: float = 0.0

    def __post_init__(self) -> None:
        if self.surrounding_spaces < 0:
            raise ValueError("Surrounding spaces must be non-negative")
        if self.dimple_height < 0 or self.dimple_length < 0:
            raise ValueError("Dimple dimensions must be non-negative")

    @property
    def has_dimples(self) -> bool:
        return self.dimple_height > 0 and self.dimple_length > 0


@dataclass(frozen=True)
class LayoutConfig:
    """Layout settings shared by the assembler and the packer.

    Attributes:
        spacing: Gap between panel bounding boxes in mm.
    """

    spacing: float = 5.0

    def __post_init__(self) -> None:
        if self.spacing < 0:
            raise ValueError("Panel spacing must be non-negative")
