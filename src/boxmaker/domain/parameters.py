"""Box parameters and their validation rules."""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import BoxParameterError, BoxType, FingerJointSettings

MIN_DIMENSION = 20.0
MIN_THICKNESS = 1.0
MAX_THICKNESS = 20.0
MIN_FINGER_SPACE_SUM = 0.1


@dataclass(frozen=True)
class BoxParameters:
    """Global parameters of a finger-jointed box.

    Validation runs on construction, so an instance always describes a box
    whose joints can be computed.

    Attributes:
        x: Box width in mm.
        y: Box depth in mm.
        h: Box height in mm.
        thickness: Material thickness in mm.
        outside: True when x/y/h describe the outer envelope.
        box_type: Which panels are generated.
        finger_joint: Joint geometry settings.
        burn: Kerf width in mm (total material removed by the beam or bit).
        dividers_x: Number of divider panels spanning the depth.
        dividers_y: Number of divider panels spanning the width.
        optimize_layout: Repack panels with the shelf packer.
    """

    x: float = 100.0
    y: float = 100.0
    h: float = 100.0
    thickness: float = 3.0
    outside: bool = False
    box_type: BoxType = BoxType.FULL_BOX
    finger_joint: FingerJointSettings = field(default_factory=FingerJointSettings)
    burn: float = 0.1
    dividers_x: int = 0
    dividers_y: int = 0
    optimize_layout: bool = False

    def __post_init__(self) -> None:
        validate_box_parameters(self)

    def inner_dimensions(self) -> tuple[float, float, float]:
        """Panel sizing dimensions after the outside-dimension adjustment."""
        if not self.outside:
            return self.x, self.y, self.h
        return (
            adjust_size(self.x, self.thickness),
            adjust_size(self.y, self.thickness),
            adjust_size(self.h, self.thickness),
        )


def adjust_size(size: float, thickness: float) -> float:
    """Convert an outer dimension into the panel sizing dimension."""
    return size - 2.0 * thickness


def _check_parameters(
    x: float,
    y: float,
    h: float,
    thickness: float,
    finger_joint: FingerJointSettings,
    burn: float,
    dividers_x: int,
    dividers_y: int,
    outside: bool = False,
) -> list[BoxParameterError]:
    errors: list[BoxParameterError] = []
    if x < MIN_DIMENSION or y < MIN_DIMENSION or h < MIN_DIMENSION:
        errors.append(
            BoxParameterError(
                f"All dimensions must be at least {MIN_DIMENSION:g}mm "
                f"(got {x:g} x {y:g} x {h:g})",
                category="dimension_too_small",
            )
        )
    elif outside and min(x, y, h) - 2.0 * thickness <= 0:
        errors.append(
            BoxParameterError(
                "Outside dimensions must exceed twice the material thickness "
                f"(got {x:g} x {y:g} x {h:g} with thickness {thickness:g})",
                category="dimension_too_small",
            )
        )
    if not MIN_THICKNESS <= thickness <= MAX_THICKNESS:
        errors.append(
            BoxParameterError(
                f"Material thickness must be between {MIN_THICKNESS:g}mm and "
                f"{MAX_THICKNESS:g}mm (got {thickness:g})",
                category="thickness_out_of_range",
            )
        )
    if abs(finger_joint.finger + finger_joint.space) < MIN_FINGER_SPACE_SUM:
        errors.append(
            BoxParameterError(
                "Finger + space must not be close to zero",
                category="degenerate_finger_ratio",
            )
        )
    if burn < 0:
        errors.append(
            BoxParameterError("Burn (kerf) must be non-negative", category="invalid_value")
        )
    if dividers_x < 0 or dividers_y < 0:
        errors.append(
            BoxParameterError("Divider counts must be non-negative", category="invalid_value")
        )
    return errors


def validate_box_parameters(params: BoxParameters) -> None:
    """Raise the first validation failure for the given parameters.

    Raises:
        BoxParameterError: If any rule is violated.
    """
    errors = _check_parameters(
        params.x,
        params.y,
        params.h,
        params.thickness,
        params.finger_joint,
        params.burn,
        params.dividers_x,
        params.dividers_y,
        params.outside,
    )
    if errors:
        raise errors[0]


def collect_parameter_errors(
    x: float,
    y: float,
    h: float,
    thickness: float,
    finger_joint: FingerJointSettings | None = None,
    burn: float = 0.0,
    dividers_x: int = 0,
    dividers_y: int = 0,
    outside: bool = False,
) -> list[str]:
    """Return every validation message for the given raw values.

    Unlike constructing BoxParameters, this reports all failures at once,
    which is what the CLI and the config validator display.
    """
    return [
        str(error)
        for error in _check_parameters(
            x,
            y,
            h,
            thickness,
            finger_joint or FingerJointSettings(),
            burn,
            dividers_x,
            dividers_y,
            outside,
        )
    ]
