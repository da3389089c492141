"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from boxmaker.domain import (
    BoxParameterError,
    BoxParameters,
    BoxType,
    FingerJointSettings,
    FingerStyle,
    LayoutConfig,
    Panel,
    collect_parameter_errors,
)
from boxmaker.domain.services import PackingSummary


def parse_box_type(value: BoxType | str | int) -> BoxType:
    """Convert a box type name or integer code into a BoxType.

    Raises:
        BoxParameterError: If the name or code is unknown.
    """
    if isinstance(value, BoxType):
        return value
    if isinstance(value, int):
        return BoxType.from_code(value)
    try:
        return BoxType(value)
    except ValueError:
        valid = ", ".join(t.value for t in BoxType)
        raise BoxParameterError(
            f"Unknown box type: {value!r} (expected one of: {valid})",
            category="unknown_code",
        ) from None


def parse_finger_style(value: FingerStyle | str | int) -> FingerStyle:
    """Convert a finger style name or integer code into a FingerStyle.

    Raises:
        BoxParameterError: If the name or code is unknown.
    """
    if isinstance(value, FingerStyle):
        return value
    if isinstance(value, int):
        return FingerStyle.from_code(value)
    try:
        return FingerStyle(value)
    except ValueError:
        valid = ", ".join(s.value for s in FingerStyle)
        raise BoxParameterError(
            f"Unknown finger style: {value!r} (expected one of: {valid})",
            category="unknown_code",
        ) from None


@dataclass
class BoxInput:
    """Input DTO for box generation.

    Mirrors BoxParameters with raw, unvalidated values so that every
    problem can be reported at once.
    """

    x: float = 100.0
    y: float = 100.0
    h: float = 100.0
    thickness: float = 3.0
    outside: bool = False
    box_type: BoxType | str | int = BoxType.FULL_BOX
    burn: float = 0.1
    dividers_x: int = 0
    dividers_y: int = 0
    optimize_layout: bool = False
    finger: float = 2.0
    space: float = 2.0
    surrounding_spaces: float = 2.0
    play: float = 0.0
    extra_length: float = 0.0
    style: FingerStyle | str | int = FingerStyle.RECTANGULAR
    dimple_height: float = 0.0
    dimple_length: float = 0.0
    spacing: float = 5.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        for parse, value in ((parse_box_type, self.box_type), (parse_finger_style, self.style)):
            try:
                parse(value)
            except BoxParameterError as e:
                errors.append(str(e))
        try:
            settings = self._finger_settings(FingerStyle.RECTANGULAR)
        except ValueError as e:
            errors.append(str(e))
            settings = None
        if self.spacing < 0:
            errors.append("Panel spacing must be non-negative")
        errors.extend(
            collect_parameter_errors(
                self.x,
                self.y,
                self.h,
                self.thickness,
                settings,
                self.burn,
                self.dividers_x,
                self.dividers_y,
                self.outside,
            )
        )
        return errors

    def _finger_settings(self, style: FingerStyle) -> FingerJointSettings:
        return FingerJointSettings(
            finger=self.finger,
            space=self.space,
            surrounding_spaces=self.surrounding_spaces,
            play=self.play,
            extra_length=self.extra_length,
            style=style,
            dimple_height=self.dimple_height,
            dimple_length=self.dimple_length,
        )

    def to_finger_settings(self) -> FingerJointSettings:
        """Convert to FingerJointSettings value object."""
        return self._finger_settings(parse_finger_style(self.style))

    def to_parameters(self) -> BoxParameters:
        """Convert to validated BoxParameters.

        Raises:
            BoxParameterError: If any value is invalid.
        """
        return BoxParameters(
            x=self.x,
            y=self.y,
            h=self.h,
            thickness=self.thickness,
            outside=self.outside,
            box_type=parse_box_type(self.box_type),
            finger_joint=self.to_finger_settings(),
            burn=self.burn,
            dividers_x=self.dividers_x,
            dividers_y=self.dividers_y,
            optimize_layout=self.optimize_layout,
        )

    def to_layout(self) -> LayoutConfig:
        """Convert to LayoutConfig value object."""
        return LayoutConfig(spacing=self.spacing)


@dataclass(frozen=True)
class LaserSettings:
    """Machine settings consumed by the G-code emitter.

    Attributes:
        passes: Number of times each outline is cut.
        power: Spindle/laser power S value.
        feed_rate: Cutting feed rate in mm/min.
        offset_x: Work origin X in machine coordinates.
        offset_y: Work origin Y in machine coordinates.
        safe_z: Travel height in mm.
        home: Emit the homing and work-offset preamble.
    """

    passes: int = 3
    power: int = 1000
    feed_rate: float = 500.0
    offset_x: float = 10.0
    offset_y: float = 10.0
    safe_z: float = 5.0
    home: bool = True

    def __post_init__(self) -> None:
        if self.passes < 1:
            raise ValueError("Laser passes must be at least 1")
        if self.power < 0:
            raise ValueError("Laser power must be non-negative")
        if self.feed_rate <= 0:
            raise ValueError("Feed rate must be positive")


@dataclass
class BoxOutput:
    """Output DTO containing the generated panels.

    Attributes:
        params: Validated parameters, None when validation failed.
        panels: Generated panels; empty when validation failed.
        layout: Layout settings used for generation.
        laser: Machine settings for the G-code emitter.
        errors: Validation error messages.
        packing_summary: Packing statistics when the layout was optimized.
    """

    params: BoxParameters | None
    panels: list[Panel]
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    laser: LaserSettings = field(default_factory=LaserSettings)
    errors: list[str] = field(default_factory=list)
    packing_summary: PackingSummary | None = None

    @property
    def is_valid(self) -> bool:
        """Check if the box was generated successfully."""
        return len(self.errors) == 0
