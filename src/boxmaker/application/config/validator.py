"""Validation results and joint-geometry advisories for box configurations.

Errors come from the domain rules and block generation. Warnings flag
settings that produce a box which cuts but probably will not fit well.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from boxmaker.application.config.schema import BoxConfiguration
from boxmaker.domain import FingerJointSettings, calc_fingers, collect_parameter_errors
from boxmaker.domain.parameters import adjust_size


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: Dotted path to the offending field (e.g. "box.x").
        message: Human-readable description.
        value: The offending value, if a single one is to blame.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: Dotted path to the field of concern.
        message: Human-readable description.
        suggestion: Optional remediation.
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> None:
        self.errors.append(ValidationError(path=path, message=message, value=value))

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> None:
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )


def _finger_settings(config: BoxConfiguration) -> FingerJointSettings:
    joint = config.finger_joint
    return FingerJointSettings(
        finger=joint.finger,
        space=joint.space,
        surrounding_spaces=joint.surrounding_spaces,
        play=joint.play,
        extra_length=joint.extra_length,
        style=joint.style,
        dimple_height=joint.dimple_height,
        dimple_length=joint.dimple_length,
    )


def check_joint_advisories(config: BoxConfiguration, result: ValidationResult) -> None:
    """Add warnings for joint settings that will cut but fit poorly."""
    box = config.box
    joint = config.finger_joint
    space_mm = joint.space * box.thickness

    if box.burn > 0 and box.burn >= space_mm:
        result.add_warning(
            "box.burn",
            f"Kerf {box.burn:g}mm is at least as wide as a finger space "
            f"({space_mm:g}mm); notches will be cut away entirely",
            suggestion="Increase finger_joint.space or measure the kerf again",
        )

    if joint.dimple_height > 0 and joint.dimple_height >= space_mm:
        result.add_warning(
            "finger_joint.dimple_height",
            f"Dimple height {joint.dimple_height:g}mm reaches across the finger "
            f"space ({space_mm:g}mm)",
            suggestion="Use a dimple height well below the space width",
        )

    if not joint.style.has_geometry:
        result.add_warning(
            "finger_joint.style",
            f"Finger style '{joint.style.value}' is drawn as plain rectangular fingers",
            suggestion="Use 'rectangular' or 'dogbone'",
        )

    x, y, h = box.x, box.y, box.h
    if box.outside:
        x, y, h = (adjust_size(v, box.thickness) for v in (x, y, h))
    shortest = min(x, y, h)
    if shortest > 0:
        count, _ = calc_fingers(shortest, box.thickness, _finger_settings(config))
        if count == 0:
            result.add_warning(
                "box",
                f"The shortest edge ({shortest:g}mm) is too short for any finger; "
                "it will be cut as a plain butt joint",
                suggestion="Reduce finger_joint.finger or make the box larger",
            )


def validate_config(config: BoxConfiguration) -> ValidationResult:
    """Run the domain rules and joint advisories over a configuration.

    Args:
        config: A configuration that already passed schema validation.

    Returns:
        ValidationResult with errors (domain rule violations) and warnings.
    """
    result = ValidationResult()
    box = config.box
    try:
        settings = _finger_settings(config)
    except ValueError as e:
        result.add_error("finger_joint", str(e))
        return result

    for message in collect_parameter_errors(
        box.x,
        box.y,
        box.h,
        box.thickness,
        settings,
        box.burn,
        box.dividers_x,
        box.dividers_y,
        box.outside,
    ):
        result.add_error("box", message)

    if result.is_valid:
        check_joint_advisories(config, result)
    return result
