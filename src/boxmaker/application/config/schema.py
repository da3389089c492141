"""Pydantic models for box configuration files.

The models only check the shape and basic ranges of a configuration. The
box-level rules (minimum dimensions, thickness range, finger ratios) are
enforced by the domain and reported through the validator, so a file that
parses here may still be rejected there.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from boxmaker.domain.value_objects import BoxType, FingerStyle

# Supported schema versions for configuration files
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Formats the exporter registry ships with
KNOWN_FORMATS: frozenset[str] = frozenset({"gcode", "svg", "dxf", "json"})


def _coerce_code(value: Any, enum_type: type[BoxType] | type[FingerStyle]) -> Any:
    # bool is an int subclass; let pydantic reject it as a name instead
    if isinstance(value, int) and not isinstance(value, bool):
        return enum_type.from_code(value)
    return value


class BoxConfig(BaseModel):
    """Box dimensions and construction options.

    Attributes:
        x: Width in mm.
        y: Depth in mm.
        h: Height in mm.
        thickness: Material thickness in mm.
        outside: Treat x, y and h as outside dimensions.
        box_type: Which panels to include, by name or integer code.
        burn: Kerf width in mm.
        dividers_x: Number of dividers along X.
        dividers_y: Number of dividers along Y.
    """

    model_config = ConfigDict(extra="forbid")

    x: float = Field(default=100.0, gt=0, description="Width in mm")
    y: float = Field(default=100.0, gt=0, description="Depth in mm")
    h: float = Field(default=100.0, gt=0, description="Height in mm")
    thickness: float = Field(default=3.0, gt=0, description="Material thickness in mm")
    outside: bool = False
    box_type: BoxType = BoxType.FULL_BOX
    burn: float = Field(default=0.1, ge=0, description="Kerf width in mm")
    dividers_x: int = Field(default=0, ge=0)
    dividers_y: int = Field(default=0, ge=0)

    @field_validator("box_type", mode="before")
    @classmethod
    def coerce_box_type_code(cls, v: Any) -> Any:
        """Accept the integer codes used by older tools."""
        return _coerce_code(v, BoxType)


class FingerJointConfig(BaseModel):
    """Finger joint settings, all lengths in multiples of thickness."""

    model_config = ConfigDict(extra="forbid")

    finger: float = Field(default=2.0, ge=0)
    space: float = Field(default=2.0, ge=0)
    surrounding_spaces: float = Field(default=2.0, ge=0)
    play: float = 0.0
    extra_length: float = 0.0
    style: FingerStyle = FingerStyle.RECTANGULAR
    dimple_height: float = Field(default=0.0, ge=0)
    dimple_length: float = Field(default=0.0, ge=0)

    @field_validator("style", mode="before")
    @classmethod
    def coerce_style_code(cls, v: Any) -> Any:
        """Accept the integer codes used by older tools."""
        return _coerce_code(v, FingerStyle)


class LayoutConfigSchema(BaseModel):
    """Sheet layout options."""

    model_config = ConfigDict(extra="forbid")

    spacing: float = Field(default=5.0, ge=0, description="Gap between panels in mm")
    optimize: bool = Field(default=False, description="Pack panels to reduce sheet usage")


class LaserConfig(BaseModel):
    """Machine settings for G-code output."""

    model_config = ConfigDict(extra="forbid")

    passes: int = Field(default=3, ge=1)
    power: int = Field(default=1000, ge=0, description="Laser power S value")
    feed_rate: float = Field(default=500.0, gt=0, description="Feed rate in mm/min")
    offset_x: float = 10.0
    offset_y: float = 10.0
    home: bool = True


class OutputConfig(BaseModel):
    """Output settings.

    Attributes:
        formats: Export formats to write.
        directory: Output directory; the current directory when None.
        project_name: Base name for exported files.
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=lambda: ["gcode"])
    directory: str | None = None
    project_name: str = Field(default="box", min_length=1)

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Reject formats no exporter handles."""
        unknown = [fmt for fmt in v if fmt not in KNOWN_FORMATS]
        if unknown:
            raise ValueError(
                f"Unknown output format(s): {', '.join(unknown)}. "
                f"Supported: {', '.join(sorted(KNOWN_FORMATS))}"
            )
        return v


class BoxConfiguration(BaseModel):
    """Root configuration model for a box configuration file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    box: BoxConfig = Field(default_factory=BoxConfig)
    finger_joint: FingerJointConfig = Field(default_factory=FingerJointConfig)
    layout: LayoutConfigSchema = Field(default_factory=LayoutConfigSchema)
    laser: LaserConfig = Field(default_factory=LaserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Only accept versions this release knows how to read."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version: {v}. Supported versions: {supported}"
            )
        return v
