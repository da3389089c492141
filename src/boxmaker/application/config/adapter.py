"""Conversion between configuration models and application DTOs.

Also holds the CLI merge: command-line values override the file, and only
options that were actually given (not None) take part.
"""

from __future__ import annotations

from typing import Any

from boxmaker.application.config.schema import BoxConfiguration
from boxmaker.application.dtos import BoxInput, LaserSettings


def config_to_input(config: BoxConfiguration) -> BoxInput:
    """Convert a BoxConfiguration into the generate command's input DTO."""
    box = config.box
    joint = config.finger_joint
    return BoxInput(
        x=box.x,
        y=box.y,
        h=box.h,
        thickness=box.thickness,
        outside=box.outside,
        box_type=box.box_type,
        burn=box.burn,
        dividers_x=box.dividers_x,
        dividers_y=box.dividers_y,
        optimize_layout=config.layout.optimize,
        finger=joint.finger,
        space=joint.space,
        surrounding_spaces=joint.surrounding_spaces,
        play=joint.play,
        extra_length=joint.extra_length,
        style=joint.style,
        dimple_height=joint.dimple_height,
        dimple_length=joint.dimple_length,
        spacing=config.layout.spacing,
    )


def config_to_laser(config: BoxConfiguration) -> LaserSettings:
    """Convert the laser section into LaserSettings."""
    laser = config.laser
    return LaserSettings(
        passes=laser.passes,
        power=laser.power,
        feed_rate=laser.feed_rate,
        offset_x=laser.offset_x,
        offset_y=laser.offset_y,
        home=laser.home,
    )


# CLI option name -> (config section, field)
_OVERRIDE_FIELDS: dict[str, tuple[str, str]] = {
    "x": ("box", "x"),
    "y": ("box", "y"),
    "h": ("box", "h"),
    "thickness": ("box", "thickness"),
    "outside": ("box", "outside"),
    "box_type": ("box", "box_type"),
    "burn": ("box", "burn"),
    "dividers_x": ("box", "dividers_x"),
    "dividers_y": ("box", "dividers_y"),
    "finger": ("finger_joint", "finger"),
    "space": ("finger_joint", "space"),
    "surrounding_spaces": ("finger_joint", "surrounding_spaces"),
    "play": ("finger_joint", "play"),
    "extra_length": ("finger_joint", "extra_length"),
    "style": ("finger_joint", "style"),
    "dimple_height": ("finger_joint", "dimple_height"),
    "dimple_length": ("finger_joint", "dimple_length"),
    "spacing": ("layout", "spacing"),
    "optimize": ("layout", "optimize"),
    "passes": ("laser", "passes"),
    "power": ("laser", "power"),
    "feed_rate": ("laser", "feed_rate"),
    "output_formats": ("output", "formats"),
    "output_dir": ("output", "directory"),
    "project_name": ("output", "project_name"),
}


def merge_config_with_cli(
    config: BoxConfiguration, **overrides: Any
) -> BoxConfiguration:
    """Merge CLI arguments into a configuration.

    Args:
        config: The configuration loaded from file (or defaults).
        **overrides: CLI values keyed by option name (x, thickness, burn,
            style, output_dir, ...). None means "not given".

    Returns:
        A new, re-validated BoxConfiguration.

    Raises:
        TypeError: If an override name is not a known option.
        pydantic.ValidationError: If a merged value is out of range.

    Example:
        >>> merged = merge_config_with_cli(config, x=150.0, burn=None)
        >>> merged.box.x
        150.0
    """
    data = config.model_dump()
    for name, value in overrides.items():
        if name not in _OVERRIDE_FIELDS:
            raise TypeError(f"Unknown override: {name}")
        if value is None:
            continue
        section, key = _OVERRIDE_FIELDS[name]
        data[section][key] = value
    return BoxConfiguration.model_validate(data)
