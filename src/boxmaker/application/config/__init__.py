"""Configuration schema and loading for box specifications.

Public API:
    - BoxConfiguration: Root configuration model
    - load_config / load_config_from_dict: Load and validate configurations
    - ConfigError: Raised when a configuration cannot be loaded
    - validate_config: Domain rules plus joint advisories
    - config_to_input / config_to_laser: Convert to application DTOs
    - merge_config_with_cli: Apply command-line overrides

Example:
    >>> from pathlib import Path
    >>> from boxmaker.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-box.json"))
    ...     print(f"Box: {config.box.x}x{config.box.y}x{config.box.h}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from boxmaker.application.config.adapter import (
    config_to_input,
    config_to_laser,
    merge_config_with_cli,
)
from boxmaker.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from boxmaker.application.config.schema import (
    KNOWN_FORMATS,
    SUPPORTED_VERSIONS,
    BoxConfig,
    BoxConfiguration,
    FingerJointConfig,
    LaserConfig,
    LayoutConfigSchema,
    OutputConfig,
)
from boxmaker.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "KNOWN_FORMATS",
    "SUPPORTED_VERSIONS",
    "BoxConfig",
    "BoxConfiguration",
    "ConfigError",
    "FingerJointConfig",
    "LaserConfig",
    "LayoutConfigSchema",
    "OutputConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_input",
    "config_to_laser",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
