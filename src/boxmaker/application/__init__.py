"""Application layer - use cases, DTOs and configuration."""

from .commands import GenerateBoxCommand
from .dtos import BoxInput, BoxOutput, LaserSettings, parse_box_type, parse_finger_style
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "BoxInput",
    "BoxOutput",
    "GenerateBoxCommand",
    "LaserSettings",
    "ServiceFactory",
    "get_factory",
    "parse_box_type",
    "parse_finger_style",
    "reset_factory",
    "set_factory",
]
