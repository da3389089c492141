"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from boxmaker.application.config.schema import (
    BoxConfig,
    FingerJointConfig,
    LaserConfig,
    LayoutConfigSchema,
)


class GenerateRequest(BaseModel):
    """Request for generating a box.

    Sections mirror the configuration file; omitted sections use defaults.
    """

    model_config = ConfigDict(extra="forbid")

    box: BoxConfig = Field(default_factory=BoxConfig, description="Box dimensions")
    finger_joint: FingerJointConfig = Field(
        default_factory=FingerJointConfig, description="Finger joint settings"
    )
    layout: LayoutConfigSchema = Field(
        default_factory=LayoutConfigSchema, description="Sheet layout options"
    )
    laser: LaserConfig = Field(
        default_factory=LaserConfig, description="Machine settings for G-code"
    )


class GenerateFromConfigRequest(BaseModel):
    """Request for generating a box from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full box configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Box configuration JSON")
