"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class BoundingBoxSchema(BaseModel):
    """Axis-aligned bounding box of a panel, in mm."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float


class PanelSchema(BaseModel):
    """One cut panel."""

    id: int = Field(..., description="Panel id, unique within the box")
    name: str = Field(..., description="Panel name, e.g. 'Wall 1'")
    role: str = Field(..., description="Panel role, e.g. 'front'")
    bounding_box: BoundingBoxSchema
    points: list[tuple[float, float]] = Field(
        ..., description="Closed outline in sheet coordinates (mm)"
    )


class BoxSummarySchema(BaseModel):
    """Summary of the generated layout."""

    panel_count: int = Field(..., description="Number of panels")
    sheet_width: float = Field(..., description="Width of the laid-out panels in mm")
    sheet_height: float = Field(..., description="Height of the laid-out panels in mm")
    packed: bool = Field(default=False, description="Whether the layout was packed")
    utilization: float | None = Field(
        default=None, description="Panel area over used sheet area when packed"
    )


class GenerateResponse(BaseModel):
    """Response for box generation."""

    is_valid: bool = Field(..., description="Whether generation succeeded")
    errors: list[str] = Field(default_factory=list)
    panels: list[PanelSchema] = Field(default_factory=list)
    summary: BoxSummarySchema | None = None


class ExportFormatsSchema(BaseModel):
    """Available export formats."""

    formats: list[str] = Field(..., description="Registered export format names")


class ValidationIssueSchema(BaseModel):
    """Single validation error or warning."""

    path: str
    message: str
    suggestion: str | None = None


class ValidationResultSchema(BaseModel):
    """Configuration validation result."""

    is_valid: bool
    errors: list[ValidationIssueSchema] = Field(default_factory=list)
    warnings: list[ValidationIssueSchema] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: list[dict[str, Any]] | None = None
