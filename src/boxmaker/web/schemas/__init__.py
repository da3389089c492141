"""Pydantic schemas for the REST API."""

from boxmaker.web.schemas.requests import (
    ConfigValidateRequest,
    GenerateFromConfigRequest,
    GenerateRequest,
)
from boxmaker.web.schemas.responses import (
    BoundingBoxSchema,
    BoxSummarySchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    GenerateResponse,
    PanelSchema,
    ValidationIssueSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "GenerateFromConfigRequest",
    "GenerateRequest",
    # Responses
    "BoundingBoxSchema",
    "BoxSummarySchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "GenerateResponse",
    "PanelSchema",
    "ValidationIssueSchema",
    "ValidationResultSchema",
]
