"""Configuration validation endpoint."""

from fastapi import APIRouter

from boxmaker.application.config import ConfigError, load_config_from_dict, validate_config
from boxmaker.web.schemas.requests import ConfigValidateRequest
from boxmaker.web.schemas.responses import ValidationIssueSchema, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a box configuration without generating it."""
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                ValidationIssueSchema(
                    path=detail.get("path", ""), message=detail.get("message", "")
                )
                for detail in e.details
            ],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[
            ValidationIssueSchema(path=error.path, message=error.message)
            for error in result.errors
        ],
        warnings=[
            ValidationIssueSchema(
                path=warning.path, message=warning.message, suggestion=warning.suggestion
            )
            for warning in result.warnings
        ],
    )
