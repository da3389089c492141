"""Box generation endpoints."""

from fastapi import APIRouter

from boxmaker.application.config import (
    BoxConfiguration,
    config_to_input,
    config_to_laser,
    load_config_from_dict,
)
from boxmaker.application.commands import GenerateBoxCommand
from boxmaker.application.dtos import BoxOutput
from boxmaker.domain.services import layout_bounds
from boxmaker.web.dependencies import GenerateCommandDep
from boxmaker.web.exceptions import BoxGenerationError
from boxmaker.web.schemas.requests import GenerateFromConfigRequest, GenerateRequest
from boxmaker.web.schemas.responses import (
    BoundingBoxSchema,
    BoxSummarySchema,
    GenerateResponse,
    PanelSchema,
)

router = APIRouter(prefix="/generate", tags=["generate"])


def request_to_config(request: GenerateRequest) -> BoxConfiguration:
    """Wrap a generate request in a full configuration."""
    return BoxConfiguration(
        box=request.box,
        finger_joint=request.finger_joint,
        layout=request.layout,
        laser=request.laser,
    )


def run_generation(command: GenerateBoxCommand, config: BoxConfiguration) -> BoxOutput:
    """Generate a box, raising BoxGenerationError when it is invalid."""
    output = command.execute(config_to_input(config), config_to_laser(config))
    if not output.is_valid:
        raise BoxGenerationError(output.errors)
    return output


def _output_to_response(output: BoxOutput) -> GenerateResponse:
    panels = []
    for panel in output.panels:
        bbox = panel.bounding_box
        panels.append(
            PanelSchema(
                id=panel.id,
                name=panel.name,
                role=panel.role.value,
                bounding_box=BoundingBoxSchema(
                    min_x=bbox.min_x,
                    min_y=bbox.min_y,
                    max_x=bbox.max_x,
                    max_y=bbox.max_y,
                    width=bbox.width,
                    height=bbox.height,
                ),
                points=[(p.x, p.y) for p in panel.points],
            )
        )

    bounds = layout_bounds(output.panels)
    summary = BoxSummarySchema(
        panel_count=len(output.panels),
        sheet_width=bounds.width if bounds else 0.0,
        sheet_height=bounds.height if bounds else 0.0,
        packed=output.packing_summary is not None,
        utilization=(
            output.packing_summary.utilization if output.packing_summary else None
        ),
    )
    return GenerateResponse(
        is_valid=output.is_valid,
        errors=output.errors,
        panels=panels,
        summary=summary,
    )


@router.post("", response_model=GenerateResponse)
async def generate_box(
    request: GenerateRequest,
    command: GenerateCommandDep,
) -> GenerateResponse:
    """Generate the panels of a box.

    Raises:
        BoxGenerationError: If the box parameters are invalid (422).
    """
    output = run_generation(command, request_to_config(request))
    return _output_to_response(output)


@router.post("/from-config", response_model=GenerateResponse)
async def generate_from_config(
    request: GenerateFromConfigRequest,
    command: GenerateCommandDep,
) -> GenerateResponse:
    """Generate a box from a full configuration document.

    Raises:
        ConfigError: If the configuration does not match the schema (422).
        BoxGenerationError: If the box parameters are invalid (422).
    """
    config = load_config_from_dict(request.config)
    output = run_generation(command, config)
    return _output_to_response(output)
