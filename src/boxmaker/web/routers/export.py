"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from boxmaker.infrastructure.exporters import ExporterRegistry
from boxmaker.web.dependencies import GenerateCommandDep
from boxmaker.web.exceptions import UnsupportedFormatError
from boxmaker.web.routers.generate import request_to_config, run_generation
from boxmaker.web.schemas.requests import GenerateRequest
from boxmaker.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_box(
    format_name: str,
    request: GenerateRequest,
    command: GenerateCommandDep,
) -> Response:
    """Generate a box and return it in the requested format.

    Raises:
        UnsupportedFormatError: If no exporter handles format_name (400).
        BoxGenerationError: If the box parameters are invalid (422).
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = run_generation(command, request_to_config(request))
    exporter = ExporterRegistry.get(format_name)()
    filename = f"box.{exporter.file_extension}"
    return Response(
        content=exporter.export_string(output),
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
