"""Typer CLI for tabbed box generation."""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError

from boxmaker.application import BoxOutput
from boxmaker.application.config import (
    BoxConfiguration,
    ConfigError,
    config_to_input,
    config_to_laser,
    load_config,
    merge_config_with_cli,
)
from boxmaker.application.factory import get_factory
from boxmaker.cli.commands import validate_command
from boxmaker.domain import BoxType, FingerStyle
from boxmaker.infrastructure.exporters import ExporterRegistry

OUTPUT_FORMATS = ["summary", "gcode", "svg", "dxf", "json"]


def _code_or_name(value: str | None) -> str | int | None:
    """Integer codes arrive from the command line as strings."""
    if value is not None and value.strip().isdigit():
        return int(value)
    return value


def _parse_formats(output_formats_str: str) -> list[str]:
    if output_formats_str.lower() == "all":
        return ExporterRegistry.available_formats()
    formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    return formats


def _export_files(
    formats: list[str], output_dir: Path, project_name: str, result: BoxOutput
) -> None:
    manager = get_factory().create_export_manager(output_dir)
    try:
        files = manager.export_all(formats, result, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


def _emit_single(output_format: str, result: BoxOutput, output_file: Path | None) -> None:
    if output_format == "summary":
        text = get_factory().get_summary_formatter().format(result)
        if output_file is None:
            typer.echo(text)
        else:
            output_file.write_text(text + "\n", encoding="utf-8")
            typer.echo(f"Summary written to {output_file}")
        return

    exporter = ExporterRegistry.get(output_format)()
    if output_file is None:
        typer.echo(exporter.export_string(result), nl=False)
        return
    try:
        exporter.export(result, output_file)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{output_format.upper()} written to {output_file}")


app = typer.Typer(
    name="boxmaker",
    help="Generate finger-jointed boxes for laser and CNC cutting.",
)

app.command(name="validate")(validate_command)


@app.command()
def generate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option("--width", "-x", help="Box width (X) in mm"),
    ] = None,
    depth: Annotated[
        float | None,
        typer.Option("--depth", "-y", help="Box depth (Y) in mm"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", "-h", help="Box height in mm"),
    ] = None,
    thickness: Annotated[
        float | None,
        typer.Option("--thickness", "-t", help="Material thickness in mm"),
    ] = None,
    outside: Annotated[
        bool,
        typer.Option("--outside", help="Treat dimensions as outside measurements"),
    ] = False,
    burn: Annotated[
        float | None,
        typer.Option("--burn", help="Kerf (cut width) in mm"),
    ] = None,
    box_type: Annotated[
        str | None,
        typer.Option("--box-type", help="Box type name or code (see 'boxmaker info')"),
    ] = None,
    style: Annotated[
        str | None,
        typer.Option("--style", help="Finger style name or code (see 'boxmaker info')"),
    ] = None,
    finger: Annotated[
        float | None,
        typer.Option("--finger", help="Finger width in multiples of thickness"),
    ] = None,
    space: Annotated[
        float | None,
        typer.Option("--space", help="Space width in multiples of thickness"),
    ] = None,
    play: Annotated[
        float | None,
        typer.Option("--play", help="Joint clearance in multiples of thickness"),
    ] = None,
    dividers_x: Annotated[
        int | None,
        typer.Option("--dividers-x", help="Number of dividers along X"),
    ] = None,
    dividers_y: Annotated[
        int | None,
        typer.Option("--dividers-y", help="Number of dividers along Y"),
    ] = None,
    optimize: Annotated[
        bool,
        typer.Option("--optimize", help="Pack panels to reduce sheet usage"),
    ] = False,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: summary, gcode, svg, dxf, json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to a file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: gcode,svg,dxf,json (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
) -> None:
    """Generate the panels of a tabbed box."""
    if output_format is not None and output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Unknown format: {output_format}. Choose from: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    config = BoxConfiguration()
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    try:
        config = merge_config_with_cli(
            config,
            x=width,
            y=depth,
            h=height,
            thickness=thickness,
            outside=outside or None,
            burn=burn,
            box_type=_code_or_name(box_type),
            style=_code_or_name(style),
            finger=finger,
            space=space,
            play=play,
            dividers_x=dividers_x,
            dividers_y=dividers_y,
            optimize=optimize or None,
            project_name=project_name,
        )
    except PydanticValidationError as e:
        typer.echo("Errors:", err=True)
        for err in e.errors():
            loc = ".".join(str(part) for part in err["loc"])
            typer.echo(f"  - {loc}: {err['msg']}", err=True)
        raise typer.Exit(code=1)

    command = get_factory().create_generate_command()
    result = command.execute(config_to_input(config), config_to_laser(config))

    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    if output_formats is not None:
        formats = _parse_formats(output_formats)
        _export_files(formats, output_dir or Path("."), config.output.project_name, result)
        return

    # A config file with an output directory exports its own formats
    if output_format is None and config_file is not None and config.output.directory:
        _export_files(
            config.output.formats,
            output_dir or Path(config.output.directory),
            config.output.project_name,
            result,
        )
        return

    _emit_single(output_format or "summary", result, output_file)


@app.command()
def info() -> None:
    """List box types, finger styles and export formats."""
    typer.echo("Box types:")
    for box_type in BoxType:
        typer.echo(f"  {box_type.code}  {box_type.value}")

    typer.echo("")
    typer.echo("Finger styles:")
    for style in FingerStyle:
        note = "" if style.has_geometry else "  (drawn as rectangular)"
        typer.echo(f"  {style.code}  {style.value}{note}")

    typer.echo("")
    typer.echo("Export formats:")
    for fmt in ExporterRegistry.available_formats():
        exporter = ExporterRegistry.get(fmt)
        typer.echo(f"  {fmt} (.{exporter.file_extension})")


if __name__ == "__main__":
    app()
