"""Exporter protocol, registry and multi-format export manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from boxmaker.application.dtos import BoxOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters turn a BoxOutput into a file format a cutter or CAD tool
    understands.

    Attributes:
        format_name: Registry key for the format (e.g. "gcode").
        file_extension: File extension without leading dot.
        media_type: MIME type used when the format is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, output: BoxOutput, path: Path) -> None:
        """Write the exported document to path."""
        ...

    def export_string(self, output: BoxOutput) -> str:
        """Return the exported document as text."""
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the @ExporterRegistry.register
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("gcode")
        class GcodeExporter:
            format_name = "gcode"
            file_extension = "gcode"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under format_name."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes a BoxOutput to one or more formats in a directory.

    Attributes:
        output_dir: Directory where exported files are saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: BoxOutput,
        project_name: str = "box",
    ) -> dict[str, Path]:
        """Export to every requested format.

        Files are named {project_name}_{format}.{ext}.

        Returns:
            Mapping of format name to the written file.

        Raises:
            KeyError: If any format is not registered.
            OSError: If the directory or a file cannot be written.
        """
        # Resolve every exporter first so a typo does not leave partial output
        exporter_classes = [(fmt, ExporterRegistry.get(fmt)) for fmt in formats]
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes:
            exporter = exporter_class()
            filepath = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath
        return results

    def export_single(
        self,
        format_name: str,
        output: BoxOutput,
        project_name: str = "box",
    ) -> Path:
        """Export to a single format and return the written file."""
        return self.export_all([format_name], output, project_name)[format_name]
