"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from boxmaker.application.commands import GenerateBoxCommand
    from boxmaker.domain.services import BoxAssembler
    from boxmaker.infrastructure.exporters import ExportManager
    from boxmaker.infrastructure.formatters import PanelSummaryFormatter


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so that the CLI, the web API and the
    tests share one wiring, and tests can swap in their own assembler.
    """

    _assembler: "BoxAssembler | None" = field(default=None, init=False, repr=False)

    def get_assembler(self) -> "BoxAssembler":
        """Get or create the box assembler instance."""
        if self._assembler is None:
            from boxmaker.domain.services import BoxAssembler

            self._assembler = BoxAssembler()
        return self._assembler

    def create_generate_command(self) -> "GenerateBoxCommand":
        """Create a GenerateBoxCommand wired to this factory's assembler."""
        from boxmaker.application.commands import GenerateBoxCommand

        return GenerateBoxCommand(assembler=self.get_assembler())

    def get_summary_formatter(self) -> "PanelSummaryFormatter":
        """Create panel summary formatter instance."""
        from boxmaker.infrastructure.formatters import PanelSummaryFormatter

        return PanelSummaryFormatter()

    def create_export_manager(self, output_dir) -> "ExportManager":
        """Create an export manager writing into output_dir."""
        from boxmaker.infrastructure.exporters import ExportManager

        return ExportManager(output_dir)


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
