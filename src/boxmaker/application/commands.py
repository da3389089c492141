"""Application commands (use cases) for box generation."""

from __future__ import annotations

import logging

from boxmaker.domain import BoxAssembler, BoxParameterError, TabbedBox

from .dtos import BoxInput, BoxOutput, LaserSettings

logger = logging.getLogger(__name__)


class GenerateBoxCommand:
    """Command to generate the panels of a finger-jointed box."""

    def __init__(self, assembler: BoxAssembler | None = None) -> None:
        self.assembler = assembler or BoxAssembler()

    def execute(
        self,
        box_input: BoxInput,
        laser: LaserSettings | None = None,
    ) -> BoxOutput:
        """Execute the box generation command.

        Invalid input never raises; it yields an output with errors and no
        panels.

        Args:
            box_input: Box dimensions, joint settings and layout options.
            laser: Machine settings carried through to the G-code exporter.

        Returns:
            BoxOutput with the generated panels or the validation errors.
        """
        laser = laser or LaserSettings()
        errors = box_input.validate()
        if errors:
            return BoxOutput(params=None, panels=[], laser=laser, errors=errors)

        try:
            params = box_input.to_parameters()
            layout = box_input.to_layout()
        except (BoxParameterError, ValueError) as e:
            return BoxOutput(params=None, panels=[], laser=laser, errors=[str(e)])

        box = TabbedBox(params, assembler=self.assembler)
        panels = box.generate(layout)
        logger.debug(f"Generated {len(panels)} panels")

        return BoxOutput(
            params=params,
            panels=panels,
            layout=layout,
            laser=laser,
            packing_summary=box.packing_summary,
        )
