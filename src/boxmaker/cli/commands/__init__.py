"""CLI subcommands for the boxmaker application.

- validate: Validate a box configuration file
"""

from boxmaker.cli.commands.validate import validate_command

__all__ = ["validate_command"]
