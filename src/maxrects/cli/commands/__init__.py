"""CLI command implementations for the maxrects application."""

from maxrects.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
