"""Validate command for checking packing job files."""

from pathlib import Path
from typing import Annotated

import typer

from maxrects.application.config import (
    ConfigError,
    PackingJobConfig,
    config_to_boxes,
    load_config,
)


def validate_command(
    job_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a packing job file.

    Checks the file for JSON syntax errors and schema errors (missing
    fields, non-positive sizes, unknown heuristics, duplicate bin ids).

    Exit codes:
        0 - Job file is valid
        1 - Job file has errors

    Example:
        maxrects validate job.json
    """
    typer.echo(f"Validating {job_file}...")
    typer.echo()

    try:
        config = load_config(job_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    _display_summary(config)


def display_load_error(error: ConfigError) -> None:
    """Print a job loading error to stderr, one line per problem."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "(root)"
            typer.echo(f"  {path}: {detail.get('message', 'Unknown error')}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo(err=True)
    typer.echo("Validation failed.", err=True)


def _display_summary(config: PackingJobConfig) -> None:
    box_count = len(config_to_boxes(config))
    box_area = sum(b.width * b.height * b.quantity for b in config.boxes)
    bin_area = sum(b.width * b.height for b in config.bins)

    typer.echo(f"Boxes: {box_count} (total area {box_area})")
    typer.echo(f"Bins: {len(config.bins)} (total area {bin_area})")
    typer.echo(f"Heuristic: {config.heuristic}")
    if box_area > bin_area:
        typer.echo("Note: total box area exceeds total bin area; some boxes will remain")
    typer.echo()
    typer.echo("Validation passed. Job file is valid.")
