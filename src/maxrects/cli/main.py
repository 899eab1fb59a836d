"""Typer CLI for rectangle packing."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from maxrects.application import PackCommand, ScorerFactory
from maxrects.application.config import ConfigError, load_config
from maxrects.application.sampling import (
    DEFAULT_BIN_SIZE,
    DEFAULT_MAX_BOX_SIZE,
    DEFAULT_MIN_BOX_SIZE,
)
from maxrects.cli.commands import display_load_error, validate_command
from maxrects.domain import PackingError, PlacementResult
from maxrects.infrastructure import (
    JsonExporter,
    PlacementRenderer,
    PlacementSummaryFormatter,
)

OUTPUT_FORMATS = ("text", "json", "ascii", "svg")
DEFAULT_SVG_OUTPUT = Path("output.svg")

app = typer.Typer(
    name="maxrects",
    help="Pack rectangular boxes into bins with the MaxRects heuristic.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _check_format(output_format: str) -> str:
    normalized = output_format.lower()
    if normalized not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)
    return normalized


def _create_command(heuristic: str | None) -> PackCommand:
    try:
        return PackCommand(heuristic)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _emit_result(result: PlacementResult, output_format: str, output: Path | None) -> None:
    """Print a result in the chosen format, or write it for svg."""
    if output_format == "json":
        typer.echo(JsonExporter().to_json(result))
    elif output_format == "ascii":
        typer.echo(PlacementRenderer().render_all_ascii(result))
    elif output_format == "svg":
        path = output or DEFAULT_SVG_OUTPUT
        try:
            PlacementRenderer().save_svg(result, path)
        except OSError as e:
            typer.echo(f"Error: Could not write {path}: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Diagram written to {path}")
        typer.echo(f"Percentage Packed: {result.packed_percentage:.2f}%")
    else:
        typer.echo(PlacementSummaryFormatter().format(result))


FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: text, json, ascii, svg"),
]
OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="SVG output path (default: output.svg)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log every placement decision"),
]


@app.command()
def pack(
    boxes: Annotated[
        int, typer.Option("--boxes", "-b", help="Number of random boxes to place")
    ],
    bins: Annotated[
        int, typer.Option("--bins", "-n", help="Number of bins to pack into")
    ],
    bin_width: Annotated[
        int, typer.Option("--bin-width", help="Width of every bin")
    ] = DEFAULT_BIN_SIZE,
    bin_height: Annotated[
        int, typer.Option("--bin-height", help="Height of every bin")
    ] = DEFAULT_BIN_SIZE,
    min_size: Annotated[
        int, typer.Option("--min-size", help="Smallest random box side")
    ] = DEFAULT_MIN_BOX_SIZE,
    max_size: Annotated[
        int, typer.Option("--max-size", help="Largest random box side")
    ] = DEFAULT_MAX_BOX_SIZE,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Random seed for reproducible boxes")
    ] = None,
    heuristic: Annotated[
        str | None,
        typer.Option("--heuristic", help="Placement heuristic (see 'maxrects heuristics')"),
    ] = None,
    output_format: FormatOption = "text",
    output: OutputOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Pack randomly generated boxes into identical bins.

    Boxes get integer sides between --min-size and --max-size; bins are
    numbered from 0.

    Examples:
        maxrects pack --boxes 50 --bins 3
        maxrects pack -b 50 -n 3 --seed 42 --format svg -o packing.svg
    """
    _configure_logging(verbose)
    output_format = _check_format(output_format)
    command = _create_command(heuristic)

    try:
        result = command.execute_sample(
            box_count=boxes,
            bin_count=bins,
            bin_width=bin_width,
            bin_height=bin_height,
            min_size=min_size,
            max_size=max_size,
            seed=seed,
        )
    except (PackingError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _emit_result(result, output_format, output)


@app.command()
def run(
    job_file: Annotated[Path, typer.Argument(help="Path to the JSON job file")],
    heuristic: Annotated[
        str | None,
        typer.Option("--heuristic", help="Override the job file's heuristic"),
    ] = None,
    output_format: FormatOption = "text",
    output: OutputOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Pack the boxes and bins described in a job file.

    Examples:
        maxrects run job.json
        maxrects run job.json --heuristic bottom_left --format json
    """
    _configure_logging(verbose)
    output_format = _check_format(output_format)

    try:
        config = load_config(job_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    command = _create_command(heuristic or config.heuristic)
    try:
        result = command.execute_job(config)
    except PackingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _emit_result(result, output_format, output)


@app.command()
def heuristics() -> None:
    """List the available placement heuristics."""
    for name in ScorerFactory.available_heuristics():
        typer.echo(name)


if __name__ == "__main__":
    app()
