"""CLI application entry point for rebarfill.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from rebarfill import __version__
from rebarfill.cli.output import (
    console,
    print_bars,
    print_drawing_info,
    print_entity,
    print_error,
    print_header,
    print_step,
    print_summary,
)
from rebarfill.config import LoggingConfig, OutputConfig, RebarFillSettings, ScanConfig
from rebarfill.core import BarFillProcessor
from rebarfill.exceptions import (
    DrawingLoadError,
    DrawingSaveError,
    RebarFillError,
    WrongWorkspaceError,
)
from rebarfill.io import DrawingWriter

# Create the Typer app
app = typer.Typer(
    name="rebarfill",
    help="Fill a region of a DXF drawing with evenly spaced reinforcement bars.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Rebarfill[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def rebarfill(
    drawing: Annotated[
        Path,
        typer.Argument(
            help="Path to input DXF drawing",
            show_default=False,
        ),
    ],
    clicks: Annotated[
        Path | None,
        typer.Option(
            "--clicks",
            "-c",
            help="Selection store (JSON); the last record's externalId is used",
        ),
    ] = None,
    handle: Annotated[
        str | None,
        typer.Option(
            "--handle",
            "-H",
            help="Entity handle (hex), bypassing the selection store",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-rebar.dxf)",
        ),
    ] = None,
    spacing: Annotated[
        float,
        typer.Option(
            "--spacing",
            "-s",
            help="Distance between scan-lines",
            min=0.001,
        ),
    ] = 100.0,
    margin: Annotated[
        float,
        typer.Option(
            "--margin",
            "-m",
            help="Scan-line extension beyond the boundary extents",
            min=0.0,
        ),
    ] = 1000.0,
    layer: Annotated[
        str,
        typer.Option(
            "--layer",
            help="Layer for the generated bars",
        ),
    ] = "REBAR",
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Compute and list bars without modifying the drawing",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate bars for the most recently selected entity of a drawing.

    The entity is either given with --handle or taken from the last record of
    the selection store passed with --clicks. Hatches, closed polylines and
    entities that explode into curves are supported.

    Example:
        rebarfill plan.dxf --clicks storage/clicks.json

    This will create plan-rebar.dxf with the bars on the REBAR layer.
    """
    if clicks is None and handle is None:
        print_error(
            "No entity selected",
            details="Pass --clicks with a selection store or --handle with an entity handle.",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_step("Loading drawing")
        print_drawing_info(str(drawing), spacing, margin)

    settings = RebarFillSettings(
        scan=ScanConfig(spacing=spacing, margin=margin),
        output=OutputConfig(layer=layer),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    try:
        processor = BarFillProcessor(settings)
        result = processor.process(
            drawing_path=drawing,
            selection_path=clicks,
            handle=handle,
            output_path=output,
            dry_run=dry_run,
        )
    except DrawingLoadError as e:
        print_error(f"Could not load drawing: {e.reason}")
        raise typer.Exit(code=1)
    except DrawingSaveError as e:
        print_error(f"Could not save drawing: {e.reason}")
        raise typer.Exit(code=1)
    except WrongWorkspaceError as e:
        print_error("Switch to MODEL space.", details=str(e))
        raise typer.Exit(code=1)
    except RebarFillError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if quiet:
        console.print(f"{result.bar_count} {result.total_length:.2f}")
        return

    print_step("Generating bars")
    print_entity(result.entity_type, result.handle)
    if dry_run and result.bars:
        print_bars(result.bars)

    output_path = None
    if not dry_run:
        output_path = str(output or DrawingWriter.get_output_path(drawing, settings.output.suffix))
    print_summary(result.bar_count, result.total_length, output_path)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
