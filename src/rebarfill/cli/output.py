"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with step indicators, summaries and formatted error messages.
"""


from rich.console import Console
from rich.table import Table
from rich.text import Text

from rebarfill.core.report import format_report
from rebarfill.domain import Bar

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Rebarfill[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_drawing_info(drawing_path: str, spacing: float, margin: float) -> None:
    """Print drawing and sweep settings."""
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(drawing_path)
    console.print(line)
    console.print(f"  spacing {spacing:g} {SYM_DOT} margin {margin:g}")


def print_entity(entity_type: str | None, handle: str | None) -> None:
    """Print the resolved entity."""
    console.print(f"  [green]{SYM_OK}[/green] Entity type: {entity_type} {SYM_DOT} handle {handle}")


def print_bars(bars: list[Bar], limit: int = 20) -> None:
    """Print a table of generated bars.

    Args:
        bars: Bars to list
        limit: Maximum number of rows shown
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("start")
    table.add_column("end")
    table.add_column("length", justify="right")

    for idx, bar in enumerate(bars[:limit], start=1):
        table.add_row(
            str(idx),
            f"({bar.start.x:.2f}, {bar.start.y:.2f})",
            f"({bar.end.x:.2f}, {bar.end.y:.2f})",
            f"{bar.length:.2f}",
        )

    console.print(table)
    if len(bars) > limit:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(bars) - limit} more)")


def print_summary(bar_count: int, total_length: float, output_path: str | None = None) -> None:
    """Print the run summary.

    Args:
        bar_count: Number of bars created
        total_length: Sum of bar lengths
        output_path: Path of the written drawing (None for dry runs)
    """
    console.print()
    console.print(format_report(bar_count, total_length), highlight=False)

    if output_path is not None:
        line = Text(f"\n{SYM_OK} ", style="bold green")
        line.append(output_path, style="bold")
        console.print(line)
    else:
        console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – no changes made")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
