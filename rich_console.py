"""
Rich console configuration for the naval map coordinate tools.

Provides styled terminal output with panels, tables and styled logging.
"""

import logging
from typing import Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler
from rich.theme import Theme
from rich.panel import Panel
from rich.table import Table

# Custom theme for chart-room styling
NAVAL_THEME = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "highlight": "bold magenta",
    "muted": "dim",
    "coord": "bold blue",
    "bearing": "bold cyan",
    "compass": "green",
})

# Global console instance
console = Console(theme=NAVAL_THEME)


def setup_rich_logging(verbose: bool = False) -> None:
    """
    Configure logging to use Rich handler for styled output.

    Args:
        verbose: Enable DEBUG level logging with full details
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                show_time=verbose,
                show_path=verbose,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
                markup=False,
            )
        ],
        force=True,  # Override any existing configuration
    )


def print_config_summary(
    input_file: str,
    output_file: str,
    direction: str,
    adjust_origin: bool = False,
    precision: Optional[int] = None,
) -> None:
    """
    Print a styled summary panel for a point file conversion.

    Args:
        input_file: Source JSON file
        output_file: Destination JSON file
        direction: "to-map" or "to-engine"
        adjust_origin: Whether the map side uses a top-left origin
        precision: Rounding digits, or None for full precision
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Input", escape(input_file))
    table.add_row("Output", f"[green]{escape(output_file)}[/]")
    table.add_row("Direction", f"[highlight]{direction}[/]")
    table.add_row("Map Origin", "top-left" if adjust_origin else "bottom-left")
    table.add_row("Precision", "full" if precision is None else f"{precision} digits")

    panel = Panel(
        table,
        title="[bold]Conversion[/]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(panel)


def print_result(title: str, values: Dict[str, str]) -> None:
    """
    Print a small key/value result table.

    Args:
        title: Panel title
        values: Ordered mapping of labels to already formatted values
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="bold")

    for key, value in values.items():
        table.add_row(key, value)

    console.print(Panel(table, title=f"[bold]{title}[/]", border_style="cyan"))


def print_completion_summary(output_file: str, point_count: int) -> None:
    """
    Print a styled completion summary.

    Args:
        output_file: Path to output file
        point_count: Number of points written
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold green")

    table.add_row("Points", f"{point_count:,}")
    table.add_row("Output", escape(output_file))

    panel = Panel(
        table,
        title="[bold green]Complete[/]",
        border_style="green",
        padding=(1, 2),
    )
    console.print(panel)


def print_error(message: str, hint: Optional[str] = None) -> None:
    """
    Print a styled error message.

    Args:
        message: Error message
        hint: Optional hint for resolution
    """
    console.print(f"\n[error]Error:[/] {escape(message)}")
    if hint:
        console.print(f"[muted]Hint: {escape(hint)}[/]")
