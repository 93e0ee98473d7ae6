"""Rich console output helpers for the CLI.

Status, summaries and errors go to stderr through Rich so that the rendered
grid is the only thing written to stdout.
"""

from rich.console import Console
from rich.text import Text

console = Console(stderr=True, highlight=False, soft_wrap=True)

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"[bold]asciigrid[/bold] v{version}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    return f"{seconds:.2f}s"


def print_summary(
    shapes: int,
    points: int,
    rows: int,
    cols: int,
    painted: int,
    skipped: int,
    total_time_s: float,
) -> None:
    """Print a render summary.

    Args:
        shapes: Number of shapes rendered
        points: Number of outline points collected
        rows: Canvas height
        cols: Canvas width
        painted: Points written to the canvas
        skipped: Points left out because they were outside the frame
        total_time_s: Render time in seconds
    """
    console.print(
        f"[green]{SYM_OK}[/green] {shapes} shapes {SYM_DOT} {points} points "
        f"{SYM_DOT} {rows}x{cols} canvas {SYM_DOT} {_format_time(total_time_s)}"
    )
    skipped_style = "yellow" if skipped > 0 else "green"
    console.print(
        f"  {painted} painted {SYM_DOT} [{skipped_style}]{skipped} skipped[/{skipped_style}]"
    )


def print_written(output_path: str) -> None:
    """Print where the grid was written."""
    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Text avoids markup parsing of brackets in messages
    line = Text()
    line.append(f"{SYM_ERR} Error: ", style="bold red")
    line.append(message)
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
