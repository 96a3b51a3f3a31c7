"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables, a terminal preview of the canvas, and formatted messages.
"""

from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from rasterlab.domain import Canvas, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info
SYM_PIXEL = "█"  # Painted pixel in the preview

# Widest painted region the terminal preview will show
MAX_PREVIEW_WIDTH = 160
MAX_PREVIEW_HEIGHT = 120


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Rasterlab[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_canvas_info(width: int, height: int, background: str) -> None:
    """Print canvas information.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        background: Background color name
    """
    console.print(f"  {width}x{height} canvas {SYM_DOT} {background} background")


def print_preview(canvas: Canvas) -> None:
    """Print the painted part of a canvas, one character per pixel.

    Only the bounding box of non-background pixels is shown, each painted
    pixel in its own color.

    Args:
        canvas: Canvas to preview
    """
    painted = canvas.painted()
    if not painted:
        console.print("  (nothing painted)")
        return

    min_x = min(x for x, _ in painted)
    max_x = max(x for x, _ in painted)
    min_y = min(y for _, y in painted)
    max_y = max(y for _, y in painted)

    width = max_x - min_x + 1
    height = max_y - min_y + 1
    if width > MAX_PREVIEW_WIDTH or height > MAX_PREVIEW_HEIGHT:
        console.print(
            f"  Preview skipped: painted region is {width}x{height} "
            f"(limit {MAX_PREVIEW_WIDTH}x{MAX_PREVIEW_HEIGHT})"
        )
        return

    console.print(f"  x {min_x}..{max_x} {SYM_DOT} y {min_y}..{max_y}")
    for y in range(min_y, max_y + 1):
        line = Text("  ")
        for x in range(min_x, max_x + 1):
            color = canvas.get_pixel(x, y)
            if color is None or color == canvas.background:
                line.append(SYM_DOT, style="dim")
            else:
                r, g, b = color
                line.append(SYM_PIXEL, style=f"rgb({r},{g},{b})")
        console.print(line, overflow="ignore", crop=False, no_wrap=True)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def print_success(
    total_time_s: float,
    rendered: int,
    pixels: int,
    errors: int,
    output_path: str | None = None,
    file_size: str | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total rendering time in seconds
        rendered: Number of shapes rendered
        pixels: Pixel writes issued
        errors: Number of shapes rejected or failed
        output_path: Path to the written image, if any
        file_size: Human-readable file size string
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        if file_size is not None:
            line.append(f" ({file_size})")
        console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {rendered} shapes {SYM_DOT} {pixels:,} pixels {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )


def print_clip_result(accepted: bool, start: Point, end: Point) -> None:
    """Print the outcome of a line clip.

    Args:
        accepted: Whether any part of the line is visible
        start: Clipped start point
        end: Clipped end point
    """
    if accepted:
        console.print(
            f"[bold green]{SYM_OK} Accepted[/bold green] "
            f"({start.x:g}, {start.y:g}) -> ({end.x:g}, {end.y:g})"
        )
    else:
        console.print(f"[bold red]{SYM_ERR} Rejected[/bold red] line lies outside")


def print_algorithms(rows: list[tuple[str, list[str], list[str]]]) -> None:
    """Print the registered algorithms per shape kind.

    Args:
        rows: (kind, algorithm names with the default first, fill names)
    """
    table = Table(title="Algorithms", show_lines=False)
    table.add_column("Shape", style="bold")
    table.add_column("Algorithms")
    table.add_column("Fills")

    for kind, algorithms, fills in rows:
        names = [f"{algorithms[0]} (default)", *algorithms[1:]]
        table.add_row(kind, ", ".join(names), ", ".join(fills) or "-")

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
