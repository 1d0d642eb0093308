"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, progress and summary messages.
"""


from rich.console import Console
from rich.text import Text

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
    console.print(f"\n[bold]Kochflake[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_render_info(
    mode: str, levels: int, display_size: int, supersample_factor: int, headless: bool
) -> None:
    """Print render configuration.

    Args:
        mode: Render mode name
        levels: Number of levels to draw
        display_size: Display width and height in pixels
        supersample_factor: Sub-samples per pixel along each axis
        headless: Whether no window is opened
    """
    line = Text("  ")
    line.append(mode, style="bold")
    if mode == "antialias":
        line.append(f" ({supersample_factor}x{supersample_factor} samples)")
    console.print(line)
    target = "headless" if headless else "window"
    console.print(
        f"  {levels} levels {SYM_DOT} {display_size}x{display_size} px {SYM_DOT} {target}"
    )


def print_level(level: int, total: int, vertices: int) -> None:
    """Print one rendered level.

    Args:
        level: Number of levels rendered so far
        total: Total number of levels
        vertices: Vertex count of the rendered level
    """
    console.print(f"  [{level}/{total}] Current snowflake has [green]{vertices:,}[/green] vertices")


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


def print_success(
    total_time_s: float,
    levels: int,
    vertices: int,
    paused_ms: int,
    dropped: int = 0,
    max_level_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total run time in seconds
        levels: Number of levels rendered
        vertices: Vertex count of the final level
        paused_ms: Time spent in frame delays
        dropped: Vertices that fell outside the display
        max_level_ms: Slowest level in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    console.print(f"  {levels} levels {SYM_DOT} {vertices:,} vertices in final level")

    timing = f"  {_format_time(paused_ms / 1000)} paused"
    if max_level_ms is not None:
        timing += f" {SYM_DOT} {max_level_ms:.1f}ms slowest level"
    console.print(timing)

    if dropped:
        console.print(f"  [yellow]{dropped:,} vertices outside display[/yellow]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice(levels: int) -> None:
    """Print cancellation acknowledgment.

    Args:
        levels: Number of levels presented before cancellation
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold] after {levels} levels")
