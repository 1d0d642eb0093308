"""CLI application entry point for kochflake.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from kochflake import __version__
from kochflake.cli.output import (
    console,
    print_cancellation_notice,
    print_error,
    print_header,
    print_level,
    print_render_info,
    print_step,
    print_success,
)
from kochflake.config import (
    KochflakeSettings,
    LoggingConfig,
    RenderConfig,
    RenderMode,
)
from kochflake.core import SnowflakeRunner
from kochflake.display import DisplaySurface, RecordingSurface, open_window
from kochflake.exceptions import ConfigurationError, DisplayError, KochflakeError

# Create the Typer app
app = typer.Typer(
    name="kochflake",
    help="Draw a Koch snowflake one refinement level at a time.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Kochflake[/bold blue] v{__version__}")
        raise typer.Exit()


# Unknown option-like tokens such as "-aa" are passed through as MODE
@app.command(context_settings={"ignore_unknown_options": True})
def draw(
    mode: Annotated[
        str | None,
        typer.Argument(
            help="Render mode: exactly 'antialias' or 'aa' (leading dashes allowed, e.g. '-aa') "
            "for 16-shade supersampling, 'plain' for lines",
            show_default=False,
        ),
    ] = None,
    levels: Annotated[
        int,
        typer.Option(
            "--levels",
            "-l",
            help="Number of refinement levels to draw (1-12)",
            min=1,
            max=12,
        ),
    ] = 8,
    delay: Annotated[
        int,
        typer.Option(
            "--delay",
            help="Pause after each level in milliseconds",
            min=0,
        ),
    ] = 1000,
    hold: Annotated[
        int,
        typer.Option(
            "--hold",
            help="Pause after the last level in milliseconds",
            min=0,
        ),
    ] = 3000,
    headless: Annotated[
        bool,
        typer.Option(
            "--headless",
            help="Render without opening a window",
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
    """Draw a Koch snowflake, refining it level by level.

    Starts from an equilateral triangle and replaces every edge with four
    edges forming an outward bump, presenting each level in turn.

    Example:
        kochflake antialias --levels 7
    """
    try:
        render_mode = RenderMode.parse(mode)
        settings = KochflakeSettings(
            render=RenderConfig(
                levels=levels,
                mode=render_mode,
                frame_delay_ms=delay,
                final_delay_ms=hold,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        )
    except ConfigurationError as e:
        print_error(str(e), details="Valid modes: plain, antialias (aa, -aa)")
        raise typer.Exit(code=1)
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
        print_render_info(
            mode=render_mode.value,
            levels=levels,
            display_size=settings.render.display_size,
            supersample_factor=settings.render.supersample_factor,
            headless=headless,
        )

    done = 0

    def on_level(completed: int, total: int, vertices: int) -> None:
        nonlocal done
        done = completed
        if not quiet:
            print_level(completed, total, vertices)

    try:
        surface = _open_surface(settings, headless)
        try:
            if not quiet:
                print_step("Rendering")
            runner = SnowflakeRunner(settings, surface)
            stats = runner.run(progress_callback=on_level)
        finally:
            surface.close()

        if not quiet:
            print_success(
                total_time_s=stats.duration_seconds,
                levels=stats.levels_rendered,
                vertices=stats.final_vertex_count,
                paused_ms=stats.paused_ms,
                dropped=stats.dropped_samples,
                max_level_ms=stats.max_level_time_ms,
            )

    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_notice(done)
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except DisplayError as e:
        print_error(
            f"Could not open window: {e.reason}",
            details="Use --headless to render without a display.",
        )
        raise typer.Exit(code=1)
    except KochflakeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _open_surface(settings: KochflakeSettings, headless: bool) -> DisplaySurface:
    """Create the surface levels are presented on.

    Args:
        settings: Kochflake settings
        headless: Use a recording surface instead of a window

    Returns:
        Display surface
    """
    if headless:
        return RecordingSurface()
    return open_window(settings.render.display_size, settings.render.window_title)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
