"""Render loop orchestration.

Drives every refinement level through generation, rasterization and
presentation on a display surface, strictly one level at a time.

Key components:
- SnowflakeRunner: Main orchestrator class
- draw_boundary: Draw a single level onto a surface
"""

import time
from collections.abc import Callable

import structlog

from kochflake.config import KochflakeSettings, RenderConfig
from kochflake.core.generator import generate_levels
from kochflake.core.rasterizer import (
    polyline_points,
    render_supersampled,
    shade_bucket_count,
    shade_color,
)
from kochflake.display import DisplaySurface
from kochflake.domain import Boundary, ShadeBuckets
from kochflake.utils import RenderLogger, RenderStats, configure_logging

ProgressCallback = Callable[[int, int, int], None]


def draw_boundary(
    surface: DisplaySurface, boundary: Boundary, config: RenderConfig
) -> ShadeBuckets | None:
    """Clear the surface and draw one level, without presenting it.

    Plain mode draws the closed polyline in the line color. Anti-aliased
    mode draws every covered shade bucket in its gray level; bucket 0 is the
    background and is left as cleared.

    Args:
        surface: Surface to draw on
        boundary: Level to draw
        config: Render configuration

    Returns:
        The shade buckets in anti-aliased mode, otherwise None
    """
    surface.clear(config.background_color)

    if not config.antialias:
        surface.draw_polyline(polyline_points(boundary), config.line_color)
        return None

    buckets = render_supersampled(boundary, config.display_size, config.supersample_factor)
    bucket_count = shade_bucket_count(config.supersample_factor)
    for bucket in buckets.covered():
        color = shade_color(
            bucket.level, bucket_count, config.background_color, config.line_color
        )
        surface.draw_points(bucket.pixels, color)
    return buckets


class SnowflakeRunner:
    """Orchestrates level-by-level snowflake rendering.

    Manages the complete workflow:
    1. Build the initial triangle
    2. Draw and present the current level
    3. Pause for the frame delay
    4. Refine and repeat until all levels are shown
    5. Hold the last frame for the final delay

    Example:
        settings = KochflakeSettings()
        runner = SnowflakeRunner(settings, RecordingSurface())
        stats = runner.run()
    """

    def __init__(
        self,
        settings: KochflakeSettings,
        surface: DisplaySurface,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize runner with configuration and a surface.

        Args:
            settings: Kochflake settings
            surface: Surface levels are presented on
            logger: Logger to use (configured from settings if None)
        """
        self.settings = settings
        self.surface = surface
        if logger is None:
            logger = configure_logging(
                log_file=settings.logging.log_file,
                console_level=settings.logging.log_level,
                file_level=settings.logging.file_log_level,
            )
        self.logger = logger
        self.render_logger = RenderLogger(logger)

    def run(self, progress_callback: ProgressCallback | None = None) -> RenderStats:
        """Render every configured level in order.

        Args:
            progress_callback: Called as (levels_done, total_levels, vertices)
                after each level is presented

        Returns:
            RenderStats for the run
        """
        render = self.settings.render
        geometry = self.settings.geometry
        stats = self.render_logger.stats
        stats.start_time = time.time()

        started = time.perf_counter()
        for boundary in generate_levels(geometry.center, geometry.radius, render.levels):
            self.render_logger.log_level_start(boundary.level)

            buckets = draw_boundary(self.surface, boundary, render)
            self.surface.present()

            if buckets is not None:
                if buckets.dropped_samples:
                    self.render_logger.log_points_dropped(
                        boundary.level, buckets.dropped_samples
                    )
                self.render_logger.log_shades(
                    boundary.level, {b.level: len(b) for b in buckets.covered()}
                )

            duration_ms = (time.perf_counter() - started) * 1000
            self.render_logger.log_level_rendered(boundary.level, len(boundary), duration_ms)

            if progress_callback:
                progress_callback(boundary.level + 1, render.levels, len(boundary))

            self._pause(render.frame_delay_ms)
            started = time.perf_counter()

        self._pause(render.final_delay_ms)
        stats.end_time = time.time()
        return stats

    def _pause(self, milliseconds: int) -> None:
        if milliseconds > 0:
            self.surface.pause(milliseconds)
            self.render_logger.log_pause(milliseconds)
