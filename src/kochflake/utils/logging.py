"""Logging utilities for Kochflake."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "kochflake"


@dataclass
class RenderStats:
    """Statistics from a render run."""

    levels_rendered: int = 0
    vertex_counts: list[int] = field(default_factory=list)
    level_times_ms: list[float] = field(default_factory=list)
    dropped_samples: int = 0
    paused_ms: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def final_vertex_count(self) -> int:
        """Vertex count of the last rendered level."""
        return self.vertex_counts[-1] if self.vertex_counts else 0

    @property
    def max_level_time_ms(self) -> float | None:
        """Slowest level, generation and drawing included."""
        return max(self.level_times_ms) if self.level_times_ms else None


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("kochflake")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_level_start(self, level: int) -> None:
        """Log start of a refinement level."""
        self._logger.debug("Rendering level", level=level)

    def log_level_rendered(
        self,
        level: int,
        vertices: int,
        duration_ms: float,
    ) -> None:
        """Log a presented refinement level."""
        self._logger.info(
            "Level rendered",
            level=level,
            vertices=vertices,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.levels_rendered += 1
        self._stats.vertex_counts.append(vertices)
        self._stats.level_times_ms.append(duration_ms)

    def log_points_dropped(self, level: int, dropped: int) -> None:
        """Log vertices that fell outside the supersampling grid."""
        self._logger.warning("Vertices outside display", level=level, dropped=dropped)
        self._stats.dropped_samples += dropped

    def log_shades(self, level: int, shaded: dict[int, int]) -> None:
        """Log pixel counts of the drawn shade buckets."""
        self._logger.debug("Shade buckets", level=level, shaded=shaded)

    def log_pause(self, milliseconds: int) -> None:
        """Record a pause on the surface."""
        self._stats.paused_ms += milliseconds

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
