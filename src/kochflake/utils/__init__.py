"""Utility functions for kochflake.

This module provides logging setup and render statistics tracking.
"""

from kochflake.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
