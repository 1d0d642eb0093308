"""Configuration management for kochflake.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Initial triangle placement
- RenderConfig: Levels, display size, supersampling and timing
- LoggingConfig: Logging settings
- KochflakeSettings: Main application settings
"""

from kochflake.config.settings import (
    GeometryConfig,
    KochflakeSettings,
    LoggingConfig,
    RenderConfig,
    RenderMode,
    get_default_settings,
)

__all__ = [
    "GeometryConfig",
    "KochflakeSettings",
    "LoggingConfig",
    "RenderConfig",
    "RenderMode",
    "get_default_settings",
]
