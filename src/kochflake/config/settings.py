"""Configuration settings for Kochflake."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kochflake.exceptions import ConfigurationError


class RenderMode(str, Enum):
    """How each refinement level is drawn."""

    PLAIN = "plain"
    ANTIALIAS = "antialias"

    @classmethod
    def parse(cls, token: str | None) -> "RenderMode":
        """Interpret a command-line mode token.

        Leading dashes are ignored so the historical ``-aa`` spelling works.
        ``aa`` and ``antialias`` select anti-aliasing.

        Args:
            token: Raw token, or None when no mode was given

        Returns:
            Matching render mode

        Raises:
            ConfigurationError: If the token names no known mode
        """
        if token is None:
            return cls.PLAIN

        word = token.strip().lstrip("-").lower()
        if word in ("", cls.PLAIN.value):
            return cls.PLAIN
        if word in ("aa", cls.ANTIALIAS.value):
            return cls.ANTIALIAS
        raise ConfigurationError("mode", f"unknown render mode '{token}'")


class GeometryConfig(BaseModel):
    """Placement of the initial triangle in display pixels."""

    model_config = ConfigDict(allow_inf_nan=False)

    center_x: float = Field(default=400.0, description="X coordinate of the triangle centre")
    center_y: float = Field(default=400.0, description="Y coordinate of the triangle centre")
    radius: float = Field(
        default=300.0,
        gt=0.0,
        description="Distance from the centre to each triangle vertex",
    )

    @property
    def center(self) -> tuple[float, float]:
        """Triangle centre as an (x, y) tuple."""
        return (self.center_x, self.center_y)


class RenderConfig(BaseModel):
    """Configuration for rasterization and presentation."""

    levels: int = Field(
        default=8,
        ge=1,
        le=12,
        description="Number of refinement levels to draw (level 0 is the triangle)",
    )
    display_size: int = Field(
        default=800,
        ge=16,
        le=4096,
        description="Width and height of the square display in pixels",
    )
    supersample_factor: int = Field(
        default=4,
        ge=1,
        le=8,
        description="Sub-samples per pixel along each axis when anti-aliasing",
    )
    mode: RenderMode = Field(default=RenderMode.PLAIN, description="Plain or anti-aliased")
    frame_delay_ms: int = Field(
        default=1000,
        ge=0,
        description="Pause after each presented level",
    )
    final_delay_ms: int = Field(
        default=3000,
        ge=0,
        description="Pause after the last level before exiting",
    )
    background_color: tuple[int, int, int] = Field(default=(88, 88, 88))
    line_color: tuple[int, int, int] = Field(default=(255, 255, 255))
    window_title: str = Field(default="Snowflake")

    @field_validator("background_color", "line_color")
    @classmethod
    def _check_channels(cls, value: tuple[int, int, int]) -> tuple[int, int, int]:
        if any(channel < 0 or channel > 255 for channel in value):
            raise ValueError("color channels must be within 0-255")
        return value

    @property
    def antialias(self) -> bool:
        """Whether levels are drawn through the supersampled rasterizer."""
        return self.mode is RenderMode.ANTIALIAS


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class KochflakeSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> KochflakeSettings:
    """Get default application settings."""
    return KochflakeSettings()
