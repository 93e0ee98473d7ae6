"""Configuration settings for asciigrid."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class OutOfBoundsPolicy(str, Enum):
    """What painting does with a point outside the canvas frame."""

    FAIL = "fail"
    IGNORE = "ignore"
    CLAMP = "clamp"


def _check_grid_char(value: str) -> str:
    if len(value) != 1 or not value.isprintable():
        raise ValueError(f"must be a single printable character, got {value!r}")
    return value


class CanvasConfig(BaseModel):
    """Configuration for canvas characters."""

    fill_char: str = Field(
        default=".",
        description="Background character of untouched cells",
    )
    mark_char: str = Field(
        default="#",
        description="Character painted at each outline point",
    )

    @field_validator("fill_char", "mark_char")
    @classmethod
    def single_char(cls, value: str) -> str:
        return _check_grid_char(value)


class RenderConfig(BaseModel):
    """Configuration for the render pipeline."""

    out_of_bounds: OutOfBoundsPolicy = Field(
        default=OutOfBoundsPolicy.FAIL,
        description="Handling of points painted outside the frame",
    )
    max_outline_points: int = Field(
        default=1_000_000,
        ge=1,
        description="Upper bound on points collected from one shape before giving up",
    )


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

    @field_validator("log_level", "file_log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level


class AsciiGridSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AsciiGridSettings:
    """Get default application settings."""
    return AsciiGridSettings()
