"""Configuration management for asciigrid.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Fill and mark characters
- RenderConfig: Pipeline behaviour (out-of-frame policy, outline limits)
- LoggingConfig: Logging settings
- AsciiGridSettings: Main application settings
"""

from asciigrid.config.settings import (
    AsciiGridSettings,
    CanvasConfig,
    LoggingConfig,
    OutOfBoundsPolicy,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "AsciiGridSettings",
    "CanvasConfig",
    "LoggingConfig",
    "OutOfBoundsPolicy",
    "RenderConfig",
    "get_default_settings",
]
