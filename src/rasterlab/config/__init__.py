"""Configuration management for rasterlab.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CanvasConfig: Canvas size and background
- CurveConfig: Curve sampling density and cardinal tension
- FillConfig: Flood fill strategy
- LoggingConfig: Logging settings
- RasterLabSettings: Main application settings
"""

from rasterlab.config.settings import (
    CanvasConfig,
    CurveConfig,
    FillConfig,
    FloodStrategy,
    LoggingConfig,
    RasterLabSettings,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "CurveConfig",
    "FillConfig",
    "FloodStrategy",
    "LoggingConfig",
    "RasterLabSettings",
    "get_default_settings",
]
