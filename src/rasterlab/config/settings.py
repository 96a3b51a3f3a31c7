"""Configuration settings for Rasterlab."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from rasterlab.domain import NamedColor


class FloodStrategy(str, Enum):
    """Flood fill variant used for ``FillKind.FLOOD``."""

    ITERATIVE = "iterative"
    RECURSIVE = "recursive"


class CanvasConfig(BaseModel):
    """Configuration for the drawing surface."""

    width: int = Field(
        default=1024,
        ge=1,
        le=16384,
        description="Canvas width in pixels",
    )
    height: int = Field(
        default=768,
        ge=1,
        le=16384,
        description="Canvas height in pixels",
    )
    background: NamedColor = Field(
        default=NamedColor.WHITE,
        description="Initial color of every pixel",
    )


class CurveConfig(BaseModel):
    """Sampling density for parametric curves.

    Hermite and cardinal counts are minimums; longer segments get more
    samples through the distance-based policies in ``core.curves``.
    """

    bezier_steps: int | None = Field(
        default=None,
        ge=1,
        le=10000,
        description="Fixed Bezier step count (None = adaptive to the control polygon length)",
    )
    hermite_points: int = Field(
        default=50,
        ge=2,
        le=1000,
        description="Minimum samples per Hermite segment",
    )
    cardinal_tension: float = Field(
        default=0.5,
        ge=0.0,
        le=2.0,
        description="Cardinal spline tension c (tangent = c/2 * neighbour difference)",
    )
    cardinal_points_per_segment: int = Field(
        default=50,
        ge=2,
        le=500,
        description="Minimum samples per cardinal spline segment",
    )


class FillConfig(BaseModel):
    """Configuration for region fills."""

    flood_strategy: FloodStrategy = Field(
        default=FloodStrategy.ITERATIVE,
        description="Flood fill variant (recursive overflows on large regions)",
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


class RasterLabSettings(BaseModel):
    """Main application settings."""

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    curves: CurveConfig = Field(default_factory=CurveConfig)
    fill: FillConfig = Field(default_factory=FillConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> RasterLabSettings:
    """Get default application settings."""
    return RasterLabSettings()
