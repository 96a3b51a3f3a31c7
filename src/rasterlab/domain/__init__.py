"""Domain models for rasterlab.

This module contains the types every algorithm shares:

- Point: A 2D point (or tangent vector), immutable and hashable
- Color: RGB pixel value, plus the named palette
- Polygon: Closed vertex sequence with a caller-supplied convexity flag
- PixelSurface / Canvas: The surface capability and its in-memory implementation
- Shape: A primitive description handed to the renderer
"""

from rasterlab.domain.color import (
    BLACK,
    BLUE,
    GREEN,
    RED,
    WHITE,
    Color,
    NamedColor,
)
from rasterlab.domain.point import Point, round_half_up
from rasterlab.domain.polygon import Polygon
from rasterlab.domain.shape import FillKind, Shape, ShapeKind
from rasterlab.domain.surface import Canvas, PixelSurface

__all__: list[str] = [
    # Colors
    "BLACK",
    "BLUE",
    "GREEN",
    "RED",
    "WHITE",
    "Color",
    "NamedColor",
    # Enums
    "FillKind",
    "ShapeKind",
    # Core types
    "Canvas",
    "PixelSurface",
    "Point",
    "Polygon",
    "Shape",
    # Helpers
    "round_half_up",
]
