"""Shape descriptions handed to the renderer.

A shape pairs a primitive kind with the points that define it, the same way
the interactive editor records what the user clicked:

- LINE: two endpoints
- CIRCLE: center, then any point on the circumference
- ELLIPSE: center, then a corner of the bounding box
- SQUARE: center, then a point whose distance is the half size
- RECTANGLE: center, then a corner
- POLYGON: three or more vertices
- BEZIER / CARDINAL: two or more control points
- HERMITE: groups of four points (P0, handle0, P1, handle1); each tangent is
  the handle minus its anchor
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from rasterlab.domain.color import BLACK, Color, NamedColor
from rasterlab.domain.point import Point


class ShapeKind(str, Enum):
    """Primitive kinds understood by the renderer."""

    LINE = "line"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    POLYGON = "polygon"
    BEZIER = "bezier"
    HERMITE = "hermite"
    CARDINAL = "cardinal"


class FillKind(str, Enum):
    """Fill applied after the outline is drawn."""

    NONE = "none"
    CIRCLE_LINES = "circle_lines"
    CIRCLE_QUARTER = "circle_quarter"
    CIRCLE_CIRCLES = "circle_circles"
    POLYGON_CONVEX = "polygon_convex"
    POLYGON_NON_CONVEX = "polygon_non_convex"
    FLOOD_RECURSIVE = "flood_recursive"
    FLOOD_ITERATIVE = "flood_iterative"
    FLOOD = "flood"
    SQUARE_HERMITE = "square_hermite"
    RECTANGLE_BEZIER = "rectangle_bezier"


@dataclass
class Shape:
    """A primitive to rasterize.

    Attributes:
        kind: Primitive kind
        points: Defining points (see module docstring for the layout per kind)
        color: Outline and fill color
        algorithm: Tracer name (None selects the kind's default)
        fill: Fill applied after the outline
    """

    kind: ShapeKind
    points: list[Point]
    color: Color = BLACK
    algorithm: str | None = None
    fill: FillKind = FillKind.NONE

    @property
    def center(self) -> Point:
        """First point, which is the center for circles, ellipses and boxes."""
        return self.points[0]

    def radius(self) -> int:
        """Circle radius: truncated distance from center to the second point."""
        return int(self.points[0].distance_to(self.points[1]))

    def radii(self) -> tuple[int, int]:
        """Ellipse semi-axes from the center/corner pair."""
        a = int(abs(self.points[1].x - self.points[0].x))
        b = int(abs(self.points[1].y - self.points[0].y))
        return a, b

    def half_size(self) -> int:
        """Square half size (same measure as the circle radius)."""
        return self.radius()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the shape
        """
        return {
            "kind": self.kind.value,
            "points": [p.to_dict() for p in self.points],
            "color": list(self.color),
            "algorithm": self.algorithm,
            "fill": self.fill.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Shape":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a shape

        Returns:
            Shape instance
        """
        return cls(
            kind=ShapeKind(data["kind"]),
            points=[Point.from_dict(p) for p in data["points"]],
            color=_parse_color(data.get("color", BLACK)),
            algorithm=data.get("algorithm"),
            fill=FillKind(data.get("fill", FillKind.NONE.value)),
        )


def _parse_color(value: Any) -> Color:
    # Palette names ("red") or RGB triples of 0-255 ints
    if isinstance(value, str):
        return NamedColor(value.lower()).rgb
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"color must be a palette name or an RGB triple, got {value!r}")
    for channel in value:
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise TypeError(f"color channel must be an int, got {channel!r}")
        if not 0 <= channel <= 255:
            raise ValueError(f"color channel {channel} outside 0-255")
    r, g, b = value
    return (r, g, b)
