"""Point, line and polygon clipping.

Coordinates follow the screen convention: y grows downward, so a window's
``y_top`` is numerically smaller than its ``y_bottom``. All boundary tests
are inclusive.

Key pieces:
- OutCode / compute_outcode: Cohen-Sutherland region codes
- cohen_sutherland_line_clip: clip a segment to a rectangle
- sutherland_hodgman_polygon_clip: clip a polygon to a rectangle
- circle_line_clip: clip a segment to a disc
"""

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import IntFlag

from rasterlab.domain import Point
from rasterlab.exceptions import GeometryError, ZeroStepError

logger = logging.getLogger(__name__)

# One clip per window edge is enough for any segment
MAX_CLIP_PASSES = 4


class OutCode(IntFlag):
    """Which half-planes outside the window a point lies in."""

    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    TOP = 4
    BOTTOM = 8


@dataclass(frozen=True, slots=True)
class ClipWindow:
    """Axis-aligned clip rectangle with inclusive bounds.

    Attributes:
        x_left: Smallest x inside the window
        x_right: Largest x inside the window
        y_top: Smallest y inside the window
        y_bottom: Largest y inside the window
    """

    x_left: float
    x_right: float
    y_top: float
    y_bottom: float

    def __post_init__(self) -> None:
        if self.x_left > self.x_right or self.y_top > self.y_bottom:
            raise GeometryError(
                f"Invalid clip window: x [{self.x_left}, {self.x_right}], "
                f"y [{self.y_top}, {self.y_bottom}]"
            )

    @classmethod
    def square(cls, x_left: float, y_top: float, size: float) -> "ClipWindow":
        """Square window with its top-left corner at (x_left, y_top)."""
        return cls(x_left, x_left + size, y_top, y_top + size)

    def is_integral(self) -> bool:
        """True when every bound is an int."""
        return all(isinstance(v, int) for v in (self.x_left, self.x_right, self.y_top, self.y_bottom))


@dataclass(frozen=True, slots=True)
class LineClipResult:
    """Outcome of a line clip.

    ``start``/``end`` hold the clipped segment when accepted and the
    unchanged input segment when rejected.
    """

    accepted: bool
    start: Point
    end: Point


def compute_outcode(x: float, y: float, window: ClipWindow) -> OutCode:
    """Region code of a point relative to the window."""
    code = OutCode.INSIDE
    if x < window.x_left:
        code |= OutCode.LEFT
    elif x > window.x_right:
        code |= OutCode.RIGHT
    if y < window.y_top:
        code |= OutCode.TOP
    elif y > window.y_bottom:
        code |= OutCode.BOTTOM
    return code


def clip_point_rectangle(x: float, y: float, window: ClipWindow) -> bool:
    """Check whether a point lies inside the window (edges included)."""
    return window.x_left <= x <= window.x_right and window.y_top <= y <= window.y_bottom


def vertical_intersection(v1: Point, v2: Point, x_edge: float) -> Point:
    """Intersection of segment v1-v2 with the vertical line ``x = x_edge``.

    Args:
        v1: First endpoint
        v2: Second endpoint
        x_edge: X of the boundary

    Returns:
        The intersection point

    Raises:
        ZeroStepError: If the segment is vertical (parallel to the boundary)
    """
    if v1.x == v2.x:
        raise ZeroStepError("vertical_intersection")
    y = v1.y + (x_edge - v1.x) * (v2.y - v1.y) / (v2.x - v1.x)
    return Point(x_edge, y)


def horizontal_intersection(v1: Point, v2: Point, y_edge: float) -> Point:
    """Intersection of segment v1-v2 with the horizontal line ``y = y_edge``.

    Raises:
        ZeroStepError: If the segment is horizontal (parallel to the boundary)
    """
    if v1.y == v2.y:
        raise ZeroStepError("horizontal_intersection")
    x = v1.x + (y_edge - v1.y) * (v2.x - v1.x) / (v2.y - v1.y)
    return Point(x, y_edge)


def cohen_sutherland_line_clip(p1: Point, p2: Point, window: ClipWindow) -> LineClipResult:
    """Clip a segment to a rectangle with the Cohen-Sutherland algorithm.

    Trivially accepts when both outcodes are zero and trivially rejects when
    they share a bit. Otherwise an outside endpoint is moved onto the first
    boundary it violates (left, right, top, bottom) and the test repeats.
    Intersections are computed in float; for all-integer input only the
    accepted endpoints are snapped back to the pixel grid.

    Args:
        p1: First endpoint
        p2: Second endpoint
        window: Clip rectangle

    Returns:
        LineClipResult with the visible part of the segment

    Examples:
        >>> window = ClipWindow(0, 10, 0, 10)
        >>> cohen_sutherland_line_clip(Point(-5, 5), Point(15, 5), window)
        LineClipResult(accepted=True, start=Point(x=0, y=5), end=Point(x=10, y=5))
    """
    on_grid = window.is_integral() and all(
        isinstance(v, int) for v in (p1.x, p1.y, p2.x, p2.y)
    )

    out1 = compute_outcode(p1.x, p1.y, window)
    out2 = compute_outcode(p2.x, p2.y, window)
    c1, c2 = p1, p2

    for _ in range(MAX_CLIP_PASSES):
        if not (out1 | out2) or out1 & out2:
            break

        out = out1 if out1 else out2
        if out & OutCode.LEFT:
            clipped = vertical_intersection(c1, c2, window.x_left)
        elif out & OutCode.RIGHT:
            clipped = vertical_intersection(c1, c2, window.x_right)
        elif out & OutCode.TOP:
            clipped = horizontal_intersection(c1, c2, window.y_top)
        else:
            clipped = horizontal_intersection(c1, c2, window.y_bottom)

        if out == out1:
            c1 = clipped
            out1 = compute_outcode(c1.x, c1.y, window)
        else:
            c2 = clipped
            out2 = compute_outcode(c2.x, c2.y, window)

    if out1 | out2:
        return LineClipResult(False, p1, p2)
    if on_grid:
        c1, c2 = Point(*c1.rounded()), Point(*c2.rounded())
    return LineClipResult(True, c1, c2)


def _clip_stage(
    vertices: list[Point],
    inside: Callable[[Point], bool],
    intersect: Callable[[Point, Point], Point],
) -> list[Point]:
    if not vertices:
        return []

    result: list[Point] = []
    v1 = vertices[-1]
    in1 = inside(v1)
    for v2 in vertices:
        in2 = inside(v2)
        if in1 and in2:
            result.append(v2)
        elif in1:
            result.append(intersect(v1, v2))
        elif in2:
            result.append(intersect(v1, v2))
            result.append(v2)
        v1, in1 = v2, in2
    return result


def sutherland_hodgman_polygon_clip(vertices: Sequence[Point], window: ClipWindow) -> list[Point]:
    """Clip a polygon to a rectangle, one boundary at a time.

    Stages run left, right, bottom, top; each walks its input as a closed
    loop and emits per edge: both inside -> the end vertex, leaving -> the
    crossing, entering -> the crossing and the end vertex, both outside ->
    nothing.

    Args:
        vertices: Polygon vertices
        window: Clip rectangle

    Returns:
        Clipped vertex list (empty when the polygon lies fully outside)
    """
    points = [Point(float(v.x), float(v.y)) for v in vertices]

    points = _clip_stage(
        points,
        lambda v: v.x >= window.x_left,
        lambda a, b: vertical_intersection(a, b, window.x_left),
    )
    points = _clip_stage(
        points,
        lambda v: v.x <= window.x_right,
        lambda a, b: vertical_intersection(a, b, window.x_right),
    )
    points = _clip_stage(
        points,
        lambda v: v.y <= window.y_bottom,
        lambda a, b: horizontal_intersection(a, b, window.y_bottom),
    )
    points = _clip_stage(
        points,
        lambda v: v.y >= window.y_top,
        lambda a, b: horizontal_intersection(a, b, window.y_top),
    )

    logger.debug("Polygon clip: %d -> %d vertices", len(vertices), len(points))
    return points


def clip_point_square(x: float, y: float, x_left: float, y_top: float, size: float) -> bool:
    """Point test against the square window ``[x_left, x_left + size] x [y_top, y_top + size]``."""
    return clip_point_rectangle(x, y, ClipWindow.square(x_left, y_top, size))


def square_line_clip(p1: Point, p2: Point, x_left: float, y_top: float, size: float) -> LineClipResult:
    """Cohen-Sutherland clip against a square window."""
    return cohen_sutherland_line_clip(p1, p2, ClipWindow.square(x_left, y_top, size))


def clip_point_circle(x: float, y: float, xc: float, yc: float, r: float) -> bool:
    """Check whether a point lies inside or on a circle (squared distances)."""
    dx = x - xc
    dy = y - yc
    return dx * dx + dy * dy <= r * r


def circle_line_clip(p1: Point, p2: Point, center: Point, r: float) -> LineClipResult:
    """Clip a segment to a disc.

    Translates the segment so the center is the origin and solves
    ``|P0 + tD|² = r²``. The root interval is intersected with ``[0, 1]``;
    an empty intersection (or no real roots) rejects the segment. Clipped
    endpoints are rounded to the pixel grid.

    Args:
        p1: First endpoint
        p2: Second endpoint
        center: Circle center
        r: Circle radius

    Returns:
        LineClipResult with the part of the segment inside the disc
    """
    if clip_point_circle(p1.x, p1.y, center.x, center.y, r) and clip_point_circle(
        p2.x, p2.y, center.x, center.y, r
    ):
        return LineClipResult(True, p1, p2)

    d1 = p1 - center
    d = p2 - p1

    a = d.x * d.x + d.y * d.y
    if a == 0:
        # Zero-length segment outside the circle
        return LineClipResult(False, p1, p2)

    b = 2 * (d1.x * d.x + d1.y * d.y)
    c = d1.x * d1.x + d1.y * d1.y - r * r
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return LineClipResult(False, p1, p2)

    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2 * a)
    t2 = (-b + root) / (2 * a)
    t_min = max(0.0, min(t1, t2))
    t_max = min(1.0, max(t1, t2))
    if t_min > t_max:
        return LineClipResult(False, p1, p2)

    start = Point(*(p1 + d.scaled(t_min)).rounded())
    end = Point(*(p1 + d.scaled(t_max)).rounded())
    return LineClipResult(True, start, end)
