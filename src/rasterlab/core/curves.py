"""Parametric curve tracers.

This module provides:
- rec_bezier / draw_bezier_curve: recursive de Casteljau evaluation
- hermite_coefficients / draw_hermite_curve: cubic Hermite segments
- cardinal_tangents / draw_cardinal_spline: Hermite segments through a
  point sequence with tangents derived from the neighbours

Control points stay in float precision; only the final pixel write rounds.
"""

import logging
from collections.abc import Sequence

from rasterlab.domain import Color, PixelSurface, Point

logger = logging.getLogger(__name__)

# Point-count caps for the adaptive density policies
HERMITE_MAX_POINTS = 1000
CARDINAL_MAX_POINTS = 500
BEZIER_MIN_STEPS = 50
BEZIER_MAX_STEPS = 1000

Coefficients = tuple[float, float, float, float]


def rec_bezier(t: float, pts: Sequence[Point], i: int, j: int) -> Point:
    """Evaluate the Bezier curve of ``pts[i..j]`` at ``t`` (de Casteljau).

    Pure recursion without memoization: O(n²) per evaluation, which is fine
    for the handful of control points a curve usually has.

    Args:
        t: Curve parameter in [0, 1]
        pts: Control points
        i: Index of the first control point
        j: Index of the last control point

    Returns:
        Point on the curve

    Examples:
        >>> pts = [Point(0.0, 0.0), Point(10.0, 0.0)]
        >>> rec_bezier(0.5, pts, 0, 1)
        Point(x=5.0, y=0.0)
    """
    if i == j:
        return pts[i]

    p1 = rec_bezier(t, pts, i, j - 1)
    p2 = rec_bezier(t, pts, i + 1, j)
    return Point((1 - t) * p1.x + t * p2.x, (1 - t) * p1.y + t * p2.y)


def bezier_step_count(points: Sequence[Point]) -> int:
    """Adaptive sample count for a Bezier curve.

    Proportional to the control polygon's length, clamped to
    ``[BEZIER_MIN_STEPS, BEZIER_MAX_STEPS]``.
    """
    total = sum(points[k].distance_to(points[k + 1]) for k in range(len(points) - 1))
    return max(BEZIER_MIN_STEPS, min(BEZIER_MAX_STEPS, int(total * 1.5) + 20))


def draw_bezier_curve(
    surface: PixelSurface, pts: Sequence[Point], steps: int, color: Color
) -> None:
    """Plot a Bezier curve at ``steps + 1`` uniform parameter values.

    Silently draws nothing for fewer than two control points or a
    non-positive step count.

    Args:
        surface: Surface to draw on
        pts: Control points (at least 2)
        steps: Number of parameter intervals
        color: Pixel color
    """
    n = len(pts)
    if n < 2 or steps < 1:
        return

    last = n - 1
    for k in range(steps + 1):
        x, y = rec_bezier(k / steps, pts, 0, last).rounded()
        surface.set_pixel(x, y, color)


def hermite_coefficients(p0: float, t0: float, p1: float, t1: float) -> Coefficients:
    """Cubic coefficients (a, b, c, d) of one Hermite coordinate.

    Product of the Hermite basis matrix with ``[p0, t0, p1, t1]``, so the
    coordinate is ``a t³ + b t² + c t + d``.
    """
    return (
        2 * p0 - 2 * p1 + t0 + t1,
        -3 * p0 + 3 * p1 - 2 * t0 - t1,
        t0,
        p0,
    )


def evaluate_cubic(coeffs: Coefficients, t: float) -> float:
    """Evaluate ``a t³ + b t² + c t + d`` in Horner form."""
    a, b, c, d = coeffs
    return ((a * t + b) * t + c) * t + d


def hermite_point_count(requested: int, p0: Point, p1: Point) -> int:
    """Samples for a Hermite segment: ``max(requested, min(1000, 2*dist + 10))``.

    Long segments get enough samples to stay gap-free, short ones stay cheap.
    """
    distance = p0.distance_to(p1)
    return max(requested, min(HERMITE_MAX_POINTS, int(distance * 2) + 10))


def draw_hermite_curve(
    surface: PixelSurface,
    p0: Point,
    t0: Point,
    p1: Point,
    t1: Point,
    num_points: int,
    color: Color,
) -> None:
    """Draw one cubic Hermite segment.

    Args:
        surface: Surface to draw on
        p0: Start point
        t0: Tangent vector at the start
        p1: End point
        t1: Tangent vector at the end
        num_points: Minimum number of samples (raised by the adaptive policy)
        color: Pixel color
    """
    if num_points < 2:
        return

    xcoeff = hermite_coefficients(p0.x, t0.x, p1.x, t1.x)
    ycoeff = hermite_coefficients(p0.y, t0.y, p1.y, t1.y)

    count = hermite_point_count(num_points, p0, p1)
    last = count - 1
    for i in range(count):
        t = i / last
        x, y = Point(evaluate_cubic(xcoeff, t), evaluate_cubic(ycoeff, t)).rounded()
        surface.set_pixel(x, y, color)


def cardinal_tangents(points: Sequence[Point], tension: float) -> list[Point]:
    """Tangent at every point of a cardinal spline.

    Interior points use the central difference ``(c/2)(p[i+1] - p[i-1])``;
    the two ends use one-sided differences.

    Args:
        points: Points the spline passes through (at least 2)
        tension: Cardinal tension ``c``

    Returns:
        One tangent per point
    """
    n = len(points)
    k = tension / 2.0
    tangents = [(points[1] - points[0]).scaled(k)]
    for i in range(1, n - 1):
        tangents.append((points[i + 1] - points[i - 1]).scaled(k))
    tangents.append((points[n - 1] - points[n - 2]).scaled(k))
    return tangents


def cardinal_point_count(requested: int, p0: Point, p1: Point) -> int:
    """Per-segment samples: ``max(requested, min(500, 1.5*dist + 20))``."""
    distance = p0.distance_to(p1)
    return max(requested, min(CARDINAL_MAX_POINTS, int(distance * 1.5) + 20))


def draw_cardinal_spline(
    surface: PixelSurface,
    points: Sequence[Point],
    tension: float,
    num_points_per_segment: int,
    color: Color,
) -> None:
    """Draw a cardinal spline through ``points`` as chained Hermite segments.

    Args:
        surface: Surface to draw on
        points: Points the spline interpolates (at least 2)
        tension: Cardinal tension ``c`` (0.5 is the usual choice)
        num_points_per_segment: Minimum samples per segment
        color: Pixel color
    """
    n = len(points)
    if n < 2:
        return

    tangents = cardinal_tangents(points, tension)
    for i in range(n - 1):
        count = cardinal_point_count(num_points_per_segment, points[i], points[i + 1])
        draw_hermite_curve(
            surface,
            points[i],
            tangents[i],
            points[i + 1],
            tangents[i + 1],
            count,
            color,
        )

    logger.debug("Cardinal spline drawn: %d segments, tension %.2f", n - 1, tension)
