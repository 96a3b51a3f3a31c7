"""Ellipse tracers.

Each tracer walks one quadrant in two regions and mirrors the points with
``plot_ellipse_points``. Region 1 is where the curve's slope magnitude is at
most 1 and x is the driving axis; region 2 is where it exceeds 1 and y
drives. Switching at the wrong place leaves visible gaps near the
45 degree transition.

``a`` is the semi-axis along x and ``b`` the semi-axis along y.
"""

import math
from collections.abc import Callable

from rasterlab.domain import Color, PixelSurface, round_half_up

EllipseTracer = Callable[[PixelSurface, int, int, int, int, Color], None]


def plot_ellipse_points(
    surface: PixelSurface, xc: int, yc: int, x: int, y: int, color: Color
) -> None:
    """Plot (x, y) relative to the center in all four quadrants."""
    surface.set_pixel(xc + x, yc + y, color)
    surface.set_pixel(xc - x, yc + y, color)
    surface.set_pixel(xc - x, yc - y, color)
    surface.set_pixel(xc + x, yc - y, color)


def _draw_flat_ellipse(surface: PixelSurface, xc: int, yc: int, a: int, b: int, color: Color) -> None:
    # A zero semi-axis collapses the ellipse onto the other axis
    for x in range(a + 1):
        plot_ellipse_points(surface, xc, yc, x, 0, color)
    for y in range(b + 1):
        plot_ellipse_points(surface, xc, yc, 0, y, color)


def draw_ellipse_direct(
    surface: PixelSurface, xc: int, yc: int, a: int, b: int, color: Color
) -> None:
    """Draw an ellipse from its explicit equation.

    Region 1 loops on x with ``y = b sqrt(1 - x²/a²)`` until
    ``a²(y - 0.5) < b²(x + 1)``; region 2 continues downward in y from
    there with ``x = a sqrt(1 - y²/b²)``.

    Args:
        surface: Surface to draw on
        xc: Center x
        yc: Center y
        a: Semi-axis along x
        b: Semi-axis along y
        color: Pixel color
    """
    if a == 0 or b == 0:
        _draw_flat_ellipse(surface, xc, yc, a, b, color)
        return

    a2 = a * a
    b2 = b * b

    x = 0
    for x in range(a + 1):
        y = round_half_up(b * math.sqrt(max(0.0, 1.0 - (x * x) / a2)))
        plot_ellipse_points(surface, xc, yc, x, y, color)
        if a2 * (y - 0.5) < b2 * (x + 1):
            break

    y = round_half_up(b * math.sqrt(max(0.0, 1.0 - (x * x) / a2)))
    while y >= 0:
        x = round_half_up(a * math.sqrt(max(0.0, 1.0 - (y * y) / b2)))
        plot_ellipse_points(surface, xc, yc, x, y, color)
        y -= 1


def draw_ellipse_polar(
    surface: PixelSurface, xc: int, yc: int, a: int, b: int, color: Color
) -> None:
    """Draw an ellipse by stepping its parametric angle.

    Region 1 advances ``theta`` until ``b²x > a²y`` (slope steeper than 1);
    region 2 carries on to ``pi/2``. Both regions step by ``1/max(a, b)``,
    which keeps consecutive samples within one pixel on either axis.

    Args:
        surface: Surface to draw on
        xc: Center x
        yc: Center y
        a: Semi-axis along x
        b: Semi-axis along y
        color: Pixel color
    """
    if a == 0 or b == 0:
        _draw_flat_ellipse(surface, xc, yc, a, b, color)
        return

    half_pi = math.pi / 2
    dtheta = 1.0 / max(a, b)
    theta = 0.0

    while theta <= half_pi:
        x = round_half_up(a * math.cos(theta))
        y = round_half_up(b * math.sin(theta))
        plot_ellipse_points(surface, xc, yc, x, y, color)
        theta += dtheta
        if b * b * x > a * a * y and y > 0:
            break

    while theta <= half_pi:
        x = round_half_up(a * math.cos(theta))
        y = round_half_up(b * math.sin(theta))
        plot_ellipse_points(surface, xc, yc, x, y, color)
        theta += dtheta

    # theta rarely lands exactly on pi/2; close the curve at the axis
    plot_ellipse_points(surface, xc, yc, 0, b, color)


def draw_ellipse_midpoint(
    surface: PixelSurface, xc: int, yc: int, a: int, b: int, color: Color
) -> None:
    """Draw an ellipse with the two-region midpoint algorithm.

    Region 1 (x-driven) starts from ``d = b² - a²b + a²/4`` and runs while
    ``b²x < a²y``. Region 2 (y-driven) restarts the decision variable at the
    midpoint ``(x + ½, y - 1)``:
    ``d = b²(x + ½)² + a²(y - 1)² - a²b²`` and runs down to the x axis.

    Args:
        surface: Surface to draw on
        xc: Center x
        yc: Center y
        a: Semi-axis along x
        b: Semi-axis along y
        color: Pixel color
    """
    if a == 0 or b == 0:
        _draw_flat_ellipse(surface, xc, yc, a, b, color)
        return

    x, y = 0, b
    a2 = a * a
    b2 = b * b

    d: float = b2 - a2 * b + a2 // 4
    plot_ellipse_points(surface, xc, yc, x, y, color)

    while b2 * x < a2 * y:
        if d < 0:
            d += b2 * (2 * x + 3)
        else:
            d += b2 * (2 * x + 3) + a2 * (-2 * y + 2)
            y -= 1
        x += 1
        plot_ellipse_points(surface, xc, yc, x, y, color)

    d = b2 * (x + 0.5) * (x + 0.5) + a2 * (y - 1) * (y - 1) - a2 * b2

    while y > 0:
        if d < 0:
            d += b2 * (2 * x + 2) + a2 * (-2 * y + 3)
            x += 1
        else:
            d += a2 * (-2 * y + 3)
        y -= 1
        plot_ellipse_points(surface, xc, yc, x, y, color)


ELLIPSE_ALGORITHMS: dict[str, EllipseTracer] = {
    "direct": draw_ellipse_direct,
    "polar": draw_ellipse_polar,
    "midpoint": draw_ellipse_midpoint,
}
