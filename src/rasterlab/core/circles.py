"""Circle tracers.

All tracers compute one octant (from the top of the circle, x = 0, down to
the 45 degree diagonal) and mirror every point into the other seven octants
with ``plot_circle_points``.
"""

import math
from collections.abc import Callable

from rasterlab.domain import Color, PixelSurface, round_half_up

CircleTracer = Callable[[PixelSurface, int, int, int, Color], None]


def plot_circle_points(
    surface: PixelSurface, xc: int, yc: int, x: int, y: int, color: Color
) -> None:
    """Plot (x, y) relative to the center in all eight octants."""
    surface.set_pixel(xc + x, yc + y, color)
    surface.set_pixel(xc - x, yc + y, color)
    surface.set_pixel(xc - x, yc - y, color)
    surface.set_pixel(xc + x, yc - y, color)
    surface.set_pixel(xc + y, yc + x, color)
    surface.set_pixel(xc - y, yc + x, color)
    surface.set_pixel(xc - y, yc - x, color)
    surface.set_pixel(xc + y, yc - x, color)


def draw_circle_direct(surface: PixelSurface, xc: int, yc: int, radius: int, color: Color) -> None:
    """Draw a circle from its explicit equation, one sqrt per step.

    Args:
        surface: Surface to draw on
        xc: Center x
        yc: Center y
        radius: Circle radius
        color: Pixel color
    """
    x, y = 0, radius
    r2 = radius * radius
    plot_circle_points(surface, xc, yc, x, y, color)
    while x < y:
        x += 1
        y = round_half_up(math.sqrt(r2 - x * x))
        plot_circle_points(surface, xc, yc, x, y, color)


def draw_circle_polar(surface: PixelSurface, xc: int, yc: int, radius: int, color: Color) -> None:
    """Draw a circle by stepping the angle by ``1/R`` and evaluating cos/sin.

    Args:
        surface: Surface to draw on
        xc: Center x
        yc: Center y
        radius: Circle radius
        color: Pixel color
    """
    if radius == 0:
        surface.set_pixel(xc, yc, color)
        return

    x, y = radius, 0
    plot_circle_points(surface, xc, yc, x, y, color)
    theta = 0.0
    dtheta = 1.0 / radius
    while x > y:
        theta += dtheta
        x = round_half_up(radius * math.cos(theta))
        y = round_half_up(radius * math.sin(theta))
        plot_circle_points(surface, xc, yc, x, y, color)


def draw_circle_iterative_polar(
    surface: PixelSurface, xc: int, yc: int, radius: int, color: Color
) -> None:
    """Draw a circle by rotating a running vector instead of calling cos/sin.

    ``cos(1/R)`` and ``sin(1/R)`` are computed once; each step applies the
    rotation ``x' = x cos - y sin``, ``y' = x sin + y cos`` and stops once
    the vector crosses the diagonal (``x <= y``).

    Args:
        surface: Surface to draw on
        xc: Center x
        yc: Center y
        radius: Circle radius
        color: Pixel color
    """
    if radius == 0:
        surface.set_pixel(xc, yc, color)
        return

    x, y = float(radius), 0.0
    dtheta = 1.0 / radius
    ct = math.cos(dtheta)
    st = math.sin(dtheta)
    plot_circle_points(surface, xc, yc, radius, 0, color)
    while x > y:
        x1 = x * ct - y * st
        y = x * st + y * ct
        x = x1
        plot_circle_points(surface, xc, yc, round_half_up(x), round_half_up(y), color)


def draw_circle_midpoint(surface: PixelSurface, xc: int, yc: int, radius: int, color: Color) -> None:
    """Draw a circle with the integer midpoint (Bresenham) algorithm.

    Decision variable ``d = 1 - R``. When negative the midpoint is inside the
    circle and only x advances (``d += 2x + 3``); otherwise y also steps in
    (``d += 2(x - y) + 5``).

    Args:
        surface: Surface to draw on
        xc: Center x
        yc: Center y
        radius: Circle radius
        color: Pixel color
    """
    x, y = 0, radius
    d = 1 - radius
    plot_circle_points(surface, xc, yc, x, y, color)
    while x < y:
        if d < 0:
            d += 2 * x + 3
        else:
            d += 2 * (x - y) + 5
            y -= 1
        x += 1
        plot_circle_points(surface, xc, yc, x, y, color)


def draw_circle_modified_midpoint(
    surface: PixelSurface, xc: int, yc: int, radius: int, color: Color
) -> None:
    """Midpoint circle with second-order differences.

    The increments ``d1`` (x step) and ``d2`` (diagonal step) are carried
    along and updated by constants, so the loop has no multiplications.
    Produces exactly the pixels of ``draw_circle_midpoint``.

    Args:
        surface: Surface to draw on
        xc: Center x
        yc: Center y
        radius: Circle radius
        color: Pixel color
    """
    x, y = 0, radius
    d = 1 - radius
    d1 = 3
    d2 = 5 - 2 * radius
    plot_circle_points(surface, xc, yc, x, y, color)
    while x < y:
        if d < 0:
            d += d1
            d2 += 2
        else:
            d += d2
            d2 += 4
            y -= 1
        d1 += 2
        x += 1
        plot_circle_points(surface, xc, yc, x, y, color)


CIRCLE_ALGORITHMS: dict[str, CircleTracer] = {
    "direct": draw_circle_direct,
    "polar": draw_circle_polar,
    "iterative_polar": draw_circle_iterative_polar,
    "midpoint": draw_circle_midpoint,
    "modified_midpoint": draw_circle_modified_midpoint,
}
