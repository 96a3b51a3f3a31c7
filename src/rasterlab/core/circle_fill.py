"""Circle fills.

All three fills walk the same integer midpoint decision variable as the
midpoint tracer, so they line up pixel for pixel with a midpoint outline.
"""

from collections.abc import Callable

from rasterlab.core.circles import draw_circle_midpoint
from rasterlab.core.lines import draw_horizontal_line
from rasterlab.domain import Color, PixelSurface

CircleFill = Callable[[PixelSurface, int, int, int, Color], None]


def is_point_in_circle(px: int, py: int, cx: int, cy: int, r: int) -> bool:
    """Check whether (px, py) lies inside or on the circle (no sqrt).

    Examples:
        >>> is_point_in_circle(3, 4, 0, 0, 5)
        True
        >>> is_point_in_circle(4, 4, 0, 0, 5)
        False
    """
    dx = px - cx
    dy = py - cy
    return dx * dx + dy * dy <= r * r


def _fill_octant_span(surface: PixelSurface, xc: int, yc: int, x: int, y: int, color: Color) -> None:
    if x <= y:
        draw_horizontal_line(surface, xc, xc + x, yc + y, color)


def _fill_symmetric_spans(surface: PixelSurface, xc: int, yc: int, x: int, y: int, color: Color) -> None:
    draw_horizontal_line(surface, xc - x, xc + x, yc + y, color)
    draw_horizontal_line(surface, xc - x, xc + x, yc - y, color)
    draw_horizontal_line(surface, xc - y, xc + y, yc + x, color)
    draw_horizontal_line(surface, xc - y, xc + y, yc - x, color)


def fill_circle_with_lines(surface: PixelSurface, xc: int, yc: int, radius: int, color: Color) -> None:
    """Fill a disc with horizontal spans.

    At every midpoint step the first-octant span from the center to the
    boundary is drawn, together with the four mirrored spans at rows
    ``yc ± y`` (half width x) and ``yc ± x`` (half width y).

    Args:
        surface: Surface to draw on
        xc: Center x
        yc: Center y
        radius: Circle radius
        color: Fill color
    """
    x, y = 0, radius
    d = 1 - radius

    _fill_octant_span(surface, xc, yc, x, y, color)
    _fill_symmetric_spans(surface, xc, yc, x, y, color)

    while x < y:
        if d < 0:
            d += 2 * x + 3
        else:
            d += 2 * (x - y) + 5
            y -= 1
        x += 1
        _fill_octant_span(surface, xc, yc, x, y, color)
        _fill_symmetric_spans(surface, xc, yc, x, y, color)


def fill_quarter_circle(surface: PixelSurface, xc: int, yc: int, radius: int, color: Color) -> None:
    """Fill only the top-right quadrant of a disc.

    Rows ``yc - y`` get spans ``xc..xc + x`` and rows ``yc - x`` get spans
    ``xc..xc + y``, which together cover the quadrant above and to the
    right of the center.
    """
    x, y = 0, radius
    d = 1 - radius

    draw_horizontal_line(surface, xc, xc + x, yc - y, color)

    while x < y:
        if d < 0:
            d += 2 * x + 3
        else:
            d += 2 * (x - y) + 5
            y -= 1
        x += 1

        draw_horizontal_line(surface, xc, xc + x, yc - y, color)
        if x <= y:
            draw_horizontal_line(surface, xc, xc + y, yc - x, color)


def fill_circle_with_circles(surface: PixelSurface, xc: int, yc: int, radius: int, color: Color) -> None:
    """Fill a disc by drawing a midpoint outline at every radius ``1..R``.

    Touches O(R²) pixels and can leave isolated background pixels between
    neighbouring rings; it is the naive counterpart to the span fills.
    """
    for r in range(1, radius + 1):
        draw_circle_midpoint(surface, xc, yc, r, color)


CIRCLE_FILL_ALGORITHMS: dict[str, CircleFill] = {
    "lines": fill_circle_with_lines,
    "quarter": fill_quarter_circle,
    "circles": fill_circle_with_circles,
}
