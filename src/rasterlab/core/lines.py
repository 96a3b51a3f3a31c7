"""Line rasterizers.

Every rasterizer takes two integer endpoints and plots an 8-connected
approximation of the segment, both endpoints included:

- draw_line_dda: floating-point digital differential analyzer
- draw_line_bresenham: integer midpoint decision variable
- draw_line_parametric: samples x(t), y(t) and truncates

The parametric variant truncates instead of rounding, so its pixels can
differ from Bresenham's for the same segment. That is kept on purpose.
"""

from collections.abc import Callable, Sequence

from rasterlab.domain import Color, PixelSurface, Point, round_half_up

LineRasterizer = Callable[[PixelSurface, int, int, int, int, Color], None]


def draw_line_dda(
    surface: PixelSurface, x1: int, y1: int, x2: int, y2: int, color: Color
) -> None:
    """Draw a line with the DDA algorithm.

    Steps one pixel at a time along the dominant axis (ties go to x) and
    accumulates the minor coordinate as a float, rounding each sample.

    Args:
        surface: Surface to draw on
        x1: X of the first endpoint
        y1: Y of the first endpoint
        x2: X of the second endpoint
        y2: Y of the second endpoint
        color: Pixel color
    """
    dx = x2 - x1
    dy = y2 - y1

    if dx == 0 and dy == 0:
        surface.set_pixel(x1, y1, color)
        return

    if abs(dx) >= abs(dy):
        # Always walk left to right
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        m = (y2 - y1) / (x2 - x1)
        surface.set_pixel(x1, y1, color)
        x = x1
        y = float(y1)
        while x < x2:
            x += 1
            y += m
            surface.set_pixel(x, round_half_up(y), color)
    else:
        # Always walk top to bottom
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        mi = (x2 - x1) / (y2 - y1)
        surface.set_pixel(x1, y1, color)
        y = y1
        xf = float(x1)
        while y < y2:
            y += 1
            xf += mi
            surface.set_pixel(round_half_up(xf), y, color)


def draw_line_bresenham(
    surface: PixelSurface, x1: int, y1: int, x2: int, y2: int, color: Color
) -> None:
    """Draw a line with Bresenham's integer midpoint algorithm.

    For an x-major line the decision variable starts at ``dx - 2dy``; a
    positive value means the midpoint lies above the line, so only x
    advances (``d += -2dy``), otherwise both advance (``d += 2(dx - dy)``).
    The y-major case mirrors this. Iteration always starts from the endpoint
    with the smaller major coordinate, so swapping the endpoints produces the
    same pixel set.

    Args:
        surface: Surface to draw on
        x1: X of the first endpoint
        y1: Y of the first endpoint
        x2: X of the second endpoint
        y2: Y of the second endpoint
        color: Pixel color

    Examples:
        A 5x2 run plots (0,0) (1,0) (2,1) (3,1) (4,2) (5,2).
    """
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)

    if dx >= dy:
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        sy = 1 if y1 < y2 else -1
        d = dx - 2 * dy
        d1 = -2 * dy
        d2 = 2 * (dx - dy)

        x, y = x1, y1
        surface.set_pixel(x, y, color)
        while x != x2:
            if d > 0:
                d += d1
            else:
                d += d2
                y += sy
            x += 1
            surface.set_pixel(x, y, color)
    else:
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        sx = 1 if x1 < x2 else -1
        d = dy - 2 * dx
        d1 = -2 * dx
        d2 = 2 * (dy - dx)

        x, y = x1, y1
        surface.set_pixel(x, y, color)
        while y != y2:
            if d > 0:
                d += d1
            else:
                d += d2
                x += sx
            y += 1
            surface.set_pixel(x, y, color)


def draw_line_parametric(
    surface: PixelSurface, x1: int, y1: int, x2: int, y2: int, color: Color
) -> None:
    """Draw a line by sampling its parametric form.

    ``t`` advances in steps of ``1 / max(|dx|, |dy|)``; each sample is
    truncated towards zero, not rounded. An integer step counter is used so
    ``t = 1`` is always reached and the second endpoint is plotted.

    Args:
        surface: Surface to draw on
        x1: X of the first endpoint
        y1: Y of the first endpoint
        x2: X of the second endpoint
        y2: Y of the second endpoint
        color: Pixel color
    """
    alpha_x = x2 - x1
    alpha_y = y2 - y1
    steps = max(abs(alpha_x), abs(alpha_y))

    if steps == 0:
        surface.set_pixel(x1, y1, color)
        return

    for k in range(steps + 1):
        t = k / steps
        surface.set_pixel(x1 + int(alpha_x * t), y1 + int(alpha_y * t), color)


def draw_horizontal_line(surface: PixelSurface, x1: int, x2: int, y: int, color: Color) -> None:
    """Fill the inclusive span ``[x1, x2]`` on row ``y`` (in either order)."""
    if x1 > x2:
        x1, x2 = x2, x1
    for x in range(x1, x2 + 1):
        surface.set_pixel(x, y, color)


def draw_polyline(
    surface: PixelSurface,
    points: Sequence[Point],
    color: Color,
    rasterizer: LineRasterizer = draw_line_bresenham,
) -> None:
    """Connect consecutive points with line segments (open path)."""
    for start, end in zip(points, points[1:], strict=False):
        sx, sy = start.rounded()
        ex, ey = end.rounded()
        rasterizer(surface, sx, sy, ex, ey, color)


def draw_polygon(
    surface: PixelSurface,
    points: Sequence[Point],
    color: Color,
    rasterizer: LineRasterizer = draw_line_bresenham,
) -> None:
    """Draw a closed polygon outline (last vertex connects back to the first)."""
    if len(points) < 2:
        return
    draw_polyline(surface, points, color, rasterizer)
    lx, ly = points[-1].rounded()
    fx, fy = points[0].rounded()
    rasterizer(surface, lx, ly, fx, fy, color)


def draw_rectangle(
    surface: PixelSurface,
    center_x: int,
    center_y: int,
    vertex_x: int,
    vertex_y: int,
    color: Color,
) -> None:
    """Draw an axis-aligned rectangle given its center and one corner."""
    half_width = abs(vertex_x - center_x)
    half_height = abs(vertex_y - center_y)

    left = center_x - half_width
    right = center_x + half_width
    top = center_y - half_height
    bottom = center_y + half_height

    draw_line_bresenham(surface, left, top, right, top, color)
    draw_line_bresenham(surface, right, top, right, bottom, color)
    draw_line_bresenham(surface, right, bottom, left, bottom, color)
    draw_line_bresenham(surface, left, bottom, left, top, color)


def draw_square(
    surface: PixelSurface, center_x: int, center_y: int, half_size: int, color: Color
) -> None:
    """Draw an axis-aligned square given its center and half size."""
    draw_rectangle(
        surface, center_x, center_y, center_x + half_size, center_y + half_size, color
    )


LINE_ALGORITHMS: dict[str, LineRasterizer] = {
    "dda": draw_line_dda,
    "bresenham": draw_line_bresenham,
    "parametric": draw_line_parametric,
}
