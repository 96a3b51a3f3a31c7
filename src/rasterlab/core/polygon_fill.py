"""Scanline polygon fills and curve-sweep box fills.

Key functions:
- convex_fill: one span per row from a ConvexEdgeTable
- non_convex_fill: active-edge-list scan with even-odd pairing
- fill_rectangle_with_bezier: one horizontal Bezier curve per row
- fill_square_with_hermite: one vertical Hermite curve per column
"""

import logging
from collections.abc import Sequence

from rasterlab.core.curves import draw_bezier_curve, draw_hermite_curve
from rasterlab.core.edge_table import ActiveEdgeList, ConvexEdgeTable, NonConvexEdgeTable
from rasterlab.core.lines import draw_line_bresenham
from rasterlab.domain import Color, PixelSurface, Point, Polygon

logger = logging.getLogger(__name__)


def convex_fill(surface: PixelSurface, vertices: Sequence[Point], color: Color) -> None:
    """Fill a convex polygon.

    Builds a table spanning the polygon's rows, records the leftmost and
    rightmost crossing of every edge per row, then draws each row with
    ``x_left < x_right`` as a single horizontal segment. Concave polygons
    are filled as their row-wise hull.

    Args:
        surface: Surface to draw on
        vertices: Polygon vertices (at least 3, otherwise nothing is drawn)
        color: Fill color
    """
    if len(vertices) < 3:
        return

    table = ConvexEdgeTable.from_polygon(Polygon(list(vertices), convex=True))
    for row, x_start, x_end in table.spans():
        draw_line_bresenham(surface, x_start, row, x_end, row, color)


def non_convex_fill(surface: PixelSurface, vertices: Sequence[Point], color: Color) -> None:
    """Fill an arbitrary (concave or self-intersecting) polygon, even-odd rule.

    Edges are bucketed by their first scanline. Scanning starts at the first
    non-empty row; each row sorts the active edges, fills between pairs of
    crossings, then moves down: expired edges (``y_max <= row``) leave, the
    rest step by their inverse slope, and edges starting on the new row join.
    The scan ends when the list empties after the last bucketed row.

    Args:
        surface: Surface to draw on
        vertices: Polygon vertices (at least 3, otherwise nothing is drawn)
        color: Fill color
    """
    if len(vertices) < 3:
        return

    table = NonConvexEdgeTable.from_polygon(Polygon(list(vertices)))
    row = table.first_row()
    if row is None:
        return

    active = ActiveEdgeList(table.nodes_at(row))
    rows_filled = 0
    while active:
        active.sort()
        for x1, x2 in active.spans():
            draw_line_bresenham(surface, x1, row, x2, row, color)
        rows_filled += 1

        row += 1
        active.advance(row)
        if row <= table.y_max:
            active.extend(table.nodes_at(row))

        # A gap between disjoint parts of a self-intersecting outline
        while not active and row < table.y_max:
            row += 1
            active.extend(table.nodes_at(row))

    logger.debug("Non-convex fill covered %d rows", rows_filled)


def fill_rectangle_with_bezier(
    surface: PixelSurface,
    center_x: int,
    center_y: int,
    vertex_x: int,
    vertex_y: int,
    color: Color,
) -> None:
    """Fill a rectangle by sweeping a flat cubic Bezier across every row.

    Each row gets control points at the left edge, one and two thirds of
    the width, and the right edge, evaluated at ``width + 1`` samples.
    """
    half_width = abs(vertex_x - center_x)
    half_height = abs(vertex_y - center_y)

    left = center_x - half_width
    right = center_x + half_width
    top = center_y - half_height
    bottom = center_y + half_height

    width = right - left
    steps = max(2, width + 1)

    for y in range(top, bottom + 1):
        control_points = [
            Point(left, y),
            Point(left + width / 3.0, y),
            Point(left + 2 * width / 3.0, y),
            Point(right, y),
        ]
        draw_bezier_curve(surface, control_points, steps, color)


def fill_square_with_hermite(
    surface: PixelSurface, center_x: int, center_y: int, half_size: int, color: Color
) -> None:
    """Fill a square by sweeping a vertical Hermite curve across every column.

    Both tangents are ``(0, height)``, so each curve runs straight from the
    top edge to the bottom edge.
    """
    left = center_x - half_size
    right = center_x + half_size
    top = center_y - half_size
    bottom = center_y + half_size

    height = bottom - top
    num_points = max(2, height + 1)
    tangent = Point(0, height)

    for x in range(left, right + 1):
        draw_hermite_curve(
            surface, Point(x, top), tangent, Point(x, bottom), tangent, num_points, color
        )


POLYGON_FILL_ALGORITHMS = {
    "convex": convex_fill,
    "non_convex": non_convex_fill,
}
