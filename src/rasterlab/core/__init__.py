"""Core rasterization algorithms for rasterlab.

This module contains the core algorithms for:

- Line rasterization (DDA, Bresenham, parametric)
- Circle and ellipse tracing (direct, polar, midpoint variants)
- Curve tracing (Bezier, Hermite, cardinal splines)
- Region filling (scanline polygon fills, circle fills, flood fills)
- Clipping (Cohen-Sutherland, Sutherland-Hodgman, circle clipping)

Every algorithm takes the surface it draws on as its first argument and
keeps no state between calls.

Key functions:
- draw_line_bresenham: Integer midpoint line
- draw_circle_midpoint: Integer midpoint circle
- draw_ellipse_midpoint: Two-region midpoint ellipse
- draw_bezier_curve: Recursive de Casteljau Bezier
- draw_cardinal_spline: Hermite segments through a point sequence
- convex_fill / non_convex_fill: Scanline polygon fills
- flood_fill: Iterative 4-connected seed fill
- cohen_sutherland_line_clip: Rectangle line clipping
- sutherland_hodgman_polygon_clip: Rectangle polygon clipping
- circle_line_clip: Disc line clipping

Key classes:
- ConvexEdgeTable / NonConvexEdgeTable / ActiveEdgeList: Scanline state
- ClipWindow / LineClipResult: Clipping geometry and results
- Renderer: Draws Shape descriptions with validation and logging
"""

from rasterlab.core.circle_fill import (
    CIRCLE_FILL_ALGORITHMS,
    fill_circle_with_circles,
    fill_circle_with_lines,
    fill_quarter_circle,
    is_point_in_circle,
)
from rasterlab.core.circles import (
    CIRCLE_ALGORITHMS,
    draw_circle_direct,
    draw_circle_iterative_polar,
    draw_circle_midpoint,
    draw_circle_modified_midpoint,
    draw_circle_polar,
    plot_circle_points,
)
from rasterlab.core.clipping import (
    ClipWindow,
    LineClipResult,
    OutCode,
    circle_line_clip,
    clip_point_circle,
    clip_point_rectangle,
    clip_point_square,
    cohen_sutherland_line_clip,
    compute_outcode,
    horizontal_intersection,
    square_line_clip,
    sutherland_hodgman_polygon_clip,
    vertical_intersection,
)
from rasterlab.core.curves import (
    cardinal_tangents,
    draw_bezier_curve,
    draw_cardinal_spline,
    draw_hermite_curve,
    evaluate_cubic,
    hermite_coefficients,
    rec_bezier,
)
from rasterlab.core.edge_table import (
    ActiveEdgeList,
    ConvexEdgeTable,
    EdgeNode,
    NonConvexEdgeTable,
)
from rasterlab.core.ellipses import (
    ELLIPSE_ALGORITHMS,
    draw_ellipse_direct,
    draw_ellipse_midpoint,
    draw_ellipse_polar,
    plot_ellipse_points,
)
from rasterlab.core.flood_fill import (
    flood_fill,
    flood_fill_iterative,
    flood_fill_recursive,
)
from rasterlab.core.lines import (
    LINE_ALGORITHMS,
    draw_horizontal_line,
    draw_line_bresenham,
    draw_line_dda,
    draw_line_parametric,
    draw_polygon,
    draw_polyline,
    draw_rectangle,
    draw_square,
)
from rasterlab.core.polygon_fill import (
    POLYGON_FILL_ALGORITHMS,
    convex_fill,
    fill_rectangle_with_bezier,
    fill_square_with_hermite,
    non_convex_fill,
)
from rasterlab.core.renderer import ALGORITHMS, FILLS, Renderer

__all__ = [
    # Registries
    "ALGORITHMS",
    "CIRCLE_ALGORITHMS",
    "CIRCLE_FILL_ALGORITHMS",
    "ELLIPSE_ALGORITHMS",
    "FILLS",
    "LINE_ALGORITHMS",
    "POLYGON_FILL_ALGORITHMS",
    # Renderer
    "Renderer",
    # Lines
    "draw_horizontal_line",
    "draw_line_bresenham",
    "draw_line_dda",
    "draw_line_parametric",
    "draw_polygon",
    "draw_polyline",
    "draw_rectangle",
    "draw_square",
    # Circles
    "draw_circle_direct",
    "draw_circle_iterative_polar",
    "draw_circle_midpoint",
    "draw_circle_modified_midpoint",
    "draw_circle_polar",
    "plot_circle_points",
    # Ellipses
    "draw_ellipse_direct",
    "draw_ellipse_midpoint",
    "draw_ellipse_polar",
    "plot_ellipse_points",
    # Curves
    "cardinal_tangents",
    "draw_bezier_curve",
    "draw_cardinal_spline",
    "draw_hermite_curve",
    "evaluate_cubic",
    "hermite_coefficients",
    "rec_bezier",
    # Scanline classes
    "ActiveEdgeList",
    "ConvexEdgeTable",
    "EdgeNode",
    "NonConvexEdgeTable",
    # Region fills
    "convex_fill",
    "fill_circle_with_circles",
    "fill_circle_with_lines",
    "fill_quarter_circle",
    "fill_rectangle_with_bezier",
    "fill_square_with_hermite",
    "flood_fill",
    "flood_fill_iterative",
    "flood_fill_recursive",
    "is_point_in_circle",
    "non_convex_fill",
    # Clipping
    "ClipWindow",
    "LineClipResult",
    "OutCode",
    "circle_line_clip",
    "clip_point_circle",
    "clip_point_rectangle",
    "clip_point_square",
    "cohen_sutherland_line_clip",
    "compute_outcode",
    "horizontal_intersection",
    "square_line_clip",
    "sutherland_hodgman_polygon_clip",
    "vertical_intersection",
]
