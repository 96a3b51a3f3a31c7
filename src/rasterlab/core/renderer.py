"""Shape rendering orchestration.

This module turns ``Shape`` descriptions into algorithm calls. It checks
preconditions, draws the outline with the selected tracer, applies the
requested fill, and records what happened.

Key components:
- ALGORITHMS: Tracer names accepted per shape kind (first entry is the default)
- FILLS: Fills accepted per shape kind
- Renderer: Main orchestrator class
"""

import time
import traceback
from collections.abc import Iterable
from typing import ClassVar

import structlog

from rasterlab.config import FloodStrategy, RasterLabSettings
from rasterlab.core.circle_fill import (
    fill_circle_with_circles,
    fill_circle_with_lines,
    fill_quarter_circle,
)
from rasterlab.core.circles import CIRCLE_ALGORITHMS
from rasterlab.core.curves import (
    bezier_step_count,
    draw_bezier_curve,
    draw_cardinal_spline,
    draw_hermite_curve,
)
from rasterlab.core.ellipses import ELLIPSE_ALGORITHMS
from rasterlab.core.flood_fill import flood_fill_iterative, flood_fill_recursive
from rasterlab.core.lines import LINE_ALGORITHMS, draw_polygon, draw_rectangle, draw_square
from rasterlab.core.polygon_fill import (
    convex_fill,
    fill_rectangle_with_bezier,
    fill_square_with_hermite,
    non_convex_fill,
)
from rasterlab.domain import Canvas, Color, FillKind, PixelSurface, Shape, ShapeKind
from rasterlab.exceptions import DegenerateInputError, RasterLabError, RenderError
from rasterlab.utils import RenderLogger, RenderStats

ALGORITHMS: dict[ShapeKind, tuple[str, ...]] = {
    ShapeKind.LINE: ("bresenham", "dda", "parametric"),
    ShapeKind.CIRCLE: ("midpoint", "modified_midpoint", "direct", "polar", "iterative_polar"),
    ShapeKind.ELLIPSE: ("midpoint", "direct", "polar"),
    ShapeKind.SQUARE: ("bresenham",),
    ShapeKind.RECTANGLE: ("bresenham",),
    ShapeKind.POLYGON: ("bresenham", "dda", "parametric"),
    ShapeKind.BEZIER: ("de_casteljau",),
    ShapeKind.HERMITE: ("hermite",),
    ShapeKind.CARDINAL: ("cardinal",),
}

_FLOOD_FILLS = (FillKind.FLOOD, FillKind.FLOOD_ITERATIVE, FillKind.FLOOD_RECURSIVE)

FILLS: dict[ShapeKind, tuple[FillKind, ...]] = {
    ShapeKind.CIRCLE: (
        FillKind.CIRCLE_LINES,
        FillKind.CIRCLE_QUARTER,
        FillKind.CIRCLE_CIRCLES,
        *_FLOOD_FILLS,
    ),
    ShapeKind.ELLIPSE: _FLOOD_FILLS,
    ShapeKind.SQUARE: (FillKind.SQUARE_HERMITE, *_FLOOD_FILLS),
    ShapeKind.RECTANGLE: (FillKind.RECTANGLE_BEZIER, *_FLOOD_FILLS),
    ShapeKind.POLYGON: (FillKind.POLYGON_CONVEX, FillKind.POLYGON_NON_CONVEX),
}


class _CountingSurface:
    """Pass-through surface that counts pixel writes."""

    def __init__(self, surface: PixelSurface) -> None:
        self._surface = surface
        self.writes = 0

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self._surface.set_pixel(x, y, color)
        self.writes += 1

    def get_pixel(self, x: int, y: int) -> Color | None:
        return self._surface.get_pixel(x, y)


class Renderer:
    """Draws shapes onto a pixel surface.

    Manages the workflow for each shape:
    1. Resolve the tracer name (kind default when unset)
    2. Check the shape's preconditions (point count, fill compatibility)
    3. Draw the outline
    4. Apply the fill
    5. Log the result and update statistics

    Example:
        renderer = Renderer(get_default_settings())
        renderer.render(Shape(ShapeKind.CIRCLE, [Point(50, 50), Point(50, 20)]))
        canvas = renderer.surface
    """

    # Minimum number of defining points per kind
    MIN_POINTS: ClassVar[dict[ShapeKind, int]] = {
        ShapeKind.LINE: 2,
        ShapeKind.CIRCLE: 2,
        ShapeKind.ELLIPSE: 2,
        ShapeKind.SQUARE: 2,
        ShapeKind.RECTANGLE: 2,
        ShapeKind.POLYGON: 3,
        ShapeKind.BEZIER: 2,
        ShapeKind.HERMITE: 4,
        ShapeKind.CARDINAL: 2,
    }

    def __init__(
        self,
        settings: RasterLabSettings,
        surface: PixelSurface | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize renderer with configuration.

        Args:
            settings: Rasterlab settings (canvas, curve and fill config)
            surface: Surface to draw on (a new Canvas from the settings if None)
            logger: Structured logger (the ``rasterlab`` logger if None)
        """
        self.settings = settings
        if surface is None:
            surface = Canvas(
                settings.canvas.width,
                settings.canvas.height,
                settings.canvas.background.rgb,
            )
        self.surface = surface
        self.logger = logger if logger is not None else structlog.get_logger("rasterlab")
        self.render_logger = RenderLogger(self.logger)

    @property
    def stats(self) -> RenderStats:
        """Statistics accumulated over every shape rendered so far."""
        return self.render_logger.stats

    def resolve_algorithm(self, shape: Shape) -> str:
        """Return the tracer name for a shape.

        Raises:
            RenderError: If the name is not registered for the shape's kind
        """
        names = ALGORITHMS[shape.kind]
        if shape.algorithm is None:
            return names[0]
        if shape.algorithm not in names:
            raise RenderError(
                shape.kind.value,
                f"unknown algorithm '{shape.algorithm}' (expected one of: {', '.join(names)})",
            )
        return shape.algorithm

    def validate(self, shape: Shape) -> None:
        """Check a shape's preconditions.

        Raises:
            DegenerateInputError: If the shape has too few points
            RenderError: If the fill does not apply to the shape's kind
        """
        required = self.MIN_POINTS[shape.kind]
        if len(shape.points) < required:
            raise DegenerateInputError(
                shape.kind.value, f"at least {required} points", len(shape.points)
            )

        if shape.fill != FillKind.NONE and shape.fill not in FILLS.get(shape.kind, ()):
            raise RenderError(
                shape.kind.value, f"fill '{shape.fill.value}' does not apply to this shape"
            )

    def render(self, shape: Shape) -> int:
        """Draw one shape (outline plus fill).

        Args:
            shape: Shape to draw

        Returns:
            Number of pixel writes issued (including overdraw and writes
            outside the surface)

        Raises:
            DegenerateInputError: If the shape has too few points
            RenderError: If the algorithm or fill is not valid for the shape
        """
        start_time = time.time()
        kind = shape.kind.value

        try:
            algorithm = self.resolve_algorithm(shape)
            self.validate(shape)
        except RasterLabError as e:
            self.render_logger.log_shape_rejected(kind, str(e))
            raise

        self.render_logger.log_shape_start(kind, algorithm, len(shape.points))
        surface = _CountingSurface(self.surface)

        try:
            self._draw_outline(surface, shape, algorithm)
            if shape.fill != FillKind.NONE:
                outline_writes = surface.writes
                self._apply_fill(surface, shape)
                self.render_logger.log_fill(kind, shape.fill.value, surface.writes - outline_writes)
        except RasterLabError as e:
            self.render_logger.log_shape_error(kind, e, traceback.format_exc())
            raise

        duration_ms = (time.time() - start_time) * 1000
        self.render_logger.log_shape_complete(kind, algorithm, surface.writes, duration_ms)
        return surface.writes

    def render_all(self, shapes: Iterable[Shape]) -> RenderStats:
        """Draw shapes in order, continuing past shapes that fail.

        Args:
            shapes: Shapes to draw

        Returns:
            RenderStats with counts, timing and error details
        """
        stats = self.render_logger.stats
        stats.start_time = time.time()

        for shape in shapes:
            try:
                self.render(shape)
            except RasterLabError:
                # Already logged and counted by render()
                continue

        stats.end_time = time.time()
        self.logger.info(
            "Rendering complete",
            rendered=stats.rendered_count,
            rejected=stats.rejected_count,
            errors=stats.error_count,
            pixels=stats.pixels_written,
            duration_seconds=round(stats.duration_seconds, 3),
        )
        return stats

    def _draw_outline(self, surface: PixelSurface, shape: Shape, algorithm: str) -> None:
        color = shape.color
        kind = shape.kind

        if kind == ShapeKind.LINE:
            x1, y1 = shape.points[0].rounded()
            x2, y2 = shape.points[1].rounded()
            LINE_ALGORITHMS[algorithm](surface, x1, y1, x2, y2, color)
        elif kind == ShapeKind.CIRCLE:
            xc, yc = shape.center.rounded()
            CIRCLE_ALGORITHMS[algorithm](surface, xc, yc, shape.radius(), color)
        elif kind == ShapeKind.ELLIPSE:
            xc, yc = shape.center.rounded()
            a, b = shape.radii()
            ELLIPSE_ALGORITHMS[algorithm](surface, xc, yc, a, b, color)
        elif kind == ShapeKind.SQUARE:
            xc, yc = shape.center.rounded()
            draw_square(surface, xc, yc, shape.half_size(), color)
        elif kind == ShapeKind.RECTANGLE:
            xc, yc = shape.center.rounded()
            vx, vy = shape.points[1].rounded()
            draw_rectangle(surface, xc, yc, vx, vy, color)
        elif kind == ShapeKind.POLYGON:
            draw_polygon(surface, shape.points, color, LINE_ALGORITHMS[algorithm])
        elif kind == ShapeKind.BEZIER:
            steps = self.settings.curves.bezier_steps or bezier_step_count(shape.points)
            draw_bezier_curve(surface, shape.points, steps, color)
        elif kind == ShapeKind.HERMITE:
            points = shape.points
            # Trailing points that do not complete a group of four are ignored
            for i in range(0, len(points) - 3, 4):
                p0, h0, p1, h1 = points[i : i + 4]
                draw_hermite_curve(
                    surface,
                    p0,
                    h0 - p0,
                    p1,
                    h1 - p1,
                    self.settings.curves.hermite_points,
                    color,
                )
        elif kind == ShapeKind.CARDINAL:
            draw_cardinal_spline(
                surface,
                shape.points,
                self.settings.curves.cardinal_tension,
                self.settings.curves.cardinal_points_per_segment,
                color,
            )

    def _apply_fill(self, surface: PixelSurface, shape: Shape) -> None:
        color = shape.color
        fill = shape.fill
        xc, yc = shape.center.rounded()

        if fill == FillKind.CIRCLE_LINES:
            fill_circle_with_lines(surface, xc, yc, shape.radius(), color)
        elif fill == FillKind.CIRCLE_QUARTER:
            fill_quarter_circle(surface, xc, yc, shape.radius(), color)
        elif fill == FillKind.CIRCLE_CIRCLES:
            fill_circle_with_circles(surface, xc, yc, shape.radius(), color)
        elif fill == FillKind.POLYGON_CONVEX:
            convex_fill(surface, shape.points, color)
        elif fill == FillKind.POLYGON_NON_CONVEX:
            non_convex_fill(surface, shape.points, color)
        elif fill == FillKind.SQUARE_HERMITE:
            fill_square_with_hermite(surface, xc, yc, shape.half_size(), color)
        elif fill == FillKind.RECTANGLE_BEZIER:
            vx, vy = shape.points[1].rounded()
            fill_rectangle_with_bezier(surface, xc, yc, vx, vy, color)
        elif fill in _FLOOD_FILLS:
            self._flood_from_center(surface, fill, xc, yc, color)

    def _flood_from_center(
        self, surface: PixelSurface, fill: FillKind, xc: int, yc: int, color: Color
    ) -> None:
        # Seeded at the center; the outline drawn just before bounds the region
        original = surface.get_pixel(xc, yc)
        if original is None:
            return

        recursive = fill == FillKind.FLOOD_RECURSIVE or (
            fill == FillKind.FLOOD
            and self.settings.fill.flood_strategy == FloodStrategy.RECURSIVE
        )
        if recursive:
            flood_fill_recursive(surface, xc, yc, color, original)
        else:
            flood_fill_iterative(surface, xc, yc, color, original)
