"""Unit tests for the parametric curve tracers."""

import pytest

from rasterlab.core.curves import (
    BEZIER_MAX_STEPS,
    BEZIER_MIN_STEPS,
    bezier_step_count,
    cardinal_point_count,
    cardinal_tangents,
    draw_bezier_curve,
    draw_cardinal_spline,
    draw_hermite_curve,
    evaluate_cubic,
    hermite_coefficients,
    hermite_point_count,
    rec_bezier,
)
from rasterlab.domain import BLACK, Canvas, Point


class TestBezier:
    """Tests for de Casteljau evaluation and drawing."""

    def test_linear_midpoint(self) -> None:
        """Test a two-point curve is the straight segment."""
        pts = [Point(0.0, 0.0), Point(10.0, 4.0)]
        assert rec_bezier(0.5, pts, 0, 1) == Point(5.0, 2.0)

    def test_quadratic_midpoint(self) -> None:
        """Test the quadratic curve at t = 0.5."""
        pts = [Point(0.0, 0.0), Point(10.0, 20.0), Point(20.0, 0.0)]
        assert rec_bezier(0.5, pts, 0, 2) == Point(10.0, 10.0)

    def test_interpolates_endpoints(self) -> None:
        """Test t = 0 and t = 1 hit the first and last control points."""
        pts = [Point(10, 10), Point(20, 40), Point(40, 0), Point(50, 30)]
        assert rec_bezier(0.0, pts, 0, 3) == pts[0]
        assert rec_bezier(1.0, pts, 0, 3) == pts[3]

    def test_draw_plots_endpoints(self, canvas: Canvas) -> None:
        """Test the drawn curve passes through both end control points."""
        pts = [Point(10, 10), Point(20, 40), Point(40, 0), Point(50, 30)]
        draw_bezier_curve(canvas, pts, 100, BLACK)
        pixels = canvas.pixels_of(BLACK)
        assert (10, 10) in pixels
        assert (50, 30) in pixels

    def test_sub_range(self) -> None:
        """Test evaluating a slice of the control points."""
        pts = [Point(0, 0), Point(4, 0), Point(8, 0), Point(99, 99)]
        assert rec_bezier(0.5, pts, 0, 2) == Point(4.0, 0.0)

    @pytest.mark.parametrize(
        "pts, steps",
        [([Point(5, 5)], 10), ([Point(5, 5), Point(20, 20)], 0), ([], 10)],
    )
    def test_degenerate_draws_nothing(self, canvas: Canvas, pts: list[Point], steps: int) -> None:
        """Test too few points or steps leave the canvas untouched."""
        draw_bezier_curve(canvas, pts, steps, BLACK)
        assert canvas.write_count == 0

    def test_step_count_policy(self) -> None:
        """Test adaptive steps follow the control polygon length."""
        assert bezier_step_count([Point(0, 0), Point(100, 0)]) == 170
        assert bezier_step_count([Point(0, 0), Point(0, 0)]) == BEZIER_MIN_STEPS
        assert bezier_step_count([Point(0, 0), Point(5000, 0)]) == BEZIER_MAX_STEPS


class TestHermite:
    """Tests for cubic Hermite segments."""

    def test_coefficients(self) -> None:
        """Test the basis matrix product."""
        assert hermite_coefficients(0, 0, 1, 0) == (-2, 3, 0, 0)

    def test_evaluate_cubic(self) -> None:
        """Test Horner evaluation at the ends and the middle."""
        coeffs = hermite_coefficients(0, 0, 1, 0)
        assert evaluate_cubic(coeffs, 0.0) == 0.0
        assert evaluate_cubic(coeffs, 0.5) == 0.5
        assert evaluate_cubic(coeffs, 1.0) == 1.0

    def test_point_count_policy(self) -> None:
        """Test sample counts grow with distance and are capped."""
        assert hermite_point_count(50, Point(0, 0), Point(100, 0)) == 210
        assert hermite_point_count(50, Point(0, 0), Point(10, 0)) == 50
        assert hermite_point_count(50, Point(0, 0), Point(5000, 0)) == 1000

    def test_draw_interpolates_endpoints(self, canvas: Canvas) -> None:
        """Test the segment starts at P0 and ends at P1."""
        draw_hermite_curve(canvas, Point(10, 80), Point(60, -60), Point(90, 20), Point(0, 60), 50, BLACK)
        pixels = canvas.pixels_of(BLACK)
        assert (10, 80) in pixels
        assert (90, 20) in pixels

    def test_straight_segment(self, canvas: Canvas) -> None:
        """Test tangents along the chord give a straight line."""
        draw_hermite_curve(canvas, Point(10, 50), Point(40, 0), Point(50, 50), Point(40, 0), 50, BLACK)
        assert canvas.painted() == {(x, 50) for x in range(10, 51)}

    def test_too_few_points(self, canvas: Canvas) -> None:
        """Test fewer than two samples draws nothing."""
        draw_hermite_curve(canvas, Point(0, 0), Point(1, 1), Point(9, 9), Point(1, 1), 1, BLACK)
        assert canvas.write_count == 0


class TestCardinal:
    """Tests for cardinal splines."""

    def test_tangents(self) -> None:
        """Test central differences inside, one-sided at the ends."""
        points = [Point(0, 0), Point(10, 0), Point(20, 10)]
        assert cardinal_tangents(points, 0.5) == [
            Point(2.5, 0.0),
            Point(5.0, 2.5),
            Point(2.5, 2.5),
        ]

    def test_zero_tension(self) -> None:
        """Test zero tension gives zero tangents."""
        points = [Point(0, 0), Point(10, 0), Point(20, 10)]
        assert all(t == Point(0, 0) for t in cardinal_tangents(points, 0.0))

    def test_point_count_policy(self) -> None:
        """Test per-segment samples grow with distance and are capped."""
        assert cardinal_point_count(50, Point(0, 0), Point(100, 0)) == 170
        assert cardinal_point_count(50, Point(0, 0), Point(10, 0)) == 50
        assert cardinal_point_count(50, Point(0, 0), Point(5000, 0)) == 500

    def test_passes_through_points(self, canvas: Canvas) -> None:
        """Test the spline interpolates every point."""
        points = [Point(10, 10), Point(30, 60), Point(60, 20), Point(90, 70)]
        draw_cardinal_spline(canvas, points, 0.5, 50, BLACK)
        pixels = canvas.pixels_of(BLACK)
        for p in points:
            assert p.rounded() in pixels

    def test_single_point(self, canvas: Canvas) -> None:
        """Test a single point draws nothing."""
        draw_cardinal_spline(canvas, [Point(10, 10)], 0.5, 50, BLACK)
        assert canvas.write_count == 0
