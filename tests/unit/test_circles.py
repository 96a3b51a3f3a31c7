"""Unit tests for circle and ellipse tracers."""

import math

import pytest

from rasterlab.core.circles import (
    CIRCLE_ALGORITHMS,
    draw_circle_midpoint,
    draw_circle_modified_midpoint,
)
from rasterlab.core.ellipses import ELLIPSE_ALGORITHMS, draw_ellipse_midpoint
from rasterlab.domain import BLACK, Canvas

CENTER = 50


def _circle(tracer, radius: int) -> set[tuple[int, int]]:
    canvas = Canvas(101, 101)
    tracer(canvas, CENTER, CENTER, radius, BLACK)
    return {(x - CENTER, y - CENTER) for x, y in canvas.pixels_of(BLACK)}


def _ellipse(tracer, a: int, b: int) -> set[tuple[int, int]]:
    canvas = Canvas(101, 101)
    tracer(canvas, CENTER, CENTER, a, b, BLACK)
    return {(x - CENTER, y - CENTER) for x, y in canvas.pixels_of(BLACK)}


class TestCircleTracers:
    """Properties shared by every circle tracer."""

    @pytest.mark.parametrize("name", sorted(CIRCLE_ALGORITHMS))
    @pytest.mark.parametrize("radius", [3, 10, 37])
    def test_eight_way_symmetry(self, name: str, radius: int) -> None:
        """Test every plotted offset appears in all eight octants."""
        pixels = _circle(CIRCLE_ALGORITHMS[name], radius)
        for x, y in pixels:
            for mirrored in [(x, -y), (-x, y), (-x, -y), (y, x), (-y, x), (y, -x), (-y, -x)]:
                assert mirrored in pixels

    @pytest.mark.parametrize("name", sorted(CIRCLE_ALGORITHMS))
    @pytest.mark.parametrize("radius", [3, 10, 37])
    def test_axis_points(self, name: str, radius: int) -> None:
        """Test the four axis extremes are plotted."""
        pixels = _circle(CIRCLE_ALGORITHMS[name], radius)
        assert {(radius, 0), (-radius, 0), (0, radius), (0, -radius)} <= pixels

    @pytest.mark.parametrize("name", sorted(CIRCLE_ALGORITHMS))
    def test_pixels_near_radius(self, name: str) -> None:
        """Test every pixel lies within one pixel of the true circle."""
        radius = 30
        for x, y in _circle(CIRCLE_ALGORITHMS[name], radius):
            assert abs(math.hypot(x, y) - radius) < 1.0

    def test_registry(self) -> None:
        """Test the registry names every tracer."""
        assert set(CIRCLE_ALGORITHMS) == {
            "direct",
            "polar",
            "iterative_polar",
            "midpoint",
            "modified_midpoint",
        }


class TestMidpointCircle:
    """Tests for the integer midpoint tracers."""

    def test_radius_five_octant(self) -> None:
        """Test the first octant of a radius-5 circle."""
        pixels = _circle(draw_circle_midpoint, 5)
        assert {(0, 5), (1, 5), (2, 5), (3, 4), (4, 3)} <= pixels
        assert len(pixels) == 28

    @pytest.mark.parametrize("radius", range(0, 41))
    def test_modified_matches_midpoint(self, radius: int) -> None:
        """Test second-order differences give identical pixels."""
        assert _circle(draw_circle_modified_midpoint, radius) == _circle(
            draw_circle_midpoint, radius
        )

    def test_zero_radius(self) -> None:
        """Test a zero radius plots the center only."""
        assert _circle(draw_circle_midpoint, 0) == {(0, 0)}


class TestEllipseTracers:
    """Properties shared by every ellipse tracer."""

    @pytest.mark.parametrize("name", sorted(ELLIPSE_ALGORITHMS))
    @pytest.mark.parametrize("a, b", [(8, 4), (4, 8), (30, 12), (10, 10)])
    def test_four_way_symmetry(self, name: str, a: int, b: int) -> None:
        """Test every plotted offset appears in all four quadrants."""
        pixels = _ellipse(ELLIPSE_ALGORITHMS[name], a, b)
        for x, y in pixels:
            assert {(-x, y), (x, -y), (-x, -y)} <= pixels

    @pytest.mark.parametrize("name", sorted(ELLIPSE_ALGORITHMS))
    @pytest.mark.parametrize("a, b", [(8, 4), (4, 8), (30, 12)])
    def test_axis_points(self, name: str, a: int, b: int) -> None:
        """Test the ends of both axes are plotted."""
        pixels = _ellipse(ELLIPSE_ALGORITHMS[name], a, b)
        assert {(a, 0), (-a, 0), (0, b), (0, -b)} <= pixels

    @pytest.mark.parametrize("name", sorted(ELLIPSE_ALGORITHMS))
    def test_stays_in_bounding_box(self, name: str) -> None:
        """Test no pixel lies outside the ellipse's bounding box."""
        for x, y in _ellipse(ELLIPSE_ALGORITHMS[name], 30, 12):
            assert abs(x) <= 30
            assert abs(y) <= 12

    @pytest.mark.parametrize("name", sorted(ELLIPSE_ALGORITHMS))
    def test_flat_ellipse(self, name: str) -> None:
        """Test a zero semi-axis collapses onto a segment."""
        assert _ellipse(ELLIPSE_ALGORITHMS[name], 6, 0) == {(x, 0) for x in range(-6, 7)}
        assert _ellipse(ELLIPSE_ALGORITHMS[name], 0, 4) == {(0, y) for y in range(-4, 5)}


class TestMidpointEllipse:
    """Tests for the two-region midpoint ellipse."""

    def test_quadrant_pixels(self) -> None:
        """Test the first quadrant of an 8x4 ellipse."""
        pixels = _ellipse(draw_ellipse_midpoint, 8, 4)
        quadrant = {(x, y) for x, y in pixels if x >= 0 and y >= 0}
        assert quadrant == {
            (0, 4),
            (1, 4),
            (2, 4),
            (3, 4),
            (4, 3),
            (5, 3),
            (6, 3),
            (7, 2),
            (8, 1),
            (8, 0),
        }

    def test_does_not_cross_axis(self) -> None:
        """Test region 2 stops on the x axis."""
        pixels = _ellipse(draw_ellipse_midpoint, 20, 6)
        assert max(abs(y) for _, y in pixels) == 6
        assert max(abs(x) for x, _ in pixels) == 20
