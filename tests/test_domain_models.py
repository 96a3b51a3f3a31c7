"""Tests for domain models to verify they work correctly."""

import pytest

from rasterlab.domain import (
    BLACK,
    RED,
    WHITE,
    Canvas,
    FillKind,
    NamedColor,
    PixelSurface,
    Point,
    Polygon,
    Shape,
    ShapeKind,
    round_half_up,
)
from rasterlab.exceptions import CanvasSizeError


class TestRoundHalfUp:
    """Tests for the pixel rounding rule."""

    def test_halves_round_up(self) -> None:
        """Test that halves always round towards +inf."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0
        assert round_half_up(-2.5) == -2

    def test_non_halves(self) -> None:
        """Test ordinary rounding."""
        assert round_half_up(1.49) == 1
        assert round_half_up(-1.51) == -2
        assert round_half_up(7) == 7


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(10, 20)
        assert p.x == 10
        assert p.y == 20

    def test_vector_arithmetic(self) -> None:
        """Test addition, subtraction and scaling."""
        a = Point(1, 2)
        b = Point(4, 6)
        assert a + b == Point(5, 8)
        assert b - a == Point(3, 4)
        assert (b - a).scaled(0.5) == Point(1.5, 2.0)

    def test_distance(self) -> None:
        """Test Euclidean distance."""
        assert Point(0, 0).distance_to(Point(3, 4)) == 5.0

    def test_rounded(self) -> None:
        """Test snapping to the pixel grid."""
        assert Point(1.5, 2.49).rounded() == (2, 2)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(3.5, -2.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_from_dict_rejects_non_finite(self) -> None:
        """Test NaN and infinite coordinates are rejected."""
        with pytest.raises(ValueError, match="finite"):
            Point.from_dict({"x": float("nan"), "y": 0})
        with pytest.raises(ValueError, match="finite"):
            Point.from_dict({"x": 0, "y": float("inf")})

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 3  # type: ignore

    def test_point_hashable(self) -> None:
        """Test that equal points collapse in a set."""
        assert len({Point(1, 1), Point(1, 1), Point(1, 2)}) == 2


class TestNamedColor:
    """Tests for the color palette."""

    def test_rgb_lookup(self) -> None:
        """Test palette names map to RGB tuples."""
        assert NamedColor.RED.rgb == RED
        assert NamedColor.WHITE.rgb == WHITE
        assert NamedColor("black").rgb == BLACK


class TestCanvas:
    """Tests for the in-memory pixel surface."""

    def test_initial_background(self) -> None:
        """Test every pixel starts as the background."""
        canvas = Canvas(4, 3, background=RED)
        assert all(pixel == RED for row in canvas.rows() for pixel in row)
        assert canvas.painted() == set()

    def test_set_and_get(self) -> None:
        """Test reading back a written pixel."""
        canvas = Canvas(4, 3)
        canvas.set_pixel(2, 1, BLACK)
        assert canvas.get_pixel(2, 1) == BLACK
        assert canvas.painted() == {(2, 1)}
        assert canvas.pixels_of(BLACK) == {(2, 1)}
        assert canvas.write_count == 1

    def test_out_of_bounds(self) -> None:
        """Test that writes outside are dropped and reads return None."""
        canvas = Canvas(4, 3)
        canvas.set_pixel(-1, 0, BLACK)
        canvas.set_pixel(4, 0, BLACK)
        canvas.set_pixel(0, 3, BLACK)
        assert canvas.painted() == set()
        assert canvas.write_count == 0
        assert canvas.get_pixel(-1, 0) is None
        assert canvas.get_pixel(0, 3) is None

    def test_clear(self) -> None:
        """Test clearing resets pixels and the write counter."""
        canvas = Canvas(4, 3)
        canvas.set_pixel(1, 1, BLACK)
        canvas.clear()
        assert canvas.painted() == set()
        assert canvas.write_count == 0

    def test_invalid_size(self) -> None:
        """Test non-positive dimensions are rejected."""
        with pytest.raises(CanvasSizeError):
            Canvas(0, 10)
        with pytest.raises(CanvasSizeError):
            Canvas(10, -1)

    def test_satisfies_surface_protocol(self) -> None:
        """Test Canvas is a PixelSurface."""
        assert isinstance(Canvas(1, 1), PixelSurface)


class TestPolygon:
    """Tests for Polygon class."""

    def test_edges_wrap_around(self) -> None:
        """Test edges start with last -> first and close the loop."""
        a, b, c = Point(0, 0), Point(10, 0), Point(5, 8)
        polygon = Polygon([a, b, c])
        assert list(polygon.edges()) == [(c, a), (a, b), (b, c)]

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        polygon = Polygon([Point(2, 3), Point(10, -1), Point(6, 9)])
        assert polygon.bounding_box() == (2, -1, 10, 9)

    def test_empty_polygon(self) -> None:
        """Test an empty polygon has no edges."""
        polygon = Polygon([])
        assert len(polygon) == 0
        assert list(polygon.edges()) == []
        assert polygon.bounding_box() == (0.0, 0.0, 0.0, 0.0)


class TestShape:
    """Tests for Shape class."""

    def test_circle_radius(self) -> None:
        """Test radius is the truncated center-to-rim distance."""
        shape = Shape(ShapeKind.CIRCLE, [Point(0, 0), Point(3, 4)])
        assert shape.radius() == 5
        shape = Shape(ShapeKind.CIRCLE, [Point(0, 0), Point(2, 2)])
        assert shape.radius() == 2

    def test_ellipse_radii(self) -> None:
        """Test semi-axes come from the center/corner offsets."""
        shape = Shape(ShapeKind.ELLIPSE, [Point(20, 20), Point(12, 24)])
        assert shape.radii() == (8, 4)

    def test_defaults(self) -> None:
        """Test default color, algorithm and fill."""
        shape = Shape(ShapeKind.LINE, [Point(0, 0), Point(1, 1)])
        assert shape.color == BLACK
        assert shape.algorithm is None
        assert shape.fill == FillKind.NONE

    def test_shape_serialization(self) -> None:
        """Test shape serialization and deserialization."""
        shape = Shape(
            kind=ShapeKind.CIRCLE,
            points=[Point(50, 50), Point(50, 40)],
            color=RED,
            algorithm="polar",
            fill=FillKind.CIRCLE_LINES,
        )
        data = shape.to_dict()
        assert data["kind"] == "circle"
        assert data["fill"] == "circle_lines"

        restored = Shape.from_dict(data)
        assert restored == shape

    def test_from_dict_named_color(self) -> None:
        """Test palette names are accepted as colors."""
        shape = Shape.from_dict(
            {"kind": "line", "points": [{"x": 0, "y": 0}, {"x": 5, "y": 5}], "color": "Red"}
        )
        assert shape.color == RED
        assert shape.fill == FillKind.NONE

    def test_from_dict_unknown_kind(self) -> None:
        """Test an unknown kind is rejected."""
        with pytest.raises(ValueError):
            Shape.from_dict({"kind": "star", "points": []})

    def test_from_dict_rejects_out_of_range_channel(self) -> None:
        """Test RGB channels must lie in 0-255."""
        with pytest.raises(ValueError, match="outside 0-255"):
            Shape.from_dict(
                {"kind": "line", "points": [{"x": 0, "y": 0}, {"x": 1, "y": 1}], "color": [0, -1, 0]}
            )

    def test_from_dict_rejects_bool_channel(self) -> None:
        """Test booleans are not accepted as channels."""
        with pytest.raises(TypeError):
            Shape.from_dict(
                {"kind": "line", "points": [{"x": 0, "y": 0}, {"x": 1, "y": 1}], "color": [True, 0, 0]}
            )

    def test_from_dict_rejects_non_numeric_point(self) -> None:
        """Test coordinates must be numbers."""
        with pytest.raises(TypeError, match="coordinate x"):
            Shape.from_dict({"kind": "line", "points": [{"x": "a", "y": 0}, {"x": 1, "y": 1}]})
