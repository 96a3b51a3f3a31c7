"""Integration tests for the command-line interface."""

import json
import logging
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from rasterlab import __version__
from rasterlab.cli.app import app, parse_point
from rasterlab.domain import Point

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_root_handlers():
    """Drop logging handlers bound to the runner's captured streams."""
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)


class TestParsePoint:
    """Tests for X,Y argument parsing."""

    def test_integers_stay_integers(self) -> None:
        """Test whole numbers parse to ints."""
        p = parse_point("12,7.0")
        assert p == Point(12, 7)
        assert isinstance(p.y, int)

    def test_fractions_kept(self) -> None:
        """Test fractional values stay floats."""
        assert parse_point("1.5,2") == Point(1.5, 2)

    @pytest.mark.parametrize("text", ["1", "1,2,3", "a,b"])
    def test_invalid(self, text: str) -> None:
        """Test malformed points are rejected."""
        with pytest.raises(typer.BadParameter):
            parse_point(text)


class TestDrawCommand:
    """Tests for 'rasterlab draw'."""

    def test_draw_line_with_preview(self) -> None:
        """Test a small line renders and previews."""
        result = runner.invoke(app, ["draw", "line", "0,0", "5,2", "--width", "20", "--height", "20"])
        assert result.exit_code == 0, result.output
        assert "Complete" in result.output
        assert "1 shapes" in result.output

    def test_draw_circle_to_file(self, tmp_path: Path) -> None:
        """Test writing a filled circle as a binary PPM."""
        output = tmp_path / "circle.ppm"
        result = runner.invoke(
            app,
            [
                "draw",
                "circle",
                "40,40",
                "40,10",
                "--fill",
                "circle_lines",
                "--color",
                "red",
                "--width",
                "80",
                "--height",
                "80",
                "--no-preview",
                "-o",
                str(output),
            ],
        )
        assert result.exit_code == 0, result.output
        assert output.read_bytes().startswith(b"P6\n80 80\n255\n")

    def test_draw_ascii(self, tmp_path: Path) -> None:
        """Test --ascii writes a P3 file."""
        output = tmp_path / "line.ppm"
        result = runner.invoke(
            app,
            ["draw", "line", "0,0", "3,3", "--width", "4", "--height", "4", "--ascii", "-q", "-o", str(output)],
        )
        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="ascii").startswith("P3\n4 4\n255\n")

    def test_invalid_point(self) -> None:
        """Test a malformed point exits with an error."""
        result = runner.invoke(app, ["draw", "line", "0,0", "abc"])
        assert result.exit_code == 1
        assert "Invalid point" in result.output

    def test_unknown_algorithm(self) -> None:
        """Test an unregistered tracer exits with an error."""
        result = runner.invoke(
            app, ["draw", "circle", "10,10", "10,5", "-a", "bogus", "--width", "20", "--height", "20"]
        )
        assert result.exit_code == 1
        assert "unknown algorithm" in result.output

    def test_degenerate_shape(self) -> None:
        """Test too few points exits with an error."""
        result = runner.invoke(app, ["draw", "polygon", "0,0", "5,5", "--width", "20", "--height", "20"])
        assert result.exit_code == 1
        assert "Degenerate polygon" in result.output

    def test_verbose_and_quiet_conflict(self) -> None:
        """Test --verbose and --quiet cannot be combined."""
        result = runner.invoke(app, ["draw", "line", "0,0", "1,1", "-v", "-q"])
        assert result.exit_code == 1


class TestRenderCommand:
    """Tests for 'rasterlab render'."""

    def test_render_scene(self, tmp_path: Path) -> None:
        """Test a scene renders to the default output path."""
        scene = tmp_path / "scene.json"
        scene.write_text(
            json.dumps(
                [
                    {"kind": "line", "points": [{"x": 0, "y": 0}, {"x": 30, "y": 10}]},
                    {
                        "kind": "circle",
                        "points": [{"x": 20, "y": 20}, {"x": 20, "y": 12}],
                        "fill": "flood",
                        "color": "blue",
                    },
                ]
            ),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["render", str(scene), "--width", "40", "--height", "40"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "scene.ppm").exists()
        assert "2 shapes" in result.output

    def test_render_reports_bad_shapes(self, tmp_path: Path) -> None:
        """Test rejected shapes are listed and the image is still written."""
        scene = tmp_path / "scene.json"
        scene.write_text(
            json.dumps([{"kind": "polygon", "points": [{"x": 0, "y": 0}]}]), encoding="utf-8"
        )
        output = tmp_path / "out.ppm"
        result = runner.invoke(
            app, ["render", str(scene), "-o", str(output), "--width", "10", "--height", "10"]
        )
        assert result.exit_code == 0, result.output
        assert "1 errors" in result.output
        assert output.exists()

    def test_missing_scene(self, tmp_path: Path) -> None:
        """Test a missing scene file exits with an error."""
        result = runner.invoke(app, ["render", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_scene(self, tmp_path: Path) -> None:
        """Test an unreadable scene exits with an error."""
        scene = tmp_path / "scene.json"
        scene.write_text("{", encoding="utf-8")
        result = runner.invoke(app, ["render", str(scene)])
        assert result.exit_code == 1
        assert "Could not load scene" in result.output

    def test_out_of_range_color_exits_cleanly(self, tmp_path: Path) -> None:
        """Test a color channel above 255 is reported instead of crashing."""
        scene = tmp_path / "scene.json"
        scene.write_text(
            json.dumps(
                [
                    {
                        "kind": "line",
                        "points": [{"x": 0, "y": 0}, {"x": 5, "y": 5}],
                        "color": [300, 0, 0],
                    }
                ]
            ),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["render", str(scene), "-q"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "Could not load scene" in result.output
        assert not (tmp_path / "scene.ppm").exists()

    def test_non_numeric_coordinate_exits_cleanly(self, tmp_path: Path) -> None:
        """Test a string coordinate is reported instead of crashing."""
        scene = tmp_path / "scene.json"
        scene.write_text(
            json.dumps([{"kind": "line", "points": [{"x": "a", "y": 0}, {"x": 5, "y": 5}]}]),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["render", str(scene), "-q"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, TypeError)
        assert "Could not load scene" in result.output


class TestClipLineCommand:
    """Tests for 'rasterlab clip-line'."""

    def test_rectangle_accept(self) -> None:
        """Test a line crossing the window is trimmed."""
        result = runner.invoke(app, ["clip-line", "0", "50", "200", "50", "--window", "20,120,10,90"])
        assert result.exit_code == 0, result.output
        assert "Accepted" in result.output
        assert "(20, 50) -> (120, 50)" in result.output

    def test_rectangle_reject(self) -> None:
        """Test a line outside the window is rejected."""
        result = runner.invoke(app, ["clip-line", "0", "0", "10", "0", "--window", "20,120,10,90"])
        assert result.exit_code == 0, result.output
        assert "Rejected" in result.output

    def test_rectangle_accepts_grazing_line(self) -> None:
        """Test an integer line crossing just inside the bottom edge is accepted."""
        result = runner.invoke(
            app, ["clip-line", "--window", "0,10,0,10", "--", "-16", "11", "33", "8"]
        )
        assert result.exit_code == 0, result.output
        assert "Accepted" in result.output
        assert "(0, 10) -> (10, 9)" in result.output

    def test_circle(self) -> None:
        """Test clipping against a circle."""
        result = runner.invoke(app, ["clip-line", "30", "50", "70", "50", "--circle", "50,50,10"])
        assert result.exit_code == 0, result.output
        assert "(40, 50) -> (60, 50)" in result.output

    def test_requires_one_region(self) -> None:
        """Test exactly one of --window and --circle must be given."""
        result = runner.invoke(app, ["clip-line", "0", "0", "1", "1"])
        assert result.exit_code == 1

    def test_malformed_window(self) -> None:
        """Test a window without four integers exits with an error."""
        result = runner.invoke(app, ["clip-line", "0", "0", "1", "1", "--window", "1,2,3"])
        assert result.exit_code == 1
        assert "Invalid --window" in result.output


class TestInfoCommands:
    """Tests for 'algorithms' and '--version'."""

    def test_algorithms(self) -> None:
        """Test the algorithm table lists tracers and fills."""
        result = runner.invoke(app, ["algorithms"])
        assert result.exit_code == 0, result.output
        assert "bresenham" in result.output
        assert "cardinal" in result.output

    def test_version(self) -> None:
        """Test --version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
