"""CLI application entry point for rasterlab.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from rasterlab import __version__
from rasterlab.cli.output import (
    console,
    format_file_size,
    print_algorithms,
    print_canvas_info,
    print_clip_result,
    print_error,
    print_header,
    print_preview,
    print_step,
    print_success,
)
from rasterlab.config import (
    CanvasConfig,
    CurveConfig,
    LoggingConfig,
    RasterLabSettings,
)
from rasterlab.core import (
    ALGORITHMS,
    FILLS,
    ClipWindow,
    Renderer,
    circle_line_clip,
    cohen_sutherland_line_clip,
)
from rasterlab.domain import Canvas, FillKind, NamedColor, Point, Shape, ShapeKind
from rasterlab.exceptions import OutputError, RasterLabError, SceneError
from rasterlab.io import CanvasWriter, SceneReader
from rasterlab.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="rasterlab",
    help="Rasterize lines, circles, ellipses, polygons and curves with classic scan-conversion algorithms.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Rasterlab[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Rasterize lines, circles, ellipses, polygons and curves."""


def parse_point(text: str) -> Point:
    """Parse an ``X,Y`` command-line point.

    Integers stay integers so line and circle geometry stays on the grid.

    Raises:
        typer.BadParameter: If the text is not two comma-separated numbers
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise typer.BadParameter(f"expected X,Y but got '{text}'")
    try:
        values = [float(p) for p in parts]
    except ValueError:
        raise typer.BadParameter(f"expected numbers in '{text}'") from None
    x, y = (int(v) if v.is_integer() else v for v in values)
    return Point(x, y)


def _build_settings(
    width: int | None,
    height: int | None,
    tension: float | None,
    steps: int | None,
    log_file: Path | None,
    verbose: bool,
) -> RasterLabSettings:
    canvas = CanvasConfig()
    curves = CurveConfig()
    return RasterLabSettings(
        canvas=CanvasConfig(
            width=width if width is not None else canvas.width,
            height=height if height is not None else canvas.height,
        ),
        curves=CurveConfig(
            bezier_steps=steps,
            cardinal_tension=tension if tension is not None else curves.cardinal_tension,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="INFO" if verbose else "WARNING",
        ),
    )


def _create_canvas(settings: RasterLabSettings) -> Canvas:
    return Canvas(settings.canvas.width, settings.canvas.height, settings.canvas.background.rgb)


def _create_renderer(settings: RasterLabSettings, canvas: Canvas, quiet: bool) -> Renderer:
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    return Renderer(settings, surface=canvas, logger=logger)


def _parse_ints(text: str, count: int, option: str) -> list[int]:
    parts = text.split(",")
    try:
        values = [int(p) for p in parts]
    except ValueError:
        values = []
    if len(values) != count:
        print_error(f"Invalid {option}: '{text}'", details=f"Expected {count} comma-separated integers")
        raise typer.Exit(code=1)
    return values


def _save_canvas(canvas: Canvas, output: Path, ascii_ppm: bool) -> str:
    CanvasWriter(canvas, output).save(binary=not ascii_ppm)
    return format_file_size(output)


WidthOption = Annotated[
    int | None,
    typer.Option("--width", help="Canvas width in pixels (default: 1024)", min=1),
]
HeightOption = Annotated[
    int | None,
    typer.Option("--height", help="Canvas height in pixels (default: 768)", min=1),
]
AsciiOption = Annotated[
    bool,
    typer.Option("--ascii", help="Write ASCII P3 instead of binary P6"),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Verbose console output"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Minimal console output"),
]


@app.command()
def draw(
    kind: Annotated[
        ShapeKind,
        typer.Argument(help="Shape kind", show_default=False),
    ],
    points: Annotated[
        list[str],
        typer.Argument(
            help="Defining points as X,Y (e.g. center and rim point for a circle)",
            show_default=False,
        ),
    ],
    algorithm: Annotated[
        str | None,
        typer.Option(
            "--algorithm",
            "-a",
            help="Tracer name (see 'rasterlab algorithms'; default depends on the shape)",
        ),
    ] = None,
    fill: Annotated[
        FillKind,
        typer.Option("--fill", "-f", help="Fill applied after the outline"),
    ] = FillKind.NONE,
    color: Annotated[
        NamedColor,
        typer.Option("--color", "-c", help="Shape color"),
    ] = NamedColor.BLACK,
    tension: Annotated[
        float | None,
        typer.Option("--tension", help="Cardinal spline tension (default: 0.5)", min=0.0, max=2.0),
    ] = None,
    steps: Annotated[
        int | None,
        typer.Option("--steps", help="Bezier step count (default: adaptive)", min=1),
    ] = None,
    width: WidthOption = None,
    height: HeightOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the canvas to a PPM image"),
    ] = None,
    ascii_ppm: AsciiOption = False,
    preview: Annotated[
        bool,
        typer.Option("--preview/--no-preview", help="Show the painted region in the terminal"),
    ] = True,
    log_file: LogFileOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Draw a single shape onto a fresh canvas.

    Example:
        rasterlab draw circle 40,40 40,10 --algorithm midpoint --fill circle_lines

    This will rasterize a circle of radius 30 centered at (40, 40), fill it
    with horizontal spans and preview the result in the terminal.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        shape_points = [parse_point(p) for p in points]
    except typer.BadParameter as e:
        print_error(f"Invalid point: {e}")
        raise typer.Exit(code=1) from None

    settings = _build_settings(width, height, tension, steps, log_file, verbose)
    shape = Shape(
        kind=kind,
        points=shape_points,
        color=color.rgb,
        algorithm=algorithm,
        fill=fill,
    )

    try:
        if not quiet:
            print_header(__version__)
            print_step(f"Drawing {kind.value}")
            print_canvas_info(
                settings.canvas.width, settings.canvas.height, settings.canvas.background.value
            )

        canvas = _create_canvas(settings)
        renderer = _create_renderer(settings, canvas, quiet)
        start_time = time.time()
        pixels = renderer.render(shape)
        duration = time.time() - start_time

        file_size = None
        if output is not None:
            file_size = _save_canvas(canvas, output, ascii_ppm)

        if not quiet:
            if preview:
                print_step("Preview")
                print_preview(canvas)
            print_success(
                total_time_s=duration,
                rendered=1,
                pixels=pixels,
                errors=0,
                output_path=str(output) if output is not None else None,
                file_size=file_size,
            )

    except OutputError as e:
        print_error(f"Could not save image: {e.reason}")
        raise typer.Exit(code=1)
    except RasterLabError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def render(
    scene: Annotated[
        Path,
        typer.Argument(help="Path to a JSON scene (list of shapes)", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output image (default: {scene}.ppm)"),
    ] = None,
    width: WidthOption = None,
    height: HeightOption = None,
    ascii_ppm: AsciiOption = False,
    log_file: LogFileOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Render every shape of a scene file, in order, onto one canvas.

    Shapes that fail validation are reported and skipped; the rest are
    still drawn and the image is written.

    Example:
        rasterlab render scene.json -o scene.ppm
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not scene.exists():
        print_error(
            f"Scene file not found: {scene}",
            details=f"The file '{scene}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    settings = _build_settings(width, height, None, None, log_file, verbose)
    output_path = output if output is not None else CanvasWriter.get_image_path(scene)

    try:
        if not quiet:
            print_header(__version__)
            print_step("Loading scene")

        reader = SceneReader(scene)
        reader.load()
        shapes = list(reader.iter_shapes())

        if not quiet:
            console.print(f"  {len(shapes)} shapes")
            print_step("Rendering")
            print_canvas_info(
                settings.canvas.width, settings.canvas.height, settings.canvas.background.value
            )

        canvas = _create_canvas(settings)
        renderer = _create_renderer(settings, canvas, quiet)
        stats = renderer.render_all(shapes)

        file_size = _save_canvas(canvas, output_path, ascii_ppm)

        if not quiet:
            for kind, message in stats.errors:
                console.print(f"  [red]{kind}[/red]: {message}")
            print_success(
                total_time_s=stats.duration_seconds,
                rendered=stats.rendered_count,
                pixels=stats.pixels_written,
                errors=stats.rejected_count + stats.error_count,
                output_path=str(output_path),
                file_size=file_size,
            )

    except SceneError as e:
        print_error(f"Could not load scene: {e.reason}")
        raise typer.Exit(code=1)
    except OutputError as e:
        print_error(f"Could not save image: {e.reason}")
        raise typer.Exit(code=1)
    except RasterLabError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command("clip-line")
def clip_line(
    x1: Annotated[float, typer.Argument(help="Start x", show_default=False)],
    y1: Annotated[float, typer.Argument(help="Start y", show_default=False)],
    x2: Annotated[float, typer.Argument(help="End x", show_default=False)],
    y2: Annotated[float, typer.Argument(help="End y", show_default=False)],
    window: Annotated[
        str | None,
        typer.Option(
            "--window",
            "-w",
            help="Rectangle as LEFT,RIGHT,TOP,BOTTOM (Cohen-Sutherland)",
        ),
    ] = None,
    circle: Annotated[
        str | None,
        typer.Option("--circle", help="Circle as XC,YC,R"),
    ] = None,
) -> None:
    """Clip a line segment to a rectangle or a circle.

    Example:
        rasterlab clip-line 0 50 200 50 --window 20,120,10,90
    """
    if (window is None) == (circle is None):
        print_error("Provide exactly one of --window or --circle")
        raise typer.Exit(code=1)

    p1 = parse_point(f"{x1},{y1}")
    p2 = parse_point(f"{x2},{y2}")

    try:
        if window is not None:
            left, right, top, bottom = _parse_ints(window, 4, "--window")
            result = cohen_sutherland_line_clip(p1, p2, ClipWindow(left, right, top, bottom))
        else:
            xc, yc, r = _parse_ints(circle, 3, "--circle")
            result = circle_line_clip(p1, p2, Point(xc, yc), r)
    except RasterLabError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_clip_result(result.accepted, result.start, result.end)


@app.command()
def algorithms() -> None:
    """List the tracers and fills available for each shape kind."""
    rows = [
        (
            kind.value,
            list(names),
            [fill.value for fill in FILLS.get(kind, ())],
        )
        for kind, names in ALGORITHMS.items()
    ]
    print_algorithms(rows)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
