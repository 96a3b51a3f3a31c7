"""Exception hierarchy for Rasterlab."""


class RasterLabError(Exception):
    """Base exception for all Rasterlab errors."""

    pass


class GeometryError(RasterLabError):
    """Errors in the geometry handed to an algorithm."""

    pass


class DegenerateInputError(GeometryError):
    """Fewer points (or a smaller extent) than the primitive requires."""

    def __init__(self, shape: str, required: str, actual: int) -> None:
        self.shape = shape
        self.required = required
        self.actual = actual
        super().__init__(f"Degenerate {shape}: requires {required}, got {actual}")


class ZeroStepError(GeometryError):
    """Division by a zero delta (coincident points, parallel clip edge)."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Zero step in {operation}")


class OutOfRangeRowError(GeometryError):
    """Scanline row outside the valid range of an edge table."""

    def __init__(self, row: int, y_min: int, y_max: int) -> None:
        self.row = row
        self.y_min = y_min
        self.y_max = y_max
        super().__init__(f"Row {row} outside edge table range [{y_min}, {y_max}]")


class FillError(RasterLabError):
    """Errors raised while filling a region."""

    pass


class RecursionDepthError(FillError):
    """Recursive flood fill exhausted the interpreter stack."""

    def __init__(self, seed: tuple[int, int]) -> None:
        self.seed = seed
        super().__init__(
            f"Recursive flood fill from {seed} exceeded the recursion limit; "
            "use the iterative variant for large regions"
        )


class SurfaceError(RasterLabError):
    """Errors related to pixel surfaces."""

    pass


class CanvasSizeError(SurfaceError):
    """Canvas created with non-positive dimensions."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Invalid canvas size {width}x{height}")


class RenderError(RasterLabError):
    """A shape could not be dispatched to an algorithm."""

    def __init__(self, shape: str, reason: str) -> None:
        self.shape = shape
        self.reason = reason
        super().__init__(f"Cannot render {shape}: {reason}")


class OutputError(RasterLabError):
    """Error writing a rendered image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write image '{path}': {reason}")


class SceneError(RasterLabError):
    """Error reading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid scene '{path}': {reason}")
