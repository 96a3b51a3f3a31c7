"""Pixel surfaces the algorithms draw onto.

Every algorithm receives its surface explicitly. Anything with ``set_pixel``
and ``get_pixel`` satisfies ``PixelSurface``; ``Canvas`` is the in-memory
implementation used by the renderer, the CLI and the tests.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from rasterlab.domain.color import WHITE, Color
from rasterlab.exceptions import CanvasSizeError


@runtime_checkable
class PixelSurface(Protocol):
    """Addressable 2D canvas capability."""

    def set_pixel(self, x: int, y: int, color: Color) -> None: ...

    def get_pixel(self, x: int, y: int) -> Color | None: ...


class Canvas:
    """Fixed-size in-memory pixel grid.

    Writes outside the grid are dropped and reads outside it return None,
    the way a device context clips. Rows are indexed top to bottom.

    Example:
        canvas = Canvas(64, 48)
        canvas.set_pixel(3, 4, RED)
        assert canvas.get_pixel(3, 4) == RED
    """

    def __init__(self, width: int, height: int, background: Color = WHITE) -> None:
        """Initialize a canvas filled with the background color.

        Args:
            width: Number of columns
            height: Number of rows
            background: Initial color of every pixel

        Raises:
            CanvasSizeError: If either dimension is not positive
        """
        if width <= 0 or height <= 0:
            raise CanvasSizeError(width, height)
        self.width = width
        self.height = height
        self.background = background
        self._rows: list[list[Color]] = [[background] * width for _ in range(height)]
        self.write_count = 0

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) addresses a pixel of this canvas."""
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not self.in_bounds(x, y):
            return
        self._rows[y][x] = color
        self.write_count += 1

    def get_pixel(self, x: int, y: int) -> Color | None:
        if not self.in_bounds(x, y):
            return None
        return self._rows[y][x]

    def clear(self, color: Color | None = None) -> None:
        """Reset every pixel to ``color`` (background by default)."""
        fill = self.background if color is None else color
        for row in self._rows:
            row[:] = [fill] * self.width
        self.write_count = 0

    def rows(self) -> Iterator[list[Color]]:
        """Iterate over pixel rows, top to bottom."""
        for row in self._rows:
            yield list(row)

    def pixels_of(self, color: Color) -> set[tuple[int, int]]:
        """Coordinates of every pixel currently holding ``color``."""
        return {
            (x, y)
            for y, row in enumerate(self._rows)
            for x, value in enumerate(row)
            if value == color
        }

    def painted(self) -> set[tuple[int, int]]:
        """Coordinates of every pixel that differs from the background."""
        return {
            (x, y)
            for y, row in enumerate(self._rows)
            for x, value in enumerate(row)
            if value != self.background
        }
