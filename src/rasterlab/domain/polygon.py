"""Polygon type used by the scanline fillers and the polygon clipper."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from rasterlab.domain.point import Point


@dataclass
class Polygon:
    """An ordered, closed sequence of vertices.

    Whether the polygon is convex is decided by the caller; nothing here
    computes it. The convex filler assumes one span per row and will draw
    wrong spans for concave shapes.

    Attributes:
        vertices: Vertices in drawing order (the last one connects to the first)
        convex: Caller-supplied classification
    """

    vertices: list[Point]
    convex: bool = False
    _cached_bbox: tuple[float, float, float, float] | None = field(
        default=None, repr=False, init=False
    )

    def __len__(self) -> int:
        return len(self.vertices)

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Yield edges as (start, end) pairs, starting with last -> first."""
        if not self.vertices:
            return
        v1 = self.vertices[-1]
        for v2 in self.vertices:
            yield v1, v2
            v1 = v2

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the polygon.

        Result is cached.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if self._cached_bbox is not None:
            return self._cached_bbox

        if not self.vertices:
            self._cached_bbox = (0.0, 0.0, 0.0, 0.0)
            return self._cached_bbox

        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        self._cached_bbox = (min(xs), min(ys), max(xs), max(ys))
        return self._cached_bbox
