"""Edge tables for scanline polygon filling.

Two table shapes are used:

- ConvexEdgeTable: one (x_left, x_right) pair per row, enough for convex
  polygons where every row crosses the boundary exactly twice.
- NonConvexEdgeTable: per row, the edges whose topmost scanline is that
  row. Scanning feeds these into an ActiveEdgeList.

Tables cover exactly the polygon's vertical extent and are indexed through
an offset, so any canvas height works and stray rows are reported instead
of silently indexing somewhere else.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rasterlab.domain import Point, Polygon
from rasterlab.exceptions import OutOfRangeRowError


class ConvexEdgeTable:
    """Row-indexed minimum/maximum x-intersections.

    Rows span ``[y_min, y_max]``; every row starts empty
    (``x_left = +inf``, ``x_right = -inf``).
    """

    def __init__(self, y_min: int, y_max: int) -> None:
        self.y_min = y_min
        self.y_max = y_max
        size = max(0, y_max - y_min + 1)
        self._x_left: list[float] = [math.inf] * size
        self._x_right: list[float] = [-math.inf] * size

    def __len__(self) -> int:
        return len(self._x_left)

    def _index(self, row: int) -> int:
        if not self.y_min <= row <= self.y_max:
            raise OutOfRangeRowError(row, self.y_min, self.y_max)
        return row - self.y_min

    def record(self, row: int, x: float) -> None:
        """Widen the row's span to include ``x``."""
        i = self._index(row)
        if x < self._x_left[i]:
            self._x_left[i] = x
        if x > self._x_right[i]:
            self._x_right[i] = x

    def span(self, row: int) -> tuple[float, float]:
        """Return (x_left, x_right) for a row."""
        i = self._index(row)
        return self._x_left[i], self._x_right[i]

    def add_edge(self, v1: Point, v2: Point) -> None:
        """Record every scanline crossing of the edge v1-v2.

        Walks rows ``ceil(y_top)`` through ``floor(y_bottom)`` inclusive,
        stepping x by the inverse slope. Horizontal edges add nothing.
        """
        if v1.y == v2.y:
            return
        if v1.y > v2.y:
            v1, v2 = v2, v1

        inverse_slope = (v2.x - v1.x) / (v2.y - v1.y)
        y = math.ceil(v1.y)
        x = v1.x + (y - v1.y) * inverse_slope
        while y <= v2.y:
            self.record(y, x)
            y += 1
            x += inverse_slope

    @classmethod
    def from_polygon(cls, polygon: Polygon) -> "ConvexEdgeTable":
        """Build the table for every edge of a polygon (wrapping last -> first)."""
        _, min_y, _, max_y = polygon.bounding_box()
        table = cls(math.ceil(min_y), math.floor(max_y))
        for v1, v2 in polygon.edges():
            table.add_edge(v1, v2)
        return table

    def spans(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(row, x_start, x_end)`` for each row with ``x_left < x_right``."""
        for i, (x_left, x_right) in enumerate(zip(self._x_left, self._x_right, strict=True)):
            if x_left < x_right:
                yield self.y_min + i, math.ceil(x_left), math.floor(x_right)


@dataclass
class EdgeNode:
    """Scan state of one polygon edge.

    Attributes:
        x: X-intersection with the current scanline
        inverse_slope: Change in x per scanline (dx/dy)
        y_max: Bottom end of the edge; the edge is active on rows < y_max
    """

    x: float
    inverse_slope: float
    y_max: float


class NonConvexEdgeTable:
    """Edges bucketed by the first scanline they cross."""

    def __init__(self, y_min: int, y_max: int) -> None:
        self.y_min = y_min
        self.y_max = y_max
        size = max(0, y_max - y_min + 1)
        self._rows: list[list[EdgeNode]] = [[] for _ in range(size)]

    def _index(self, row: int) -> int:
        if not self.y_min <= row <= self.y_max:
            raise OutOfRangeRowError(row, self.y_min, self.y_max)
        return row - self.y_min

    def nodes_at(self, row: int) -> list[EdgeNode]:
        """Edges whose first scanline is ``row``."""
        return self._rows[self._index(row)]

    def first_row(self) -> int | None:
        """Topmost row holding at least one edge, or None for an empty table."""
        for i, nodes in enumerate(self._rows):
            if nodes:
                return self.y_min + i
        return None

    def add_edge(self, v1: Point, v2: Point) -> None:
        """Bucket the edge v1-v2 under its topmost integer row ``ceil(y_top)``.

        The node's x is the intersection with that row. Horizontal edges and
        edges that cross no scanline are skipped.
        """
        if v1.y == v2.y:
            return
        if v1.y > v2.y:
            v1, v2 = v2, v1

        inverse_slope = (v2.x - v1.x) / (v2.y - v1.y)
        y = math.ceil(v1.y)
        if y >= v2.y:
            return
        x = v1.x + (y - v1.y) * inverse_slope
        self.nodes_at(y).append(EdgeNode(x, inverse_slope, v2.y))

    @classmethod
    def from_polygon(cls, polygon: Polygon) -> "NonConvexEdgeTable":
        """Build the table for every edge of a polygon (wrapping last -> first)."""
        _, min_y, _, max_y = polygon.bounding_box()
        table = cls(math.ceil(min_y), math.floor(max_y))
        for v1, v2 in polygon.edges():
            table.add_edge(v1, v2)
        return table


class ActiveEdgeList:
    """Edges crossing the current scanline, kept sorted by x."""

    def __init__(self, nodes: Iterable[EdgeNode] = ()) -> None:
        self._nodes: list[EdgeNode] = [EdgeNode(n.x, n.inverse_slope, n.y_max) for n in nodes]

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __iter__(self) -> Iterator[EdgeNode]:
        return iter(self._nodes)

    def extend(self, nodes: Iterable[EdgeNode]) -> None:
        """Merge newly-active edges (copied, so the table stays untouched)."""
        self._nodes.extend(EdgeNode(n.x, n.inverse_slope, n.y_max) for n in nodes)

    def sort(self) -> None:
        """Order edges by their current x-intersection."""
        self._nodes.sort(key=lambda node: node.x)

    def spans(self) -> list[tuple[int, int]]:
        """Pair consecutive intersections into fill spans (even-odd rule).

        Expects the list to be sorted. Each pair ``(xa, xb)`` becomes the
        pixel span ``ceil(xa)..floor(xb)``; empty spans are dropped and an
        unpaired trailing edge is ignored.
        """
        result: list[tuple[int, int]] = []
        for k in range(0, len(self._nodes) - 1, 2):
            x1 = math.ceil(self._nodes[k].x)
            x2 = math.floor(self._nodes[k + 1].x)
            if x1 <= x2:
                result.append((x1, x2))
        return result

    def advance(self, next_row: int) -> None:
        """Move to ``next_row``: drop finished edges, step the rest by their slope."""
        self._nodes = [node for node in self._nodes if node.y_max > next_row]
        for node in self._nodes:
            node.x += node.inverse_slope
