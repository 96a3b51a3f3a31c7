"""Core geometric point type.

Points carry either integer pixel-grid coordinates (lines, circles) or float
coordinates (curve control points, clip geometry). Float coordinates are kept
until the final pixel write, where they are rounded with ``round_half_up``.
"""

import math
from dataclasses import dataclass
from typing import Any


def round_half_up(value: float) -> int:
    """Round to the nearest pixel using ``floor(v + 0.5)``.

    Unlike the builtin ``round``, halves always round towards +inf, which
    keeps rasterized curves free of banker's-rounding jitter.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate (pixels grow to the right)
        y: Y coordinate (pixels grow downward)
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> "Point":
        """Multiply both coordinates by a scalar."""
        return Point(self.x * factor, self.y * factor)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def rounded(self) -> tuple[int, int]:
        """Snap to the pixel grid.

        Returns:
            Tuple of integer (x, y) pixel coordinates
        """
        return (round_half_up(self.x), round_half_up(self.y))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance

        Raises:
            KeyError: If x or y is missing
            TypeError: If a coordinate is not a number
            ValueError: If a coordinate is NaN or infinite
        """
        x, y = data["x"], data["y"]
        for name, value in (("x", x), ("y", y)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"coordinate {name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"coordinate {name} must be finite, got {value!r}")
        return cls(x=x, y=y)
