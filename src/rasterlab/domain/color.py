"""Pixel color values.

A color is an RGB tuple. Algorithms only ever compare colors for equality
(flood fill, boundary checks), so any hashable value would work; the tuple
form is what ``Canvas`` stores and what the image writer understands.
"""

from enum import Enum

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
WHITE: Color = (255, 255, 255)


class NamedColor(str, Enum):
    """Palette selectable from configuration and the CLI."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    WHITE = "white"

    @property
    def rgb(self) -> Color:
        """RGB value of this palette entry."""
        return _PALETTE[self]


_PALETTE: dict[NamedColor, Color] = {
    NamedColor.BLACK: BLACK,
    NamedColor.RED: RED,
    NamedColor.GREEN: GREEN,
    NamedColor.BLUE: BLUE,
    NamedColor.WHITE: WHITE,
}
