"""Seed flood fills (4-connected).

A pixel is filled when it still holds the seed's original color and does
not already hold the fill color; the second test keeps a fill whose color
equals the original from looping forever. Reads outside the surface return
None, which never matches, so the surface edge bounds the fill.
"""

import logging

from rasterlab.domain import Color, PixelSurface
from rasterlab.exceptions import RecursionDepthError

logger = logging.getLogger(__name__)


def _should_fill(surface: PixelSurface, x: int, y: int, fill: Color, original: Color) -> bool:
    current = surface.get_pixel(x, y)
    return current == original and current != fill


def _fill_recursive(surface: PixelSurface, x: int, y: int, fill: Color, original: Color) -> None:
    if not _should_fill(surface, x, y, fill, original):
        return

    surface.set_pixel(x, y, fill)

    _fill_recursive(surface, x + 1, y, fill, original)
    _fill_recursive(surface, x - 1, y, fill, original)
    _fill_recursive(surface, x, y + 1, fill, original)
    _fill_recursive(surface, x, y - 1, fill, original)


def flood_fill_recursive(
    surface: PixelSurface, x: int, y: int, fill: Color, original: Color
) -> None:
    """Flood fill by direct recursion on the four neighbours.

    Recursion depth grows with the size of the region, so anything larger
    than a few thousand pixels exhausts the interpreter stack. Use
    ``flood_fill_iterative`` for real work.

    Args:
        surface: Surface to fill on
        x: Seed x
        y: Seed y
        fill: New color
        original: Color being replaced

    Raises:
        RecursionDepthError: If the region is too large for the call stack
    """
    try:
        _fill_recursive(surface, x, y, fill, original)
    except RecursionError as e:
        raise RecursionDepthError((x, y)) from e


def flood_fill_iterative(
    surface: PixelSurface, x: int, y: int, fill: Color, original: Color
) -> None:
    """Flood fill with an explicit stack of pending coordinates.

    Visits the same pixels as ``flood_fill_recursive`` without any risk of
    stack overflow.

    Args:
        surface: Surface to fill on
        x: Seed x
        y: Seed y
        fill: New color
        original: Color being replaced
    """
    stack = [(x, y)]
    filled = 0

    while stack:
        cx, cy = stack.pop()
        if not _should_fill(surface, cx, cy, fill, original):
            continue

        surface.set_pixel(cx, cy, fill)
        filled += 1

        stack.append((cx + 1, cy))
        stack.append((cx - 1, cy))
        stack.append((cx, cy + 1))
        stack.append((cx, cy - 1))

    logger.debug("Flood fill from (%d, %d) filled %d pixels", x, y, filled)


def flood_fill(
    surface: PixelSurface, x: int, y: int, fill: Color, original: Color | None = None
) -> None:
    """Flood fill from a seed, reading the original color from the seed when omitted.

    Args:
        surface: Surface to fill on
        x: Seed x
        y: Seed y
        fill: New color
        original: Color being replaced (defaults to the seed pixel's color)
    """
    if original is None:
        original = surface.get_pixel(x, y)
        if original is None:
            return
    flood_fill_iterative(surface, x, y, fill, original)
