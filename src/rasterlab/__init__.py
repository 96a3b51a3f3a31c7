"""Rasterlab - Educational 2D rasterization engine.

Rasterlab is a collection of scan-conversion algorithms that turn continuous
geometric primitives (lines, circles, ellipses, polygons, parametric curves)
into discrete pixels on a surface, plus the fill, flood and clipping algorithms
that work on those pixels.

Example:
    $ rasterlab draw circle 40,40 40,10 --algorithm midpoint --fill lines

This will render a filled circle onto an in-memory canvas and preview it in
the terminal.
"""

__version__ = "0.1.0"
__author__ = "Rasterlab Contributors"

__all__ = ["__author__", "__version__"]
