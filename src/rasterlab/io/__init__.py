"""Image and scene I/O layer for rasterlab.

This module handles reading scene files and writing rendered canvases.
It keeps file formats out of the algorithms and the domain models.

Key responsibilities:
- Load JSON scenes into Shape models
- Encode canvases as PPM (binary P6 or ASCII P3)
- Derive image paths from scene paths

Key classes:
- SceneReader: Load scenes and iterate their shapes
- CanvasWriter: Save canvases as images
"""

from rasterlab.io.reader import SceneReader
from rasterlab.io.writer import CanvasWriter, encode_ppm

__all__ = [
    "CanvasWriter",
    "SceneReader",
    "encode_ppm",
]
