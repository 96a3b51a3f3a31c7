"""Command-line interface for rasterlab.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Draw single shapes with any registered tracer and fill
- Render JSON scenes to PPM images
- Terminal preview of the painted region
- Line clipping against rectangles and circles
"""

from rasterlab.cli.app import cli, main

__all__ = ["cli", "main"]
