"""Shared fixtures for rasterlab tests."""

import pytest

from rasterlab.config import CanvasConfig, RasterLabSettings
from rasterlab.domain import Canvas


@pytest.fixture
def canvas() -> Canvas:
    """A 100x100 white canvas."""
    return Canvas(100, 100)


@pytest.fixture
def small_settings() -> RasterLabSettings:
    """Settings with a 100x100 canvas."""
    return RasterLabSettings(canvas=CanvasConfig(width=100, height=100))
