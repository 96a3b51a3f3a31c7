"""Scene reader for loading shape lists.

This module provides the SceneReader class for loading a JSON scene file
(a list of ``Shape.to_dict()`` records, or an object with a ``shapes`` list)
into domain models.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from rasterlab.domain import Shape
from rasterlab.exceptions import SceneError


class SceneReader:
    """Loads JSON scenes and converts them to shapes.

    Example:
        reader = SceneReader(Path("scene.json"))
        reader.load()
        for shape in reader.iter_shapes():
            print(shape.kind)
    """

    def __init__(self, scene_path: Path) -> None:
        """Initialize the scene reader.

        Args:
            scene_path: Path to the JSON scene file
        """
        self._scene_path = scene_path
        self._records: list[dict[str, Any]] | None = None

    def load(self) -> None:
        """Load the scene file.

        Raises:
            FileNotFoundError: If scene file does not exist
            SceneError: If the file is not valid JSON or has no shape list
        """
        if not self._scene_path.exists():
            raise FileNotFoundError(f"Scene file not found: {self._scene_path}")

        try:
            data = json.loads(self._scene_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise SceneError(str(self._scene_path), f"invalid JSON ({e.msg})") from e

        if isinstance(data, dict):
            data = data.get("shapes")
        if not isinstance(data, list):
            raise SceneError(str(self._scene_path), "expected a list of shapes")

        self._records = data

    @property
    def shape_count(self) -> int:
        """Return number of shape records in the scene.

        Raises:
            RuntimeError: If scene has not been loaded yet
        """
        if self._records is None:
            raise RuntimeError("Scene not loaded. Call load() first.")

        return len(self._records)

    def iter_shapes(self) -> Iterator[Shape]:
        """Iterate over all shapes in file order.

        Yields:
            Shape domain models

        Raises:
            RuntimeError: If scene has not been loaded yet
            SceneError: If a record is missing fields or has an unknown kind/fill
        """
        if self._records is None:
            raise RuntimeError("Scene not loaded. Call load() first.")

        for index, record in enumerate(self._records):
            try:
                yield Shape.from_dict(record)
            except (KeyError, TypeError, ValueError) as e:
                raise SceneError(
                    str(self._scene_path), f"shape #{index}: {type(e).__name__}: {e}"
                ) from e
