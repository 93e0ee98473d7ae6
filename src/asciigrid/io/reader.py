"""Scene reader for loading shape lists from JSON files.

This module provides the SceneReader class for loading scene files and
converting their shape descriptions to domain shapes.
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from asciigrid.domain import Shape
from asciigrid.exceptions import SceneLoadError
from asciigrid.io.converter import shape_from_dict


class SceneReader:
    """Loads a JSON scene and yields its shapes in file order.

    A scene file holds either a list of shape descriptions or an object with
    a ``"shapes"`` list.

    Example:
        reader = SceneReader(Path("scene.json"))
        reader.load()
        for shape in reader.iter_shapes():
            print(shape)
    """

    def __init__(self, scene_path: Path) -> None:
        """Initialize the scene reader.

        Args:
            scene_path: Path to the JSON scene file
        """
        self._scene_path = scene_path
        self._entries: list[dict[str, Any]] | None = None

    def load(self) -> None:
        """Load and validate the scene file.

        Raises:
            SceneLoadError: If the file is missing, unreadable, not JSON, or
                does not hold a list of shapes
        """
        if not self._scene_path.exists():
            raise SceneLoadError(str(self._scene_path), "file not found")

        try:
            data = json.loads(self._scene_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise SceneLoadError(str(self._scene_path), str(e)) from e
        except json.JSONDecodeError as e:
            raise SceneLoadError(str(self._scene_path), f"invalid JSON: {e}") from e

        if isinstance(data, dict):
            data = data.get("shapes")
        if not isinstance(data, list):
            raise SceneLoadError(str(self._scene_path), "expected a list of shapes")

        self._entries = data

    @property
    def shape_count(self) -> int:
        """Number of shape entries in the scene.

        Raises:
            RuntimeError: If the scene has not been loaded yet
        """
        if self._entries is None:
            raise RuntimeError("Scene not loaded. Call load() first.")
        return len(self._entries)

    def iter_shapes(self) -> Iterator[Shape]:
        """Yield the scene's shapes in file order.

        Raises:
            RuntimeError: If the scene has not been loaded yet
            ShapeSpecError: If an entry is malformed
            InvalidShapeError: If an entry describes an invalid shape
        """
        if self._entries is None:
            raise RuntimeError("Scene not loaded. Call load() first.")
        for entry in self._entries:
            yield shape_from_dict(entry)

    def read(self) -> list[Shape]:
        """Load the scene if needed and return all of its shapes."""
        if self._entries is None:
            self.load()
        return list(self.iter_shapes())
