"""Input/output layer for asciigrid.

This module turns shape descriptions into domain shapes and writes rendered
grids out.

Key responsibilities:
- Parse compact shape specs given on the command line
- Load JSON scene files
- Write rendered canvases to files or streams

Key classes:
- SceneReader: Load scenes and yield shapes
- GridWriter: Write canvases
"""

from asciigrid.io.converter import (
    parse_shape_spec,
    parse_shape_specs,
    shape_from_dict,
    shape_to_dict,
)
from asciigrid.io.reader import SceneReader
from asciigrid.io.writer import GridWriter

__all__ = [
    "GridWriter",
    "SceneReader",
    "parse_shape_spec",
    "parse_shape_specs",
    "shape_from_dict",
    "shape_to_dict",
]
