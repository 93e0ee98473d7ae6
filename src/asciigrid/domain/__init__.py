"""Domain models for asciigrid.

This module contains the value types of the grid and the shapes drawn on it.
All models are immutable (frozen dataclasses) and independent of how they are
rendered.

Key classes:
- Point: An integer grid coordinate
- Frame: An inclusive axis-aligned bounding box
- Shape: Abstract outline generator (begin/next traversal)
- Dot, VerticalLine, Square, Rect: The concrete shapes
"""

from asciigrid.domain.point import Frame, Point, cols, rows
from asciigrid.domain.shapes import Dot, Rect, Shape, ShapeKind, Square, VerticalLine

__all__: list[str] = [
    # Enums
    "ShapeKind",
    # Core types
    "Point",
    "Frame",
    # Shapes
    "Shape",
    "Dot",
    "VerticalLine",
    "Square",
    "Rect",
    # Frame helpers
    "rows",
    "cols",
]
