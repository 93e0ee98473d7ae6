"""Integer grid coordinates and bounding frames.

This module defines the two value types everything else is built on:
- Point: A 2D integer grid coordinate
- Frame: An axis-aligned bounding box with inclusive corners

The y axis grows upward. ``Frame.aa`` is the minimum corner and ``Frame.bb``
the maximum corner; ``top_left``/``bottom_right`` are aliases kept for the
naming used by the text renderer.
"""

from dataclasses import dataclass
from typing import Any

from asciigrid.exceptions import InvalidFrameError


@dataclass(frozen=True, slots=True)
class Point:
    """A point on the integer grid.

    Immutable and hashable. Equality is structural.

    Attributes:
        x: Column coordinate
        y: Row coordinate (grows upward)
    """

    x: int
    y: int

    def offset(self, dx: int = 0, dy: int = 0) -> "Point":
        """Return a new point shifted by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=int(data["x"]), y=int(data["y"]))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Frame:
    """Axis-aligned bounding box with inclusive corners.

    Attributes:
        aa: Minimum corner (smallest x and y)
        bb: Maximum corner (largest x and y)

    Raises:
        InvalidFrameError: If aa exceeds bb on either axis
    """

    aa: Point
    bb: Point

    def __post_init__(self) -> None:
        if self.aa.x > self.bb.x or self.aa.y > self.bb.y:
            raise InvalidFrameError(self.aa, self.bb)

    @property
    def top_left(self) -> Point:
        """Minimum corner."""
        return self.aa

    @property
    def bottom_right(self) -> Point:
        """Maximum corner."""
        return self.bb

    @property
    def rows(self) -> int:
        """Number of grid rows covered, both extremes included."""
        return self.bb.y - self.aa.y + 1

    @property
    def cols(self) -> int:
        """Number of grid columns covered, both extremes included."""
        return self.bb.x - self.aa.x + 1

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside the frame (inclusive)."""
        return (
            self.aa.x <= point.x <= self.bb.x
            and self.aa.y <= point.y <= self.bb.y
        )

    def clamp(self, point: Point) -> Point:
        """Return the in-frame point nearest to the given point."""
        return Point(
            min(max(point.x, self.aa.x), self.bb.x),
            min(max(point.y, self.aa.y), self.bb.y),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with aa and bb corner dictionaries
        """
        return {"aa": self.aa.to_dict(), "bb": self.bb.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Frame":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with aa and bb corner dictionaries

        Returns:
            Frame instance
        """
        return cls(aa=Point.from_dict(data["aa"]), bb=Point.from_dict(data["bb"]))

    def __str__(self) -> str:
        return f"[{self.aa}..{self.bb}]"


def rows(frame: Frame) -> int:
    """Number of rows in a frame."""
    return frame.rows


def cols(frame: Frame) -> int:
    """Number of columns in a frame."""
    return frame.cols
