"""Shapes that enumerate their own outlines.

Every shape implements the same cyclic traversal contract:

- ``begin()`` returns the canonical first point of the outline.
- ``next(prev)`` returns the point that follows ``prev`` on the outline. Called
  on the last point of the cycle it returns ``begin()`` again.

Shapes hold no traversal state; the caller owns the cursor and passes it back
in on every call, so a single shape instance can be walked by any number of
callers at once.

Key classes:
- Shape: Abstract base defining the contract
- Dot: A single point (cycle of length 1)
- VerticalLine: A vertical segment walked bottom to top
- Square: Square outline from its lower-left corner and side
- Rect: Rectangle outline from a position and size, or from two corners
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from asciigrid.domain.point import Point
from asciigrid.exceptions import (
    InvalidCursorError,
    InvalidShapeError,
    InvalidShapeStateError,
    OutlineInvariantError,
)


class ShapeKind(str, Enum):
    """Serialized shape type tags."""

    DOT = "dot"
    VERTICAL_LINE = "vline"
    SQUARE = "square"
    RECT = "rect"


class Shape(ABC):
    """A shape whose outline can be walked as a cycle of grid points."""

    kind: ShapeKind

    @abstractmethod
    def begin(self) -> Point:
        """Return the first point of the outline."""

    @abstractmethod
    def next(self, prev: Point) -> Point:
        """Return the outline point following ``prev``.

        Args:
            prev: A point previously returned by begin() or next()

        Returns:
            The next point of the cycle; begin() after the last point
        """

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""


@dataclass(frozen=True)
class Dot(Shape):
    """A single point. Its outline is a self-loop."""

    point: Point
    kind = ShapeKind.DOT

    def begin(self) -> Point:
        return self.point

    def next(self, prev: Point) -> Point:
        if prev != self.point:
            raise InvalidCursorError("dot", prev)
        return self.point

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "point": list(self.point.to_tuple())}


@dataclass(frozen=True)
class VerticalLine(Shape):
    """A vertical segment between two points sharing the same x.

    A line whose endpoints differ in x can be constructed, but any traversal
    of it fails. The outline runs from the lower endpoint upward and wraps from
    the upper endpoint back to the lower one.

    Attributes:
        start: First endpoint
        end: Second endpoint
        is_valid: Whether start and end share the same x coordinate
    """

    start: Point
    end: Point
    is_valid: bool = field(init=False)
    kind = ShapeKind.VERTICAL_LINE

    def __post_init__(self) -> None:
        object.__setattr__(self, "is_valid", self.start.x == self.end.x)

    def _endpoints(self) -> tuple[Point, Point]:
        if not self.is_valid:
            raise InvalidShapeStateError(
                "vertical line",
                f"x coordinates differ ({self.start.x} != {self.end.x})",
            )
        # Ties go to start.
        if self.start.y <= self.end.y:
            return self.start, self.end
        return self.end, self.start

    def begin(self) -> Point:
        low, _ = self._endpoints()
        return low

    def next(self, prev: Point) -> Point:
        low, high = self._endpoints()
        if prev == high:
            return low
        return Point(prev.x, prev.y + 1)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "start": list(self.start.to_tuple()),
            "end": list(self.end.to_tuple()),
        }


@dataclass(frozen=True)
class Square(Shape):
    """Square outline anchored at its lower-left corner.

    The walk starts at the lower-left corner and goes along the bottom edge,
    up the right edge, back along the top edge and down the left edge.

    Attributes:
        lower_left: Bottom-left corner
        side: Side length, must be positive

    Raises:
        InvalidShapeError: If side is not positive
    """

    lower_left: Point
    side: int
    kind = ShapeKind.SQUARE

    def __post_init__(self) -> None:
        if self.side <= 0:
            raise InvalidShapeError("square", f"side must be positive, got {self.side}")

    def begin(self) -> Point:
        return self.lower_left

    def next(self, prev: Point) -> Point:
        lb = self.lower_left
        rb = lb.offset(dx=self.side)
        lt = lb.offset(dy=self.side)
        rt = lb.offset(dx=self.side, dy=self.side)

        # Corners sit on two edges; the order of these checks picks the edge.
        if prev.y == lb.y and prev.x < rb.x:
            return prev.offset(dx=1)
        if prev.x == rb.x and prev.y < rt.y:
            return prev.offset(dy=1)
        if prev.y == rt.y and prev.x > lt.x:
            return prev.offset(dx=-1)
        if prev.x == lt.x and prev.y > lb.y:
            return prev.offset(dy=-1)
        return lb

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "lower_left": list(self.lower_left.to_tuple()),
            "side": self.side,
        }


@dataclass(frozen=True, init=False)
class Rect(Shape):
    """Rectangle outline between two corners.

    Can be built either from a position and a size, ``Rect(pos, w, h)``, or
    from two corners, ``Rect(a, b)``. Width and height must both be positive,
    so ``b`` has to lie strictly above and to the right of ``a``.

    The walk starts at ``aa`` and goes up the left edge, along the top edge,
    down the right edge and back along the bottom edge.

    Attributes:
        aa: Lower-left corner
        bb: Upper-right corner

    Raises:
        InvalidShapeError: If width or height is not positive
    """

    aa: Point
    bb: Point
    kind = ShapeKind.RECT

    def __init__(
        self,
        position: Point,
        width: "int | Point",
        height: int | None = None,
    ) -> None:
        if isinstance(width, Point):
            if height is not None:
                raise InvalidShapeError("rect", "height given together with a corner")
            corner = width
            width = corner.x - position.x
            height = corner.y - position.y
        elif height is None:
            raise InvalidShapeError("rect", "height is required with a width")

        if not (width > 0 and height > 0):
            raise InvalidShapeError(
                "rect", f"width and height must be positive, got {width}x{height}"
            )
        object.__setattr__(self, "aa", position)
        object.__setattr__(self, "bb", position.offset(dx=width, dy=height))

    @classmethod
    def from_size(cls, position: Point, width: int, height: int) -> "Rect":
        """Build a rectangle from its lower-left corner and size."""
        return cls(position, width, height)

    @classmethod
    def from_corners(cls, a: Point, b: Point) -> "Rect":
        """Build a rectangle from its lower-left and upper-right corners."""
        return cls(a, b)

    @property
    def width(self) -> int:
        return self.bb.x - self.aa.x

    @property
    def height(self) -> int:
        return self.bb.y - self.aa.y

    def begin(self) -> Point:
        return self.aa

    def next(self, prev: Point) -> Point:
        aa, bb = self.aa, self.bb
        if prev.x == aa.x and prev.y < bb.y:
            return prev.offset(dy=1)
        elif prev.y == bb.y and prev.x < bb.x:
            return prev.offset(dx=1)
        elif prev.x == bb.x and prev.y > aa.y:
            return prev.offset(dy=-1)
        elif prev.y == aa.y and prev.x > aa.x:
            return prev.offset(dx=-1)
        raise OutlineInvariantError(f"Point {prev} is not on the outline of rect {aa}-{bb}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "a": list(self.aa.to_tuple()),
            "b": list(self.bb.to_tuple()),
        }
