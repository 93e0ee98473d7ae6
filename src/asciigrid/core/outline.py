"""Outline collection by walking a shape's begin/next cycle.

Key functions:
- iter_outline: Lazily yield a shape's outline points once each
- collect: Outline of one shape as a list
- collect_all: Outlines of several shapes concatenated in submission order
"""

from collections.abc import Callable, Iterable, Iterator

from asciigrid.domain import Point, Shape
from asciigrid.exceptions import OutlineInvariantError

DEFAULT_MAX_POINTS = 1_000_000


def iter_outline(shape: Shape, max_points: int = DEFAULT_MAX_POINTS) -> Iterator[Point]:
    """Yield the outline points of a shape in traversal order.

    Starts at ``shape.begin()`` and follows ``shape.next`` until the cycle
    returns to the starting point. The closing point is not yielded twice.

    Args:
        shape: Shape to walk
        max_points: Maximum number of points to yield before deciding the
            cycle never closes

    Yields:
        Outline points, each exactly once

    Raises:
        OutlineInvariantError: If the cycle is longer than max_points
        ShapeError: Propagated from the shape's own begin()/next()
    """
    first = shape.begin()
    yield first

    count = 1
    cursor = shape.next(first)
    while cursor != first:
        if count >= max_points:
            raise OutlineInvariantError(
                f"Outline of {type(shape).__name__} did not close "
                f"within {max_points} points"
            )
        yield cursor
        count += 1
        cursor = shape.next(cursor)


def collect(shape: Shape, max_points: int = DEFAULT_MAX_POINTS) -> list[Point]:
    """Collect the outline of a single shape.

    Examples:
        >>> from asciigrid.domain import Dot
        >>> collect(Dot(Point(5, 5)))
        [Point(x=5, y=5)]
    """
    return list(iter_outline(shape, max_points))


def collect_all(
    shapes: Iterable[Shape],
    max_points: int = DEFAULT_MAX_POINTS,
    shape_callback: Callable[[int, Shape, int], None] | None = None,
) -> list[Point]:
    """Collect outlines of several shapes into one combined sequence.

    Outlines are concatenated in the order the shapes are given, with no
    deduplication across shapes.

    Args:
        shapes: Shapes in submission order
        max_points: Per-shape limit passed to iter_outline
        shape_callback: Optional callback(index, shape, point_count) run after
            each shape's outline has been collected
    """
    points: list[Point] = []
    for index, shape in enumerate(shapes):
        start = len(points)
        points.extend(iter_outline(shape, max_points))
        if shape_callback is not None:
            shape_callback(index, shape, len(points) - start)
    return points
