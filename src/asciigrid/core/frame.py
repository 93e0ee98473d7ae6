"""Bounding frame computation."""

from collections.abc import Iterable

from asciigrid.domain import Frame, Point
from asciigrid.exceptions import EmptyPointSetError


def compute_frame(points: Iterable[Point]) -> Frame:
    """Find the minimal frame enclosing all points.

    Args:
        points: Non-empty sequence of points

    Returns:
        Frame whose aa is (min x, min y) and bb is (max x, max y)

    Raises:
        EmptyPointSetError: If points is empty

    Examples:
        >>> compute_frame([Point(3, 1), Point(0, 4)])
        Frame(aa=Point(x=0, y=1), bb=Point(x=3, y=4))
    """
    iterator = iter(points)
    try:
        first = next(iterator)
    except StopIteration:
        raise EmptyPointSetError() from None

    min_x = max_x = first.x
    min_y = max_y = first.y
    for p in iterator:
        min_x = min(min_x, p.x)
        min_y = min(min_y, p.y)
        max_x = max(max_x, p.x)
        max_y = max(max_y, p.y)

    return Frame(Point(min_x, min_y), Point(max_x, max_y))


frame = compute_frame
