"""Unit tests for shape outline traversal."""

import pytest

from asciigrid.core.outline import collect
from asciigrid.domain import Dot, Point, Rect, Shape, Square, VerticalLine
from asciigrid.exceptions import (
    InvalidCursorError,
    InvalidShapeError,
    InvalidShapeStateError,
    OutlineInvariantError,
    ShapeError,
)


def walk(shape: Shape, steps: int) -> list[Point]:
    """Follow next() from begin() for a number of steps."""
    points = [shape.begin()]
    for _ in range(steps):
        points.append(shape.next(points[-1]))
    return points


ALL_SHAPES = [
    Dot(Point(5, 5)),
    VerticalLine(Point(0, 5), Point(0, 2)),
    VerticalLine(Point(3, 3), Point(3, 3)),
    Square(Point(0, 0), 2),
    Square(Point(-4, 7), 1),
    Rect(Point(0, 0), Point(2, 1)),
    Rect(Point(10, 5), Point(20, 10)),
]


class TestCycleClosure:
    """Every shape's walk returns to begin() after visiting each point once."""

    @pytest.mark.parametrize("shape", ALL_SHAPES, ids=lambda s: type(s).__name__)
    def test_returns_to_begin_after_outline_length(self, shape: Shape) -> None:
        outline = collect(shape)
        points = walk(shape, len(outline))
        assert points[-1] == shape.begin()
        assert len(set(points[:-1])) == len(outline)

    @pytest.mark.parametrize("shape", ALL_SHAPES, ids=lambda s: type(s).__name__)
    def test_begin_is_deterministic(self, shape: Shape) -> None:
        assert shape.begin() == shape.begin()


class TestDot:
    """Tests for Dot."""

    def test_begin(self):
        """Test begin returns the dot itself."""
        assert Dot(Point(5, 5)).begin() == Point(5, 5)

    def test_next_self_loop(self):
        """Test next on the dot returns the dot."""
        assert Dot(Point(5, 5)).next(Point(5, 5)) == Point(5, 5)

    def test_next_rejects_other_point(self):
        """Test next with a foreign point is an invalid argument."""
        with pytest.raises(InvalidCursorError):
            Dot(Point(5, 5)).next(Point(5, 6))

    def test_bad_cursor_is_value_error(self):
        """Test the cursor error is also a ValueError."""
        with pytest.raises(ValueError):
            Dot(Point(0, 0)).next(Point(1, 0))


class TestVerticalLine:
    """Tests for VerticalLine."""

    def test_begin_is_lower_endpoint(self):
        """Test begin picks the endpoint with the smaller y."""
        assert VerticalLine(Point(0, 5), Point(0, 2)).begin() == Point(0, 2)
        assert VerticalLine(Point(0, 2), Point(0, 5)).begin() == Point(0, 2)

    def test_walk_up_then_wrap(self):
        """Test the walk steps up by one and wraps from the top."""
        line = VerticalLine(Point(0, 5), Point(0, 2))
        assert walk(line, 4) == [
            Point(0, 2),
            Point(0, 3),
            Point(0, 4),
            Point(0, 5),
            Point(0, 2),
        ]

    def test_degenerate_line(self):
        """Test a line with equal endpoints is a one-point cycle."""
        line = VerticalLine(Point(1, 1), Point(1, 1))
        assert line.begin() == Point(1, 1)
        assert line.next(Point(1, 1)) == Point(1, 1)

    def test_validity_flag(self):
        """Test validity is computed at construction."""
        assert VerticalLine(Point(0, 0), Point(0, 9)).is_valid
        assert not VerticalLine(Point(0, 0), Point(1, 0)).is_valid

    def test_mismatched_x_fails_on_begin(self):
        """Test traversal of a slanted line is an invalid state."""
        line = VerticalLine(Point(0, 0), Point(1, 0))
        with pytest.raises(InvalidShapeStateError, match="x coordinates differ"):
            line.begin()

    def test_mismatched_x_fails_on_next(self):
        """Test next also fails on a slanted line."""
        line = VerticalLine(Point(0, 0), Point(1, 0))
        with pytest.raises(InvalidShapeStateError):
            line.next(Point(0, 0))


class TestSquare:
    """Tests for Square."""

    def test_outline(self):
        """Test the outline walks bottom, right, top, then left edge."""
        assert collect(Square(Point(0, 0), 2)) == [
            Point(0, 0),
            Point(1, 0),
            Point(2, 0),
            Point(2, 1),
            Point(2, 2),
            Point(1, 2),
            Point(0, 2),
            Point(0, 1),
        ]

    def test_outline_covers_block_boundary(self):
        """Test the outline is exactly the boundary of a 3x3 block."""
        expected = {
            Point(0, 0), Point(0, 1), Point(0, 2), Point(1, 2),
            Point(2, 2), Point(2, 1), Point(2, 0), Point(1, 0),
        }
        assert set(collect(Square(Point(0, 0), 2))) == expected

    def test_wraps_to_lower_left(self):
        """Test the last point leads back to the lower-left corner."""
        assert Square(Point(0, 0), 2).next(Point(0, 1)) == Point(0, 0)

    @pytest.mark.parametrize("side", [0, -1])
    def test_non_positive_side_rejected(self, side):
        """Test construction fails before any traversal."""
        with pytest.raises(InvalidShapeError, match="side must be positive"):
            Square(Point(0, 0), side)


class TestRect:
    """Tests for Rect."""

    def test_corner_constructor(self):
        """Test construction from two corners."""
        rect = Rect(Point(10, 5), Point(20, 10))
        assert rect.aa == Point(10, 5)
        assert rect.bb == Point(20, 10)
        assert (rect.width, rect.height) == (10, 5)

    def test_size_constructor(self):
        """Test construction from position and size."""
        assert Rect(Point(0, 0), 2, 1) == Rect(Point(0, 0), Point(2, 1))
        assert Rect.from_size(Point(1, 1), 3, 4).bb == Point(4, 5)
        assert Rect.from_corners(Point(1, 1), Point(4, 5)).width == 3

    def test_outline(self):
        """Test the outline goes up, right, down, then back left."""
        assert collect(Rect(Point(0, 0), Point(2, 1))) == [
            Point(0, 0),
            Point(0, 1),
            Point(1, 1),
            Point(2, 1),
            Point(2, 0),
            Point(1, 0),
        ]

    @pytest.mark.parametrize(
        "args",
        [
            (Point(0, 0), 0, 3),
            (Point(0, 0), 3, 0),
            (Point(0, 0), -1, 2),
            (Point(5, 5), Point(3, 8)),
            (Point(0, 0), Point(4, 0)),
        ],
    )
    def test_non_positive_size_rejected(self, args):
        """Test construction fails for empty or inverted rectangles."""
        with pytest.raises(InvalidShapeError):
            Rect(*args)

    def test_width_without_height_rejected(self):
        """Test a numeric width needs a height."""
        with pytest.raises(InvalidShapeError, match="height is required"):
            Rect(Point(0, 0), 2)

    def test_corner_with_height_rejected(self):
        """Test a corner cannot be combined with a height."""
        with pytest.raises(InvalidShapeError):
            Rect(Point(0, 0), Point(1, 1), 3)

    def test_interior_cursor_is_invariant_violation(self):
        """Test next on a point off the outline signals a programming error."""
        rect = Rect(Point(0, 0), Point(4, 4))
        with pytest.raises(OutlineInvariantError):
            rect.next(Point(2, 2))

    def test_errors_share_base(self):
        """Test all shape errors derive from ShapeError."""
        with pytest.raises(ShapeError):
            Rect(Point(0, 0), 0, 0)
