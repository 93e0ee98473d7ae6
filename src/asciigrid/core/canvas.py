"""Character canvas sized to a frame.

The canvas is a flat, row-major buffer of ``frame.rows * frame.cols`` single
characters. Row 0 is the top of the picture: a point's row index is
``frame.bb.y - point.y`` because y grows upward while text is written top-down.
The column index is ``point.x - frame.aa.x``.
"""

from typing import TextIO

from asciigrid.config import OutOfBoundsPolicy
from asciigrid.domain import Frame, Point
from asciigrid.exceptions import InvalidCharError, PointOutOfFrameError

DEFAULT_FILL = "."
DEFAULT_MARK = "#"


def _check_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1 or not char.isprintable():
        raise InvalidCharError(char)
    return char


class Canvas:
    """A 2D character grid covering a frame.

    Example:
        cnv = Canvas(Frame(Point(0, 0), Point(2, 1)))
        cnv.paint(Point(0, 0))
        cnv.flush(sys.stdout)
    """

    def __init__(self, frame: Frame, fill: str = DEFAULT_FILL) -> None:
        """Allocate a canvas with every cell set to ``fill``.

        Args:
            frame: Region of the grid the canvas covers
            fill: Background character

        Raises:
            InvalidCharError: If fill is not a single printable character
        """
        self._frame = frame
        self._cells: list[str] = [_check_char(fill)] * (frame.rows * frame.cols)

    @property
    def frame(self) -> Frame:
        return self._frame

    @property
    def rows(self) -> int:
        return self._frame.rows

    @property
    def cols(self) -> int:
        return self._frame.cols

    def fill(self, char: str) -> None:
        """Reset every cell to ``char``."""
        char = _check_char(char)
        self._cells[:] = [char] * len(self._cells)

    def _index(self, point: Point) -> int:
        row = self._frame.bb.y - point.y
        col = point.x - self._frame.aa.x
        return row * self.cols + col

    def paint(
        self,
        point: Point,
        mark: str = DEFAULT_MARK,
        policy: OutOfBoundsPolicy | str = OutOfBoundsPolicy.FAIL,
    ) -> bool:
        """Set the cell under ``point`` to ``mark``.

        Args:
            point: Grid point to paint
            mark: Character to write
            policy: Handling of points outside the frame, as a policy or its
                value ("fail", "ignore", "clamp")

        Returns:
            True if a cell was written, False if the point was ignored

        Raises:
            PointOutOfFrameError: If the point is outside the frame and the
                policy is FAIL
            InvalidCharError: If mark is not a single printable character
            ValueError: If policy is not a known policy value
        """
        policy = OutOfBoundsPolicy(policy)
        mark = _check_char(mark)
        if not self._frame.contains(point):
            if policy is OutOfBoundsPolicy.IGNORE:
                return False
            if policy is OutOfBoundsPolicy.CLAMP:
                point = self._frame.clamp(point)
            else:
                raise PointOutOfFrameError(point, self._frame)
        self._cells[self._index(point)] = mark
        return True

    def char_at(self, point: Point) -> str:
        """Character currently stored under a grid point.

        Raises:
            PointOutOfFrameError: If the point is outside the frame
        """
        if not self._frame.contains(point):
            raise PointOutOfFrameError(point, self._frame)
        return self._cells[self._index(point)]

    def cell(self, row: int, col: int) -> str:
        """Character at a canvas row/column (row 0 is the top line)."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} canvas")
        return self._cells[row * self.cols + col]

    def to_lines(self) -> list[str]:
        """Canvas rows as strings, top row first."""
        width = self.cols
        return [
            "".join(self._cells[start : start + width])
            for start in range(0, len(self._cells), width)
        ]

    def to_text(self) -> str:
        """Canvas as text, every row terminated by a newline."""
        return "".join(f"{line}\n" for line in self.to_lines())

    def flush(self, output: TextIO) -> None:
        """Write the canvas row by row to a text stream."""
        for line in self.to_lines():
            output.write(line)
            output.write("\n")

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Canvas(frame={self._frame!r}, size={self.rows}x{self.cols})"


def canvas(frame: Frame, fill: str = DEFAULT_FILL) -> Canvas:
    """Allocate a canvas for ``frame`` filled with ``fill``."""
    return Canvas(frame, fill)


def paint(
    point: Point,
    cnv: Canvas,
    mark: str = DEFAULT_MARK,
    policy: OutOfBoundsPolicy | str = OutOfBoundsPolicy.FAIL,
) -> bool:
    """Paint one point onto a canvas. See Canvas.paint."""
    return cnv.paint(point, mark, policy)


def flush(output: TextIO, cnv: Canvas) -> None:
    """Write a canvas to a text stream. See Canvas.flush."""
    cnv.flush(output)
