"""Grid writer for saving rendered text."""

import sys
from pathlib import Path
from typing import TextIO

from asciigrid.core.canvas import Canvas


class GridWriter:
    """Writes a rendered canvas to a file or a text stream.

    Example:
        writer = GridWriter(Path("out.txt"))
        writer.write(canvas)
    """

    def __init__(self, target: Path | TextIO | None = None) -> None:
        """Initialize the writer.

        Args:
            target: File path, open text stream, or None for stdout
        """
        self._target = target

    def write(self, cnv: Canvas) -> None:
        """Write the canvas, one newline-terminated line per row.

        Raises:
            OSError: If the target file cannot be written
        """
        if isinstance(self._target, Path):
            self._target.parent.mkdir(parents=True, exist_ok=True)
            with self._target.open("w", encoding="utf-8", newline="\n") as f:
                cnv.flush(f)
        else:
            cnv.flush(self._target if self._target is not None else sys.stdout)
