"""Render pipeline orchestration.

This module runs the full pipeline for a batch of shapes:

1. Collect every shape's outline into one combined point sequence
2. Derive the bounding frame of those points
3. Allocate a canvas for the frame, filled with the background character
4. Paint each point in order (later shapes overwrite earlier ones)
5. Flush the canvas as text

Key components:
- Renderer: Settings-driven orchestrator that records RenderStats
- render / render_to: One-call helpers using default settings
"""

import time
from collections.abc import Sequence
from typing import TextIO

import structlog

from asciigrid.config import AsciiGridSettings, OutOfBoundsPolicy, get_default_settings
from asciigrid.core.canvas import Canvas
from asciigrid.core.frame import compute_frame
from asciigrid.core.outline import collect_all
from asciigrid.domain import Point, Shape
from asciigrid.utils import RenderLogger, RenderStats, configure_logging


class Renderer:
    """Renders shape outlines onto a character canvas.

    Example:
        renderer = Renderer(AsciiGridSettings())
        canvas = renderer.render([Rect(Point(10, 5), Point(20, 10)), Dot(Point(2, 2))])
        canvas.flush(sys.stdout)
    """

    def __init__(
        self,
        settings: AsciiGridSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            settings: Application settings (defaults if None)
            logger: Bound logger to use; configured from settings if None
        """
        self.settings = settings or get_default_settings()
        if logger is None:
            logger = configure_logging(
                log_file=self.settings.logging.log_file,
                console_level=self.settings.logging.log_level,
                file_level=self.settings.logging.file_log_level,
            )
        self.logger = logger
        self.render_logger = RenderLogger(self.logger)

    @property
    def stats(self) -> RenderStats:
        """Statistics of the most recent render pass."""
        return self.render_logger.stats

    def collect(self, shapes: Sequence[Shape]) -> list[Point]:
        """Collect the outlines of all shapes in submission order."""

        def log_shape(index: int, shape: Shape, count: int) -> None:
            self.render_logger.log_shape_collected(index, shape.kind.value, count)

        return collect_all(
            shapes,
            self.settings.render.max_outline_points,
            shape_callback=log_shape,
        )

    def paint_all(self, points: Sequence[Point], cnv: Canvas) -> None:
        """Paint every point onto the canvas with the configured mark."""
        mark = self.settings.canvas.mark_char
        policy = self.settings.render.out_of_bounds
        for point in points:
            if cnv.paint(point, mark, policy):
                self.render_logger.log_point_painted()
            else:
                self.render_logger.log_point_skipped(str(point), str(cnv.frame))

    def render_points(self, points: Sequence[Point]) -> Canvas:
        """Frame, allocate and paint a canvas for an already collected sequence."""
        frame = compute_frame(points)
        self.render_logger.log_frame(str(frame), frame.rows, frame.cols)
        cnv = Canvas(frame, self.settings.canvas.fill_char)
        self.paint_all(points, cnv)
        return cnv

    def render(self, shapes: Sequence[Shape]) -> Canvas:
        """Run the pipeline and return the painted canvas.

        Args:
            shapes: Shapes to draw, painted in the given order

        Returns:
            Canvas covering the frame of all outlines

        Raises:
            ShapeError: If a shape cannot produce its outline
            EmptyPointSetError: If no shapes were given
            PointOutOfFrameError: If painting fails under the FAIL policy
        """
        self.render_logger = RenderLogger(self.logger)
        stats = self.render_logger.stats
        stats.start_time = time.time()

        stage = "collect"
        try:
            points = self.collect(shapes)
            stage = "paint"
            cnv = self.render_points(points)
        except Exception as e:
            self.render_logger.log_render_error(stage, e)
            raise
        finally:
            stats.end_time = time.time()

        self.render_logger.log_render_complete()
        return cnv

    def render_text(self, shapes: Sequence[Shape]) -> str:
        """Run the pipeline and return the canvas as text."""
        return self.render(shapes).to_text()

    def render_to(self, output: TextIO, shapes: Sequence[Shape]) -> RenderStats:
        """Run the pipeline and write the canvas to a text stream."""
        self.render(shapes).flush(output)
        return self.stats


def _settings_for(
    fill: str,
    mark: str,
    out_of_bounds: OutOfBoundsPolicy,
) -> AsciiGridSettings:
    return AsciiGridSettings.model_validate(
        {
            "canvas": {"fill_char": fill, "mark_char": mark},
            "render": {"out_of_bounds": out_of_bounds},
        }
    )


def render(
    shapes: Sequence[Shape],
    fill: str = ".",
    mark: str = "#",
    out_of_bounds: OutOfBoundsPolicy = OutOfBoundsPolicy.FAIL,
) -> str:
    """Render shapes to text with the given characters."""
    return Renderer(_settings_for(fill, mark, out_of_bounds)).render_text(shapes)


def render_to(
    output: TextIO,
    shapes: Sequence[Shape],
    fill: str = ".",
    mark: str = "#",
    out_of_bounds: OutOfBoundsPolicy = OutOfBoundsPolicy.FAIL,
) -> RenderStats:
    """Render shapes and write the text to ``output``."""
    return Renderer(_settings_for(fill, mark, out_of_bounds)).render_to(output, shapes)
