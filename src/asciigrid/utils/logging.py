"""Logging utilities for asciigrid."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on every call.
_installed_handlers: list[logging.Handler] = []


@dataclass
class RenderStats:
    """Statistics from one render pass."""

    shape_count: int = 0
    point_count: int = 0
    painted_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to stderr and, optionally, a file.

    Console output always goes to stderr so it never mixes with a grid
    written to stdout.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("asciigrid")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking render progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_shape_collected(self, index: int, shape_kind: str, point_count: int) -> None:
        """Log one shape's outline collection."""
        self._logger.debug(
            "Outline collected",
            shape=index,
            kind=shape_kind,
            points=point_count,
        )
        self._stats.shape_count += 1
        self._stats.point_count += point_count

    def log_frame(self, frame: str, rows: int, cols: int) -> None:
        """Log the derived frame."""
        self._logger.debug("Frame computed", frame=frame, rows=rows, cols=cols)

    def log_point_painted(self) -> None:
        """Count a painted point."""
        self._stats.painted_count += 1

    def log_point_skipped(self, point: str, frame: str) -> None:
        """Log a point left unpainted because it is outside the frame."""
        self._logger.warning("Point outside frame skipped", point=point, frame=frame)
        self._stats.skipped_count += 1

    def log_render_error(
        self,
        stage: str,
        error: Exception,
    ) -> None:
        """Log a render failure."""
        self._logger.error(
            "Render failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((stage, str(error)))

    def log_render_complete(self) -> None:
        """Log a finished render pass."""
        self._logger.info(
            "Render complete",
            shapes=self._stats.shape_count,
            points=self._stats.point_count,
            painted=self._stats.painted_count,
            skipped=self._stats.skipped_count,
        )

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
