"""Logging utilities for Rasterlab."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    rendered_count: int = 0
    rejected_count: int = 0
    error_count: int = 0
    pixels_written: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("rasterlab")
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger


class RenderLogger:
    """Logger for tracking rendered shapes and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_shape_start(self, kind: str, algorithm: str, point_count: int) -> None:
        """Log start of shape rendering."""
        self._logger.debug("Rendering shape", kind=kind, algorithm=algorithm, points=point_count)

    def log_shape_complete(
        self,
        kind: str,
        algorithm: str,
        pixels: int,
        duration_ms: float,
    ) -> None:
        """Log successful shape rendering."""
        self._logger.info(
            "Shape rendered",
            kind=kind,
            algorithm=algorithm,
            pixels=pixels,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.rendered_count += 1
        self._stats.pixels_written += pixels

    def log_shape_rejected(self, kind: str, reason: str) -> None:
        """Log shape rejected by a precondition check."""
        self._logger.warning("Shape rejected", kind=kind, reason=reason)
        self._stats.rejected_count += 1
        self._stats.errors.append((kind, reason))

    def log_shape_error(
        self,
        kind: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log shape rendering error."""
        self._logger.error(
            "Shape rendering failed",
            kind=kind,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((kind, str(error)))

    def log_fill(self, kind: str, fill: str, pixels: int) -> None:
        """Log fill details."""
        self._logger.debug("Fill applied", kind=kind, fill=fill, pixels=pixels)

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
