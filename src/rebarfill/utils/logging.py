"""Logging utilities for rebarfill."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class RunStats:
    """Statistics from one bar generation run."""

    scan_lines: int = 0
    bars: int = 0
    total_length: float = 0.0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging with optional file output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("rebarfill")
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None, level=file_level)

    return logger


class RunLogger:
    """Logger for tracking pipeline progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RunStats()

    def log_selection(self, external_id: str, source: str) -> None:
        """Log which entity handle was selected."""
        self._logger.info("Entity selected", handle=external_id, source=source)

    def log_entity(self, entity_type: str, handle: str | None) -> None:
        """Log the resolved entity type."""
        self._logger.info("Entity resolved", entity_type=entity_type, handle=handle)

    def log_bars(self, scan_lines: int, bars: int, total_length: float) -> None:
        """Log bar generation results."""
        self._logger.info(
            "Bars generated",
            scan_lines=scan_lines,
            bars=bars,
            total_length=round(total_length, 2),
        )
        self._stats.scan_lines = scan_lines
        self._stats.bars = bars
        self._stats.total_length = total_length

    def log_failure(self, error: Exception) -> None:
        """Log a pipeline failure."""
        self._logger.error(
            "Bar generation failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> RunStats:
        """Get current run statistics."""
        return self._stats
