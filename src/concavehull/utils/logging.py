"""Logging utilities for concavehull."""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class RefinementStats:
    """Statistics from one refinement run."""

    edges_popped: int = 0
    splits: int = 0
    accepted_short: int = 0
    rejected_boundary: int = 0
    rejected_intersection: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def accepted_count(self) -> int:
        """Number of edges finalized as hull boundary."""
        return self.accepted_short + self.rejected_boundary + self.rejected_intersection

    @property
    def duration_seconds(self) -> float:
        """Calculate refinement duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def get_logger(name: str = "concavehull") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger ``name``.

    Until ``configure_logging`` is called, output follows the stdlib
    defaults, so a library user sees nothing below WARNING.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


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
        quiet: If True, suppress console output entirely

    Calling this again replaces the handlers installed by the previous call.

    Returns:
        Configured structlog logger
    """
    package_logger = logging.getLogger("concavehull")
    package_logger.setLevel(logging.DEBUG)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        package_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(console_handler)

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

    logger = get_logger("concavehull")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


class RefinementLogger:
    """Logger for tracking refinement decisions and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RefinementStats()
        self._debug = logger.isEnabledFor(logging.DEBUG)

    def log_start(self, point_count: int, convex_count: int, concavity: float) -> None:
        """Log start of a refinement run."""
        self._stats.start_time = time.perf_counter()
        if self._debug:
            self._logger.debug(
                "Refinement started",
                points=point_count,
                convex_points=convex_count,
                concavity=concavity,
            )

    def log_pop(self) -> None:
        self._stats.edges_popped += 1

    def log_accepted_short(self, edge: tuple[int, int]) -> None:
        """Log an edge accepted because it is within the concavity limit."""
        self._stats.accepted_short += 1

    def log_split(self, edge: tuple[int, int], index: int, score: float) -> None:
        """Log an edge opened by inserting a point."""
        if self._debug:
            self._logger.debug(
                "Edge split",
                edge=edge,
                inserted=index,
                score=round(score, 4),
            )
        self._stats.splits += 1

    def log_rejected_boundary(self, edge: tuple[int, int], index: int) -> None:
        """Log a split rejected because the best point is already on the boundary."""
        if self._debug:
            self._logger.debug(
                "Split rejected", edge=edge, candidate=index, reason="boundary"
            )
        self._stats.rejected_boundary += 1

    def log_rejected_intersection(self, edge: tuple[int, int], index: int) -> None:
        """Log a split rejected because it would make the boundary self-intersect."""
        if self._debug:
            self._logger.debug(
                "Split rejected", edge=edge, candidate=index, reason="intersection"
            )
        self._stats.rejected_intersection += 1

    def log_complete(self, hull_edges: int) -> None:
        """Log end of a refinement run."""
        self._stats.end_time = time.perf_counter()
        self._logger.info(
            "Refinement complete",
            hull_edges=hull_edges,
            splits=self._stats.splits,
            rejected_boundary=self._stats.rejected_boundary,
            rejected_intersection=self._stats.rejected_intersection,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    @property
    def stats(self) -> RefinementStats:
        """Get current refinement statistics."""
        return self._stats
