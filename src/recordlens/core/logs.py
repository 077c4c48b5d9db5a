"""Timing helper that logs the entry and exit of an operation."""

import logging
import time
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class TimedResult:
    """Result object for timed_log context manager.

    ``elapsed_ms`` is None until the block exits.
    """

    message: str
    elapsed_ms: float | None = None


@contextmanager
def timed_log(
    message: str,
    level: int = logging.DEBUG,
    log: logging.Logger | None = None,
    **attributes: str | int | float | bool,
) -> Generator[TimedResult]:
    """Context manager that logs entry and exit with elapsed time.

    The exit line is written only when the block completes without raising.

    Args:
        message: The base log message
        level: Log level (default DEBUG)
        log: Logger to write to (default: this module's logger)
        **attributes: Additional structured fields, passed as ``extra``

    Yields:
        TimedResult whose elapsed_ms is filled in on exit
    """
    target = log or logger
    result = TimedResult(message=message)
    start = time.perf_counter()
    target.log(level, "%s [entry]", message, extra={"phase": "entry", **attributes})
    yield result
    result.elapsed_ms = max((time.perf_counter() - start) * 1000.0, 0.0)
    target.log(
        level,
        "%s [exit] %.3fms",
        message,
        result.elapsed_ms,
        extra={"phase": "exit", "elapsed_ms": result.elapsed_ms, **attributes},
    )
