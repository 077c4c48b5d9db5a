"""Standard library logging setup for recordlens.

The package installs a NullHandler on the ``recordlens`` logger, so nothing
is printed unless the application configures logging. ``configure_logging``
is a convenience for scripts and the demo entry point.
"""

import logging
import sys
from typing import TextIO

from recordlens.core.config import EngineConfig

LOGGER_NAME = "recordlens"

DEFAULT_FORMAT = "%(asctime)s %(levelname)-5s [%(threadName)s] %(name)s - %(message)s"


class _StageFilter(logging.Filter):
    """Expose the ``phase`` extra of timed log lines to the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        phase = getattr(record, "phase", None)
        record.phase_suffix = f" phase={phase}" if phase else ""
        return True


def configure_logging(
    config: EngineConfig | None = None,
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Attach a stream handler to the ``recordlens`` logger.

    Calling it again replaces the handler installed by a previous call
    rather than adding a second one.

    Args:
        config: When ``enable_logging`` is False, the package is silenced
            and no handler is attached.
        level: Level for the package logger.
        stream: Destination stream (default: stderr).
        fmt: Format string for the handler.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        if getattr(handler, "_recordlens_managed", False):
            package_logger.removeHandler(handler)

    if config is not None and not config.enable_logging:
        package_logger.setLevel(logging.CRITICAL + 1)
        return package_logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt + "%(phase_suffix)s"))
    handler.addFilter(_StageFilter())
    handler._recordlens_managed = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
