"""Logging setup for the command line.

Records go to stderr so stdout carries only search results.
"""

import logging
import sys
from datetime import date
from pathlib import Path

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOG_DATE_FORMAT = "%H:%M:%S"


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configure and return a logger writing to stderr.

    Calling it again replaces the handlers installed by the
    previous call. Child loggers (``logging.getLogger(__name__)``
    inside the package) inherit the handlers of the configured parent.

    Args:
        name: Logger name (e.g., 'imdb_search').
        level: Logging level (default INFO).
        log_dir: If given, records are also appended to a dated
            log file in this directory.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_dir is not None:
        file_handler = _open_log_file(name, log_dir)
        if file_handler is not None:
            handlers.append(file_handler)

    formatter = logging.Formatter(_LOG_FORMAT, _LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def _open_log_file(name: str, log_dir: Path) -> logging.FileHandler | None:
    """Open today's log file for name, or None if it cannot be created."""
    log_path = log_dir / f"{name.replace('.', '_')}_{date.today():%Y%m%d}.log"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, encoding="utf-8")
    except OSError as e:
        print(f"Warning: Could not create log file: {e}", file=sys.stderr)
        return None
