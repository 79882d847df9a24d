"""Logging configuration for taskboard."""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "taskboard"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_for(verbose: int) -> int:
    """Map a -v count to a logging level (1=INFO, 2+=DEBUG)."""
    return logging.DEBUG if verbose >= 2 else logging.INFO


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure the taskboard logger.

    Nothing is logged unless verbose > 0 or log_file is given. Stderr
    output would corrupt the terminal UI, so the TUI is usually run with
    --log-file when debugging.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    if verbose == 0 and log_file is None:
        return

    level = level_for(verbose)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("=" * 60)
    logger.info("taskboard starting | level=%s", logging.getLevelName(level))
    logger.info("=" * 60)
