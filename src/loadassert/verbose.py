"""Logging setup for assertion output."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logger(
    debug_file: Path | None = None,
    verbose: bool = False,
    logger_name: str = "loadassert",
) -> logging.Logger:
    """
    Configure and return the logger that receives assertion failures.

    Failures are logged by modules under the ``loadassert`` namespace, so
    handlers attached here see every hard abort and soft failure.

    Args:
        debug_file: Optional log file. Parent directories are created.
        verbose: If True, also log to stderr.
        logger_name: Logger to configure (allows independent loggers in tests).

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)

    # Reconfiguring replaces handlers instead of stacking duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    logger.disabled = False
    logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if debug_file is not None:
        debug_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(debug_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger
