"""Logging utilities for samplecheck runs.

Diagnostics always go to stderr so they never interleave with the progress
stream and summary grid printed on stdout.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "samplecheck"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the samplecheck hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _level_for(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach a stderr handler (and optional file sink) to the samplecheck logger.

    ``quiet`` keeps only warnings and errors (missing samples, templates and
    credentials); ``verbose`` wins over ``quiet`` when both are set.
    """
    level = _level_for(verbose=verbose, quiet=quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    # The file sink keeps debug detail even when the console is quieter.
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    # Repeated main() calls in one process would otherwise duplicate lines.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(logging.Formatter("[samplecheck] %(levelname)s %(message)s"))
    logger.addHandler(stderr_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
