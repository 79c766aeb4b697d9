from __future__ import annotations

import logging
import sys

APP_LOGGER = "mdjrnl"

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def level_for_verbosity(verbosity: int) -> int:
    """Map a repeated ``--debug`` count to a logging level."""
    return _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]


def setup_logging(verbosity: int = 0) -> logging.Logger:
    logger = logging.getLogger(APP_LOGGER)
    level = level_for_verbosity(verbosity)
    logger.setLevel(level)
    logger.propagate = False

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    fmt = logging.Formatter("%(levelname)s | %(name)s | %(message)s")

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    logger.debug("Logging initialized. level=%s", logging.getLevelName(level))
    return logger
