"""Logging setup for the command-line entry point."""

import logging
import sys
from typing import Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Configure the root logger to write to stderr.

    stdout is reserved for the report itself.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger()
    logger.setLevel(level)

    # Drop handlers from a previous call
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    logging.getLogger(__name__).debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger
