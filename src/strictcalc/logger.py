"""Package logger shared by every pipeline stage."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "strictcalc.stderr"

logger = logging.getLogger("strictcalc")
logger.addHandler(logging.NullHandler())


def configure_logging(level: int = logging.WARNING) -> logging.Handler:
    """Send package log records to stderr at the given level, replacing any earlier setup."""
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
