import logging
import sys

ROOT_LOGGER_NAME = "ecrtag"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(ROOT_LOGGER_NAME)


def warn(message: str) -> None:
    logger.warning(message)


def configure_logging(verbose: bool = False) -> None:
    """Send ecrtag logs to stderr.

    Args:
        verbose: Log everything down to DEBUG instead of WARNING.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
