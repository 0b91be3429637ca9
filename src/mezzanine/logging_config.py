"""
Logging Configuration
Sets up the 'mezzanine' logger for a command session.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    host_handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'mezzanine' namespace.

    The command may be launched many times inside one host session, so any
    handlers from a previous run are replaced rather than stacked.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to append the session log to.
        host_handler: Optional handler supplied by the host application
            (e.g. its own log window). Replaces the stdout handler.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("mezzanine")
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [host_handler or logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized.")
    return logger
