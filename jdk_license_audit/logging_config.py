"""
Logging configuration for the command-line tool.
"""

import logging
import sys


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name on terminals."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def setup_logging(level: str = "INFO", verbose: bool = False) -> logging.Logger:
    """Attach a console handler to the package logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        verbose: Include timestamps, logger names and source locations
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger('jdk_license_audit')
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    if verbose:
        fmt = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
    else:
        fmt = '%(levelname)s - %(message)s'
    if sys.stderr.isatty():
        handler.setFormatter(ColoredFormatter(fmt))
    else:
        handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)

    return logger
