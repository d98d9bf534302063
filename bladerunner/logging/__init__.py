"""
Logging Package
Structured logging for the view layer

Every bladerunner module logs through getLogger(__name__), so configuring the
'bladerunner' logger with LoggerConfig.setup_logger() covers the whole package.
"""
from bladerunner.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Names outside the 'bladerunner' hierarchy are nested under it so that a
    single LoggerConfig.setup_logger('bladerunner') call configures them.

    Example:
        from bladerunner.logging import getLogger
        logger = getLogger(__name__)
        logger.info("Compiled view", extra={'path': path})
    """
    if name is None or name == 'bladerunner' or name.startswith('bladerunner.'):
        return logging.getLogger(name or 'bladerunner')
    return logging.getLogger(f'bladerunner.{name}')
