################################################################################
# File Name: logging_config.py
# Purpose/Description: Logging setup for the library's own loggers
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Configure package loggers, leave root alone
# ================================================================================
################################################################################

"""
Logging configuration module.

setupLogging() attaches handlers to the ``analysis`` and ``common`` loggers
only, so an application embedding the library keeps control of the root
logger. Calling it again replaces the handlers it installed before.

Usage:
    from common.logging_config import setupLogging, logWithContext

    setupLogging(level='DEBUG', logFile='logs/statistics.log')
    logWithContext(logger, 'info', 'Data sets summarized', succeeded=3, failed=1)
"""

import logging
import sys
from pathlib import Path
from typing import Any

from .error_handler import ConfigurationError

DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s | %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# Loggers owned by this library
PACKAGE_LOGGERS = ('analysis', 'common')

# Marks handlers created by setupLogging()
_HANDLER_FLAG = 'installedBySetupLogging'

logger = logging.getLogger(__name__)


def setupLogging(level: str = 'INFO', logFile: str | None = None) -> list[logging.Logger]:
    """
    Configure the library's loggers.

    Args:
        level: One of LOG_LEVELS, any case
        logFile: Optional file that receives the same records as stderr

    Returns:
        The configured package loggers

    Raises:
        ConfigurationError: If level is not a known level name
    """
    levelName = level.upper()
    if levelName not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level: {level}",
            details={'level': level, 'allowed': ','.join(LOG_LEVELS)}
        )

    formatter = logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if logFile:
        Path(logFile).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(logFile, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_FLAG, True)

    loggers = []
    for name in PACKAGE_LOGGERS:
        packageLogger = logging.getLogger(name)
        for old in [h for h in packageLogger.handlers if getattr(h, _HANDLER_FLAG, False)]:
            packageLogger.removeHandler(old)
            old.close()
        packageLogger.setLevel(levelName)
        for handler in handlers:
            packageLogger.addHandler(handler)
        loggers.append(packageLogger)

    logWithContext(logger, 'info', 'Logging configured', logLevel=levelName, logFile=logFile)
    return loggers


def logWithContext(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any
) -> None:
    """
    Log a message followed by ``| key=value ...`` context.

    The record is attributed to the caller, not to this helper. Unknown
    level names log at INFO.

    Args:
        logger: Logger instance
        level: Level name, any case
        message: Log message
        **context: Context fields appended in order
    """
    levelNo = logging.getLevelName(level.upper())
    if not isinstance(levelNo, int):
        levelNo = logging.INFO

    if context:
        message = message + ' | ' + ' '.join(f'{k}={v}' for k, v in context.items())

    logger.log(levelNo, message, stacklevel=2)
