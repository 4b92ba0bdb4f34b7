################################################################################
# File Name: config.py
# Purpose/Description: Typed settings for the statistics library
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Replaced dot-path validator with AnalysisSettings
# ================================================================================
################################################################################

"""
Configuration module.

Reads the sections the library understands from a nested config dict:

    {
        'logging': {'level': 'DEBUG', 'file': 'logs/statistics.log'},
        'batch': {'failFast': False}
    }

Missing keys fall back to the AnalysisSettings defaults. Unrelated keys
are ignored so the library can share an application's config file.

Usage:
    from common.config import loadSettings

    settings = loadSettings(rawConfig)
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .error_handler import ConfigurationError
from .logging_config import LOG_LEVELS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisSettings:
    """
    Settings applied by configureFromConfig().

    Attributes:
        logLevel: Level for the library loggers
        logFile: Optional log file path
        failFast: Whether summarizeDatasets() stops at the first rejected data set
    """
    logLevel: str = 'INFO'
    logFile: str | None = None
    failFast: bool = False


# Config key -> (AnalysisSettings field, accepted type)
SETTING_KEYS: dict[str, tuple[str, type]] = {
    'logging.level': ('logLevel', str),
    'logging.file': ('logFile', str),
    'batch.failFast': ('failFast', bool),
}


def loadSettings(config: Mapping[str, Any]) -> AnalysisSettings:
    """
    Build AnalysisSettings from a nested config dict.

    Every problem is reported at once: the ConfigurationError details map
    each offending key to what was found there.

    Args:
        config: Raw configuration dictionary

    Returns:
        AnalysisSettings with defaults for absent keys

    Raises:
        ConfigurationError: If a value has the wrong type or an unknown log level
    """
    values: dict[str, Any] = {}
    problems: dict[str, str] = {}

    for key, (fieldName, expectedType) in SETTING_KEYS.items():
        value = _lookup(config, key)
        if value is None:
            continue
        if not isinstance(value, expectedType):
            problems[key] = f'expected {expectedType.__name__}, got {type(value).__name__}'
            continue
        values[fieldName] = value

    level = values.get('logLevel')
    if level is not None and level.upper() not in LOG_LEVELS:
        problems['logging.level'] = f'unknown level {level!r}'

    if problems:
        raise ConfigurationError('Invalid analysis configuration', details=problems)

    settings = AnalysisSettings(**values)
    logger.debug(f"Settings loaded | {settings}")
    return settings


def _lookup(config: Mapping[str, Any], key: str) -> Any:
    value: Any = config
    for part in key.split('.'):
        if not isinstance(value, Mapping) or part not in value:
            return None
        value = value[part]
    return value
