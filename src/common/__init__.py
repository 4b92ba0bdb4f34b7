################################################################################
# File Name: __init__.py
# Purpose/Description: Common utilities package initialization
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Settings, package logging, data set errors
# ================================================================================
################################################################################

"""
Common utilities package.

Shared by the analysis subpackage:
- Typed settings (config)
- Package logger setup (logging_config)
- Error base classes and batch error collection (error_handler)
"""

from .config import AnalysisSettings, loadSettings
from .error_handler import (
    BaseError,
    ConfigurationError,
    DataError,
    ErrorCategory,
    ErrorCollector,
    formatError,
)
from .logging_config import logWithContext, setupLogging

__all__ = [
    'AnalysisSettings',
    'loadSettings',
    'BaseError',
    'ConfigurationError',
    'DataError',
    'ErrorCategory',
    'ErrorCollector',
    'formatError',
    'logWithContext',
    'setupLogging',
]
