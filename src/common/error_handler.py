################################################################################
# File Name: error_handler.py
# Purpose/Description: Error base classes and per-data-set error reporting
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Rebuilt around data set errors
# ================================================================================
################################################################################

"""
Error handling module.

Provides:
- ErrorCategory: config, data or system
- BaseError: message plus structured details, with a category per subclass
- DataError / ConfigurationError: the two categories the library raises
- formatError: one-line rendering of any exception
- ErrorCollector: per-data-set failures gathered during a batch summary

Usage:
    from common.error_handler import ErrorCollector

    collector = ErrorCollector()
    collector.add(error, dataset='coolantTemp')
    collector.report()
"""

import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of errors for classification."""
    CONFIGURATION = 'config'    # bad settings, fail fast
    DATA = 'data'               # rejected observations, skip the data set
    SYSTEM = 'system'           # anything else


# ================================================================================
# Custom Exception Classes
# ================================================================================

class BaseError(Exception):
    """
    Base exception carrying structured details.

    Attributes:
        message: Human readable description
        details: Context such as the offending index or value
    """

    category: ErrorCategory = ErrorCategory.SYSTEM

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def toDict(self) -> dict[str, Any]:
        """Serialize the error, e.g. for a batch report."""
        return {
            'type': type(self).__name__,
            'category': self.category.value,
            'message': self.message,
            'details': dict(self.details)
        }


class ConfigurationError(BaseError):
    """Settings that cannot be applied."""
    category = ErrorCategory.CONFIGURATION


class DataError(BaseError):
    """Observations that cannot be analyzed."""
    category = ErrorCategory.DATA


# ================================================================================
# Formatting
# ================================================================================

def classifyError(error: Exception) -> ErrorCategory:
    """Category of a BaseError, SYSTEM for every other exception."""
    if isinstance(error, BaseError):
        return error.category
    return ErrorCategory.SYSTEM


def formatError(error: Exception) -> str:
    """
    Render an error on one line.

    BaseError details are appended as key=value pairs, e.g.
    ``[DATA] The passed sequence may only contain finite numbers. | index=1 type=str``.

    Args:
        error: Exception to format

    Returns:
        Formatted error string
    """
    tag = classifyError(error).value.upper()

    if not isinstance(error, BaseError):
        return f"[{tag}] {type(error).__name__}: {error}"

    text = f"[{tag}] {error.message}"
    if error.details:
        text += ' | ' + ' '.join(f'{k}={v}' for k, v in error.details.items())
    return text


# ================================================================================
# Batch Error Collection
# ================================================================================

class ErrorCollector:
    """
    Collects failures by data set name during a batch summary.

    A later failure for the same data set replaces the earlier one.

    Example:
        collector = ErrorCollector()
        for name, values in datasets.items():
            try:
                summary(values)
            except StatisticsError as e:
                collector.add(e, dataset=name)

        collector.report()
        collector.formatted()    # {'speed': '[DATA] ...'}
    """

    def __init__(self):
        self._errors: dict[str, Exception] = {}

    def add(self, error: Exception, dataset: str) -> None:
        """Record the failure for a data set."""
        self._errors[dataset] = error

    def hasErrors(self) -> bool:
        return bool(self._errors)

    def formatted(self) -> dict[str, str]:
        """Data set name to formatError() text, in insertion order."""
        return {name: formatError(error) for name, error in self._errors.items()}

    def report(self) -> None:
        """Log one ERROR line per failed data set."""
        if not self._errors:
            return

        logger.error(f"Skipped {len(self._errors)} data set(s)")
        for name, text in self.formatted().items():
            logger.error(f"  {name}: {text}")
