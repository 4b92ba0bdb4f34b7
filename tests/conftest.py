################################################################################
# File Name: conftest.py
# Purpose/Description: Pytest fixtures and configuration
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Statistics data set and logging fixtures
# ================================================================================
################################################################################

"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.

Usage:
    def test_something(sampleNumbers, restorePackageLoggers):
        # sampleNumbers and restorePackageLoggers are automatically injected
        pass
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest

# Add src to path for imports
srcPath = Path(__file__).parent.parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

from common.logging_config import PACKAGE_LOGGERS  # noqa: E402


# ================================================================================
# Data Set Fixtures
# ================================================================================

@pytest.fixture
def sampleNumbers() -> List[float]:
    """
    Provide the textbook standard deviation data set.

    Returns:
        List whose population standard deviation is exactly 2
    """
    return [2, 4, 4, 4, 5, 5, 7, 9]


@pytest.fixture
def unsortedNumbers() -> List[float]:
    """
    Provide an unsorted data set with a negative value and floats.

    Returns:
        List of mixed int and float values in no particular order
    """
    return [4.5, -1, 7, 2, 2, 10.25, 3]


@pytest.fixture
def namedDatasets() -> Dict[str, Any]:
    """
    Provide named data sets, two valid and two invalid.

    Returns:
        Dictionary of data set name to observations
    """
    return {
        'rpm': [800, 2500, 3100, 2500],
        'coolantTemp': [88.5, 90.0, 91.5],
        'empty': [],
        'corrupt': [1, 'x', 3],
    }


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture
def sampleConfig() -> Dict[str, Any]:
    """
    Provide sample configuration for tests.

    Returns:
        Dictionary with test configuration values
    """
    return {
        'application': {
            'name': 'TestApp'
        },
        'logging': {
            'level': 'DEBUG'
        },
        'batch': {
            'failFast': True
        }
    }


# ================================================================================
# Logging Fixtures
# ================================================================================

@pytest.fixture
def restorePackageLoggers() -> Generator[List[logging.Logger], None, None]:
    """
    Restore the analysis and common loggers after tests that call setupLogging.

    Yields:
        The package loggers, in PACKAGE_LOGGERS order
    """
    loggers = [logging.getLogger(name) for name in PACKAGE_LOGGERS]
    saved = [(list(lg.handlers), lg.level) for lg in loggers]

    yield loggers

    for packageLogger, (handlers, level) in zip(loggers, saved):
        for handler in packageLogger.handlers:
            if handler not in handlers:
                handler.close()
        packageLogger.handlers[:] = handlers
        packageLogger.setLevel(level)


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
