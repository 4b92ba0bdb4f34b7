################################################################################
# File Name: __init__.py
# Purpose/Description: Analysis subpackage for descriptive statistics
# Author: Ralph Agent
# Creation Date: 2026-01-22
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-22    | Ralph Agent  | Initial subpackage creation
# 2026-01-22    | Ralph Agent  | Added all exports
# 2026-10-19    | Ralph Agent  | Descriptive statistics API
# ================================================================================
################################################################################
"""
Analysis Subpackage.

This subpackage contains descriptive statistics components:
- Pure calculation functions (average, maximum, median, minimum, mode,
  range, standardDeviation)
- Shared input validation
- Summary record for one data set and batch reports for many

Usage:
    from analysis import summary, median

    stats = summary([2, 4, 4, 4, 5, 5, 7, 9])
    stats.standardDeviation    # 2.0
    median([1, 2, 3, 4])       # 2.5
"""

# Pure calculation functions
from .calculations import (
    STANDARD_DEVIATION_PRECISION,
    average,
    maximum,
    median,
    minimum,
    mode,
    range,
    standardDeviation,
)

# Exceptions
from .exceptions import (
    EmptySequenceError,
    InvalidElementError,
    NotASequenceError,
    StatisticsError,
)

# Helpers
from .helpers import configureFromConfig, summarizeDatasets, summary

# Types
from .types import DatasetSummaryReport, StatisticalSummary

# Validation
from .validation import validateNumbers

__all__ = [
    # Types
    'StatisticalSummary',
    'DatasetSummaryReport',
    # Exceptions
    'StatisticsError',
    'NotASequenceError',
    'EmptySequenceError',
    'InvalidElementError',
    # Validation
    'validateNumbers',
    # Calculation functions
    'average',
    'maximum',
    'median',
    'minimum',
    'mode',
    'range',
    'standardDeviation',
    'STANDARD_DEVIATION_PRECISION',
    # Helpers
    'summary',
    'summarizeDatasets',
    'configureFromConfig',
]
