################################################################################
# File Name: helpers.py
# Purpose/Description: Summary and helper functions for the analysis subpackage
# Author: Ralph Agent
# Creation Date: 2026-01-22
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-22    | Ralph Agent  | Initial creation
# 2026-10-19    | Ralph Agent  | summary(), batch summaries, config setup
# ================================================================================
################################################################################

"""
Summary and helper functions for the analysis subpackage.

Provides:
- summary: All descriptive statistics of one data set as a StatisticalSummary
- summarizeDatasets: Summaries for several named data sets, collecting failures
- configureFromConfig: Load AnalysisSettings and set up logging from them
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from common.config import AnalysisSettings, loadSettings
from common.error_handler import ErrorCollector
from common.logging_config import logWithContext, setupLogging

from .calculations import (
    average,
    maximum,
    median,
    minimum,
    mode,
    range,
    standardDeviation,
)
from .exceptions import StatisticsError
from .types import DatasetSummaryReport, StatisticalSummary
from .validation import validateNumbers

logger = logging.getLogger(__name__)


# ================================================================================
# Summary Functions
# ================================================================================

def summary(numbers: Sequence[float]) -> StatisticalSummary:
    """
    Calculate all descriptive statistics for a data set.

    Each statistic validates the input again on its own; any failure
    propagates unchanged and no partial summary is returned.

    Args:
        numbers: Sequence of finite numbers

    Returns:
        StatisticalSummary with every statistic populated

    Raises:
        NotASequenceError: If numbers is not a sequence
        EmptySequenceError: If numbers has no elements
        InvalidElementError: If an element is not a finite number
    """
    validateNumbers(numbers)

    result = StatisticalSummary(
        average=average(numbers),
        maximum=maximum(numbers),
        median=median(numbers),
        minimum=minimum(numbers),
        mode=mode(numbers),
        range=range(numbers),
        standardDeviation=standardDeviation(numbers)
    )

    logWithContext(logger, 'debug', 'Summary calculated', sampleCount=len(numbers))
    return result


def summarizeDatasets(
    datasets: Mapping[str, Any],
    failFast: bool = False
) -> DatasetSummaryReport:
    """
    Calculate summaries for several named data sets.

    A data set that fails validation is recorded in the report's errors
    and does not stop the remaining data sets from being summarized,
    unless failFast is set.

    Args:
        datasets: Mapping of data set name to its observations
        failFast: Re-raise the first StatisticsError instead of collecting it

    Returns:
        DatasetSummaryReport with summaries and formatted errors by name

    Raises:
        StatisticsError: Only when failFast is set

    Example:
        report = summarizeDatasets({'rpm': [800, 2500, 3100], 'speed': []})
        report.summaries['rpm'].median    # 2500
        report.errors['speed']            # '[DATA] The passed sequence ...'
    """
    report = DatasetSummaryReport()
    collector = ErrorCollector()

    for name, numbers in datasets.items():
        try:
            report.summaries[name] = summary(numbers)
        except StatisticsError as e:
            if failFast:
                logWithContext(logger, 'error', 'Stopped at data set', dataset=name, error=type(e).__name__)
                raise
            collector.add(e, dataset=name)
            logWithContext(logger, 'warning', 'Skipped data set', dataset=name, error=type(e).__name__)

    report.errors = collector.formatted()
    collector.report()

    logWithContext(
        logger, 'info', 'Data sets summarized',
        succeeded=report.successCount,
        failed=report.errorCount
    )
    return report


# ================================================================================
# Configuration
# ================================================================================

def configureFromConfig(config: Mapping[str, Any]) -> AnalysisSettings:
    """
    Load settings and configure the library loggers from them.

    Args:
        config: Raw configuration dictionary, e.g. {'logging': {'level': 'DEBUG'}}

    Returns:
        AnalysisSettings that were applied

    Raises:
        ConfigurationError: If a setting has the wrong type or an unknown log level
    """
    settings = loadSettings(config)
    setupLogging(level=settings.logLevel, logFile=settings.logFile)
    return settings
