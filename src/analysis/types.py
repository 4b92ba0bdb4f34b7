################################################################################
# File Name: types.py
# Purpose/Description: Type definitions for the analysis subpackage
# Author: Ralph Agent
# Creation Date: 2026-01-22
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-22    | Ralph Agent  | Initial creation
# 2026-10-19    | Ralph Agent  | StatisticalSummary and batch report types
# ================================================================================
################################################################################

"""
Type definitions for the analysis subpackage.

Provides:
- StatisticalSummary dataclass for the descriptive statistics of one data set
- DatasetSummaryReport dataclass for a batch run over named data sets

These types have no dependencies on other project modules (only stdlib).
"""

from dataclasses import dataclass, field
from typing import Any

# ================================================================================
# Data Classes
# ================================================================================

@dataclass(frozen=True)
class StatisticalSummary:
    """
    Descriptive statistics for a single set of observations.

    Attributes:
        average: Arithmetic mean
        maximum: Largest value observed
        median: Middle value (mean of the two middle values for even counts)
        minimum: Smallest value observed
        mode: Most frequent values, ascending
        range: Maximum minus minimum
        standardDeviation: Population standard deviation, 4 decimal places
    """
    average: float
    maximum: float
    median: float
    minimum: float
    mode: list[float]
    range: float
    standardDeviation: float

    def toDict(self) -> dict[str, Any]:
        """Convert summary to dictionary for serialization."""
        return {
            'average': self.average,
            'maximum': self.maximum,
            'median': self.median,
            'minimum': self.minimum,
            'mode': list(self.mode),
            'range': self.range,
            'standardDeviation': self.standardDeviation
        }


@dataclass
class DatasetSummaryReport:
    """
    Result of summarizing several named data sets.

    Attributes:
        summaries: Dataset name to StatisticalSummary for each success
        errors: Dataset name to formatted error message for each failure
    """
    summaries: dict[str, StatisticalSummary] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def successCount(self) -> int:
        return len(self.summaries)

    @property
    def errorCount(self) -> int:
        return len(self.errors)

    def toDict(self) -> dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            'summaries': {
                name: summary.toDict()
                for name, summary in self.summaries.items()
            },
            'errors': dict(self.errors),
            'successCount': self.successCount,
            'errorCount': self.errorCount
        }
