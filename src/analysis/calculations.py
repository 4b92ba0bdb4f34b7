################################################################################
# File Name: calculations.py
# Purpose/Description: Pure calculation functions for descriptive statistics
# Author: Ralph Agent
# Creation Date: 2026-01-22
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-22    | Ralph Agent  | Initial creation
# 2026-10-19    | Ralph Agent  | Validated descriptive statistics API
# ================================================================================
################################################################################

"""
Pure calculation functions for descriptive statistics.

Provides:
- average: Arithmetic mean of values
- maximum: Largest value
- median: Middle value of the sorted values
- minimum: Smallest value
- mode: All most frequent values, ascending
- range: Difference between largest and smallest value
- standardDeviation: Population standard deviation rounded to 4 places

Every function validates its input with validateNumbers() first and never
mutates the caller's sequence; sorting always happens on a copy.

Note:
    ``range`` shadows the builtin inside this module, so no code here
    iterates with the builtin range().
"""

import math
from collections import Counter
from collections.abc import Sequence

from .validation import validateNumbers

# Decimal places kept by standardDeviation()
STANDARD_DEVIATION_PRECISION = 4


# ================================================================================
# Statistics Calculator Functions
# ================================================================================

def average(numbers: Sequence[float]) -> float:
    """
    Calculate arithmetic mean of values.

    Args:
        numbers: Sequence of finite numbers

    Returns:
        Sum of the values divided by their count

    Raises:
        StatisticsError: If numbers fails validation
    """
    validateNumbers(numbers)
    return sum(numbers) / len(numbers)


def maximum(numbers: Sequence[float]) -> float:
    """Return the largest value in numbers."""
    validateNumbers(numbers)
    return max(numbers)


def minimum(numbers: Sequence[float]) -> float:
    """Return the smallest value in numbers."""
    validateNumbers(numbers)
    return min(numbers)


def median(numbers: Sequence[float]) -> float:
    """
    Calculate median of values.

    For an even count the mean of the two middle values is returned,
    for an odd count the single middle value.

    Args:
        numbers: Sequence of finite numbers

    Returns:
        Median value

    Raises:
        StatisticsError: If numbers fails validation
    """
    validateNumbers(numbers)
    ordered = sorted(numbers)
    middle = len(ordered) // 2

    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]


def mode(numbers: Sequence[float]) -> list[float]:
    """
    Calculate mode (most common values) of values.

    Unlike a single-valued mode, every value sharing the highest frequency
    is returned. When all values are equally frequent, all distinct values
    are returned.

    Args:
        numbers: Sequence of finite numbers

    Returns:
        Ascending list of the most frequent values, without duplicates

    Raises:
        StatisticsError: If numbers fails validation
    """
    validateNumbers(numbers)
    frequencies = Counter(numbers)
    highestCount = max(frequencies.values())

    return sorted(value for value, count in frequencies.items() if count == highestCount)


def range(numbers: Sequence[float]) -> float:
    """
    Calculate range (largest minus smallest value) of values.

    Args:
        numbers: Sequence of finite numbers

    Returns:
        Range of the values

    Raises:
        StatisticsError: If numbers fails validation
    """
    validateNumbers(numbers)
    ordered = sorted(numbers)
    return ordered[-1] - ordered[0]


def standardDeviation(numbers: Sequence[float]) -> float:
    """
    Calculate population standard deviation of values.

    Divides the sum of squared differences from the mean by N (not N-1),
    then rounds the square root to STANDARD_DEVIATION_PRECISION places.

    Rounding uses round(), which takes the nearest binary float and sends
    exact ties to the even digit: standardDeviation([0, 0.0625]) is 0.0312,
    not 0.0313.

    Args:
        numbers: Sequence of finite numbers

    Returns:
        Standard deviation as a float

    Raises:
        StatisticsError: If numbers fails validation
    """
    validateNumbers(numbers)
    count = len(numbers)
    mean = sum(numbers) / count

    # Calculate sum of squared differences from mean
    squaredDiffs = []
    for value in numbers:
        diff = value - mean
        squaredDiffs.append(diff * diff)

    variance = sum(squaredDiffs) / count
    return round(math.sqrt(variance), STANDARD_DEVIATION_PRECISION)
