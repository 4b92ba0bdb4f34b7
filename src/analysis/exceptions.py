################################################################################
# File Name: exceptions.py
# Purpose/Description: Exception definitions for the analysis subpackage
# Author: Ralph Agent
# Creation Date: 2026-01-22
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-22    | Ralph Agent  | Initial creation
# 2026-10-19    | Ralph Agent  | Input validation error taxonomy
# ================================================================================
################################################################################

"""
Exception definitions for the analysis subpackage.

Provides:
- StatisticsError: Base exception for statistics-related errors
- NotASequenceError: Input is not a sequence of observations
- EmptySequenceError: Input sequence has no elements
- InvalidElementError: Input sequence holds a non-finite or non-numeric element

The validation errors also derive from the matching builtin (TypeError or
ValueError) so plain ``except TypeError`` callers keep working.
"""

from common.error_handler import DataError

# ================================================================================
# Custom Exceptions
# ================================================================================

class StatisticsError(DataError):
    """Base exception for statistics-related errors."""
    pass


class NotASequenceError(StatisticsError, TypeError):
    """The passed argument is not a sequence."""
    pass


class EmptySequenceError(StatisticsError, ValueError):
    """The passed sequence contains no elements."""
    pass


class InvalidElementError(StatisticsError, TypeError):
    """The passed sequence contains something other than finite numbers."""
    pass
