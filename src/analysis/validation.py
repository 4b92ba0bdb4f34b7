################################################################################
# File Name: validation.py
# Purpose/Description: Input validation shared by all statistics functions
# Author: Ralph Agent
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | Ralph Agent  | Initial creation
# ================================================================================
################################################################################

"""
Input validation for the analysis subpackage.

Every statistics function calls validateNumbers() before computing anything,
so the calculations can assume a non-empty sequence of finite real numbers.
"""

import logging
import math
from collections.abc import Sequence
from numbers import Real
from typing import Any

from .exceptions import EmptySequenceError, InvalidElementError, NotASequenceError

logger = logging.getLogger(__name__)

# Sequences of characters or bytes are never observation sets
_TEXT_TYPES = (str, bytes, bytearray)


def validateNumbers(numbers: Any) -> None:
    """
    Check that numbers is a non-empty sequence of finite real numbers.

    Checks run in order and the first failure decides the error raised:
    sequence type, then length, then each element.

    Args:
        numbers: Candidate set of observations

    Raises:
        NotASequenceError: If numbers is not a list, tuple or other sequence
        EmptySequenceError: If numbers has no elements
        InvalidElementError: If an element is not a finite real number, or lies
            beyond the float range
    """
    if not isinstance(numbers, Sequence) or isinstance(numbers, _TEXT_TYPES):
        logger.debug(f"Rejected input | reason=not_a_sequence | type={type(numbers).__name__}")
        raise NotASequenceError(
            'The passed argument is not a sequence.',
            details={'type': type(numbers).__name__}
        )

    if len(numbers) == 0:
        logger.debug("Rejected input | reason=empty_sequence")
        raise EmptySequenceError('The passed sequence contains no elements.')

    for index, value in enumerate(numbers):
        if not _isFiniteNumber(value):
            logger.debug(f"Rejected input | reason=invalid_element | index={index}")
            raise InvalidElementError(
                'The passed sequence may only contain finite numbers.',
                details={'index': index, 'value': repr(value), 'type': type(value).__name__}
            )


def _isFiniteNumber(value: Any) -> bool:
    # bool is an int subclass but not an observation
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # ints and Fractions beyond float range cannot take part in the float math
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False
