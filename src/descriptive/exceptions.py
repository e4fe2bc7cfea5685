################################################################################
# File Name: exceptions.py
# Purpose/Description: Exception definitions for the descriptive statistics engine
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial implementation
# ================================================================================
################################################################################

"""
Exception definitions for the descriptive statistics engine.

Provides:
- StatisticsError: Base exception for statistics-related errors
- StatisticsCalculationError: A formula is undefined for the given data
- InsufficientDataError: Not enough data points to calculate statistics
- EmptyDatasetError: No observations or class rows were supplied
- InsufficientSampleError: Sample variance requested for a single observation
- ZeroMeanError: Coefficient of variation requested for a zero mean
- DomainError: Logarithm or reciprocal undefined for a value
- MalformedInputError: Class label, class row or class count cannot be used

Every exception carries a stable ``code`` so callers can tell the failed
condition apart without inspecting messages.

StatisticsError builds on common.error_handler.DataError, so the shared error
handling classifies every statistics failure as a data error.
"""

from typing import Any

from common.error_handler import DataError

# ================================================================================
# Custom Exceptions
# ================================================================================

class StatisticsError(DataError):
    """Base exception for statistics-related errors."""

    code: str = 'statistics_error'

    def toDict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = super().toDict()
        result['code'] = self.code
        return result


class StatisticsCalculationError(StatisticsError):
    """Error during statistics calculation."""
    code = 'calculation_error'


class InsufficientDataError(StatisticsError):
    """Not enough data points to calculate statistics."""
    code = 'insufficient_data'


class EmptyDatasetError(InsufficientDataError):
    """Calculator invoked with zero observations or rows."""
    code = 'empty_input'


class InsufficientSampleError(InsufficientDataError):
    """Sample variance is undefined for a single observation (n - 1 == 0)."""
    code = 'insufficient_sample'


class ZeroMeanError(StatisticsCalculationError):
    """Coefficient of variation is undefined when the mean is zero."""
    code = 'division_by_zero'


class DomainError(StatisticsCalculationError):
    """Value outside the domain of a formula (log of x <= 0, 1/0)."""
    code = 'domain_error'


class MalformedInputError(StatisticsError):
    """Input could not be interpreted (bad class label, row or class count)."""
    code = 'malformed_input'
