################################################################################
# File Name: calculations.py
# Purpose/Description: Pure calculation functions for ungrouped statistics
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
Pure calculation functions for ungrouped (raw) statistics.

Provides:
- calculateMean: Arithmetic mean
- calculateMedian: Median of the sorted values
- calculateModes: All values sharing the highest frequency
- calculateRange: max - min
- calculateVariance: Sample variance (divisor n - 1)
- calculateStandardDeviation: Sample standard deviation
- calculateMeanDeviation: Mean absolute deviation from the mean
- calculateCoefficientOfVariation: stdDev / mean in percent
- calculateGeometricMean: exp of the mean logarithm
- calculateHarmonicMean: n over the sum of reciprocals
- calculateUngrouped: All of the above as an UngroupedStatisticsResult

These are pure functions with no side effects. Undefined results raise a
StatisticsError subclass instead of returning NaN or infinity.
"""

import math
from collections import Counter
from collections.abc import Sequence

from .exceptions import (
    DomainError,
    EmptyDatasetError,
    InsufficientSampleError,
    ZeroMeanError,
)
from .types import UngroupedStatisticsResult


# ================================================================================
# Validation
# ================================================================================

def _requireValues(values: Sequence[float], statistic: str) -> None:
    if not values:
        raise EmptyDatasetError(
            f"Cannot calculate {statistic} of empty dataset",
            details={'statistic': statistic}
        )


# ================================================================================
# Statistics Calculator Functions
# ================================================================================

def calculateMean(values: Sequence[float]) -> float:
    """
    Calculate arithmetic mean of values.

    Args:
        values: List of numeric values

    Returns:
        Mean value

    Raises:
        EmptyDatasetError: If values list is empty
    """
    _requireValues(values, 'mean')
    return sum(values) / len(values)


def calculateMedian(values: Sequence[float]) -> float:
    """
    Calculate median of values.

    Averages the two central values when the count is even.

    Raises:
        EmptyDatasetError: If values list is empty
    """
    _requireValues(values, 'median')
    sortedValues = sorted(values)
    n = len(sortedValues)
    if n % 2 == 0:
        return (sortedValues[n // 2 - 1] + sortedValues[n // 2]) / 2
    return sortedValues[n // 2]


def calculateModes(values: Sequence[float]) -> list[float]:
    """
    Calculate every mode of values.

    Args:
        values: List of numeric values

    Returns:
        Values sharing the maximum frequency, in order of first occurrence

    Raises:
        EmptyDatasetError: If values list is empty
    """
    _requireValues(values, 'mode')
    counter = Counter(values)
    maxCount = max(counter.values())
    return [value for value, count in counter.items() if count == maxCount]


def calculateRange(values: Sequence[float]) -> float:
    """Calculate max - min of values."""
    _requireValues(values, 'range')
    return max(values) - min(values)


def calculateVariance(values: Sequence[float], mean: float | None = None) -> float:
    """
    Calculate sample variance of values.

    Args:
        values: List of numeric values
        mean: Pre-calculated mean (optional, will calculate if not provided)

    Returns:
        Sum of squared deviations divided by n - 1

    Raises:
        EmptyDatasetError: If values list is empty
        InsufficientSampleError: If only one value is provided
    """
    _requireValues(values, 'variance')
    if len(values) < 2:
        raise InsufficientSampleError(
            "Cannot calculate sample variance with fewer than 2 values",
            details={'sampleCount': len(values)}
        )

    if mean is None:
        mean = calculateMean(values)

    squaredDiffs = [(v - mean) ** 2 for v in values]
    return sum(squaredDiffs) / (len(values) - 1)


def calculateStandardDeviation(values: Sequence[float], mean: float | None = None) -> float:
    """
    Calculate sample standard deviation of values.

    Raises:
        EmptyDatasetError: If values list is empty
        InsufficientSampleError: If only one value is provided
    """
    return math.sqrt(calculateVariance(values, mean))


def calculateMeanDeviation(values: Sequence[float], mean: float | None = None) -> float:
    """Calculate the mean absolute deviation of values from their mean."""
    _requireValues(values, 'mean deviation')
    if mean is None:
        mean = calculateMean(values)
    return sum(abs(v - mean) for v in values) / len(values)


def calculateCoefficientOfVariation(stdDev: float, mean: float) -> float:
    """
    Calculate coefficient of variation in percent.

    Args:
        stdDev: Standard deviation
        mean: Mean value

    Returns:
        (stdDev / mean) * 100

    Raises:
        ZeroMeanError: If mean is zero
    """
    if mean == 0:
        raise ZeroMeanError(
            "Cannot calculate coefficient of variation when mean is zero",
            details={'stdDev': stdDev}
        )
    return (stdDev / mean) * 100


def calculateGeometricMean(values: Sequence[float]) -> float:
    """
    Calculate geometric mean of values.

    Raises:
        EmptyDatasetError: If values list is empty
        DomainError: If any value is zero or negative
    """
    _requireValues(values, 'geometric mean')
    nonPositive = [v for v in values if v <= 0]
    if nonPositive:
        raise DomainError(
            "Geometric mean requires all values > 0",
            details={'invalidValues': nonPositive}
        )
    return math.exp(sum(math.log(v) for v in values) / len(values))


def calculateHarmonicMean(values: Sequence[float]) -> float:
    """
    Calculate harmonic mean of values.

    Raises:
        EmptyDatasetError: If values list is empty
        DomainError: If any value is zero or the reciprocals sum to zero
    """
    _requireValues(values, 'harmonic mean')
    if any(v == 0 for v in values):
        raise DomainError(
            "Harmonic mean requires all values != 0",
            details={'zeroCount': sum(1 for v in values if v == 0)}
        )
    reciprocalSum = sum(1 / v for v in values)
    if reciprocalSum == 0:
        raise DomainError(
            "Harmonic mean is undefined when the reciprocals sum to zero",
            details={'sampleCount': len(values)}
        )
    return len(values) / reciprocalSum


def calculateUngrouped(values: Sequence[float]) -> UngroupedStatisticsResult:
    """
    Calculate all descriptive statistics for raw observations.

    Args:
        values: Raw observations (not modified)

    Returns:
        UngroupedStatisticsResult with all calculated values. The mode is a
        single value when unique, otherwise a tuple of all tied values.

    Raises:
        EmptyDatasetError: If no values provided
        InsufficientSampleError: If only one value is provided
        ZeroMeanError: If the mean is zero
        DomainError: If a value is outside the geometric/harmonic mean domain
    """
    values = list(values)
    _requireValues(values, 'statistics')

    mean = calculateMean(values)
    median = calculateMedian(values)
    modes = calculateModes(values)
    valueRange = calculateRange(values)
    variance = calculateVariance(values, mean)
    stdDev = math.sqrt(variance)
    meanDev = calculateMeanDeviation(values, mean)
    cv = calculateCoefficientOfVariation(stdDev, mean)
    geometricMean = calculateGeometricMean(values)
    harmonicMean = calculateHarmonicMean(values)

    return UngroupedStatisticsResult(
        sampleCount=len(values),
        mean=mean,
        median=median,
        mode=modes[0] if len(modes) == 1 else tuple(modes),
        range=valueRange,
        variance=variance,
        stdDev=stdDev,
        meanDev=meanDev,
        cv=cv,
        geometricMean=geometricMean,
        harmonicMean=harmonicMean
    )
