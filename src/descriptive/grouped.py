################################################################################
# File Name: grouped.py
# Purpose/Description: Grouped (class interval) statistics calculator
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
Grouped statistics calculator.

Computes descriptive statistics from class rows (stated bounds, frequency,
optional midpoint) and returns them together with the complete frequency
table: actual bounds, relative frequency, fx, deviation from the mean,
f * deviation squared and cumulative frequencies.

Median and mode use the interpolation formulas for grouped data with
continuity-corrected lower bounds (stated lower bound - 0.5) and a class
width of upper - lower + 1. Rows are processed in the order given; they are
never re-sorted.

Usage:
    from descriptive import ClassRow, calculateGrouped

    rows = [ClassRow(20, 29, 5), ClassRow(30, 39, 10), ClassRow(40, 49, 8)]
    result = calculateGrouped(rows)
    print(result.median, result.mode)
"""

import logging
import math
from collections.abc import Sequence

from .exceptions import (
    DomainError,
    EmptyDatasetError,
    InsufficientSampleError,
    MalformedInputError,
    ZeroMeanError,
)
from .types import (
    CONTINUITY_CORRECTION,
    ClassRow,
    ExpandedFrequencyRow,
    FrequencyTableEntry,
    GroupedStatisticsResult,
)

logger = logging.getLogger(__name__)


def _classWidth(row: ClassRow) -> float:
    return row.upper - row.lower + 1


def _actualLower(row: ClassRow) -> float:
    return row.lower - CONTINUITY_CORRECTION


def _coerceRow(row: ClassRow | FrequencyTableEntry) -> ClassRow:
    if isinstance(row, FrequencyTableEntry):
        return row.toClassRow()
    if not isinstance(row, ClassRow):
        raise MalformedInputError(
            f"Expected ClassRow, got {type(row).__name__}",
            details={'row': repr(row)}
        )
    return row


def _checkRows(rows: list[ClassRow]) -> int:
    """Validate frequencies and return n."""
    if not rows:
        raise EmptyDatasetError("Cannot calculate grouped statistics without class rows")

    for row in rows:
        if isinstance(row.frequency, bool) or not isinstance(row.frequency, int):
            raise MalformedInputError(
                f"Class '{row.label}' frequency must be an integer",
                details={'frequency': row.frequency}
            )
        if row.frequency < 0:
            raise MalformedInputError(
                f"Class '{row.label}' has negative frequency",
                details={'frequency': row.frequency}
            )

    n = sum(row.frequency for row in rows)
    if n == 0:
        raise EmptyDatasetError(
            "Cannot calculate grouped statistics when all frequencies are zero",
            details={'classCount': len(rows)}
        )
    if n < 2:
        raise InsufficientSampleError(
            "Cannot calculate sample variance with fewer than 2 observations",
            details={'sampleCount': n}
        )
    return n


# ================================================================================
# Median and Mode Interpolation
# ================================================================================

def calculateGroupedMedian(rows: Sequence[ClassRow], cumulativeAsc: Sequence[int]) -> float:
    """
    Interpolate the median inside the median class.

    The median class is the first row whose cumulative frequency reaches n / 2.

    Args:
        rows: Class rows in caller order
        cumulativeAsc: Ascending cumulative frequency per row

    Returns:
        l + ((n/2 - F) / f) * w
    """
    n = cumulativeAsc[-1]
    medianPosition = n / 2
    medianIndex = next(
        i for i, cumulative in enumerate(cumulativeAsc) if cumulative >= medianPosition
    )
    medianRow = rows[medianIndex]
    previousCumulative = cumulativeAsc[medianIndex - 1] if medianIndex > 0 else 0

    logger.debug(f"Median class | index={medianIndex} class={medianRow.label}")

    return _actualLower(medianRow) + (
        (medianPosition - previousCumulative) / medianRow.frequency
    ) * _classWidth(medianRow)


def calculateGroupedMode(rows: Sequence[ClassRow]) -> float:
    """
    Interpolate the mode inside the modal class.

    The modal class is the first row with the highest frequency. When the
    frequency differences on both sides are equal and opposite (denominator
    of zero) the mode falls back to the class's actual lower bound.

    Args:
        rows: Class rows in caller order

    Returns:
        l + ((f1 - f0) / ((f1 - f0) + (f1 - f2))) * w
    """
    modeIndex = 0
    for i in range(1, len(rows)):
        if rows[i].frequency > rows[modeIndex].frequency:
            modeIndex = i

    modeRow = rows[modeIndex]
    f1 = modeRow.frequency
    f0 = rows[modeIndex - 1].frequency if modeIndex > 0 else 0
    f2 = rows[modeIndex + 1].frequency if modeIndex < len(rows) - 1 else 0
    lowerBound = _actualLower(modeRow)

    denominator = (f1 - f0) + (f1 - f2)
    if denominator == 0:
        logger.warning(
            f"Degenerate mode denominator, using class lower bound | class={modeRow.label}"
        )
        return lowerBound

    return lowerBound + ((f1 - f0) / denominator) * _classWidth(modeRow)


# ================================================================================
# Grouped Statistics Calculator
# ================================================================================

def calculateGrouped(
    rows: Sequence[ClassRow | FrequencyTableEntry]
) -> GroupedStatisticsResult:
    """
    Calculate all descriptive statistics for grouped data.

    Args:
        rows: Class rows in ascending interval order. FrequencyTableEntry
            items from buildFrequencyTable are accepted and converted.

    Returns:
        GroupedStatisticsResult with statistics and the complete frequency table

    Raises:
        EmptyDatasetError: If there are no rows or all frequencies are zero
        InsufficientSampleError: If the total frequency is 1
        MalformedInputError: If a row is not a class row or has a bad frequency
        ZeroMeanError: If the mean is zero
        DomainError: If a populated class mark is outside the
            geometric/harmonic mean domain
    """
    classRows = [_coerceRow(row) for row in rows]
    n = _checkRows(classRows)

    # First pass: class marks, fx and the mean
    midpoints = [row.classMark for row in classRows]
    fxValues = [row.frequency * x for row, x in zip(classRows, midpoints)]
    mean = sum(fxValues) / n

    # Cumulative frequencies, descending recorded before subtracting
    cumulativeAscList: list[int] = []
    cumulativeDescList: list[int] = []
    cumulativeAsc = 0
    cumulativeDesc = n
    for row in classRows:
        cumulativeAsc += row.frequency
        cumulativeAscList.append(cumulativeAsc)
        cumulativeDescList.append(cumulativeDesc)
        cumulativeDesc -= row.frequency

    # Second pass: deviations from the shared mean
    frequencyTable: list[ExpandedFrequencyRow] = []
    sumFDevSquared = 0.0
    sumAbsDev = 0.0
    for i, row in enumerate(classRows):
        deviation = midpoints[i] - mean
        fDevSquared = row.frequency * deviation ** 2
        sumFDevSquared += fDevSquared
        sumAbsDev += row.frequency * abs(deviation)

        frequencyTable.append(ExpandedFrequencyRow(
            lower=row.lower,
            upper=row.upper,
            frequency=row.frequency,
            midpoint=midpoints[i],
            relativeFrequency=(row.frequency / n) * 100,
            fx=fxValues[i],
            deviation=deviation,
            fDevSquared=fDevSquared,
            cumulativeAsc=cumulativeAscList[i],
            cumulativeDesc=cumulativeDescList[i]
        ))

    median = calculateGroupedMedian(classRows, cumulativeAscList)
    mode = calculateGroupedMode(classRows)
    groupedRange = (
        (classRows[-1].upper + CONTINUITY_CORRECTION) - _actualLower(classRows[0])
    )

    variance = sumFDevSquared / (n - 1)
    stdDev = math.sqrt(variance)
    meanDev = sumAbsDev / n

    if mean == 0:
        raise ZeroMeanError(
            "Cannot calculate coefficient of variation when mean is zero",
            details={'stdDev': stdDev}
        )
    cv = (stdDev / mean) * 100

    # Empty classes carry no weight in the weighted means
    populated = [(row.frequency, x) for row, x in zip(classRows, midpoints) if row.frequency > 0]

    nonPositive = [x for _, x in populated if x <= 0]
    if nonPositive:
        raise DomainError(
            "Geometric mean requires all class marks > 0",
            details={'invalidMidpoints': nonPositive}
        )
    geometricMean = math.exp(sum(f * math.log(x) for f, x in populated) / n)

    # Every populated mark is > 0 here, so no reciprocal can be undefined
    harmonicMean = n / sum(f / x for f, x in populated)

    logger.debug(f"Grouped statistics calculated | classes={len(classRows)} n={n}")

    return GroupedStatisticsResult(
        sampleCount=n,
        mean=mean,
        median=median,
        mode=mode,
        range=groupedRange,
        variance=variance,
        stdDev=stdDev,
        meanDev=meanDev,
        cv=cv,
        geometricMean=geometricMean,
        harmonicMean=harmonicMean,
        frequencyTable=frequencyTable
    )
