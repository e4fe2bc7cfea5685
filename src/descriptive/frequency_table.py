################################################################################
# File Name: frequency_table.py
# Purpose/Description: Class count selection and frequency table construction
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
Frequency table construction from raw observations.

Provides:
- selectClassCount: Default number of classes by Sturges' rule
- buildFrequencyTable: Partition the data range into k contiguous classes

Classes are right-open except the last one, which is closed at the maximum
value so the maximum is always counted regardless of how the class width
rounds.
"""

import logging
import math
from collections.abc import Sequence

from .exceptions import EmptyDatasetError, MalformedInputError
from .types import FrequencyTableEntry

logger = logging.getLogger(__name__)

# Decimal places kept for class midpoints
MIDPOINT_PRECISION = 1


def roundHalfUp(value: float, places: int = MIDPOINT_PRECISION) -> float:
    """Round to the given decimal places with halves rounded up (not to even)."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def selectClassCount(n: int) -> int:
    """
    Select a default class count with Sturges' rule.

    Args:
        n: Sample size

    Returns:
        ceil(1 + log2(n))

    Raises:
        EmptyDatasetError: If n < 1
    """
    if n < 1:
        raise EmptyDatasetError(
            "Cannot select class count for an empty dataset",
            details={'sampleCount': n}
        )
    return math.ceil(1 + math.log2(n))


def buildFrequencyTable(values: Sequence[float], k: int) -> list[FrequencyTableEntry]:
    """
    Build a frequency table of k classes from raw observations.

    Args:
        values: Raw observations (not modified)
        k: Number of classes

    Returns:
        List of k FrequencyTableEntry in ascending class order

    Raises:
        EmptyDatasetError: If values is empty
        MalformedInputError: If k is not a positive integer
    """
    values = list(values)
    if not values:
        raise EmptyDatasetError("Cannot build frequency table of empty dataset")
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise MalformedInputError(
            f"Class count must be a positive integer, got {k!r}",
            details={'classCount': k}
        )

    n = len(values)
    minValue = min(values)
    maxValue = max(values)
    classWidth = (maxValue - minValue) / k

    logger.debug(
        f"Building frequency table | n={n} k={k} min={minValue} "
        f"max={maxValue} width={classWidth}"
    )

    entries: list[FrequencyTableEntry] = []
    cumulativeAsc = 0

    for i in range(k):
        lower = minValue + i * classWidth
        isLast = i == k - 1

        if isLast:
            upper = maxValue + 1
            frequency = sum(1 for v in values if lower <= v <= maxValue)
        else:
            upper = lower + classWidth
            frequency = sum(1 for v in values if lower <= v < upper)

        cumulativeAsc += frequency

        entries.append(FrequencyTableEntry(
            classLower=math.floor(lower),
            classUpper=math.floor(upper - 1),
            lowerBoundary=lower,
            upperBoundary=upper,
            frequency=frequency,
            midpoint=roundHalfUp((lower + upper) / 2),
            cumulativeAsc=cumulativeAsc,
            cumulativeDesc=n - cumulativeAsc + frequency
        ))

    return entries
