################################################################################
# File Name: pipeline.py
# Purpose/Description: End-to-end analysis of raw and grouped datasets
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
Analysis pipeline.

Runs the engine the way a front end does and captures statistics errors in
the returned analysis instead of raising them:

- analyzeRawData: class count -> frequency table -> ungrouped statistics
  -> grouped statistics of the built table
- analyzeGroupedData: validate manually entered rows -> grouped statistics
- classRowsFromTable: convert builder entries into class rows

Usage:
    from descriptive import analyzeRawData

    analysis = analyzeRawData([12, 15, 15, 18, 21], classCount=3)
    if analysis.success:
        print(analysis.ungrouped.mean, analysis.grouped.mean)
    else:
        print(analysis.errorCode, analysis.errorMessage)
"""

import logging
from collections.abc import Sequence

from .calculations import calculateUngrouped
from .exceptions import EmptyDatasetError, MalformedInputError, StatisticsError
from .frequency_table import buildFrequencyTable, selectClassCount
from .grouped import calculateGrouped
from .types import (
    ClassRow,
    FrequencyTableEntry,
    GroupedDataAnalysis,
    RawDataAnalysis,
)

logger = logging.getLogger(__name__)


def classRowsFromTable(entries: Sequence[FrequencyTableEntry]) -> list[ClassRow]:
    """Convert frequency table entries into grouped calculator input."""
    return [entry.toClassRow() for entry in entries]


def _recordFailure(
    analysis: RawDataAnalysis | GroupedDataAnalysis,
    error: StatisticsError
) -> None:
    analysis.success = False
    analysis.errorCode = error.code
    analysis.errorMessage = error.message
    logger.warning(f"Analysis failed | code={error.code} | error={error.message}")


def analyzeRawData(
    values: Sequence[float],
    classCount: int | None = None
) -> RawDataAnalysis:
    """
    Analyze raw observations end to end.

    Steps that completed before a failure stay on the returned analysis, so a
    dataset containing zero still gets its frequency table even though its
    geometric mean is undefined.

    Args:
        values: Raw observations (not modified)
        classCount: Number of classes; None selects it with Sturges' rule

    Returns:
        RawDataAnalysis (check success before reading the statistics)
    """
    values = list(values)
    analysis = RawDataAnalysis(sampleCount=len(values))

    try:
        if not values:
            raise EmptyDatasetError("Please enter data: the dataset is empty")

        if classCount is None:
            analysis.classCount = selectClassCount(len(values))
            analysis.classCountAuto = True
        else:
            analysis.classCount = classCount

        logger.info(
            f"Analyzing raw data | n={len(values)} k={analysis.classCount} "
            f"auto={analysis.classCountAuto}"
        )

        analysis.frequencyTable = buildFrequencyTable(values, analysis.classCount)
        analysis.ungrouped = calculateUngrouped(values)
        analysis.grouped = calculateGrouped(classRowsFromTable(analysis.frequencyTable))

    except StatisticsError as e:
        _recordFailure(analysis, e)

    return analysis


def analyzeGroupedData(rows: Sequence[ClassRow]) -> GroupedDataAnalysis:
    """
    Analyze manually entered class rows.

    Each row must have lower < upper and frequency > 0.

    Args:
        rows: Class rows in ascending interval order

    Returns:
        GroupedDataAnalysis (check success before reading the statistics)
    """
    analysis = GroupedDataAnalysis(rows=list(rows))

    try:
        if not analysis.rows:
            raise EmptyDatasetError("Please enter rows: no class intervals given")

        for index, row in enumerate(analysis.rows, 1):
            try:
                row.validate()
            except MalformedInputError as e:
                raise MalformedInputError(
                    f"Row {index}: {e.message}",
                    details={'row': index, **e.details}
                ) from e

        logger.info(f"Analyzing grouped data | classes={len(analysis.rows)}")
        analysis.grouped = calculateGrouped(analysis.rows)

    except StatisticsError as e:
        _recordFailure(analysis, e)

    return analysis
