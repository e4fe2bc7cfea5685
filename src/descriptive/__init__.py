################################################################################
# File Name: __init__.py
# Purpose/Description: Descriptive statistics engine package
# Author: Michael Cornelison
# Creation Date: 2026-10-19
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-19    | M. Cornelison | Initial package creation
# ================================================================================
################################################################################
"""
Descriptive Statistics Package.

This package contains the statistics engine and its front-end helpers:
- Class count selection (Sturges' rule) and frequency table construction
- Ungrouped statistics from raw observations
- Grouped statistics from class rows, with the complete frequency table
- Analysis pipeline, input parsing and report formatting

Usage:
    from descriptive import (
        buildFrequencyTable, calculateGrouped, calculateUngrouped, selectClassCount
    )

    values = [12, 15, 15, 18, 21, 25, 30]
    table = buildFrequencyTable(values, selectClassCount(len(values)))
    rawStats = calculateUngrouped(values)
    groupedStats = calculateGrouped(table)

    # Or run everything at once
    from descriptive import analyzeRawData
    analysis = analyzeRawData(values)
"""

__version__ = '1.0.0'

# Pure calculation functions
from .calculations import (
    calculateCoefficientOfVariation,
    calculateGeometricMean,
    calculateHarmonicMean,
    calculateMean,
    calculateMeanDeviation,
    calculateMedian,
    calculateModes,
    calculateRange,
    calculateStandardDeviation,
    calculateUngrouped,
    calculateVariance,
)

# Exceptions
from .exceptions import (
    DomainError,
    EmptyDatasetError,
    InsufficientDataError,
    InsufficientSampleError,
    MalformedInputError,
    StatisticsCalculationError,
    StatisticsError,
    ZeroMeanError,
)

# Frequency table
from .frequency_table import buildFrequencyTable, selectClassCount

# Grouped calculator
from .grouped import calculateGrouped, calculateGroupedMedian, calculateGroupedMode

# Front-end helpers
from .parsing import parseClassRows, parseValues
from .pipeline import analyzeGroupedData, analyzeRawData, classRowsFromTable
from .report import formatReport

# Types
from .types import (
    ClassRow,
    ExpandedFrequencyRow,
    FrequencyTableEntry,
    GroupedDataAnalysis,
    GroupedStatisticsResult,
    RawDataAnalysis,
    StatisticsKind,
    UngroupedStatisticsResult,
    parseClassLabel,
)

__all__ = [
    # Types
    'StatisticsKind',
    'ClassRow',
    'FrequencyTableEntry',
    'ExpandedFrequencyRow',
    'UngroupedStatisticsResult',
    'GroupedStatisticsResult',
    'RawDataAnalysis',
    'GroupedDataAnalysis',
    'parseClassLabel',
    # Exceptions
    'StatisticsError',
    'StatisticsCalculationError',
    'InsufficientDataError',
    'EmptyDatasetError',
    'InsufficientSampleError',
    'ZeroMeanError',
    'DomainError',
    'MalformedInputError',
    # Engine operations
    'selectClassCount',
    'buildFrequencyTable',
    'calculateUngrouped',
    'calculateGrouped',
    # Calculation functions
    'calculateMean',
    'calculateMedian',
    'calculateModes',
    'calculateRange',
    'calculateVariance',
    'calculateStandardDeviation',
    'calculateMeanDeviation',
    'calculateCoefficientOfVariation',
    'calculateGeometricMean',
    'calculateHarmonicMean',
    'calculateGroupedMedian',
    'calculateGroupedMode',
    # Front-end helpers
    'analyzeRawData',
    'analyzeGroupedData',
    'classRowsFromTable',
    'parseValues',
    'parseClassRows',
    'formatReport',
]
