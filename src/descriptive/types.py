################################################################################
# File Name: types.py
# Purpose/Description: Type definitions for the descriptive statistics engine
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
Type definitions for the descriptive statistics engine.

Provides:
- StatisticsKind enum tagging ungrouped vs grouped results
- ClassRow dataclass for one class interval entering the grouped calculator
- FrequencyTableEntry dataclass for one class produced by the table builder
- ExpandedFrequencyRow dataclass for one row of the grouped calculator output
- UngroupedStatisticsResult / GroupedStatisticsResult statistic summaries
- RawDataAnalysis / GroupedDataAnalysis pipeline results
- parseClassLabel for turning a "lower-upper" label into a typed pair

Intervals are carried as (lower, upper) floats; labels are only produced for
display and only parsed at the input boundary.

These types have no dependencies on other project modules apart from the
engine's own exceptions.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from .exceptions import MalformedInputError

# "lower-upper" with optional sign and decimals on both bounds, e.g. "-5-5", "1.5-2.5"
CLASS_LABEL_PATTERN = re.compile(
    r'^\s*([-+]?\d+(?:\.\d+)?)\s*-\s*([-+]?\d+(?:\.\d+)?)\s*$'
)

# Half-width of the continuity correction applied to stated class bounds
CONTINUITY_CORRECTION = 0.5


# ================================================================================
# Enums
# ================================================================================

class StatisticsKind(Enum):
    """Which calculator produced a statistics result."""
    UNGROUPED = 'ungrouped'
    GROUPED = 'grouped'


# ================================================================================
# Helpers
# ================================================================================

def formatBound(value: float) -> str:
    """Format a class bound without a trailing '.0' for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def parseClassLabel(label: str) -> tuple[float, float]:
    """
    Parse a "lower-upper" class label into a (lower, upper) pair.

    Args:
        label: Class label such as "20-29" or "1.5-2.5"

    Returns:
        Tuple of (lower, upper) as floats

    Raises:
        MalformedInputError: If the label does not hold two numeric bounds
    """
    if not isinstance(label, str):
        raise MalformedInputError(
            f"Class label must be a string, got {type(label).__name__}",
            details={'label': label}
        )

    match = CLASS_LABEL_PATTERN.match(label)
    if match is None:
        raise MalformedInputError(
            f"Malformed class label '{label}' (expected 'lower-upper')",
            details={'label': label}
        )

    return float(match.group(1)), float(match.group(2))


# ================================================================================
# Data Classes
# ================================================================================

@dataclass(frozen=True)
class ClassRow:
    """
    One class interval entering the grouped calculator.

    Attributes:
        lower: Stated lower bound of the class
        upper: Stated upper bound of the class
        frequency: Number of observations in the class
        midpoint: Class mark; None means (lower + upper) / 2

    Any midpoint other than None is used as given, including 0.0.
    """
    lower: float
    upper: float
    frequency: int
    midpoint: float | None = None

    @classmethod
    def fromLabel(
        cls,
        label: str,
        frequency: int,
        midpoint: float | None = None
    ) -> 'ClassRow':
        """Build a row from a "lower-upper" label."""
        lower, upper = parseClassLabel(label)
        return cls(lower=lower, upper=upper, frequency=frequency, midpoint=midpoint)

    @property
    def label(self) -> str:
        return f"{formatBound(self.lower)}-{formatBound(self.upper)}"

    @property
    def classMark(self) -> float:
        if self.midpoint is not None:
            return self.midpoint
        return (self.lower + self.upper) / 2

    def validate(self) -> None:
        """
        Check a manually entered row: start below end, positive frequency.

        Raises:
            MalformedInputError: If the row is not a usable interval
        """
        if self.lower >= self.upper:
            raise MalformedInputError(
                f"Class '{self.label}' must have lower < upper",
                details={'lower': self.lower, 'upper': self.upper}
            )
        if self.frequency <= 0:
            raise MalformedInputError(
                f"Class '{self.label}' must have frequency > 0",
                details={'frequency': self.frequency}
            )

    def toDict(self) -> dict[str, Any]:
        """Convert row to dictionary for serialization."""
        return {
            'class': self.label,
            'lower': self.lower,
            'upper': self.upper,
            'frequency': self.frequency,
            'midpoint': self.midpoint
        }


@dataclass(frozen=True)
class FrequencyTableEntry:
    """
    One class of a frequency table built from raw observations.

    Attributes:
        classLower: Displayed lower bound, floor(lowerBoundary)
        classUpper: Displayed upper bound, floor(upperBoundary - 1)
        lowerBoundary: Real-valued lower boundary of the class
        upperBoundary: Real-valued upper boundary (max + 1 for the last class)
        frequency: Number of observations in the class
        midpoint: (lowerBoundary + upperBoundary) / 2 rounded to 1 decimal
        cumulativeAsc: Observations in this class and all classes before it
        cumulativeDesc: Observations in this class and all classes after it
    """
    classLower: int
    classUpper: int
    lowerBoundary: float
    upperBoundary: float
    frequency: int
    midpoint: float
    cumulativeAsc: int
    cumulativeDesc: int

    @property
    def label(self) -> str:
        return f"{self.classLower}-{self.classUpper}"

    def toClassRow(self) -> ClassRow:
        """Convert to the grouped calculator's input, using the displayed bounds."""
        return ClassRow(
            lower=float(self.classLower),
            upper=float(self.classUpper),
            frequency=self.frequency,
            midpoint=self.midpoint
        )

    def toDict(self) -> dict[str, Any]:
        """Convert entry to dictionary for serialization."""
        return {
            'class': self.label,
            'frequency': self.frequency,
            'midpoint': self.midpoint,
            'cumulativeAsc': self.cumulativeAsc,
            'cumulativeDesc': self.cumulativeDesc,
            'lowerBoundary': self.lowerBoundary,
            'upperBoundary': self.upperBoundary
        }


@dataclass(frozen=True)
class ExpandedFrequencyRow:
    """
    One row of the grouped calculator's complete frequency table.

    Attributes:
        lower: Stated lower bound
        upper: Stated upper bound
        frequency: Class frequency (f)
        midpoint: Class mark (x)
        relativeFrequency: Frequency as a percentage of n
        fx: frequency * midpoint
        deviation: midpoint - mean
        fDevSquared: frequency * deviation ** 2
        cumulativeAsc: Running total of frequency from the first class
        cumulativeDesc: Frequency of this class and all classes after it
    """
    lower: float
    upper: float
    frequency: int
    midpoint: float
    relativeFrequency: float
    fx: float
    deviation: float
    fDevSquared: float
    cumulativeAsc: int
    cumulativeDesc: int

    @property
    def label(self) -> str:
        return f"{formatBound(self.lower)}-{formatBound(self.upper)}"

    @property
    def x(self) -> float:
        return self.midpoint

    @property
    def actualBounds(self) -> tuple[float, float]:
        """Continuity-corrected interval (lower - 0.5, upper + 0.5)."""
        return (self.lower - CONTINUITY_CORRECTION, self.upper + CONTINUITY_CORRECTION)

    @property
    def actualBoundsLabel(self) -> str:
        actualLower, actualUpper = self.actualBounds
        return f"{actualLower:.1f}-{actualUpper:.1f}"

    @property
    def classWidth(self) -> float:
        """Width of the interval treated as inclusive integers."""
        return self.upper - self.lower + 1

    def toDict(self) -> dict[str, Any]:
        """Convert row to dictionary for serialization."""
        return {
            'class': self.label,
            'actualBounds': self.actualBoundsLabel,
            'x': self.midpoint,
            'ca': self.midpoint,
            'f': self.frequency,
            'rf': self.relativeFrequency,
            'cumulativeAsc': self.cumulativeAsc,
            'cumulativeDesc': self.cumulativeDesc,
            'fx': self.fx,
            'deviation': self.deviation,
            'fDevSquared': self.fDevSquared
        }


@dataclass(frozen=True)
class StatisticsSummary:
    """
    Descriptive statistics shared by both calculators.

    Attributes:
        sampleCount: Number of observations (n)
        mean: Arithmetic mean
        median: Median
        mode: Mode (ungrouped ties are a tuple of values)
        range: Spread between the extremes
        variance: Sample variance (divisor n - 1)
        stdDev: Sample standard deviation
        meanDev: Mean absolute deviation from the mean
        cv: Coefficient of variation in percent
        geometricMean: Geometric mean
        harmonicMean: Harmonic mean
    """
    kind: ClassVar[StatisticsKind]

    sampleCount: int
    mean: float
    median: float
    mode: float | tuple[float, ...]
    range: float
    variance: float
    stdDev: float
    meanDev: float
    cv: float
    geometricMean: float
    harmonicMean: float

    def toDict(self) -> dict[str, Any]:
        """Convert statistics to dictionary for serialization."""
        return {
            'kind': self.kind.value,
            'sampleCount': self.sampleCount,
            'mean': self.mean,
            'median': self.median,
            'mode': list(self.mode) if isinstance(self.mode, tuple) else self.mode,
            'range': self.range,
            'variance': self.variance,
            'stdDev': self.stdDev,
            'meanDev': self.meanDev,
            'cv': self.cv,
            'geometricMean': self.geometricMean,
            'harmonicMean': self.harmonicMean
        }


@dataclass(frozen=True)
class UngroupedStatisticsResult(StatisticsSummary):
    """Statistics computed directly from raw observations."""
    kind: ClassVar[StatisticsKind] = StatisticsKind.UNGROUPED

    @property
    def modes(self) -> tuple[float, ...]:
        """All modal values, whether or not the mode is unique."""
        if isinstance(self.mode, tuple):
            return self.mode
        return (self.mode,)

    @property
    def hasUniqueMode(self) -> bool:
        return not isinstance(self.mode, tuple)


@dataclass(frozen=True)
class GroupedStatisticsResult(StatisticsSummary):
    """Statistics computed from class rows, with the complete frequency table."""
    kind: ClassVar[StatisticsKind] = StatisticsKind.GROUPED

    frequencyTable: list[ExpandedFrequencyRow] = field(default_factory=list)

    def toDict(self) -> dict[str, Any]:
        """Convert statistics and table to dictionary for serialization."""
        result = super().toDict()
        result['frequencyTable'] = [row.toDict() for row in self.frequencyTable]
        return result


@dataclass
class RawDataAnalysis:
    """
    Result of analyzing a raw observation set end to end.

    Attributes:
        sampleCount: Number of observations supplied
        classCount: Number of classes used for the frequency table
        classCountAuto: Whether classCount came from Sturges' rule
        frequencyTable: Classes built from the observations
        ungrouped: Statistics computed from the raw observations
        grouped: Statistics computed from the built frequency table
        success: Whether every step completed
        errorCode: Code of the failed condition (see exceptions)
        errorMessage: Error message if a step failed
    """
    kind: ClassVar[StatisticsKind] = StatisticsKind.UNGROUPED

    sampleCount: int = 0
    classCount: int | None = None
    classCountAuto: bool = False
    frequencyTable: list[FrequencyTableEntry] = field(default_factory=list)
    ungrouped: UngroupedStatisticsResult | None = None
    grouped: GroupedStatisticsResult | None = None
    success: bool = True
    errorCode: str | None = None
    errorMessage: str | None = None

    def toDict(self) -> dict[str, Any]:
        """Convert analysis to dictionary for serialization."""
        return {
            'kind': self.kind.value,
            'sampleCount': self.sampleCount,
            'classCount': self.classCount,
            'classCountAuto': self.classCountAuto,
            'frequencyTable': [entry.toDict() for entry in self.frequencyTable],
            'ungrouped': self.ungrouped.toDict() if self.ungrouped else None,
            'grouped': self.grouped.toDict() if self.grouped else None,
            'success': self.success,
            'errorCode': self.errorCode,
            'errorMessage': self.errorMessage
        }


@dataclass
class GroupedDataAnalysis:
    """
    Result of analyzing manually entered class rows.

    Attributes:
        rows: Class rows as supplied by the caller
        grouped: Statistics computed from the rows
        success: Whether the calculation completed
        errorCode: Code of the failed condition (see exceptions)
        errorMessage: Error message if the calculation failed
    """
    kind: ClassVar[StatisticsKind] = StatisticsKind.GROUPED

    rows: list[ClassRow] = field(default_factory=list)
    grouped: GroupedStatisticsResult | None = None
    success: bool = True
    errorCode: str | None = None
    errorMessage: str | None = None

    def toDict(self) -> dict[str, Any]:
        """Convert analysis to dictionary for serialization."""
        return {
            'kind': self.kind.value,
            'rows': [row.toDict() for row in self.rows],
            'grouped': self.grouped.toDict() if self.grouped else None,
            'success': self.success,
            'errorCode': self.errorCode,
            'errorMessage': self.errorMessage
        }
