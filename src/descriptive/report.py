################################################################################
# File Name: report.py
# Purpose/Description: Plain-text report formatting for analysis results
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
Plain-text report formatting.

Rounding happens here and only here; the engine's results keep full
precision.
"""

from collections.abc import Sequence

from .types import (
    ExpandedFrequencyRow,
    FrequencyTableEntry,
    GroupedDataAnalysis,
    RawDataAnalysis,
    StatisticsSummary,
)

DEFAULT_PRECISION = 2

STATISTIC_LABELS = [
    ('mean', 'Mean'),
    ('median', 'Median'),
    ('mode', 'Mode'),
    ('range', 'Range'),
    ('variance', 'Variance'),
    ('stdDev', 'Std Dev'),
    ('meanDev', 'Mean Deviation'),
    ('cv', 'C.V.'),
    ('geometricMean', 'Geometric Mean'),
    ('harmonicMean', 'Harmonic Mean'),
]


def formatNumber(value: float, precision: int = DEFAULT_PRECISION) -> str:
    return f"{value:.{precision}f}"


def formatMode(mode: float | tuple[float, ...], precision: int = DEFAULT_PRECISION) -> str:
    """Format a mode; tied values are joined with ', '."""
    if isinstance(mode, tuple):
        return ', '.join(formatNumber(value, precision) for value in mode)
    return formatNumber(mode, precision)


def formatStatistics(
    title: str,
    stats: StatisticsSummary,
    precision: int = DEFAULT_PRECISION
) -> list[str]:
    """Return the summary lines for one statistics result."""
    lines = [f"--- {title} (n={stats.sampleCount}) ---"]
    for attribute, label in STATISTIC_LABELS:
        value = getattr(stats, attribute)
        if attribute == 'mode':
            text = formatMode(value, precision)
        elif attribute == 'cv':
            text = f"{formatNumber(value, precision)}%"
        else:
            text = formatNumber(value, precision)
        lines.append(f"  {label + ':':<16} {text}")
    return lines


def formatFrequencyTable(entries: Sequence[FrequencyTableEntry]) -> list[str]:
    """Return the lines of a builder frequency table with a total row."""
    total = sum(entry.frequency for entry in entries)
    lines = [f"  {'Class':<14}{'f':>6}{'R.F (%)':>10}{'X':>10}{'Cum.Asc':>10}{'Cum.Desc':>10}"]
    for entry in entries:
        relative = (entry.frequency / total) * 100 if total else 0.0
        lines.append(
            f"  {entry.label:<14}{entry.frequency:>6}{relative:>9.1f}%"
            f"{entry.midpoint:>10.1f}{entry.cumulativeAsc:>10}{entry.cumulativeDesc:>10}"
        )
    lines.append(f"  {'Total':<14}{total:>6}{'100%':>10}")
    return lines


def formatExpandedTable(
    rows: Sequence[ExpandedFrequencyRow],
    precision: int = 1
) -> list[str]:
    """Return the lines of the grouped calculator's complete frequency table."""
    header = (
        f"  {'Class':<12}{'Actual Bounds':>16}{'x':>9}{'f':>6}{'R.F (%)':>9}"
        f"{'Cum.Asc':>9}{'Cum.Desc':>10}{'fx':>11}{'(x-mean)':>11}{'f(x-mean)^2':>14}"
    )
    lines = [header]
    for row in rows:
        lines.append(
            f"  {row.label:<12}{row.actualBoundsLabel:>16}"
            f"{formatNumber(row.midpoint, precision):>9}{row.frequency:>6}"
            f"{formatNumber(row.relativeFrequency, precision):>8}%"
            f"{row.cumulativeAsc:>9}{row.cumulativeDesc:>10}"
            f"{formatNumber(row.fx, precision):>11}"
            f"{formatNumber(row.deviation, precision):>11}"
            f"{formatNumber(row.fDevSquared, precision):>14}"
        )
    totalF = sum(row.frequency for row in rows)
    totalFx = sum(row.fx for row in rows)
    totalFDevSquared = sum(row.fDevSquared for row in rows)
    lines.append(
        f"  {'Total':<12}{'':>16}{'':>9}{totalF:>6}{'100%':>9}{'':>9}{'':>10}"
        f"{formatNumber(totalFx, precision):>11}{'':>11}"
        f"{formatNumber(totalFDevSquared, precision):>14}"
    )
    return lines


def formatReport(
    analysis: RawDataAnalysis | GroupedDataAnalysis,
    precision: int = DEFAULT_PRECISION
) -> list[str]:
    """
    Return a list of lines forming the human-readable statistics report.

    Args:
        analysis: Result of analyzeRawData or analyzeGroupedData
        precision: Decimal places for statistic values

    Returns:
        Report lines (no trailing newlines)
    """
    lines = ["=== descriptive statistics report ==="]

    if isinstance(analysis, RawDataAnalysis):
        if analysis.frequencyTable:
            source = "Sturges' rule" if analysis.classCountAuto else 'user'
            lines.append(
                f"--- frequency distribution table (k={analysis.classCount}, {source}) ---"
            )
            lines.extend(formatFrequencyTable(analysis.frequencyTable))
        if analysis.ungrouped:
            lines.extend(formatStatistics('raw data summary', analysis.ungrouped, precision))
        if analysis.grouped:
            lines.extend(
                formatStatistics('grouped data analysis', analysis.grouped, precision)
            )
    else:
        if analysis.grouped:
            lines.append('--- complete frequency table ---')
            lines.extend(formatExpandedTable(analysis.grouped.frequencyTable))
            lines.extend(
                formatStatistics('grouped data summary', analysis.grouped, precision)
            )

    if not analysis.success:
        lines.append(f"error [{analysis.errorCode}]: {analysis.errorMessage}")

    return lines
