################################################################################
# File Name: test_grouped.py
# Purpose/Description: Tests for grouped statistics and class label parsing
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
Tests for the grouped module and the ClassRow helpers in types.

Run with:
    pytest tests/test_grouped.py -v
"""

import math
import sys
from pathlib import Path

import pytest

srcPath = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(srcPath))

from descriptive.calculations import calculateUngrouped
from descriptive.exceptions import (
    DomainError,
    EmptyDatasetError,
    InsufficientSampleError,
    MalformedInputError,
    ZeroMeanError,
)
from descriptive.frequency_table import buildFrequencyTable
from descriptive.grouped import calculateGrouped, calculateGroupedMode
from descriptive.types import ClassRow, StatisticsKind, parseClassLabel


class TestCalculateGrouped:
    """Tests for calculateGrouped on the three-class dataset."""

    def test_calculateGrouped_textbookRows_medianInterpolated(self, textbookRows):
        """
        Given: Rows 20-29 (5), 30-39 (10), 40-49 (8)
        When: calculateGrouped() is called
        Then: median = 29.5 + ((11.5 - 5) / 10) * 10 = 36.0
        """
        result = calculateGrouped(textbookRows)

        assert result.kind == StatisticsKind.GROUPED
        assert result.sampleCount == 23
        assert result.median == pytest.approx(36.0)

    def test_calculateGrouped_textbookRows_modeInterpolated(self, textbookRows):
        """
        Given: Rows 20-29 (5), 30-39 (10), 40-49 (8)
        When: calculateGrouped() is called
        Then: mode = 29.5 + (5 / (5 + 2)) * 10
        """
        result = calculateGrouped(textbookRows)

        assert result.mode == pytest.approx(29.5 + 50 / 7)

    def test_calculateGrouped_textbookRows_momentsMatch(self, textbookRows):
        """
        Given: Rows 20-29 (5), 30-39 (10), 40-49 (8)
        When: calculateGrouped() is called
        Then: Mean, range and dispersion match the hand-worked values
        """
        result = calculateGrouped(textbookRows)
        mean = 823.5 / 23
        sumSquares = 5 * 24.5 ** 2 + 10 * 34.5 ** 2 + 8 * 44.5 ** 2

        assert result.mean == pytest.approx(mean)
        assert result.range == pytest.approx(30.0)
        assert result.variance == pytest.approx((sumSquares - 23 * mean ** 2) / 22)
        assert result.stdDev == pytest.approx(math.sqrt(result.variance))
        assert result.meanDev == pytest.approx((7 * mean - 111.5) / 23)
        assert result.cv == pytest.approx(result.stdDev / mean * 100)

    def test_calculateGrouped_textbookRows_weightedMeans(self, textbookRows):
        """
        Given: Rows with positive class marks
        When: calculateGrouped() is called
        Then: Geometric and harmonic means are frequency-weighted
        """
        result = calculateGrouped(textbookRows)
        logSum = 5 * math.log(24.5) + 10 * math.log(34.5) + 8 * math.log(44.5)

        assert result.geometricMean == pytest.approx(math.exp(logSum / 23))
        assert result.harmonicMean == pytest.approx(23 / (5 / 24.5 + 10 / 34.5 + 8 / 44.5))

    def test_calculateGrouped_textbookRows_completeTable(self, textbookRows):
        """
        Given: Rows 20-29 (5), 30-39 (10), 40-49 (8)
        When: calculateGrouped() is called
        Then: The complete table carries bounds, x, fx and cumulative counts
        """
        table = calculateGrouped(textbookRows).frequencyTable

        assert [row.label for row in table] == ['20-29', '30-39', '40-49']
        assert table[0].actualBounds == (19.5, 29.5)
        assert table[0].actualBoundsLabel == '19.5-29.5'
        assert table[0].classWidth == 10
        assert [row.x for row in table] == [24.5, 34.5, 44.5]
        assert [row.fx for row in table] == [122.5, 345.0, 356.0]
        assert [row.cumulativeAsc for row in table] == [5, 15, 23]
        assert [row.cumulativeDesc for row in table] == [23, 18, 8]
        assert table[0].relativeFrequency == pytest.approx(5 / 23 * 100)
        assert sum(row.relativeFrequency for row in table) == pytest.approx(100.0)

    def test_calculateGrouped_medianClass_containsMedian(self, textbookRows):
        """
        Given: Rows where the median class is 30-39
        When: calculateGrouped() is called
        Then: The median lies within the median class's actual bounds
        """
        result = calculateGrouped(textbookRows)

        assert 29.5 <= result.median <= 39.5

    def test_calculateGrouped_rowsNotResorted(self, textbookRows):
        """
        Given: The same rows in descending order
        When: calculateGrouped() is called
        Then: The median class is chosen by the given order
        """
        result = calculateGrouped(list(reversed(textbookRows)))

        assert result.median == pytest.approx(33.0)

    def test_calculateGrouped_givenMidpoint_used(self):
        """
        Given: A row with an explicit midpoint
        When: calculateGrouped() is called
        Then: The given midpoint replaces (lower + upper) / 2
        """
        rows = [ClassRow(20, 29, 5, midpoint=25.0), ClassRow(30, 39, 5)]

        result = calculateGrouped(rows)

        assert result.frequencyTable[0].midpoint == 25.0
        assert result.frequencyTable[0].fx == 125.0

    def test_calculateGrouped_emptyClassWithZeroMark_ignoredByWeightedMeans(self):
        """
        Given: An empty class whose mark is 0
        When: calculateGrouped() is called
        Then: The weighted means only use populated classes
        """
        rows = [ClassRow(-1, 1, 0), ClassRow(2, 4, 3), ClassRow(5, 7, 2)]

        result = calculateGrouped(rows)

        assert result.mean == pytest.approx(4.2)
        assert result.median == pytest.approx(4.0)
        assert result.geometricMean == pytest.approx(
            math.exp((3 * math.log(3) + 2 * math.log(6)) / 5)
        )

    def test_calculateGrouped_equalFrequencies_modeAtFirstClassUpperBound(self):
        """
        Given: Every class with the same frequency
        When: calculateGrouped() is called
        Then: The first class is modal and the mode is its actual upper bound
        """
        rows = [ClassRow(0, 9, 4), ClassRow(10, 19, 4), ClassRow(20, 29, 4)]

        result = calculateGrouped(rows)

        assert result.mode == pytest.approx(9.5)

    def test_calculateGrouped_frequencyTableEntries_accepted(self):
        """
        Given: Entries straight from buildFrequencyTable
        When: calculateGrouped() is called
        Then: They are converted using displayed bounds and builder midpoints
        """
        result = calculateGrouped(buildFrequencyTable(list(range(1, 11)), 3))

        assert [row.label for row in result.frequencyTable] == ['1-3', '4-6', '7-10']
        assert result.mean == pytest.approx(6.0)

    def test_calculateGrouped_calledTwice_identicalResults(self, textbookRows):
        """
        Given: The same rows twice
        When: calculateGrouped() is called
        Then: Results are equal
        """
        assert calculateGrouped(textbookRows) == calculateGrouped(textbookRows)

    # =========================================================================
    # Error Tests
    # =========================================================================

    def test_calculateGrouped_noRows_raisesEmptyDataset(self):
        """
        Given: No rows
        When: calculateGrouped() is called
        Then: Raises EmptyDatasetError
        """
        with pytest.raises(EmptyDatasetError):
            calculateGrouped([])

    def test_calculateGrouped_allZeroFrequencies_raisesEmptyDataset(self):
        """
        Given: Rows whose frequencies are all zero
        When: calculateGrouped() is called
        Then: Raises EmptyDatasetError
        """
        with pytest.raises(EmptyDatasetError):
            calculateGrouped([ClassRow(1, 5, 0), ClassRow(6, 10, 0)])

    def test_calculateGrouped_singleObservation_raisesInsufficientSample(self):
        """
        Given: A total frequency of 1
        When: calculateGrouped() is called
        Then: Raises InsufficientSampleError
        """
        with pytest.raises(InsufficientSampleError):
            calculateGrouped([ClassRow(1, 5, 1)])

    def test_calculateGrouped_negativeFrequency_raisesMalformed(self):
        """
        Given: A negative frequency
        When: calculateGrouped() is called
        Then: Raises MalformedInputError
        """
        with pytest.raises(MalformedInputError):
            calculateGrouped([ClassRow(1, 5, 3), ClassRow(6, 10, -1)])

    def test_calculateGrouped_notARow_raisesMalformed(self):
        """
        Given: A dict instead of a class row
        When: calculateGrouped() is called
        Then: Raises MalformedInputError
        """
        with pytest.raises(MalformedInputError):
            calculateGrouped([{'lower': 1, 'upper': 5, 'frequency': 3}])

    def test_calculateGrouped_zeroMean_raisesZeroMean(self):
        """
        Given: Symmetric rows around zero
        When: calculateGrouped() is called
        Then: Raises ZeroMeanError
        """
        with pytest.raises(ZeroMeanError):
            calculateGrouped([ClassRow(-9, -1, 5), ClassRow(1, 9, 5)])

    def test_calculateGrouped_negativeMark_raisesDomainError(self):
        """
        Given: A populated class with a negative mark and a positive mean
        When: calculateGrouped() is called
        Then: Raises DomainError for the geometric mean
        """
        with pytest.raises(DomainError):
            calculateGrouped([ClassRow(-9, -1, 2), ClassRow(1, 9, 5)])


class TestCalculateGroupedMode:
    """Tests for the degenerate mode denominator."""

    def test_calculateGroupedMode_zeroDenominator_returnsLowerBound(self, caplog):
        """
        Given: Rows whose frequency differences cancel out
        When: calculateGroupedMode() is called
        Then: Falls back to the modal class's actual lower bound with a warning
        """
        rows = [ClassRow(10, 19, 0), ClassRow(20, 29, 0)]

        with caplog.at_level('WARNING'):
            mode = calculateGroupedMode(rows)

        assert mode == 9.5
        assert 'Degenerate mode denominator' in caplog.text


class TestRoundTrip:
    """Tests for raw data -> frequency table -> grouped statistics."""

    def test_roundTrip_scores_groupedMeanNearRawMean(self, rawScores):
        """
        Given: Raw scores grouped into six classes
        When: Grouped statistics are computed from the built table
        Then: n matches and the grouped mean is within half a class width
        """
        table = buildFrequencyTable(rawScores, 6)

        grouped = calculateGrouped(table)
        ungrouped = calculateUngrouped(rawScores)

        assert grouped.sampleCount == ungrouped.sampleCount == 20
        assert abs(grouped.mean - ungrouped.mean) <= ((98 - 45) / 6) / 2


class TestParseClassLabel:
    """Tests for parseClassLabel and ClassRow.fromLabel."""

    @pytest.mark.parametrize('label, expected', [
        ('20-29', (20.0, 29.0)),
        ('1.5-2.5', (1.5, 2.5)),
        (' 20 - 29 ', (20.0, 29.0)),
        ('-5-5', (-5.0, 5.0)),
        ('-10--2', (-10.0, -2.0)),
    ])
    def test_parseClassLabel_validLabel_returnsPair(self, label, expected):
        """
        Given: A well-formed label
        When: parseClassLabel() is called
        Then: Returns the (lower, upper) pair
        """
        assert parseClassLabel(label) == expected

    @pytest.mark.parametrize('label', ['abc', '20', '20-', '', '20-29-39', 5])
    def test_parseClassLabel_malformed_raises(self, label):
        """
        Given: A label without two numeric bounds
        When: parseClassLabel() is called
        Then: Raises MalformedInputError
        """
        with pytest.raises(MalformedInputError) as excInfo:
            parseClassLabel(label)

        assert excInfo.value.code == 'malformed_input'

    def test_classMark_zeroMidpoint_usedAsGiven(self):
        """
        Given: A row with an explicit midpoint of 0.0
        When: classMark is read
        Then: 0.0 is returned rather than (lower + upper) / 2
        """
        assert ClassRow(-1, 3, 2, midpoint=0.0).classMark == 0.0
        assert ClassRow(-1, 3, 2).classMark == 1.0

    def test_fromLabel_buildsRow(self):
        """
        Given: A label and frequency
        When: ClassRow.fromLabel() is called
        Then: Row carries typed bounds and a default class mark
        """
        row = ClassRow.fromLabel('20-29', 5)

        assert (row.lower, row.upper, row.frequency) == (20.0, 29.0, 5)
        assert row.label == '20-29'
        assert row.classMark == 24.5

    def test_validate_reversedBounds_raises(self):
        """
        Given: A row whose lower bound exceeds its upper bound
        When: validate() is called
        Then: Raises MalformedInputError
        """
        with pytest.raises(MalformedInputError):
            ClassRow(30, 20, 5).validate()

    def test_validate_zeroFrequency_raises(self):
        """
        Given: A row with frequency 0
        When: validate() is called
        Then: Raises MalformedInputError
        """
        with pytest.raises(MalformedInputError):
            ClassRow(20, 29, 0).validate()
