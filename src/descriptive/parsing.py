################################################################################
# File Name: parsing.py
# Purpose/Description: Text input parsing for raw values and class rows
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
Text input parsing.

Provides:
- parseValues: Numbers separated by commas, semicolons or whitespace
- parseClassRows: One "lower-upper frequency" class per line

Usage:
    from descriptive.parsing import parseValues, parseClassRows

    values = parseValues("12, 15, 15 18")
    rows = parseClassRows(["20-29 5", "30-39 10", "40-49 8"])
"""

import math
import re
from collections.abc import Iterable

from .exceptions import MalformedInputError
from .types import ClassRow, parseClassLabel

VALUE_SEPARATOR_PATTERN = re.compile(r'[,;\s]+')

# "lower-upper" followed by whitespace, ',' or ':' and the frequency
CLASS_ROW_PATTERN = re.compile(r'^\s*(?P<label>.+?)\s*[\s,:]\s*(?P<frequency>[-+]?\d+)\s*$')


def parseValues(text: str) -> list[float]:
    """
    Parse raw observations from free text.

    Args:
        text: Numbers separated by commas, semicolons or whitespace

    Returns:
        Parsed values in input order (empty list for blank text)

    Raises:
        MalformedInputError: If a token is not a finite number
    """
    values: list[float] = []
    for token in VALUE_SEPARATOR_PATTERN.split(text.strip()):
        if not token:
            continue
        try:
            value = float(token)
        except ValueError as e:
            raise MalformedInputError(
                f"Invalid number '{token}'",
                details={'token': token}
            ) from e
        if not math.isfinite(value):
            raise MalformedInputError(
                f"Value '{token}' is not a finite number",
                details={'token': token}
            )
        values.append(value)
    return values


def parseClassRows(lines: Iterable[str]) -> list[ClassRow]:
    """
    Parse class rows, one per line.

    Accepted forms are "20-29 5", "20-29,5" and "20-29:5". Blank lines and
    lines starting with '#' are skipped.

    Args:
        lines: Lines of text

    Returns:
        ClassRow list in input order, midpoints left to the calculator

    Raises:
        MalformedInputError: If a line cannot be parsed (message names the line)
    """
    rows: list[ClassRow] = []
    for lineNum, line in enumerate(lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue

        match = CLASS_ROW_PATTERN.match(stripped)
        if match is None:
            raise MalformedInputError(
                f"Line {lineNum}: expected 'lower-upper frequency', got '{stripped}'",
                details={'line': lineNum, 'text': stripped}
            )

        try:
            lower, upper = parseClassLabel(match.group('label'))
        except MalformedInputError as e:
            raise MalformedInputError(
                f"Line {lineNum}: {e.message}",
                details={'line': lineNum, **e.details}
            ) from e

        rows.append(ClassRow(
            lower=lower,
            upper=upper,
            frequency=int(match.group('frequency'))
        ))
    return rows
