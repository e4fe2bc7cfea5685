################################################################################
# File Name: conftest.py
# Purpose/Description: Pytest fixtures and configuration
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Dataset and statistics config fixtures
# ================================================================================
################################################################################

"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.

Usage:
    def test_something(rawScores, textbookRows):
        # rawScores and textbookRows are automatically injected
        pass
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest

# Add src to path for imports
srcPath = Path(__file__).parent.parent / 'src'
if str(srcPath) not in sys.path:
    sys.path.insert(0, str(srcPath))

from descriptive.types import ClassRow


# ================================================================================
# Dataset Fixtures
# ================================================================================

@pytest.fixture
def rawScores() -> List[float]:
    """
    Provide a raw exam score dataset.

    Returns:
        20 integer scores between 45 and 98
    """
    return [
        45, 52, 58, 61, 63, 67, 70, 71, 72, 75,
        76, 78, 80, 82, 84, 85, 88, 90, 94, 98
    ]


@pytest.fixture
def textbookRows() -> List[ClassRow]:
    """
    Provide the three-class grouped dataset used for median/mode checks.

    Returns:
        Rows 20-29 (5), 30-39 (10), 40-49 (8); n = 23
    """
    return [
        ClassRow(lower=20, upper=29, frequency=5),
        ClassRow(lower=30, upper=39, frequency=10),
        ClassRow(lower=40, upper=49, frequency=8),
    ]


# ================================================================================
# Configuration Fixtures
# ================================================================================

@pytest.fixture
def sampleConfig() -> Dict[str, Any]:
    """
    Provide sample configuration for tests.

    Returns:
        Dictionary with test configuration values
    """
    return {
        'application': {
            'name': 'TestStats',
            'version': '1.0.0'
        },
        'analysis': {
            'classCount': 4,
            'displayPrecision': 3
        },
        'logging': {
            'level': 'DEBUG',
            'file': None
        }
    }


@pytest.fixture
def tempConfigFile(tmp_path: Path, sampleConfig: Dict[str, Any]) -> Path:
    """
    Create temporary config file for testing.

    Args:
        tmp_path: Pytest temp directory fixture
        sampleConfig: Sample configuration fixture

    Returns:
        Path to temporary config file
    """
    configFile = tmp_path / 'config.json'
    with open(configFile, 'w') as f:
        json.dump(sampleConfig, f)

    return configFile


# ================================================================================
# Environment Fixtures
# ================================================================================

@pytest.fixture
def cleanEnv() -> Generator[None, None, None]:
    """
    Ensure clean environment with no test variables.

    Removes the variables read by the bundled configuration before the test,
    restores them after.
    """
    varsToRemove = [
        'STATS_CLASS_COUNT', 'STATS_DISPLAY_PRECISION', 'STATS_LOG_LEVEL',
        'STATS_LOG_FILE', 'TEST_VAR'
    ]

    saved = {}
    for var in varsToRemove:
        saved[var] = os.environ.pop(var, None)

    yield

    for var, value in saved.items():
        if value is None:
            os.environ.pop(var, None)
        else:
            os.environ[var] = value


@pytest.fixture
def restoreLogging() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test that reconfigures them."""
    rootLogger = logging.getLogger()
    handlers = list(rootLogger.handlers)
    level = rootLogger.level

    yield

    rootLogger.handlers.clear()
    rootLogger.handlers.extend(handlers)
    rootLogger.setLevel(level)


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
