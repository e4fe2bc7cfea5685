################################################################################
# File Name: cli.py
# Purpose/Description: Command-line entry point for the statistics engine
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
Command-line entry point.

This module provides the command-line front end for the engine with:
- CLI argument parsing
- Configuration loading and validation
- Raw or grouped input from arguments or files
- Text report or JSON output
- Error handling and exit codes

Usage:
    descriptive-stats --values "12, 15, 15, 18, 21, 25"
    descriptive-stats --file scores.txt --classes 6
    descriptive-stats --grouped classes.txt --json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from common.config_loader import loadConfigWithEnv
from common.config_validator import ConfigValidationError, ConfigValidator, getConfigValue
from common.error_handler import ConfigurationError, DataError, formatError, handleError
from common.logging_config import (
    LogContext,
    getLogger,
    logWithContext,
    setupLogging,
    setupLoggingFromConfig,
)

from . import __version__
from .parsing import parseClassRows, parseValues
from .pipeline import analyzeGroupedData, analyzeRawData
from .report import formatReport
from .types import GroupedDataAnalysis, RawDataAnalysis

DEFAULT_CONFIG = str(Path(__file__).resolve().parent / 'stats_config.json')
DEFAULT_ENV = '.env'

# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_DATA_ERROR = 2
EXIT_UNKNOWN_ERROR = 3


def _nonNegativeInt(text: str) -> int:
    """Argparse type for counts that may be zero but not negative."""
    try:
        value = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid int value: '{text}'") from e
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def parseArgs(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='descriptive-stats',
        description='Descriptive statistics for raw or grouped data',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  descriptive-stats --values "1,2,3,4,5"      Raw data from the command line
  descriptive-stats --file data.txt -k 6      Raw data file with 6 classes
  descriptive-stats --grouped classes.txt     One "lower-upper frequency" per line
  descriptive-stats --values "2 4 4" --json   Machine-readable output
        '''
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--values',
        help='Raw observations separated by commas, semicolons or spaces'
    )
    source.add_argument(
        '--file', '-f',
        help='File containing raw observations'
    )
    source.add_argument(
        '--grouped', '-g',
        help='File containing class rows ("20-29 5" per line)'
    )

    parser.add_argument(
        '--classes', '-k',
        type=int,
        default=None,
        help="Number of classes for raw data (default: Sturges' rule)"
    )

    parser.add_argument(
        '--precision', '-p',
        type=_nonNegativeInt,
        default=None,
        help='Decimal places in the text report (default: from config)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the full result as JSON instead of a text report'
    )

    parser.add_argument(
        '--config', '-c',
        default=DEFAULT_CONFIG,
        help='Path to configuration file (default: bundled stats_config.json)'
    )

    parser.add_argument(
        '--env-file', '-e',
        default=DEFAULT_ENV,
        help='Path to environment file (default: .env)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose (debug) logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(argv)


def loadConfiguration(
    configPath: str,
    envPath: str | None = None
) -> dict[str, Any]:
    """
    Load and validate configuration.

    Args:
        configPath: Path to configuration file
        envPath: Path to environment file

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigurationError: If configuration is invalid
    """
    logger = getLogger(__name__)

    try:
        config = loadConfigWithEnv(configPath, envPath)
        config = ConfigValidator().validate(config)
        logger.debug(f"Configuration loaded from {configPath}")
        return config

    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Configuration file is not valid JSON: {e}") from e
    except ConfigValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def _readText(path: str) -> str:
    try:
        return Path(path).read_text(encoding='utf-8')
    except OSError as e:
        raise DataError(f"Cannot read input file: {path}", details={'path': path}) from e


def runAnalysis(
    args: argparse.Namespace,
    config: dict[str, Any]
) -> RawDataAnalysis | GroupedDataAnalysis:
    """
    Read the requested input and run the matching analysis.

    Args:
        args: Parsed command line arguments
        config: Validated configuration

    Returns:
        Analysis result

    Raises:
        DataError: If the input cannot be read or parsed
    """
    logger = getLogger(__name__)

    if args.grouped:
        with LogContext(source=args.grouped):
            rows = parseClassRows(_readText(args.grouped).splitlines())
            logWithContext(logger, 'info', "Grouped input parsed", rows=len(rows))
            return analyzeGroupedData(rows)

    source = args.file if args.file else 'argument'
    with LogContext(source=source):
        text = _readText(args.file) if args.file else args.values
        values = parseValues(text)
        classCount = args.classes
        if classCount is None:
            classCount = getConfigValue(config, 'analysis.classCount')
        logWithContext(logger, 'info', "Raw input parsed", values=len(values))
        return analyzeRawData(values, classCount=classCount)


def writeOutput(
    analysis: RawDataAnalysis | GroupedDataAnalysis,
    asJson: bool,
    precision: int
) -> None:
    """Print the analysis to stdout as JSON or a text report."""
    if asJson:
        print(json.dumps(analysis.toDict(), indent=2))
    else:
        print('\n'.join(formatReport(analysis, precision=precision)))


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parseArgs(argv)

    setupLogging(level='DEBUG' if args.verbose else 'WARNING')
    logger = getLogger(__name__)

    try:
        config = loadConfiguration(args.config, args.env_file)

        setupLoggingFromConfig(config, verbose=args.verbose)

        precision = args.precision
        if precision is None:
            precision = getConfigValue(config, 'analysis.displayPrecision', 2)

        analysis = runAnalysis(args, config)
        writeOutput(analysis, asJson=args.json, precision=precision)

        if not analysis.success:
            logger.warning(f"Analysis incomplete: {analysis.errorMessage}")
            return EXIT_DATA_ERROR
        return EXIT_SUCCESS

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(formatError(e), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    except DataError as e:
        handleError(e, reraise=False)
        print(formatError(e), file=sys.stderr)
        return EXIT_DATA_ERROR

    except Exception as e:
        handleError(e, reraise=False)
        print(formatError(e), file=sys.stderr)
        return EXIT_UNKNOWN_ERROR


if __name__ == '__main__':
    sys.exit(main())
