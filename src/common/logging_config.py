################################################################################
# File Name: logging_config.py
# Purpose/Description: Structured logging configuration and utilities
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Removed PII masking, logs go to stderr
# 2026-10-19    | M. Cornelison | Added setupLoggingFromConfig
# ================================================================================
################################################################################

"""
Logging configuration module.

Provides structured logging with:
- Configurable log levels
- Console and file output
- Consistent formatting
- Setup from the validated "logging" configuration section

Console output goes to stderr so that reports and JSON written to stdout stay
clean.

Usage:
    from common.logging_config import setupLogging, getLogger

    setupLogging(level='INFO')
    logger = getLogger(__name__)
    logger.info("Operation completed")

    # Or from a validated configuration
    setupLoggingFromConfig(config, verbose=args.verbose)
"""

import logging
import sys
from pathlib import Path
from typing import Any

# Default log format
DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s | %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class StructuredFormatter(logging.Formatter):
    """
    Custom formatter for structured logging.

    Adds support for extra fields in log output.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record with extra fields.

        Args:
            record: Log record to format

        Returns:
            Formatted log string
        """
        message = super().format(record)

        extra = getattr(record, 'extra', None)
        if extra and isinstance(extra, dict):
            extraStr = ' | ' + ' '.join(f'{k}={v}' for k, v in extra.items())
            message += extraStr

        return message


def setupLogging(
    level: str = 'INFO',
    logFormat: str | None = None,
    logFile: str | None = None
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        logFormat: Custom format string
        logFile: Optional file path for log output

    Returns:
        Root logger instance
    """
    rootLogger = logging.getLogger()
    rootLogger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Clear existing handlers
    rootLogger.handlers.clear()

    formatter = StructuredFormatter(
        fmt=logFormat or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )

    consoleHandler = logging.StreamHandler(sys.stderr)
    consoleHandler.setFormatter(formatter)
    rootLogger.addHandler(consoleHandler)

    # File handler (optional)
    if logFile:
        logPath = Path(logFile)
        logPath.parent.mkdir(parents=True, exist_ok=True)

        fileHandler = logging.FileHandler(logFile, encoding='utf-8')
        fileHandler.setFormatter(formatter)
        rootLogger.addHandler(fileHandler)

    rootLogger.debug(f"Logging configured | level={level}")

    return rootLogger


def setupLoggingFromConfig(
    config: dict[str, Any],
    verbose: bool = False
) -> logging.Logger:
    """
    Configure logging from the "logging" section of a validated configuration.

    Args:
        config: Configuration with logging.level, logging.format and logging.file
        verbose: Force DEBUG regardless of the configured level

    Returns:
        Root logger instance
    """
    section = config.get('logging') or {}
    level = 'DEBUG' if verbose else (section.get('level') or 'WARNING')
    return setupLogging(
        level=level,
        logFormat=section.get('format'),
        logFile=section.get('file')
    )


def getLogger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def logWithContext(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: Any
) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level
        message: Log message
        **context: Additional context fields
    """
    logFunc = getattr(logger, level.lower(), logger.info)

    if context:
        contextStr = ' | ' + ' '.join(f'{k}={v}' for k, v in context.items())
        logFunc(message + contextStr)
    else:
        logFunc(message)


class LogContext:
    """
    Context manager for adding context to all log messages.

    Usage:
        with LogContext(source='scores.txt'):
            logger.info("Analyzing")  # Includes source
    """

    def __init__(self, **context: Any):
        """
        Initialize log context.

        Args:
            **context: Context fields to add to logs
        """
        self.context = context
        self._oldFactory = None

    def __enter__(self) -> 'LogContext':
        """Enter context and add fields to log records."""
        self._oldFactory = logging.getLogRecordFactory()

        context = self.context

        def recordFactory(*args: Any, **kwargs: Any) -> logging.LogRecord:
            record = self._oldFactory(*args, **kwargs)
            record.extra = context
            return record

        logging.setLogRecordFactory(recordFactory)
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context and restore original factory."""
        if self._oldFactory:
            logging.setLogRecordFactory(self._oldFactory)
