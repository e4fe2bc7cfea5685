################################################################################
# File Name: __init__.py
# Purpose/Description: Common utilities package initialization
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Config loader replaces secrets loader
# ================================================================================
################################################################################

"""
Common utilities package.

This package provides shared functionality used across the application:
- Configuration loading and validation
- Logging configuration
- Error handling

Usage:
    from common.config_validator import ConfigValidator
    from common.config_loader import loadConfigWithEnv
    from common.logging_config import getLogger
    from common.error_handler import DataError
"""

from .config_loader import loadConfigWithEnv
from .config_validator import ConfigValidationError, ConfigValidator
from .error_handler import ConfigurationError, DataError, ErrorCategory, handleError
from .logging_config import getLogger, setupLogging

__all__ = [
    'ConfigValidator',
    'ConfigValidationError',
    'loadConfigWithEnv',
    'getLogger',
    'setupLogging',
    'ConfigurationError',
    'DataError',
    'ErrorCategory',
    'handleError'
]
