################################################################################
# File Name: config_validator.py
# Purpose/Description: Configuration validation with required fields and defaults
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation
# 2026-10-19    | M. Cornelison | Analysis defaults and value checks
# ================================================================================
################################################################################

"""
Configuration validation module.

Provides validation of configuration files with:
- Required field checking
- Default value application
- Nested configuration support
- Value checks for analysis and logging settings
- Clear error messages for missing/invalid fields

Usage:
    from common.config_validator import ConfigValidator

    validator = ConfigValidator()
    config = validator.validate(rawConfig)
"""

from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(
        self,
        message: str,
        missingFields: Optional[List[str]] = None,
        invalidFields: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.missingFields = missingFields or []
        self.invalidFields = invalidFields or []


# Define required configuration keys
REQUIRED_KEYS: List[str] = []

# Define default values for optional settings
DEFAULTS: Dict[str, Any] = {
    'application.name': 'descriptive-stats',
    'application.version': '1.0.0',
    # None selects the class count with Sturges' rule
    'analysis.classCount': None,
    'analysis.displayPrecision': 2,
    'logging.level': 'INFO',
    'logging.format': None,
    'logging.file': None,
}

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigValidator:
    """
    Validates configuration dictionaries.

    Provides methods to:
    - Check for required fields
    - Apply default values
    - Validate field types and ranges
    - Return fully validated configuration

    Attributes:
        requiredKeys: List of required configuration keys (dot notation)
        defaults: Dictionary of default values for optional fields
    """

    def __init__(
        self,
        requiredKeys: Optional[List[str]] = None,
        defaults: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the validator.

        Args:
            requiredKeys: List of required keys in dot notation (e.g., 'analysis.classCount')
            defaults: Dictionary of default values in dot notation
        """
        self.requiredKeys = requiredKeys if requiredKeys is not None else REQUIRED_KEYS
        self.defaults = defaults if defaults is not None else DEFAULTS

    def validate(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and enhance configuration.

        Performs:
        1. Required field validation
        2. Default value application
        3. Analysis and logging value checks
        4. Returns validated configuration

        Args:
            config: Raw configuration dictionary

        Returns:
            Validated configuration with defaults applied

        Raises:
            ConfigValidationError: If required fields are missing or values are invalid
        """
        missingFields = self._validateRequired(config)
        if missingFields:
            fieldList = ', '.join(missingFields)
            raise ConfigValidationError(
                f"Missing required configuration fields: {fieldList}",
                missingFields=missingFields
            )

        config = self._applyDefaults(config)

        invalidFields = self._validateValues(config)
        if invalidFields:
            fieldList = ', '.join(invalidFields)
            raise ConfigValidationError(
                f"Invalid configuration values: {fieldList}",
                invalidFields=invalidFields
            )

        logger.debug("Configuration validated successfully")
        return config

    def _validateRequired(self, config: Dict[str, Any]) -> List[str]:
        """
        Check for required configuration fields.

        Args:
            config: Configuration dictionary to check

        Returns:
            List of missing field names (empty if all present)
        """
        missingFields = []

        for key in self.requiredKeys:
            if self._getNestedValue(config, key) is None:
                missingFields.append(key)

        return missingFields

    def _applyDefaults(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply default values for missing optional fields.

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with defaults applied
        """
        for key, defaultValue in self.defaults.items():
            if self._getNestedValue(config, key) is None:
                self._setNestedValue(config, key, defaultValue)
                logger.debug(f"Applied default for {key}: {defaultValue}")

        return config

    def _validateValues(self, config: Dict[str, Any]) -> List[str]:
        """
        Check analysis and logging settings.

        Args:
            config: Configuration dictionary with defaults applied

        Returns:
            List of invalid field names (empty if all valid)
        """
        invalidFields = []

        classCount = self._getNestedValue(config, 'analysis.classCount')
        if classCount is not None and (not _isInt(classCount) or classCount < 1):
            invalidFields.append('analysis.classCount')

        precision = self._getNestedValue(config, 'analysis.displayPrecision')
        if not _isInt(precision) or precision < 0:
            invalidFields.append('analysis.displayPrecision')

        level = self._getNestedValue(config, 'logging.level')
        if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
            invalidFields.append('logging.level')

        return invalidFields

    def _getNestedValue(self, config: Dict[str, Any], key: str) -> Any:
        """
        Get a value from nested dictionary using dot notation.

        Args:
            config: Configuration dictionary
            key: Dot-notation key (e.g., 'analysis.classCount')

        Returns:
            Value if found, None otherwise
        """
        keys = key.split('.')
        value = config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return None

        return value

    def _setNestedValue(self, config: Dict[str, Any], key: str, value: Any) -> None:
        """
        Set a value in nested dictionary using dot notation.

        Args:
            config: Configuration dictionary to modify
            key: Dot-notation key (e.g., 'analysis.classCount')
            value: Value to set
        """
        keys = key.split('.')
        current = config

        for k in keys[:-1]:
            if k not in current:
                current[k] = {}
            current = current[k]

        current[keys[-1]] = value

    def validateField(
        self,
        config: Dict[str, Any],
        key: str,
        expectedType: type,
        allowNone: bool = False
    ) -> bool:
        """
        Validate a specific field's type.

        Args:
            config: Configuration dictionary
            key: Dot-notation key to validate
            expectedType: Expected Python type
            allowNone: Whether None is acceptable

        Returns:
            True if valid, False otherwise
        """
        value = self._getNestedValue(config, key)

        if value is None:
            return allowNone

        return isinstance(value, expectedType)


def _isInt(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def getConfigValue(config: Dict[str, Any], key: str, default: Any = None) -> Any:
    """
    Read a dot-notation value from a validated configuration.

    Args:
        config: Configuration dictionary
        key: Dot-notation key (e.g., 'logging.level')
        default: Value returned when the key is absent or None

    Returns:
        Configured value or default
    """
    value = ConfigValidator()._getNestedValue(config, key)
    return default if value is None else value


def validateConfig(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convenience function to validate configuration.

    Args:
        config: Raw configuration dictionary

    Returns:
        Validated configuration

    Raises:
        ConfigValidationError: If validation fails
    """
    validator = ConfigValidator()
    return validator.validate(config)
