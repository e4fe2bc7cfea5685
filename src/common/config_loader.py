################################################################################
# File Name: config_loader.py
# Purpose/Description: JSON configuration loading with environment placeholders
# Author: Michael Cornelison
# Creation Date: 2026-01-21
# Copyright: (c) 2026 Michael Cornelison. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-01-21    | M. Cornelison | Initial implementation (secrets loader)
# 2026-10-19    | M. Cornelison | Config loader with typed placeholder values
# ================================================================================
################################################################################

"""
Configuration loading module.

Provides:
- Loads environment variables from .env file
- Resolves ${VAR_NAME} placeholders in configuration
- Supports default values: ${VAR_NAME:default}
- A value that is exactly one placeholder is converted to a JSON scalar
  (number, true/false, null) when the resolved text is one

Usage:
    from common.config_loader import loadConfigWithEnv

    config = loadConfigWithEnv('stats_config.json')
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Pattern to match ${VAR_NAME} or ${VAR_NAME:default}
PLACEHOLDER_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


def loadEnvFile(envPath: Optional[str] = None) -> Dict[str, str]:
    """
    Load environment variables from .env file.

    Args:
        envPath: Path to .env file. Defaults to .env in current directory.

    Returns:
        Dictionary of loaded variable names

    Note:
        Does not override existing environment variables.
    """
    if envPath is None:
        envPath = '.env'

    loadedVars: Dict[str, str] = {}
    envFile = Path(envPath)

    if not envFile.exists():
        logger.debug(f".env file not found at {envPath}")
        return loadedVars

    with open(envFile, 'r', encoding='utf-8') as f:
        for lineNum, line in enumerate(f, 1):
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith('#'):
                continue

            if '=' not in line:
                logger.warning(f"Invalid line {lineNum} in .env: missing '='")
                continue

            key, _, value = line.partition('=')
            key = key.strip()
            value = value.strip()

            # Remove surrounding quotes if present
            if value and value[0] in ('"', "'") and value[-1] == value[0]:
                value = value[1:-1]

            if key not in os.environ:
                os.environ[key] = value
                loadedVars[key] = value

    logger.info(f"Loaded {len(loadedVars)} variables from {envPath}")
    return loadedVars


def resolvePlaceholders(config: Any) -> Any:
    """
    Recursively resolve ${VAR_NAME} placeholders in configuration.

    Supports:
    - ${VAR_NAME} - resolves to environment variable
    - ${VAR_NAME:default} - uses default if VAR_NAME not set

    Args:
        config: Configuration value (dict, list, str, or other)

    Returns:
        Configuration with placeholders resolved
    """
    if isinstance(config, dict):
        return {key: resolvePlaceholders(value) for key, value in config.items()}

    elif isinstance(config, list):
        return [resolvePlaceholders(item) for item in config]

    elif isinstance(config, str):
        return _resolveString(config)

    else:
        return config


def _resolveString(value: str) -> Any:
    """
    Resolve placeholders in a string value.

    Args:
        value: String potentially containing ${VAR} placeholders

    Returns:
        Resolved string, or a JSON scalar when value is a single placeholder
    """
    def replacer(match: re.Match) -> str:
        varName = match.group(1)
        defaultValue = match.group(2)

        envValue = os.environ.get(varName)

        if envValue is not None:
            logger.debug(f"Resolved {varName} from environment")
            return envValue
        elif defaultValue is not None:
            logger.debug(f"Using default for {varName}")
            return defaultValue
        else:
            logger.warning(f"Environment variable {varName} not set and no default")
            return match.group(0)  # Return original placeholder

    resolved = PLACEHOLDER_PATTERN.sub(replacer, value)

    if PLACEHOLDER_PATTERN.fullmatch(value) and resolved != value:
        return _toScalar(resolved)
    return resolved


def _toScalar(text: str) -> Any:
    if text.strip() == '':
        return None
    try:
        scalar = json.loads(text)
    except json.JSONDecodeError:
        return text
    if isinstance(scalar, (dict, list)):
        return text
    return scalar


def loadConfigWithEnv(
    configPath: str,
    envPath: Optional[str] = None
) -> Dict[str, Any]:
    """
    Load configuration file and resolve all environment placeholders.

    Args:
        configPath: Path to configuration JSON file
        envPath: Optional path to .env file

    Returns:
        Configuration dictionary with placeholders resolved

    Raises:
        FileNotFoundError: If config file doesn't exist
        json.JSONDecodeError: If config file is invalid JSON
    """
    loadEnvFile(envPath)

    configFile = Path(configPath)
    if not configFile.exists():
        raise FileNotFoundError(f"Configuration file not found: {configPath}")

    logger.debug(f"Loading configuration from {configPath}")

    with open(configFile, 'r', encoding='utf-8') as f:
        config = json.load(f)

    return resolvePlaceholders(config)
