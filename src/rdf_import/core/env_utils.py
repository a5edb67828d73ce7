#!/usr/bin/env python3
"""
Utility functions for reading environment variables with cross-platform support.

Handles Windows CRLF line endings and other whitespace issues that can occur
when .env files are edited on different operating systems.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def getenv_clean(key: str, default: str = None, strip: bool = True) -> Optional[str]:
    """Get environment variable with automatic cleaning of line endings and whitespace.

    Args:
        key: Environment variable name
        default: Default value if variable is not set
        strip: If True, strip whitespace and line endings (default: True)

    Returns:
        Cleaned environment variable value, or default if not set

    Example:
        >>> # .env file has: NEO4J_PASSWORD=secret\r\n
        >>> value = getenv_clean("NEO4J_PASSWORD", "password")
        >>> # Returns: "secret" (without \r\n)
    """
    raw_value = os.getenv(key, default)

    if raw_value is None:
        return None

    if not strip:
        return raw_value

    cleaned = raw_value.strip().rstrip("\r\n")

    # A changed value means the .env file carries stray line endings
    if raw_value != cleaned:
        logger.warning(
            f"Environment variable {key} had trailing whitespace/line endings: "
            f"raw={repr(raw_value)}, cleaned={repr(cleaned)}"
        )

    return cleaned


def getenv_optional(key: str) -> Optional[str]:
    """Get a cleaned environment variable, treating an empty value as unset.

    Used for optional paths (schema file, container mount) where an empty
    string must behave exactly like an absent variable.
    """
    value = getenv_clean(key, None)
    return value or None


def getenv_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean with automatic cleaning.

    Handles line endings and converts string values to boolean:
    - "true", "True", "TRUE", "1", "yes", "on" → True
    - "false", "False", "FALSE", "0", "no", "off" → False
    - Empty string → False, unset → default value

    Args:
        key: Environment variable name
        default: Default boolean value if variable is not set

    Returns:
        Boolean value
    """
    raw_value = getenv_clean(key, None)

    if raw_value is None:
        return default

    cleaned_lower = raw_value.lower()
    if cleaned_lower in ("true", "1", "yes", "on"):
        return True
    elif cleaned_lower in ("false", "0", "no", "off", ""):
        return False
    else:
        logger.warning(
            f"Environment variable {key} has unexpected boolean value: {repr(raw_value)}. "
            f"Using default: {default}"
        )
        return default
