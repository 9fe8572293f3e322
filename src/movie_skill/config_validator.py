"""
Configuration validation utilities.

Reads environment values, rejects template placeholders and keeps
secrets out of error messages.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError


def get_required_env(key: str, description: str = None) -> str:
    """
    Get required environment variable with validation.

    :param key: Environment variable name
    :param description: Human-readable description for error messages
    :return: Environment variable value
    :raises: ConfigurationError if not set or invalid
    """
    value = os.getenv(key)

    if not value:
        desc = description or key
        raise ConfigurationError(
            f"{key} is required but not set.\n"
            f"Please set it using one of these methods:\n"
            f"  1. Environment variable: export {key}='your-value'\n"
            f"  2. .env file: Create .env in project root with {key}=your-value\n\n"
            f"Description: {desc}"
        )

    if _is_placeholder(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value.\n"
            f"Please set a real value. Current value: {mask_secret(value)}"
        )

    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def parse_number(value: str, key: str, kind: type = float):
    """
    Parse a numeric setting, failing with a readable message.

    :param value: Raw string value
    :param key: Environment variable name (for error messages)
    :param kind: int or float
    :return: Parsed positive number
    :raises: ConfigurationError if not a positive number
    """
    try:
        number = kind(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a {kind.__name__}, got {value!r}") from None

    if number <= 0:
        raise ConfigurationError(f"{key} must be positive, got {number}")

    return number


def validate_url(url: str, url_name: str) -> str:
    """
    Validate a service base URL.

    :param url: URL to validate
    :param url_name: Name of the setting (for error messages)
    :return: URL without a trailing slash
    :raises: ConfigurationError if not an http(s) URL
    """
    if not url.startswith(("http://", "https://")):
        raise ConfigurationError(
            f"{url_name} must start with http:// or https://, got {url!r}"
        )
    return url.rstrip("/")


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "your-",
        "placeholder",
        "xxx",
        "replace",
        "changeme",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def mask_secret(secret: str, show_chars: int = 4) -> str:
    """
    Mask secret for safe display in logs and error messages.

    :param secret: Secret to mask
    :param show_chars: Number of characters to show at start/end
    :return: Masked secret
    """
    if not secret or len(secret) <= show_chars * 2:
        return "***"

    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
