"""Error message formatting for user-friendly exception handling."""

import re

from fluent_validator.validation.exceptions import ValidationError


def _format_pattern_error(error: re.error) -> str:
    if error.pattern is None:
        return f"Invalid regular expression: {error.msg}"
    pattern = error.pattern
    if isinstance(pattern, bytes):
        pattern = pattern.decode("utf-8", errors="replace")
    return f"Invalid regular expression '{pattern}': {error.msg}"


ERROR_TYPES = {
    ValidationError: lambda e: f"Invalid validator configuration: {e!s}",
    re.error: _format_pattern_error,
    TypeError: lambda e: f"Incompatible value: {e!s}",
    ValueError: lambda e: str(e),
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
