"""Validation result types.

This module defines the structured outcome returned by every validator,
a value object instead of a (bool, str) tuple.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationResult:
    """Immutable validation result.

    ``error_message`` is empty when the value passed.
    """

    is_valid: bool
    error_message: str = ""

    @classmethod
    def ok(cls) -> "ValidationResult":
        """Build a passing result."""
        return cls(True)

    @classmethod
    def fail(cls, error_message: str) -> "ValidationResult":
        """Build a failing result carrying a human-readable message."""
        return cls(False, error_message)

    @property
    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.is_valid

    def __bool__(self) -> bool:
        return self.is_valid
