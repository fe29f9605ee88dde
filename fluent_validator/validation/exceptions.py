"""Exceptions for custom validators.

The built-in validators never raise for a bad value; they return a failed
ValidationResult. ValidationError is available to custom validators that
prefer to reject malformed configuration by raising.
"""


class ValidationError(Exception):
    """Raised by custom validators on malformed configuration."""

    def __init__(self, message: str, validator_name: str | None = None):
        super().__init__(message)
        self.message = message
        self.validator_name = validator_name

    def __str__(self) -> str:
        if self.validator_name:
            return f"{self.validator_name}: {self.message}"
        return self.message
