"""fluent-validator: chainable input validation."""

from fluent_validator.validation import (
    EMAIL_PATTERN,
    BaseValidator,
    DateValidator,
    EmailValidator,
    IntegerValidator,
    StringValidator,
    Validate,
    ValidationError,
    ValidationResult,
    Validator,
    create_date,
    create_email,
    create_integer,
    create_string,
)

__version__ = "0.1.0"

__all__ = [
    "BaseValidator",
    "EMAIL_PATTERN",
    "DateValidator",
    "EmailValidator",
    "IntegerValidator",
    "StringValidator",
    "Validate",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "create_date",
    "create_email",
    "create_integer",
    "create_string",
]
