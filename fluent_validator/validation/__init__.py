"""Fluent validators for strings, integers, dates and email addresses.

Validators are configured through chained calls and evaluated with
``validate``, which always returns a ValidationResult instead of raising.
"""

from fluent_validator.validation.exceptions import ValidationError
from fluent_validator.validation.factory import (
    Validate,
    create_date,
    create_email,
    create_integer,
    create_string,
)
from fluent_validator.validation.protocols import BaseValidator, Validator
from fluent_validator.validation.results import ValidationResult
from fluent_validator.validation.validators import (
    EMAIL_PATTERN,
    DateValidator,
    EmailValidator,
    IntegerValidator,
    StringValidator,
)

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
