"""Entry points for building validators.

Usage:
    from fluent_validator import Validate

    result = Validate.integer().min(18).max(120).validate(15)
"""

from fluent_validator.validation.validators import (
    DateValidator,
    EmailValidator,
    IntegerValidator,
    StringValidator,
)


def create_string() -> StringValidator:
    return StringValidator()


def create_integer() -> IntegerValidator:
    return IntegerValidator()


def create_date() -> DateValidator:
    return DateValidator()


def create_email() -> EmailValidator:
    return EmailValidator()


class Validate:
    """Stateless factory; every call returns a fresh, unconfigured validator."""

    string = staticmethod(create_string)
    integer = staticmethod(create_integer)
    date = staticmethod(create_date)
    email = staticmethod(create_email)
