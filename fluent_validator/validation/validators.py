"""Concrete validator implementations.

Each validator is configured through chained calls that return the same
instance, then evaluated with ``validate``. Checks run in a fixed order and
the first failing check decides the message.
"""

import re
from datetime import date, datetime, time

from fluent_validator.validation.protocols import BaseValidator
from fluent_validator.validation.results import ValidationResult

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

REQUIRED_MESSAGE = "Value is required"
PATTERN_MESSAGE = "Value does not match the required pattern"
EMAIL_FORMAT_MESSAGE = "Invalid email address format"
DATE_AFTER_MESSAGE = "Date must be after the minimum date"
DATE_BEFORE_MESSAGE = "Date must be before the maximum date"


class StringValidator(BaseValidator[str]):
    """Validates strings by presence, length and regular expression.

    Empty values only fail when ``required`` is set; every other rule is
    skipped for them.
    """

    name = "string"

    def __init__(self):
        self._required = False
        self._min_length = 0
        self._max_length: int | None = None
        self._pattern: re.Pattern[str] | None = None

    def required(self, flag: bool = True) -> "StringValidator":
        self._required = flag
        return self

    def min_length(self, length: int) -> "StringValidator":
        """Minimum number of characters; 0 disables the check."""
        self._min_length = length
        return self

    def max_length(self, length: int) -> "StringValidator":
        self._max_length = length
        return self

    def matches(self, pattern: str | re.Pattern[str]) -> "StringValidator":
        """Constrain values to a regular expression.

        The expression is searched for anywhere in the value, so anchor it
        with ``^``/``$`` to match the whole string. An empty pattern clears
        the rule.

        Raises:
            re.error: If the expression does not compile
        """
        if isinstance(pattern, re.Pattern):
            self._pattern = pattern
        elif pattern:
            self._pattern = re.compile(pattern)
        else:
            self._pattern = None
        return self

    @property
    def pattern(self) -> str | None:
        return self._pattern.pattern if self._pattern is not None else None

    def validate(self, value: str | None) -> ValidationResult:
        if self._required and not value:
            return ValidationResult.fail(REQUIRED_MESSAGE)

        if value:
            length = len(value)

            if self._min_length > 0 and length < self._min_length:
                return ValidationResult.fail(
                    f"Minimum length is {self._min_length} characters"
                )

            if self._max_length is not None and length > self._max_length:
                return ValidationResult.fail(
                    f"Maximum length is {self._max_length} characters"
                )

            if self._pattern is not None and not self._pattern.search(value):
                return ValidationResult.fail(PATTERN_MESSAGE)

        return ValidationResult.ok()


class IntegerValidator(BaseValidator[int]):
    """Validates integers against optional inclusive bounds."""

    name = "integer"

    def __init__(self):
        # None means "no bound"; 0 is a real bound
        self._min_value: int | None = None
        self._max_value: int | None = None

    def min(self, value: int) -> "IntegerValidator":
        self._min_value = value
        return self

    def max(self, value: int) -> "IntegerValidator":
        self._max_value = value
        return self

    def validate(self, value: int) -> ValidationResult:
        if self._min_value is not None and value < self._min_value:
            return ValidationResult.fail(
                f"Value must be greater than or equal to {self._min_value}"
            )

        if self._max_value is not None and value > self._max_value:
            return ValidationResult.fail(
                f"Value must be less than or equal to {self._max_value}"
            )

        return ValidationResult.ok()


def _comparable(value: date, bound: date) -> tuple[date, date]:
    """Promote a plain date to midnight when the other side is a datetime."""
    value_is_dt = isinstance(value, datetime)
    bound_is_dt = isinstance(bound, datetime)
    if value_is_dt and not bound_is_dt:
        return value, datetime.combine(bound, time.min, tzinfo=value.tzinfo)
    if bound_is_dt and not value_is_dt:
        return datetime.combine(value, time.min, tzinfo=bound.tzinfo), bound
    return value, bound


class DateValidator(BaseValidator[date]):
    """Validates dates and datetimes against optional bounds.

    A value equal to a bound passes.
    """

    name = "date"

    def __init__(self):
        self._min_date: date | None = None
        self._max_date: date | None = None

    def after(self, bound: date) -> "DateValidator":
        self._min_date = bound
        return self

    def before(self, bound: date) -> "DateValidator":
        self._max_date = bound
        return self

    def validate(self, value: date) -> ValidationResult:
        if self._min_date is not None:
            current, bound = _comparable(value, self._min_date)
            if current < bound:
                return ValidationResult.fail(DATE_AFTER_MESSAGE)

        if self._max_date is not None:
            current, bound = _comparable(value, self._max_date)
            if current > bound:
                return ValidationResult.fail(DATE_BEFORE_MESSAGE)

        return ValidationResult.ok()


class EmailValidator(BaseValidator[str]):
    """Validates email addresses.

    Wraps a StringValidator preset with EMAIL_PATTERN, so the string options
    (required, length limits, a replacement pattern) still apply. Any failure
    on a non-empty value is reported as EMAIL_FORMAT_MESSAGE.
    """

    name = "email"

    def __init__(self):
        self._string = StringValidator().matches(EMAIL_PATTERN)

    def required(self, flag: bool = True) -> "EmailValidator":
        self._string.required(flag)
        return self

    def min_length(self, length: int) -> "EmailValidator":
        self._string.min_length(length)
        return self

    def max_length(self, length: int) -> "EmailValidator":
        self._string.max_length(length)
        return self

    def matches(self, pattern: str | re.Pattern[str]) -> "EmailValidator":
        self._string.matches(pattern)
        return self

    @property
    def pattern(self) -> str | None:
        return self._string.pattern

    def validate(self, value: str | None) -> ValidationResult:
        result = self._string.validate(value)
        if result.failed and value:
            return ValidationResult.fail(EMAIL_FORMAT_MESSAGE)
        return result
