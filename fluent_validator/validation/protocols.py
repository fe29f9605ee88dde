"""Common interface for validators.

Any object with a ``validate`` method returning a ValidationResult satisfies
the Validator protocol. BaseValidator adds ``is_valid`` on top of it and is
what the built-in validators inherit from.
"""

from typing import Protocol, TypeVar, runtime_checkable

from fluent_validator.validation.results import ValidationResult

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Validator(Protocol[T_contra]):
    """Common interface for all validators.

    Example:
        class PositiveValidator:
            def validate(self, value: float) -> ValidationResult:
                if value > 0:
                    return ValidationResult.ok()
                return ValidationResult.fail("Value must be positive")

        validator: Validator[float] = PositiveValidator()
    """

    def validate(self, value: T_contra) -> ValidationResult:
        """Check a value against the configured rules.

        Args:
            value: Value to check

        Returns:
            ValidationResult describing the outcome. Never raises for a
            value that simply breaks a rule.
        """
        ...


class BaseValidator(Validator[T]):
    """Validator with the ``is_valid`` shortcut.

    Subclasses only implement ``validate``.
    """

    def validate(self, value: T) -> ValidationResult:
        raise NotImplementedError

    def is_valid(self, value: T) -> bool:
        """Shortcut for ``validate(value).is_valid``."""
        return self.validate(value).is_valid
