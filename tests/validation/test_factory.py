"""Tests for the validator factory."""

import pytest

from fluent_validator import (
    DateValidator,
    EmailValidator,
    IntegerValidator,
    StringValidator,
    Validate,
    create_date,
    create_email,
    create_integer,
    create_string,
)


class TestValidate:
    """Tests for the Validate factory and create_* functions."""

    @pytest.mark.parametrize(
        "factory, expected_type",
        [
            (Validate.string, StringValidator),
            (Validate.integer, IntegerValidator),
            (Validate.date, DateValidator),
            (Validate.email, EmailValidator),
            (create_string, StringValidator),
            (create_integer, IntegerValidator),
            (create_date, DateValidator),
            (create_email, EmailValidator),
        ],
    )
    def test_creates_expected_type(self, factory, expected_type):
        assert isinstance(factory(), expected_type)

    def test_returns_fresh_instances(self):
        first = Validate.string().required()
        second = Validate.string()

        assert first is not second
        assert not first.validate("").is_valid
        assert second.validate("").is_valid

    def test_string_scenario(self):
        result = (
            Validate.string()
            .required()
            .min_length(5)
            .max_length(20)
            .matches("^[a-zA-Z0-9_]+$")
            .validate("john123")
        )

        assert result.is_valid

    def test_integer_scenario(self):
        result = Validate.integer().min(18).max(120).validate(15)

        assert not result.is_valid
        assert result.error_message == "Value must be greater than or equal to 18"

    def test_email_scenarios(self):
        assert Validate.email().validate("user@example.com").is_valid
        assert not Validate.email().validate("not-an-email").is_valid
        assert Validate.email().validate("").is_valid
        assert (
            Validate.email().required().validate("").error_message
            == "Value is required"
        )
