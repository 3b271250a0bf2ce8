"""Tests for validator factories."""

from datetime import UTC, datetime, timedelta

import pytest

from src.shared.validators.factories import (
    email_address,
    matches,
    max_length,
    min_length,
    minimum_age,
    nic_number,
    number,
    past_date,
    phone_number,
    required,
    strong_password,
    url,
    valid_date,
)
from src.shared.validators.models import ValidationErrorCode, ValidationResult, Validator


def years_ago(years: int, days: int = 0) -> str:
    today = datetime.now(UTC).date()
    try:
        born = today.replace(year=today.year - years)
    except ValueError:  # 29 February
        born = today.replace(year=today.year - years, day=28)
    return (born - timedelta(days=days)).isoformat()


class TestRequired:
    """Test the required() factory."""

    def test_empty_value_fails_with_message(self):
        """Test empty values fail with the field name in the message."""
        result = required("Name")("")
        assert result.is_valid is False
        assert result.message == "Name is required"
        assert result.code == ValidationErrorCode.MISSING_REQUIRED

    @pytest.mark.parametrize("value", [None, "   "])
    def test_blank_values_fail(self, value):
        """Test None and whitespace fail."""
        assert required("Name")(value).is_valid is False

    @pytest.mark.parametrize("value", ["Jane", 0, False])
    def test_filled_values_pass(self, value):
        """Test filled values pass, including zero."""
        assert required("Count")(value).is_valid is True

    def test_factory_is_pure(self):
        """Test identical arguments give equivalent validators."""
        assert required("Name")("").message == required("Name")("").message


class TestLengthFactories:
    """Test min_length() and max_length()."""

    def test_min_length_passes_at_threshold(self):
        """Test a value of exactly n characters passes."""
        assert min_length("Name", 3)("abc").is_valid is True

    def test_min_length_fails_below_threshold(self):
        """Test shorter values fail with the threshold in the message."""
        result = min_length("Name", 3)("ab")
        assert result.is_valid is False
        assert result.message == "Name must be at least 3 characters"
        assert result.code == ValidationErrorCode.RANGE_INVALID

    @pytest.mark.parametrize("value", [None, "", 12345])
    def test_min_length_fails_for_absent_or_unsized(self, value):
        """Test absent and unsized values fail."""
        assert min_length("Name", 1)(value).is_valid is False

    def test_max_length_passes_at_threshold(self):
        """Test a value of exactly n characters passes."""
        assert max_length("Name", 3)("abc").is_valid is True

    def test_max_length_fails_above_threshold(self):
        """Test longer values fail with the threshold in the message."""
        result = max_length("Name", 3)("abcd")
        assert result.is_valid is False
        assert result.message == "Name must be less than 3 characters"

    @pytest.mark.parametrize("value", [None, ""])
    def test_max_length_passes_for_absent_values(self, value):
        """Test absent values pass."""
        assert max_length("Name", 3)(value).is_valid is True

    def test_length_applies_to_sequences(self):
        """Test lists are measured by item count."""
        assert min_length("Tags", 2)(["a", "b"]).is_valid is True
        assert max_length("Tags", 1)(["a", "b"]).is_valid is False


class TestFormatFactories:
    """Test the format factories built on predicates."""

    @pytest.mark.parametrize(
        ("factory", "bad_value", "message"),
        [
            (email_address, "nope", "Please enter a valid email address"),
            (phone_number, "123", "Please enter a valid phone number"),
            (nic_number, "12345", "Please enter a valid NIC number"),
            (url, "example.com", "Please enter a valid URL"),
            (number, "abc", "Field must be a number"),
            (valid_date, "someday", "Please enter a valid date"),
        ],
    )
    def test_bad_value_fails_with_default_message(self, factory, bad_value, message):
        """Test malformed values fail with a format error."""
        result = factory("Field")(bad_value)
        assert result.is_valid is False
        assert result.message == message
        assert result.code == ValidationErrorCode.FORMAT_INVALID

    @pytest.mark.parametrize("factory", [email_address, phone_number, nic_number, url, number, valid_date, past_date])
    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values_are_left_to_required(self, factory, value):
        """Test format factories let empty values through."""
        assert factory("Field")(value).is_valid is True

    def test_custom_message(self):
        """Test a custom message replaces the default."""
        result = phone_number("Mobile", message="Please enter a valid mobile number")("12")
        assert result.message == "Please enter a valid mobile number"


class TestDateFactories:
    """Test past_date() and minimum_age()."""

    def test_past_date_fails_for_future(self):
        """Test a future date fails with a range error."""
        tomorrow = (datetime.now(UTC) + timedelta(days=1)).isoformat()
        result = past_date("Date of birth")(tomorrow)
        assert result.is_valid is False
        assert result.message == "Date of birth cannot be in the future"
        assert result.code == ValidationErrorCode.RANGE_INVALID

    def test_past_date_passes_for_past(self):
        """Test a past date passes."""
        assert past_date("Date of birth")("1990-01-01").is_valid is True

    def test_minimum_age_passes_on_birthday(self):
        """Test someone turning 18 today passes."""
        assert minimum_age("Date of birth", 18)(years_ago(18)).is_valid is True

    def test_minimum_age_fails_day_before_birthday(self):
        """Test someone turning 18 tomorrow fails."""
        result = minimum_age("Date of birth", 18)(years_ago(18, days=-1))
        assert result.is_valid is False
        assert result.message == "Must be at least 18 years old"

    def test_minimum_age_fails_for_unparseable_date(self):
        """Test an invalid date fails the age check."""
        assert minimum_age("Date of birth", 18)("never").is_valid is False


class TestStrongPassword:
    """Test the strong_password() factory."""

    def test_reports_checker_message(self):
        """Test the first policy violation is surfaced."""
        result = strong_password("Password")("abc")
        assert result.message == "Password must be at least 8 characters long"

    def test_uses_policy_options(self):
        """Test policy options are honoured."""
        assert strong_password("Password", {"requireSpecialChars": False})("Abcdefg1").is_valid is True


class TestMatches:
    """Test the matches() cross-field factory."""

    def test_equal_values_pass(self):
        """Test matching values pass."""
        validator = matches("Confirm password", "password")
        assert validator("Secret1!", {"password": "Secret1!"}).is_valid is True

    def test_different_values_fail(self):
        """Test different values fail."""
        result = matches("Confirm password", "password")("other", {"password": "Secret1!"})
        assert result.is_valid is False
        assert result.message == "Confirm password does not match"


class TestValidatorGate:
    """Test condition gates on validators."""

    def test_factories_default_to_always_applying(self):
        """Test validators apply to any form state by default."""
        assert required("Name").applies({}) is True

    def test_when_argument_sets_gate(self):
        """Test the when= argument installs a gate."""
        validator = required("Company", when=lambda values: values.get("employed") is True)
        assert validator.applies({"employed": True}) is True
        assert validator.applies({"employed": False}) is False

    def test_when_returns_gated_copy(self):
        """Test when() leaves the original validator ungated."""
        original = required("Name")
        gated = original.when(lambda values: False)
        assert original.applies({}) is True
        assert gated.applies({}) is False

    def test_from_predicate(self):
        """Test a plain predicate can be wrapped into a validator."""
        validator = Validator.from_predicate(lambda value: value == "yes", "Must agree")
        assert validator("yes") == ValidationResult.ok()
        assert validator("no").message == "Must agree"
