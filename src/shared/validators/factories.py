"""Validator factories.

Each factory closes over a field's display name (and threshold, where it has
one) and returns a ``Validator``. Format and range factories let empty values
through; combine them with ``required`` when the field must be filled.

Example:
    ```python
    schema = {
        "email": [required("Email"), email_address("Email")],
        "name": [required("Name"), max_length("Name", 100)],
    }
    ```
"""

from collections.abc import Callable, Mapping, Sized
from typing import Any

from .common import is_empty, is_number, is_valid_url
from .dates import age_in_years, is_past_date, parse_date
from .email import is_valid_email
from .identity import is_valid_nic
from .models import ConditionFn, ValidationErrorCode, ValidationResult, Validator, always
from .password import PasswordPolicyOptions, resolve_password_policy, validate_password
from .phone import is_valid_phone_number


def _optional(
    predicate: Callable[[Any], bool],
    message: str,
    code: ValidationErrorCode,
    when: ConditionFn | None,
) -> Validator:
    """Wrap a predicate that only applies to filled values."""
    return Validator.from_predicate(
        lambda value: is_empty(value) or predicate(value),
        message,
        code,
        condition=when,
    )


def required(field_name: str, when: ConditionFn | None = None) -> Validator:
    """Field must not be empty."""
    return Validator.from_predicate(
        lambda value: not is_empty(value),
        f"{field_name} is required",
        ValidationErrorCode.MISSING_REQUIRED,
        condition=when,
    )


def min_length(field_name: str, length: int, when: ConditionFn | None = None) -> Validator:
    """Field must have at least ``length`` items; absent values fail."""

    def predicate(value: Any) -> bool:
        if value is None or not isinstance(value, Sized):
            return False
        return len(value) > 0 and len(value) >= length

    return Validator.from_predicate(
        predicate,
        f"{field_name} must be at least {length} characters",
        ValidationErrorCode.RANGE_INVALID,
        condition=when,
    )


def max_length(field_name: str, length: int, when: ConditionFn | None = None) -> Validator:
    """Field must have at most ``length`` items; absent values pass."""

    def predicate(value: Any) -> bool:
        if value is None or value == "":
            return True
        return isinstance(value, Sized) and len(value) <= length

    return Validator.from_predicate(
        predicate,
        f"{field_name} must be less than {length} characters",
        ValidationErrorCode.RANGE_INVALID,
        condition=when,
    )


def email_address(field_name: str, message: str | None = None, when: ConditionFn | None = None) -> Validator:
    return _optional(
        is_valid_email,
        message or "Please enter a valid email address",
        ValidationErrorCode.FORMAT_INVALID,
        when,
    )


def phone_number(field_name: str, message: str | None = None, when: ConditionFn | None = None) -> Validator:
    return _optional(
        is_valid_phone_number,
        message or "Please enter a valid phone number",
        ValidationErrorCode.FORMAT_INVALID,
        when,
    )


def nic_number(field_name: str, message: str | None = None, when: ConditionFn | None = None) -> Validator:
    return _optional(
        is_valid_nic,
        message or "Please enter a valid NIC number",
        ValidationErrorCode.FORMAT_INVALID,
        when,
    )


def url(field_name: str, message: str | None = None, when: ConditionFn | None = None) -> Validator:
    return _optional(
        is_valid_url,
        message or "Please enter a valid URL",
        ValidationErrorCode.FORMAT_INVALID,
        when,
    )


def number(field_name: str, message: str | None = None, when: ConditionFn | None = None) -> Validator:
    return _optional(
        is_number,
        message or f"{field_name} must be a number",
        ValidationErrorCode.FORMAT_INVALID,
        when,
    )


def valid_date(field_name: str, message: str | None = None, when: ConditionFn | None = None) -> Validator:
    return _optional(
        lambda value: parse_date(value) is not None,
        message or "Please enter a valid date",
        ValidationErrorCode.FORMAT_INVALID,
        when,
    )


def past_date(field_name: str, message: str | None = None, when: ConditionFn | None = None) -> Validator:
    """Filled date must lie in the past.

    Unparseable dates also fail here; put ``valid_date`` first to report them
    with a format message instead.
    """
    return _optional(
        is_past_date,
        message or f"{field_name} cannot be in the future",
        ValidationErrorCode.RANGE_INVALID,
        when,
    )


def minimum_age(
    field_name: str,
    years: int,
    message: str | None = None,
    when: ConditionFn | None = None,
) -> Validator:
    """Filled birth date must be at least ``years`` completed years ago."""

    def predicate(value: Any) -> bool:
        age = age_in_years(value)
        return age is not None and age >= years

    return _optional(
        predicate,
        message or f"Must be at least {years} years old",
        ValidationErrorCode.RANGE_INVALID,
        when,
    )


def strong_password(
    field_name: str,
    options: PasswordPolicyOptions = None,
    when: ConditionFn | None = None,
) -> Validator:
    """Field must satisfy the password policy; reports the checker's message."""
    policy = resolve_password_policy(options)

    def check(value: Any, _: Mapping[str, Any]) -> ValidationResult:
        return validate_password(value, policy)

    return Validator(check=check, condition=when or always)


def matches(
    field_name: str,
    other_field: str,
    message: str | None = None,
    when: ConditionFn | None = None,
) -> Validator:
    """Field must equal the value of ``other_field`` in the same form."""

    def check(value: Any, all_values: Mapping[str, Any]) -> ValidationResult:
        if value == all_values.get(other_field):
            return ValidationResult.ok()
        return ValidationResult.fail(message or f"{field_name} does not match", ValidationErrorCode.FORMAT_INVALID)

    return Validator(check=check, condition=when or always)
