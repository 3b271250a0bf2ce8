"""Shared validators package for the application.

This package contains reusable, side-effect-free validation functions that
can be used across different features and schemas. None of them raise on bad
input; failures come back as data.

Available modules:
- common.py: Emptiness, numeric and URL checks
- email.py: Email format validation
- phone.py: Phone number validation
- identity.py: NIC number validation
- dates.py: Date parsing, past-date and age checks
- password.py: Password policy validation
- models.py: ValidationResult, ValidationErrorCode and Validator
- factories.py: Validator factories (required, min_length, max_length, ...)
- schema.py: Schema-driven form validation
"""

from .common import is_empty, is_number, is_valid_url
from .dates import age_in_years, is_past_date, parse_date
from .email import is_valid_email
from .factories import (
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
from .identity import is_valid_nic
from .models import ValidationErrorCode, ValidationResult, Validator
from .password import PasswordPolicyConfig, resolve_password_policy, validate_password
from .phone import is_valid_phone_number
from .schema import ErrorMap, Schema, field_equals, field_is_filled, validate_field, validate_form

__all__ = [
    "ErrorMap",
    "PasswordPolicyConfig",
    "Schema",
    "ValidationErrorCode",
    "ValidationResult",
    "Validator",
    "age_in_years",
    "email_address",
    "field_equals",
    "field_is_filled",
    "is_empty",
    "is_number",
    "is_past_date",
    "is_valid_email",
    "is_valid_nic",
    "is_valid_phone_number",
    "is_valid_url",
    "matches",
    "max_length",
    "min_length",
    "minimum_age",
    "nic_number",
    "number",
    "parse_date",
    "past_date",
    "phone_number",
    "required",
    "resolve_password_policy",
    "strong_password",
    "url",
    "valid_date",
    "validate_field",
    "validate_form",
    "validate_password",
]
