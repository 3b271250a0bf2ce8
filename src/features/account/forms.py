"""Validation schema for the password change form."""

from src.shared.validators.factories import matches, required, strong_password
from src.shared.validators.models import ValidationErrorCode, ValidationResult, Validator
from src.shared.validators.password import PasswordPolicyOptions
from src.shared.validators.schema import Schema, field_is_filled


def _differs_from_current(value, all_values) -> ValidationResult:
    if value != all_values.get("current_password"):
        return ValidationResult.ok()
    return ValidationResult.fail(
        "New password must be different from the current password", ValidationErrorCode.POLICY_VIOLATION
    )


def build_password_change_schema(policy: PasswordPolicyOptions = None) -> Schema:
    """Build the password change schema.

    Args:
        policy: Password policy for the new password (defaults when None)

    Returns:
        Schema for validate_form

    """
    return {
        "current_password": [required("Current password")],
        "new_password": [
            strong_password("New password", policy),
            Validator(check=_differs_from_current, condition=field_is_filled("current_password")),
        ],
        "confirm_password": [
            required("Confirm password").when(field_is_filled("new_password")),
            matches(
                "Confirm password",
                "new_password",
                message="New password and confirm password do not match",
            ),
        ],
    }
