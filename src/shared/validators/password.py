"""Password policy validation functions."""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .models import ValidationErrorCode, ValidationResult

SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
SPECIAL_CHARACTER_PATTERN = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")


class PasswordPolicyConfig(BaseModel):
    """Password rules; every requirement can be toggled independently.

    Accepts snake_case or camelCase keys, so ``{"minLength": 10}`` and
    ``{"min_length": 10}`` are equivalent. Unknown keys are ignored.
    """

    min_length: int = 8
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = True

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


PasswordPolicyOptions = PasswordPolicyConfig | Mapping[str, Any] | None


def resolve_password_policy(options: PasswordPolicyOptions = None) -> PasswordPolicyConfig:
    """Merge partial policy overrides onto the defaults.

    Any int is accepted as the minimum length; zero or a negative value
    disables the length rule.

    Args:
        options: A full config, a mapping of overrides, or None for defaults

    Returns:
        The effective PasswordPolicyConfig

    Raises:
        pydantic.ValidationError: If an override is not an int length or bool
            flag. Wrongly typed options are a caller bug, not password input.

    """
    if options is None:
        return PasswordPolicyConfig()
    if isinstance(options, PasswordPolicyConfig):
        return options
    return PasswordPolicyConfig.model_validate(dict(options))


def validate_password(password: Any, options: PasswordPolicyOptions = None) -> ValidationResult:
    """Check a password against the policy.

    Rules are checked in a fixed order and the first violation wins:
    presence, minimum length, uppercase, lowercase, digit, special character.

    Args:
        password: Password to check
        options: Policy overrides merged onto the defaults; see
            resolve_password_policy for accepted types

    Returns:
        ValidationResult whose message names the first rule violated

    Examples:
        >>> validate_password("abc").message
        'Password must be at least 8 characters long'
        >>> validate_password("Abcdef1!").is_valid
        True

    """
    policy = resolve_password_policy(options)

    if password is None or password == "":
        return ValidationResult.fail("Password is required", ValidationErrorCode.MISSING_REQUIRED)
    password = str(password)

    if len(password) < policy.min_length:
        return ValidationResult.fail(
            f"Password must be at least {policy.min_length} characters long",
            ValidationErrorCode.POLICY_VIOLATION,
        )
    if policy.require_uppercase and not UPPERCASE_PATTERN.search(password):
        return ValidationResult.fail(
            "Password must contain at least one uppercase letter", ValidationErrorCode.POLICY_VIOLATION
        )
    if policy.require_lowercase and not LOWERCASE_PATTERN.search(password):
        return ValidationResult.fail(
            "Password must contain at least one lowercase letter", ValidationErrorCode.POLICY_VIOLATION
        )
    if policy.require_numbers and not DIGIT_PATTERN.search(password):
        return ValidationResult.fail("Password must contain at least one number", ValidationErrorCode.POLICY_VIOLATION)
    if policy.require_special_chars and not SPECIAL_CHARACTER_PATTERN.search(password):
        return ValidationResult.fail(
            "Password must contain at least one special character", ValidationErrorCode.POLICY_VIOLATION
        )

    return ValidationResult.ok("Password is valid")

