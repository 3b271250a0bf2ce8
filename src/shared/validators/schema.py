"""Schema-driven form validation.

A schema maps field names to an ordered list of validators. For each field
the first applicable validator that fails determines the field's error; the
remaining validators for that field are not evaluated.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .common import is_empty
from .models import CheckFn, ConditionFn, ValidationResult, Validator, as_validator

logger = logging.getLogger(__name__)

Schema = Mapping[str, Sequence[Validator | CheckFn]]
ErrorMap = dict[str, str]


def validate_field(
    value: Any,
    validators: Sequence[Validator | CheckFn],
    values: Mapping[str, Any],
) -> ValidationResult | None:
    """Run a field's validators in order and return the first failure.

    Validators whose condition gate rejects ``values`` are skipped without
    running their check.

    Args:
        value: The field's current value
        validators: Ordered validators for the field
        values: Snapshot of all form values, passed to gates and checks

    Returns:
        The first failing ValidationResult, or None if the field is valid

    """
    for candidate in validators:
        validator = as_validator(candidate)
        if not validator.applies(values):
            continue
        result = validator(value, values)
        if not result.is_valid:
            return result
    return None


def validate_form(values: Mapping[str, Any], schema: Schema) -> ErrorMap:
    """Validate a snapshot of form values against a schema.

    Args:
        values: Current field values; missing fields are validated as None
        schema: Field name to ordered validators

    Returns:
        Field name to error message, only for invalid fields

    Examples:
        >>> from src.shared.validators.factories import required
        >>> validate_form({"name": ""}, {"name": [required("Name")]})
        {'name': 'Name is required'}

    """
    errors: ErrorMap = {}

    for field_name, validators in schema.items():
        failure = validate_field(values.get(field_name), validators, values)
        if failure is not None:
            errors[field_name] = failure.message

    if errors:
        logger.debug(f"Form validation failed for fields: {sorted(errors)}")
    return errors


def field_is_filled(field_name: str) -> ConditionFn:
    """Condition gate: apply only when ``field_name`` has a value.

    Example:
        ```python
        matches("New password", "confirm_password").when(field_is_filled("confirm_password"))
        ```
    """
    return lambda values: not is_empty(values.get(field_name))


def field_equals(field_name: str, expected: Any) -> ConditionFn:
    """Condition gate: apply only when ``field_name`` equals ``expected``."""
    return lambda values: values.get(field_name) == expected


__all__ = [
    "ErrorMap",
    "Schema",
    "field_equals",
    "field_is_filled",
    "validate_field",
    "validate_form",
]
