"""Validation models: results, error codes, and the validator wrapper.

Validation never raises. A failing check is returned as a ``ValidationResult``
with ``is_valid=False`` and a human-readable message.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

# Check signature shared by every validator: (value, all_values) -> result
CheckFn = Callable[[Any, Mapping[str, Any]], "ValidationResult"]
ConditionFn = Callable[[Mapping[str, Any]], bool]


class ValidationErrorCode(StrEnum):
    """Categories of validation failure."""

    MISSING_REQUIRED = "missing_required"  # Required field is empty
    FORMAT_INVALID = "format_invalid"  # Email, phone, NIC, URL, number, date shape
    RANGE_INVALID = "range_invalid"  # Length, date or age bound
    POLICY_VIOLATION = "policy_violation"  # Password policy rule


class ValidationResult(BaseModel):
    """Outcome of a single check."""

    is_valid: bool
    message: str = ""
    code: ValidationErrorCode | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def ok(cls, message: str = "") -> "ValidationResult":
        """Build a passing result."""
        return cls(is_valid=True, message=message)

    @classmethod
    def fail(cls, message: str, code: ValidationErrorCode | None = None) -> "ValidationResult":
        """Build a failing result."""
        return cls(is_valid=False, message=message, code=code)


def always(_: Mapping[str, Any]) -> bool:
    """Default condition gate: the validator always applies."""
    return True


@dataclass(frozen=True, slots=True)
class Validator:
    """A field check plus an optional condition gate.

    ``check`` receives the field value and the full values snapshot.
    ``condition`` receives the snapshot only and decides whether the check
    runs at all for the current form state.
    """

    check: CheckFn
    condition: ConditionFn = always

    def __call__(self, value: Any, all_values: Mapping[str, Any] | None = None) -> ValidationResult:
        return self.check(value, all_values if all_values is not None else {})

    def applies(self, all_values: Mapping[str, Any]) -> bool:
        """Evaluate the condition gate against the values snapshot."""
        return bool(self.condition(all_values))

    def when(self, condition: ConditionFn) -> "Validator":
        """Return a copy of this validator gated on ``condition``."""
        return replace(self, condition=condition)

    @classmethod
    def from_predicate(
        cls,
        predicate: Callable[[Any], bool],
        message: str,
        code: ValidationErrorCode | None = None,
        condition: ConditionFn | None = None,
    ) -> "Validator":
        """Wrap a ``value -> bool`` predicate into a validator."""

        def check(value: Any, _: Mapping[str, Any]) -> ValidationResult:
            if predicate(value):
                return ValidationResult.ok()
            return ValidationResult.fail(message, code)

        return cls(check=check, condition=condition or always)


def as_validator(candidate: "Validator | CheckFn") -> Validator:
    """Accept a bare ``(value, all_values)`` callable as an ungated validator."""
    if isinstance(candidate, Validator):
        return candidate
    return Validator(check=candidate)


__all__ = [
    "CheckFn",
    "ConditionFn",
    "ValidationErrorCode",
    "ValidationResult",
    "Validator",
    "always",
    "as_validator",
]
