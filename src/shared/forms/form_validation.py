"""Form validation responses and the HTTP error raised for invalid forms."""

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel, Field

from src.shared.validators.schema import ErrorMap, Schema, validate_form

logger = logging.getLogger(__name__)


class FormValidationFailed(HTTPException):
    """Base exception for a form that failed validation.

    The detail carries the per-field error map so the UI can show each
    message next to its field.
    """

    form_name: str = "Form"

    def __init__(self, errors: ErrorMap):
        self.errors = errors
        super().__init__(
            status_code=422,
            detail={"message": f"{self.form_name} is invalid", "errors": errors},
        )


class FormValidationResponse(BaseModel):
    """Result of a successful form validation."""

    valid: bool = True
    errors: dict[str, str] = Field(default_factory=dict)


def ensure_valid_form(
    values: Mapping[str, Any],
    schema: Schema,
    exception_class: type[FormValidationFailed] = FormValidationFailed,
) -> FormValidationResponse:
    """Validate form values, raising ``exception_class`` on any field error.

    Args:
        values: Submitted form values
        schema: Validation schema for the form
        exception_class: FormValidationFailed subclass to raise

    Returns:
        FormValidationResponse for a valid form

    Raises:
        FormValidationFailed: If at least one field is invalid.

    """
    errors = validate_form(values, schema)
    if errors:
        logger.info(f"{exception_class.form_name} rejected: {len(errors)} invalid field(s)")
        raise exception_class(errors)
    return FormValidationResponse()


__all__ = ["FormValidationFailed", "FormValidationResponse", "ensure_valid_form"]
