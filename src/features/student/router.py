"""Student form router (API endpoints)."""

import logging

from fastapi import APIRouter

from src.shared.forms.form_validation import FormValidationResponse, ensure_valid_form

from .exceptions import StudentFormInvalid
from .forms import build_student_form_schema
from .schemas import StudentFormRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/students", tags=["Students"])


@router.post("/validate", response_model=FormValidationResponse)
async def validate_student_form(data: StudentFormRequest):
    """Validate a student create/edit form and report per-field errors."""
    schema = build_student_form_schema()
    return ensure_valid_form(data.model_dump(), schema, StudentFormInvalid)
