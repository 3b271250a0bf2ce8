"""Staff form router (API endpoints)."""

import logging

from fastapi import APIRouter

from src.config.settings import settings
from src.shared.forms.form_validation import FormValidationResponse, ensure_valid_form

from .exceptions import StaffFormInvalid
from .forms import build_staff_form_schema
from .schemas import StaffFormRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/staff", tags=["Staff"])


@router.post("/validate", response_model=FormValidationResponse)
async def validate_staff_form(data: StaffFormRequest):
    """Validate a staff create/edit form and report per-field errors."""
    schema = build_staff_form_schema(settings.staff_minimum_age)
    return ensure_valid_form(data.model_dump(), schema, StaffFormInvalid)
