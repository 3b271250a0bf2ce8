"""Account settings router (API endpoints)."""

import logging

from fastapi import APIRouter

from src.config.settings import settings
from src.shared.forms.form_validation import FormValidationResponse, ensure_valid_form

from .exceptions import PasswordChangeInvalid
from .forms import build_password_change_schema
from .schemas import PasswordChangeRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/account", tags=["Account"])


@router.post("/password/validate", response_model=FormValidationResponse)
async def validate_password_change(data: PasswordChangeRequest):
    """Validate a password change against the configured password policy."""
    schema = build_password_change_schema(settings.get_password_policy())
    return ensure_valid_form(data.model_dump(), schema, PasswordChangeInvalid)
