"""Account settings schemas (DTOs)."""

from pydantic import BaseModel


class PasswordChangeRequest(BaseModel):
    """Password change form from the settings page."""

    current_password: str = ""
    new_password: str = ""
    confirm_password: str = ""
