"""Account-related exceptions."""

from src.shared.forms.form_validation import FormValidationFailed


class PasswordChangeInvalid(FormValidationFailed):
    """Raised when a password change form has field errors."""

    form_name = "Password change form"
