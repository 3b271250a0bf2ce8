"""Staff-related exceptions."""

from src.shared.forms.form_validation import FormValidationFailed


class StaffFormInvalid(FormValidationFailed):
    """Raised when a submitted staff form has field errors."""

    form_name = "Staff form"
