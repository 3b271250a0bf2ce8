"""Student-related exceptions."""

from src.shared.forms.form_validation import FormValidationFailed


class StudentFormInvalid(FormValidationFailed):
    """Raised when a submitted student form has field errors."""

    form_name = "Student form"
