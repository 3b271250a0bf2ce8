"""Validation schema for the student form."""

from src.shared.validators.factories import email_address, past_date, phone_number, required, valid_date
from src.shared.validators.schema import Schema


def build_student_form_schema() -> Schema:
    """Build the student form schema."""
    return {
        "name": [required("Name")],
        "email": [required("Email"), email_address("Email")],
        "mobile_no": [
            required("Mobile number"),
            phone_number("Mobile number", message="Please enter a valid mobile number"),
        ],
        "id_no": [required("ID number")],
        "date_of_birth": [required("Date of birth"), valid_date("Date of birth"), past_date("Date of birth")],
        "nic_no": [required("NIC number")],
    }
