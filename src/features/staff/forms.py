"""Validation schema for the staff form."""

from src.shared.validators.factories import (
    email_address,
    max_length,
    minimum_age,
    nic_number,
    past_date,
    phone_number,
    required,
    url,
    valid_date,
)
from src.shared.validators.schema import Schema

NAME_MAX_LENGTH = 100


def build_staff_form_schema(minimum_age_years: int = 18) -> Schema:
    """Build the staff form schema.

    Args:
        minimum_age_years: Youngest allowed staff age in completed years

    Returns:
        Schema for validate_form

    """
    return {
        "name": [required("Name"), max_length("Name", NAME_MAX_LENGTH)],
        "mobile_no": [required("Mobile number"), phone_number("Mobile number")],
        "email": [required("Email"), email_address("Email")],
        "id_no": [required("ID number")],
        "date_of_birth": [
            required("Date of birth"),
            valid_date("Date of birth"),
            past_date("Date of birth"),
            minimum_age(
                "Date of birth",
                minimum_age_years,
                message=f"Staff must be at least {minimum_age_years} years old",
            ),
        ],
        "nic_no": [required("NIC number"), nic_number("NIC number")],
        "image_url": [url("Image URL")],
    }
