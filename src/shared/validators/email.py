"""Email format validation."""

import re
from typing import Any

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def is_valid_email(email: Any) -> bool:
    """Check that a value looks like ``local@domain.tld``.

    Structural check only. Deliverability and internationalized domains are
    not verified.

    Examples:
        >>> is_valid_email("a@b.co")
        True
        >>> is_valid_email("not-an-email")
        False

    """
    if not isinstance(email, str) or not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None
