"""Phone number validation."""

import re
from typing import Any

MIN_PHONE_DIGITS = 10

NON_DIGITS = re.compile(r"[^0-9]")


def is_valid_phone_number(phone_number: Any) -> bool:
    """Check that a phone number carries at least ten digits.

    Punctuation, spaces and country-code prefixes are ignored, so
    ``"(555) 123-4567"`` and ``"+94 77 123 4567"`` both pass. Region-specific
    lengths are not checked.
    """
    if isinstance(phone_number, bool) or not isinstance(phone_number, (str, int)):
        return False
    digits = NON_DIGITS.sub("", str(phone_number))
    return len(digits) >= MIN_PHONE_DIGITS
