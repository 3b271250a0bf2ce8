"""National Identity Card (NIC) number validation."""

import re
from typing import Any

# Legacy format: 9 digits followed by V or X
LEGACY_NIC_PATTERN = re.compile(r"[0-9]{9}[vVxX]")

# Current format: 12 digits
MODERN_NIC_PATTERN = re.compile(r"[0-9]{12}")


def is_valid_nic(nic: Any) -> bool:
    """Check that a value has the shape of a legacy or modern NIC number.

    Only the format is checked; the digits themselves are not verified.

    Examples:
        >>> is_valid_nic("123456789V")
        True
        >>> is_valid_nic("199012345678")
        True
        >>> is_valid_nic("12345")
        False

    """
    if not isinstance(nic, str) or not nic:
        return False
    return LEGACY_NIC_PATTERN.fullmatch(nic) is not None or MODERN_NIC_PATTERN.fullmatch(nic) is not None
