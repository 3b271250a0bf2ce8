"""Generic value predicates: emptiness, numbers and URLs."""

import math
import numbers
from collections.abc import Sized
from datetime import date
from decimal import Decimal
from typing import Any
from urllib.parse import urlparse

# Schemes that only make sense with a host component
HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})

PREFIXED_INTEGER_MARKERS = ("0x", "0o", "0b")


def is_empty(value: Any) -> bool:
    """Check whether a value counts as "not provided".

    ``None``, whitespace-only strings and empty collections are empty.
    Numbers (``0`` included) and dates always carry a value. Anything else is
    stringified first.

    Examples:
        >>> is_empty("   ")
        True
        >>> is_empty(0)
        False

    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (numbers.Number, date)):
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    return str(value).strip() == ""


def is_number(value: Any) -> bool:
    """Check whether a value coerces to a finite number.

    Args:
        value: Number or numeric string

    Returns:
        True for finite reals and strings such as ``"42"``, ``"-1.5e3"`` or
        ``"0x1A"``. False for ``None``, blank strings, NaN and infinities.

    Whitespace-only strings are not numbers. The admin UI coerced them to 0
    in JavaScript; here a blank input is treated as missing instead.

    """
    if value is None:
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, numbers.Real):
        return math.isfinite(float(value))
    if not isinstance(value, str):
        return False

    text = value.strip()
    if not text or "_" in text:
        return False

    unsigned = text.lstrip("+-")
    if unsigned[:2].lower() in PREFIXED_INTEGER_MARKERS:
        # Signed prefixed literals are not numbers ("-0x1A")
        if unsigned != text:
            return False
        try:
            int(text, 0)
        except ValueError:
            return False
        return True

    try:
        return math.isfinite(float(text))
    except ValueError:
        return False


def is_valid_url(value: Any) -> bool:
    """Check whether a value parses as an absolute URL.

    A scheme is always required; web schemes also need a host. Embedded
    whitespace, malformed IPv6 hosts and bad ports are parse failures.
    """
    if not isinstance(value, str):
        return False

    url = value.strip()
    if not url or any(ch.isspace() for ch in url):
        return False

    try:
        parsed = urlparse(url)
        # Accessing the port validates it
        parsed.port
    except ValueError:
        return False

    if not parsed.scheme:
        return False
    if parsed.scheme.lower() in HOST_REQUIRED_SCHEMES and not parsed.hostname:
        return False
    return True
