"""Date parsing and date-based predicates."""

from datetime import UTC, date, datetime, time
from typing import Any


def parse_date(value: Any) -> datetime | None:
    """Parse a date-like value into an aware datetime.

    Accepts ``datetime``, ``date`` and ISO-8601 strings. Naive values are
    interpreted as UTC.

    Args:
        value: Value to parse

    Returns:
        Timezone-aware datetime, or None if the value is not a date

    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def is_past_date(value: Any) -> bool:
    """Check that a date lies strictly before the current moment.

    Examples:
        >>> is_past_date("2000-01-01")
        True
        >>> is_past_date("not a date")
        False

    """
    parsed = parse_date(value)
    if parsed is None:
        return False
    return parsed < datetime.now(UTC)


def age_in_years(value: Any, today: date | None = None) -> int | None:
    """Count the completed years between a birth date and ``today``.

    Returns None when the birth date cannot be parsed. A birth date in the
    future gives a negative age.
    """
    parsed = parse_date(value)
    if parsed is None:
        return None

    born = parsed.date()
    today = today or datetime.now(UTC).date()
    had_birthday = (today.month, today.day) >= (born.month, born.day)
    return today.year - born.year - (0 if had_birthday else 1)
