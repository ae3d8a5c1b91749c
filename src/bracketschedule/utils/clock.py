"""12-hour clock arithmetic used to stamp games with kickoff times."""

import re
from datetime import datetime
from typing import Tuple

from dateutil.relativedelta import relativedelta

from bracketschedule.exceptions import TimeFormatException

# "8:00 AM", "12:30pm", " 4:05 PM "
CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})\s*(AM|PM)$", re.IGNORECASE)

# Any fixed date works; only the time of day is kept.
_ANCHOR = datetime(2000, 1, 1)


def parse_clock(value: str) -> Tuple[int, int]:
    """Parse a 12-hour clock string.

    Surrounding whitespace is ignored and the space before the meridiem is
    optional, so ``"4:05PM"`` parses the same as ``"4:05 PM"``.

    Args:
        value: Time such as ``"8:00 AM"``; the meridiem is case-insensitive.

    Returns:
        Tuple of (hour in 0-23, minute in 0-59)

    Raises:
        TimeFormatException: If the string does not match ``H:MM AM|PM`` or
            the hour/minute is out of range.
    """
    match = CLOCK_PATTERN.match(str(value).strip())
    if not match:
        raise TimeFormatException(f"Bad time format: {value}")

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = match.group(3).upper()

    if not 1 <= hour <= 12 or not 0 <= minute <= 59:
        raise TimeFormatException(f"Bad time format: {value}")

    if meridiem == "PM" and hour != 12:
        hour += 12
    if meridiem == "AM" and hour == 12:
        hour = 0
    return hour, minute


def format_clock(hour_24: int, minute: int) -> str:
    """Render a 24-hour time as ``H:MM AM|PM``."""
    meridiem = "PM" if hour_24 >= 12 else "AM"
    hour = hour_24 % 12
    if hour == 0:
        hour = 12
    return f"{hour}:{minute:02d} {meridiem}"


def add_minutes(clock: str, minutes: int) -> str:
    """Return the clock time ``minutes`` after ``clock``, wrapping at midnight.

    Example:
        >>> add_minutes("11:30 PM", 60)
        '12:30 AM'
    """
    hour, minute = parse_clock(clock)
    shifted = _ANCHOR.replace(hour=hour, minute=minute) + relativedelta(
        minutes=minutes
    )
    return format_clock(shifted.hour, shifted.minute)


__all__ = ["parse_clock", "format_clock", "add_minutes", "CLOCK_PATTERN"]
