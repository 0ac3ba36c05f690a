"""Composition of a UTC timestamp from raw GPS time and date fields.

GPS receivers report time as HHMMSS with optional decimal seconds, and the
date as DDMMYY. The two are composed into "DDMMYY HHMMSS UTC" and parsed as
a fixed-width layout.

Century policy:
    Two-digit years 00-79 map to 2000-2079, 80-99 map to 1980-1999. GPS
    time starts in 1980, so no receiver reports an earlier year.
"""

import re
from datetime import datetime, timezone

from serialgps.errors import DateFormatError

_DECIMAL_SECONDS = re.compile(r"\.[0-9]*$")
_COMPOSED_LAYOUT = re.compile(
    r"(?P<day>\d{2})(?P<month>\d{2})(?P<year>\d{2}) "
    r"(?P<hour>\d{2})(?P<minute>\d{2})(?P<second>\d{2}) UTC"
)
_CENTURY_PIVOT = 80


def expand_year(two_digit_year: int) -> int:
    """Apply the century policy to a two-digit year.

    Example:
        >>> expand_year(94)
        1994
        >>> expand_year(24)
        2024
    """
    if two_digit_year >= _CENTURY_PIVOT:
        return 1900 + two_digit_year
    return 2000 + two_digit_year


def compose(time: str, date: str) -> str:
    """Build the "DDMMYY HHMMSS UTC" string, dropping decimal seconds.

    Example:
        >>> compose("123519.00", "230394")
        '230394 123519 UTC'
    """
    return f"{date} {_DECIMAL_SECONDS.sub('', time)} UTC"


def parse_date_time(time: str | None, date: str | None) -> datetime | None:
    """Parse raw GPS time and date fields into an aware UTC datetime.

    Args:
        time: UTC time field (HHMMSS or HHMMSS.ss)
        date: Date field (DDMMYY)

    Returns:
        A timezone-aware datetime in UTC, or None if either field is missing
        or empty

    Raises:
        DateFormatError: If the composed string does not match the
            fixed-width layout or names an impossible date or time

    Example:
        >>> parse_date_time("123519", "230394")
        datetime.datetime(1994, 3, 23, 12, 35, 19, tzinfo=datetime.timezone.utc)
        >>> parse_date_time("", "230394") is None
        True
    """
    if not time or not date:
        return None

    composed = compose(time, date)
    match = _COMPOSED_LAYOUT.fullmatch(composed)
    if match is None:
        raise DateFormatError(f"Unexpected date/time layout: {composed!r}")

    parts = {name: int(value) for name, value in match.groupdict().items()}
    try:
        return datetime(
            expand_year(parts["year"]),
            parts["month"],
            parts["day"],
            parts["hour"],
            parts["minute"],
            parts["second"],
            tzinfo=timezone.utc,
        )
    except ValueError as e:
        raise DateFormatError(f"Invalid date/time: {composed!r}") from e
