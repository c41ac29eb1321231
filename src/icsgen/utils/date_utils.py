"""Date and date-time helpers for DTSTART, DTEND and DTSTAMP values.

Start and end values arrive as loosely ISO-8601-like strings. A value is a
date-time when it contains an uppercase ``T`` or a space anywhere; anything
else is a bare date. The check looks at the text only, so a bare date written
with a stray ``T`` is read as a date-time.
"""

from datetime import date, datetime, timedelta
from typing import Any

from dateutil import parser
from icalendar import vDate, vDatetime

from icsgen.exceptions import InvalidDateError
from icsgen.utils.timezone_utils import UTC, TimezoneManager

DATE_TIME_MARKERS = ('T', ' ')

def is_date_time(value: str) -> bool:
    """Return True when ``value`` denotes a date-time rather than a bare date."""
    return any(marker in value for marker in DATE_TIME_MARKERS)

def parse_date_string(value: str, tz_manager: TimezoneManager, field: str = 'start') -> datetime:
    """Parse a loose date string into an aware datetime.
    
    Naive results are read as local time. Ambiguous numeric forms are
    month-first, so ``9-26-1985`` is 26 September 1985.
    
    Raises:
        InvalidDateError: If the string cannot be read as a date
    """
    try:
        parsed = parser.parse(value)
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(f"Cannot parse {field} value {value!r}", field, value) from e
    return tz_manager.localize_datetime(parsed)

def local_date(value: datetime, tz_manager: TimezoneManager) -> date:
    """Calendar date of ``value`` in the local timezone."""
    return tz_manager.localize_datetime(value).date()

def add_days(value: date, days: int) -> date:
    """Shift a calendar date, rolling over month and year boundaries."""
    return value + timedelta(days=days)

def format_local_date(value: date) -> str:
    """Render ``YYYYMMDD``."""
    return vDate(value).to_ical().decode('utf-8')

def format_utc_datetime(value: datetime, with_seconds: bool = False) -> str:
    """Render ``YYYYMMDDTHHMMSSZ`` in UTC; seconds are ``00`` unless requested."""
    value = value.astimezone(UTC).replace(microsecond=0)
    if not with_seconds:
        value = value.replace(second=0)
    return vDatetime(value).to_ical().decode('utf-8')

def as_date_string(value: Any) -> Any:
    """Turn ``date``/``datetime`` objects into ISO text; other values pass through."""
    # date.isoformat() has no 'T', datetime.isoformat() does
    if isinstance(value, date):
        return value.isoformat()
    return value
